"""Security tokens – random strings and salts from a CSPRNG."""
from __future__ import annotations

import string
from collections.abc import Mapping
from typing import Any

from ironclad.kernel.errors import InvalidInputError
from ironclad.kernel.security import RandomSource, SystemRandomSource
from ironclad.observability.logging import get_logger

__all__ = ["CHARSETS", "DEFAULT_CHARSET", "random_salt", "random_string"]

_log = get_logger(__name__)

CHARSETS: Mapping[str, str] = {
    "alphanumeric": string.ascii_uppercase + string.ascii_lowercase + string.digits,
    "numeric": string.digits,
    "hex": "0123456789abcdef",
}
DEFAULT_CHARSET = "alphanumeric"


def _require_positive(length: Any, argument: str) -> int:
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise InvalidInputError("Length must be a positive integer", argument=argument)
    return length


def random_string(
    length: int,
    charset: str = DEFAULT_CHARSET,
    *,
    source: RandomSource | None = None,
) -> str:
    """Return *length* characters drawn uniformly from *charset*.

    An unknown *charset* name falls back to ``alphanumeric``.
    """
    _require_positive(length, "length")
    alphabet = CHARSETS.get(charset) if isinstance(charset, str) else None
    if alphabet is None:
        _log.debug("tokens.unknown_charset", charset=charset, fallback=DEFAULT_CHARSET)
        alphabet = CHARSETS[DEFAULT_CHARSET]
    rng = source or SystemRandomSource()
    return "".join(alphabet[rng.randbelow(len(alphabet))] for _ in range(length))


def random_salt(length: int = 16, *, source: RandomSource | None = None) -> str:
    """Return *length* random bytes as a hex string (``2 * length`` chars)."""
    _require_positive(length, "length")
    return (source or SystemRandomSource()).token_bytes(length).hex()
