"""Security hashing – salted SHA-2 digests and salt generation."""
from __future__ import annotations

import base64
import hashlib
from typing import Any

from ironclad.kernel.errors import (
    InvalidInputError,
    UnsupportedAlgorithmError,
    UnsupportedConfigurationError,
)
from ironclad.kernel.security import RandomSource, constant_time_equal
from ironclad.security.hashing.password import BcryptPasswordHasher
from ironclad.security.tokens import random_salt

__all__ = [
    "BCRYPT",
    "DIGEST_ALGORITHMS",
    "ENCODINGS",
    "SUPPORTED_ALGORITHMS",
    "generate_salt",
    "hash_string",
    "verify_hash",
]

DIGEST_ALGORITHMS: frozenset[str] = frozenset({"sha256", "sha512"})
BCRYPT = "bcrypt"
SUPPORTED_ALGORITHMS: frozenset[str] = DIGEST_ALGORITHMS | {BCRYPT}
ENCODINGS: frozenset[str] = frozenset({"hex", "base64"})


def _salt_bytes(salt: Any) -> bytes:
    if isinstance(salt, str):
        return salt.encode("utf-8")
    if isinstance(salt, (bytes, bytearray, memoryview)):
        return bytes(salt)
    raise InvalidInputError("Salt must be a string or bytes", argument="salt")


def _check_options(algorithm: Any, encoding: Any) -> None:
    if not isinstance(algorithm, str) or algorithm not in SUPPORTED_ALGORITHMS:
        raise UnsupportedAlgorithmError(algorithm)
    if not isinstance(encoding, str) or encoding not in ENCODINGS:
        raise UnsupportedConfigurationError(
            f"Unsupported digest encoding: {encoding}", option="encoding", value=encoding
        )


def hash_string(
    value: str,
    *,
    algorithm: str = "sha256",
    encoding: str = "hex",
    salt: str | bytes | None = None,
    rounds: int = 12,
) -> str:
    """Digest *value* with *algorithm*, optionally prefixed by *salt*.

    ``sha256`` / ``sha512`` return a ``hex`` or ``base64`` string. ``bcrypt``
    returns a self-salted bcrypt hash and ignores *salt* and *encoding*.

    Raises:
        InvalidInputError: *value* is not a string or *salt* is neither
            ``str`` nor ``bytes``.
        UnsupportedAlgorithmError: unknown *algorithm*.
        UnsupportedConfigurationError: unknown *encoding*.
    """
    if not isinstance(value, str):
        raise InvalidInputError("Input must be a string", argument="value")
    _check_options(algorithm, encoding)

    if algorithm == BCRYPT:
        return BcryptPasswordHasher(rounds).hash(value)

    digest = hashlib.new(algorithm)
    if salt:
        digest.update(_salt_bytes(salt))
    digest.update(value.encode("utf-8"))
    if encoding == "base64":
        return base64.b64encode(digest.digest()).decode("ascii")
    return digest.hexdigest()


def verify_hash(
    value: str,
    hashed: str,
    *,
    algorithm: str = "sha256",
    encoding: str = "hex",
    salt: str | bytes | None = None,
) -> bool:
    """Check *value* against a digest produced by :func:`hash_string`."""
    if not isinstance(value, str) or not isinstance(hashed, str):
        raise InvalidInputError("Inputs must be strings")
    _check_options(algorithm, encoding)

    if algorithm == BCRYPT:
        return BcryptPasswordHasher().verify(value, hashed)
    expected = hash_string(value, algorithm=algorithm, encoding=encoding, salt=salt)
    return constant_time_equal(expected, hashed)


def generate_salt(length: int = 16, *, source: RandomSource | None = None) -> str:
    """Return *length* random bytes as a hex string (``2 * length`` chars)."""
    return random_salt(length, source=source)
