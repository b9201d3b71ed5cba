"""Kernel security – constant-time string equality."""
from __future__ import annotations

import hmac
from typing import Any


def constant_time_equal(a: Any, b: Any) -> bool:
    """Return ``True`` when *a* and *b* are equal strings.

    Never raises: non-string arguments and length mismatches compare unequal.
    Equal-length inputs are compared with :func:`hmac.compare_digest`, which
    examines every byte regardless of where the first difference sits.
    """
    if not isinstance(a, str) or not isinstance(b, str):
        return False
    if len(a) != len(b):
        return False
    return hmac.compare_digest(a.encode("utf-8"), b.encode("utf-8"))


__all__ = ["constant_time_equal"]
