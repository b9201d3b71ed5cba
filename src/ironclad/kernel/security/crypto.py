"""Kernel security – RandomSource and PasswordHasher ports."""
from __future__ import annotations

import abc
import secrets
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Port: cryptographically secure randomness."""

    def token_bytes(self, n: int) -> bytes: ...

    def randbelow(self, n: int) -> int: ...


class SystemRandomSource:
    """:class:`RandomSource` backed by the OS CSPRNG via :mod:`secrets`."""

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)

    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)


class PasswordHasher(abc.ABC):
    """Port: one-way password hashing."""

    @abc.abstractmethod
    def hash(self, password: str) -> str: ...

    @abc.abstractmethod
    def verify(self, password: str, hashed: str) -> bool: ...


__all__ = ["PasswordHasher", "RandomSource", "SystemRandomSource"]
