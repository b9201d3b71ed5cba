"""Security hashing – bcrypt-backed PasswordHasher."""
from __future__ import annotations

import bcrypt

from ironclad.kernel.errors import InvalidInputError
from ironclad.kernel.security import PasswordHasher

__all__ = ["BcryptPasswordHasher"]


class BcryptPasswordHasher(PasswordHasher):
    """One-way password hashing with bcrypt; the salt lives inside the hash."""

    def __init__(self, rounds: int = 12) -> None:
        if isinstance(rounds, bool) or not isinstance(rounds, int) or not 4 <= rounds <= 31:
            raise InvalidInputError("bcrypt rounds must be an integer between 4 and 31", argument="rounds")
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        if not isinstance(password, str):
            raise InvalidInputError("Input must be a string", argument="password")
        hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=self._rounds))
        return hashed.decode("ascii")

    def verify(self, password: str, hashed: str) -> bool:
        if not isinstance(password, str) or not isinstance(hashed, str):
            raise InvalidInputError("Inputs must be strings")
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            # not a bcrypt hash at all
            return False
