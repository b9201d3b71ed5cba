"""Kernel security – constant-time compare, RandomSource and PasswordHasher ports."""
from ironclad.kernel.security.compare import constant_time_equal
from ironclad.kernel.security.crypto import PasswordHasher, RandomSource, SystemRandomSource

__all__ = [
    "PasswordHasher",
    "RandomSource",
    "SystemRandomSource",
    "constant_time_equal",
]
