"""Security – hashing: salted digests, bcrypt password hashing, salts."""
from ironclad.security.hashing.digest import (
    DIGEST_ALGORITHMS,
    ENCODINGS,
    SUPPORTED_ALGORITHMS,
    generate_salt,
    hash_string,
    verify_hash,
)
from ironclad.security.hashing.password import BcryptPasswordHasher

__all__ = [
    "BcryptPasswordHasher",
    "DIGEST_ALGORITHMS",
    "ENCODINGS",
    "SUPPORTED_ALGORITHMS",
    "generate_salt",
    "hash_string",
    "verify_hash",
]
