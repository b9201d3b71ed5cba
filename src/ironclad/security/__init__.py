"""Security – hashing, random tokens, bloom filter."""
from ironclad.security.bloom import BloomFilter
from ironclad.security.hashing import BcryptPasswordHasher, generate_salt, hash_string, verify_hash
from ironclad.security.tokens import random_salt, random_string

__all__ = [
    "BcryptPasswordHasher",
    "BloomFilter",
    "generate_salt",
    "hash_string",
    "random_salt",
    "random_string",
    "verify_hash",
]
