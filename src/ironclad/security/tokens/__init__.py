"""Security – random tokens."""
from ironclad.security.tokens.generator import CHARSETS, DEFAULT_CHARSET, random_salt, random_string

__all__ = ["CHARSETS", "DEFAULT_CHARSET", "random_salt", "random_string"]
