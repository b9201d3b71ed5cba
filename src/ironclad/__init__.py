"""
ironclad – sensitive-data handling primitives.

Import path convention::

    from ironclad.application.masking import mask, redact, redact_file, RedactionRuleSet
    from ironclad.kernel.security import constant_time_equal
    from ironclad.security.hashing import hash_string, verify_hash
    from ironclad.security.tokens import random_string, random_salt
    from ironclad.security.bloom import BloomFilter
    from ironclad.kernel.errors import IroncladError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
