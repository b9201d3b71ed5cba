"""Security – bloom filter."""
from ironclad.security.bloom.filter import BloomFilter

__all__ = ["BloomFilter"]
