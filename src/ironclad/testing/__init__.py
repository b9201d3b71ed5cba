"""Testing support – Hypothesis strategies.

Usage in a test module::

    from hypothesis import given
    from ironclad.testing import mask_configs, sensitive_strings
"""

from ironclad.testing.strategies import mask_configs, sensitive_strings, sensitivities

__all__ = ["mask_configs", "sensitive_strings", "sensitivities"]
