"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    IroncladError
    ├── DomainError                    (domain.py)
    │   ├── InvalidInputError
    │   └── UnsupportedConfigurationError
    │       └── UnsupportedAlgorithmError
    ├── ApplicationError               (application.py)
    │   ├── MaskGeneratorError
    │   ├── UsageError
    │   └── RedactionRuleError
    │       ├── RuleCompilationError
    │       └── RuleApplicationError
    └── InfrastructureError            (infrastructure.py)
        ├── SerializationError
        └── RedactionIOError
            ├── FileReadError
            └── FileWriteError
"""

from ironclad.kernel.errors.application import (
    ApplicationError,
    MaskGeneratorError,
    RedactionRuleError,
    RuleApplicationError,
    RuleCompilationError,
    UsageError,
)
from ironclad.kernel.errors.base import IroncladError
from ironclad.kernel.errors.domain import (
    DomainError,
    InvalidInputError,
    UnsupportedAlgorithmError,
    UnsupportedConfigurationError,
)
from ironclad.kernel.errors.infrastructure import (
    FileReadError,
    FileWriteError,
    InfrastructureError,
    RedactionIOError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "DomainError",
    "FileReadError",
    "FileWriteError",
    "InfrastructureError",
    "InvalidInputError",
    "IroncladError",
    "MaskGeneratorError",
    "RedactionIOError",
    "RedactionRuleError",
    "RuleApplicationError",
    "RuleCompilationError",
    "SerializationError",
    "UnsupportedAlgorithmError",
    "UnsupportedConfigurationError",
    "UsageError",
]
