"""Application-layer errors – failures while running a redaction."""

from __future__ import annotations

from typing import Any

from ironclad.kernel.errors.base import IroncladError


class ApplicationError(IroncladError):
    """Failure inside a use case (redaction run, masking generator, config)."""

    default_code = "application_error"


class MaskGeneratorError(ApplicationError):
    """A custom mask generator returned something other than a string."""

    default_code = "mask_generator_error"


class UsageError(ApplicationError):
    """Command-line arguments are missing or malformed."""

    default_code = "usage_error"


class RedactionRuleError(ApplicationError):
    """A single redaction rule could not be applied.

    These are collected per rule; they never abort the remaining rules.
    """

    default_code = "redaction_rule_error"

    def __init__(self, pattern: str, message: str, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.pattern = pattern
        self.detail.setdefault("pattern", pattern)


class RuleCompilationError(RedactionRuleError):
    """The rule's pattern is not a valid regular expression."""

    default_code = "rule_compilation_error"


class RuleApplicationError(RedactionRuleError):
    """Masking a match of the rule's pattern raised."""

    default_code = "rule_application_error"


__all__ = [
    "ApplicationError",
    "MaskGeneratorError",
    "RedactionRuleError",
    "RuleApplicationError",
    "RuleCompilationError",
    "UsageError",
]
