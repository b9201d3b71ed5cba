"""Application masking – mask(), redaction rules and the redaction pipeline."""
from ironclad.application.masking.config import (
    SENSITIVITY_RATIOS,
    MaskConfig,
    MaskGenerator,
    RepeatMask,
    Sensitivity,
)
from ironclad.application.masking.log_filter import RedactingLogFilter
from ironclad.application.masking.masker import mask, masked_length
from ironclad.application.masking.redactor import (
    FileRedactionResult,
    RedactionResult,
    Redactor,
    RuleFailure,
    apply_rule,
    redact,
    redact_file,
)
from ironclad.application.masking.rules import RedactionRule, RedactionRuleSet

__all__ = [
    "FileRedactionResult",
    "MaskConfig",
    "MaskGenerator",
    "RedactingLogFilter",
    "RedactionResult",
    "RedactionRule",
    "RedactionRuleSet",
    "Redactor",
    "RepeatMask",
    "RuleFailure",
    "SENSITIVITY_RATIOS",
    "Sensitivity",
    "apply_rule",
    "mask",
    "masked_length",
    "redact",
    "redact_file",
]
