from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ironclad.application.masking import redactor as _redactor
from ironclad.application.masking.redactor import Redactor
from ironclad.application.masking.rules import RedactionRuleSet

__all__ = ["RedactingLogFilter"]


class RedactingLogFilter(logging.Filter):
    """Runs a redaction rule set over each record's formatted message."""

    def __init__(self, rules: RedactionRuleSet | Mapping[str, Any], name: str = "") -> None:
        super().__init__(name)
        self._redactor = Redactor(rules)

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        # the redactor's own rule-failure warnings must not re-enter the filter
        if record.name == _redactor.__name__:
            return True
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # mismatched %-args; leave the record for Handler.handleError
            return True
        result = self._redactor.run(message)
        record.msg = result.text
        record.args = None
        return True
