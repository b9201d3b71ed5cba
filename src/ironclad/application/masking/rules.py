"""Application masking – redaction rules and rule sets."""
from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ironclad.application.masking.config import MaskConfig
from ironclad.kernel.errors import FileReadError, InvalidInputError, SerializationError
from ironclad.observability.logging import get_logger

__all__ = ["RedactionRule", "RedactionRuleSet"]

_log = get_logger(__name__)


@dataclass(frozen=True)
class RedactionRule:
    """Mask every match of *pattern* with *config*."""

    pattern: str
    config: MaskConfig = MaskConfig()


class RedactionRuleSet:
    """Ordered, immutable rules keyed by pattern.

    Rules run in insertion order, each one over the output of the previous.

    Usage::

        rules = RedactionRuleSet.from_mapping({
            r"\\d{4}-\\d{4}-\\d{4}-\\d{4}": {"visibleStart": 4, "visibleEnd": 4},
            r"[\\w.+-]+@[\\w-]+\\.[\\w.]+": {"sensitivity": "high"},
        })
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: tuple[RedactionRule, ...] | list[RedactionRule] = ()) -> None:
        ordered: dict[str, RedactionRule] = {}
        for rule in rules:
            if not isinstance(rule, RedactionRule):
                raise InvalidInputError(
                    f"Expected RedactionRule, got {type(rule).__name__}", argument="rules"
                )
            # a repeated pattern keeps its first position but the latest config
            ordered[rule.pattern] = rule
        self._rules: tuple[RedactionRule, ...] = tuple(ordered.values())

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> RedactionRuleSet:
        if isinstance(mapping, RedactionRuleSet):
            return mapping
        if not isinstance(mapping, Mapping):
            raise InvalidInputError(
                f"Redaction rules must be a mapping, got {type(mapping).__name__}",
                argument="rules",
            )
        rules: list[RedactionRule] = []
        for pattern, options in mapping.items():
            if not isinstance(pattern, str):
                raise InvalidInputError(
                    f"Rule pattern must be a string, got {type(pattern).__name__}",
                    argument="rules",
                )
            rules.append(RedactionRule(pattern, cls._config(pattern, options)))
        return cls(rules)

    @classmethod
    def from_json(cls, payload: str | bytes) -> RedactionRuleSet:
        """Parse a JSON object of ``pattern -> options``."""
        try:
            decoded = json.loads(payload)
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"Invalid redaction rules JSON: {exc}", payload_type="json", cause=exc
            ) from exc
        if not isinstance(decoded, dict):
            raise SerializationError(
                "Redaction rules JSON must be an object mapping patterns to options",
                payload_type="json",
            )
        return cls.from_mapping(decoded)

    @classmethod
    def from_file(cls, path: str | Path, *, encoding: str = "utf-8") -> RedactionRuleSet:
        try:
            payload = Path(path).read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise FileReadError(path, cause=exc) from exc
        return cls.from_json(payload)

    @staticmethod
    def _config(pattern: str, options: Any) -> MaskConfig:
        if isinstance(options, MaskConfig):
            return options
        if options is not None and not isinstance(options, Mapping):
            _log.debug("rules.options_ignored", pattern=pattern, got=type(options).__name__)
        # a malformed rule body masks with the defaults, like any other bad option
        return MaskConfig.from_mapping(options)

    @property
    def patterns(self) -> tuple[str, ...]:
        return tuple(rule.pattern for rule in self._rules)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {rule.pattern: rule.config.to_dict() for rule in self._rules}

    def __iter__(self) -> Iterator[RedactionRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __bool__(self) -> bool:
        return bool(self._rules)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RedactionRuleSet):
            return NotImplemented
        return self._rules == other._rules

    def __hash__(self) -> int:
        return hash(self._rules)

    def __repr__(self) -> str:
        return f"RedactionRuleSet(patterns={list(self.patterns)!r})"
