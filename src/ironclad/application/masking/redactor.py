"""Application masking – rule-driven redaction of text and files."""
from __future__ import annotations

import os
import re
import tempfile
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import reduce
from pathlib import Path
from typing import Any

from ironclad.application.masking.masker import mask
from ironclad.application.masking.rules import RedactionRule, RedactionRuleSet
from ironclad.kernel.errors import (
    FileReadError,
    FileWriteError,
    InvalidInputError,
    RedactionRuleError,
    RuleApplicationError,
    RuleCompilationError,
)
from ironclad.observability.logging import get_logger

__all__ = [
    "FileRedactionResult",
    "RedactionResult",
    "Redactor",
    "RuleFailure",
    "apply_rule",
    "redact",
    "redact_file",
]

_log = get_logger(__name__)

RulesLike = RedactionRuleSet | Mapping[str, Any]


@dataclass(frozen=True)
class RuleFailure:
    """A rule that was skipped and why."""

    pattern: str
    error: RedactionRuleError

    def to_dict(self) -> dict[str, Any]:
        return {"pattern": self.pattern, **self.error.to_dict()}


@dataclass(frozen=True)
class RedactionResult:
    """Outcome of one redaction run."""

    text: str
    applied: tuple[str, ...] = ()
    failures: tuple[RuleFailure, ...] = ()
    replacements: int = 0

    @property
    def ok(self) -> bool:
        return not self.failures

    def to_dict(self) -> dict[str, Any]:
        return {
            "applied": list(self.applied),
            "failures": [failure.to_dict() for failure in self.failures],
            "replacements": self.replacements,
        }


@dataclass(frozen=True)
class FileRedactionResult(RedactionResult):
    source: Path = field(default_factory=Path)
    destination: Path = field(default_factory=Path)

    @property
    def in_place(self) -> bool:
        return self.source == self.destination

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload.update(source=str(self.source), destination=str(self.destination))
        return payload


def _compile(rule: RedactionRule) -> re.Pattern[str]:
    try:
        return re.compile(rule.pattern)
    except (re.error, OverflowError, RecursionError) as exc:
        raise RuleCompilationError(
            rule.pattern, f"Invalid pattern '{rule.pattern}': {exc}", cause=exc
        ) from exc


def apply_rule(text: str, rule: RedactionRule) -> tuple[str, int]:
    """Mask every non-overlapping match of *rule* in *text*.

    Returns the new text and the number of matches. Either the whole rule
    applies or, on error, nothing does.
    """
    compiled = _compile(rule)
    try:
        return compiled.subn(lambda match: mask(match.group(0), rule.config), text)
    except Exception as exc:  # noqa: BLE001 – any generator failure is a rule failure
        raise RuleApplicationError(
            rule.pattern, f"Error applying rule '{rule.pattern}': {exc}", cause=exc
        ) from exc


class Redactor:
    """Apply a rule set sequentially; later rules see earlier rules' output.

    A rule that fails to compile or to mask is recorded and skipped; it never
    aborts the remaining rules.
    """

    def __init__(self, rules: RulesLike) -> None:
        self._rules = RedactionRuleSet.from_mapping(rules)

    @property
    def rules(self) -> RedactionRuleSet:
        return self._rules

    def run(self, text: str) -> RedactionResult:
        if not isinstance(text, str):
            raise InvalidInputError(
                f"Text to redact must be a string, got {type(text).__name__}", argument="text"
            )
        result = reduce(self._step, self._rules, RedactionResult(text=text))
        _log.debug(
            "redaction.completed",
            rules=len(self._rules),
            applied=len(result.applied),
            failed=len(result.failures),
            replacements=result.replacements,
        )
        return result

    @staticmethod
    def _step(state: RedactionResult, rule: RedactionRule) -> RedactionResult:
        try:
            text, count = apply_rule(state.text, rule)
        except RedactionRuleError as exc:
            _log.warning(
                "redaction.rule_failed",
                pattern=rule.pattern,
                code=exc.code,
                reason=str(exc.cause) if exc.cause else exc.message,
            )
            return RedactionResult(
                text=state.text,
                applied=state.applied,
                failures=state.failures + (RuleFailure(rule.pattern, exc),),
                replacements=state.replacements,
            )
        return RedactionResult(
            text=text,
            applied=state.applied + (rule.pattern,),
            failures=state.failures,
            replacements=state.replacements + count,
        )


def redact(text: str, rules: RulesLike) -> str:
    """Return *text* with every rule applied in order."""
    return Redactor(rules).run(text).text


def _read(path: Path, encoding: str) -> str:
    try:
        with path.open("r", encoding=encoding, newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(path, cause=exc) from exc


def _write(path: Path, content: str, encoding: str) -> None:
    """Replace *path* with *content*; a failed write leaves *path* untouched."""
    try:
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    except OSError as exc:
        raise FileWriteError(path, cause=exc) from exc
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(content)
        if path.exists():
            os.chmod(tmp_path, path.stat().st_mode & 0o7777)
        os.replace(tmp_path, path)
    except (OSError, UnicodeEncodeError) as exc:
        tmp_path.unlink(missing_ok=True)
        raise FileWriteError(path, cause=exc) from exc


def redact_file(
    source: str | Path,
    rules: RulesLike,
    destination: str | Path | None = None,
    *,
    encoding: str = "utf-8",
) -> FileRedactionResult:
    """Redact *source* and write the result to *destination*.

    *destination* defaults to *source* (in-place overwrite). All rules run in
    memory before the single write.

    Raises:
        FileReadError: *source* cannot be read or decoded.
        FileWriteError: *destination* cannot be written.
    """
    source_path = Path(source)
    destination_path = Path(destination) if destination is not None else source_path
    redactor = Redactor(rules)

    result = redactor.run(_read(source_path, encoding))
    _write(destination_path, result.text, encoding)
    _log.info(
        "redaction.file_written",
        source=str(source_path),
        destination=str(destination_path),
        replacements=result.replacements,
        failed=len(result.failures),
    )
    return FileRedactionResult(
        text=result.text,
        applied=result.applied,
        failures=result.failures,
        replacements=result.replacements,
        source=source_path,
        destination=destination_path,
    )
