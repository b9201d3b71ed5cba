"""Application masking – MaskConfig, Sensitivity and mask generators."""
from __future__ import annotations

import enum
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "DEFAULT_MASK_CHAR",
    "DEFAULT_VISIBLE_END",
    "DEFAULT_VISIBLE_START",
    "MaskConfig",
    "MaskGenerator",
    "RepeatMask",
    "SENSITIVITY_RATIOS",
    "Sensitivity",
]

DEFAULT_VISIBLE_START = 2
DEFAULT_VISIBLE_END = 2
DEFAULT_MASK_CHAR = "*"


class Sensitivity(str, enum.Enum):
    """How much of the hidden span is replaced by mask characters."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, value: Any) -> Sensitivity:
        """Lenient lookup: anything unrecognised means ``MEDIUM``."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (TypeError, ValueError):
            return cls.MEDIUM


SENSITIVITY_RATIOS: Mapping[Sensitivity, float] = {
    Sensitivity.LOW: 0.3,
    Sensitivity.MEDIUM: 0.7,
    Sensitivity.HIGH: 1.0,
}


@runtime_checkable
class MaskGenerator(Protocol):
    """Port: produce the replacement for a hidden span of *length* characters."""

    def __call__(self, length: int) -> str: ...


@dataclass(frozen=True)
class RepeatMask:
    """Default generator: repeat a literal (one or more characters)."""

    char: str = DEFAULT_MASK_CHAR

    def __call__(self, length: int) -> str:
        return self.char * length


def _count(value: Any, default: int) -> int:
    # bool is an int subclass but never a meaningful character count
    if isinstance(value, bool):
        return default
    # JSON numbers may decode as 4.0
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or value < 0:
        return default
    return value


def _mask_char(value: Any) -> str | Callable[[int], str]:
    if callable(value):
        return value
    if isinstance(value, str) and value:
        return value
    return DEFAULT_MASK_CHAR


# Wire (camelCase) and keyword spellings accepted by from_mapping.
_OPTION_ALIASES: Mapping[str, str] = {
    "visibleStart": "visible_start",
    "visible_start": "visible_start",
    "visibleEnd": "visible_end",
    "visible_end": "visible_end",
    "maskChar": "mask_char",
    "mask_char": "mask_char",
    "sensitivity": "sensitivity",
}


@dataclass(frozen=True)
class MaskConfig:
    """How a single string is masked.

    Every field is normalised on construction, so a malformed value falls
    back to its default instead of raising:

    * ``visible_start`` / ``visible_end`` – characters kept verbatim at each
      end (negative or non-integer values mean the default of 2).
    * ``mask_char`` – literal repeated over the masked span, or a
      :class:`MaskGenerator` called with the masked length.
    * ``sensitivity`` – :class:`Sensitivity` (or its string value); unknown
      values mean ``medium``.
    """

    visible_start: int = DEFAULT_VISIBLE_START
    visible_end: int = DEFAULT_VISIBLE_END
    mask_char: str | Callable[[int], str] = DEFAULT_MASK_CHAR
    sensitivity: Sensitivity = Sensitivity.MEDIUM
    generator: MaskGenerator = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "visible_start", _count(self.visible_start, DEFAULT_VISIBLE_START))
        object.__setattr__(self, "visible_end", _count(self.visible_end, DEFAULT_VISIBLE_END))
        object.__setattr__(self, "mask_char", _mask_char(self.mask_char))
        object.__setattr__(self, "sensitivity", Sensitivity.parse(self.sensitivity))
        generator = self.mask_char if callable(self.mask_char) else RepeatMask(self.mask_char)
        object.__setattr__(self, "generator", generator)

    @property
    def ratio(self) -> float:
        return SENSITIVITY_RATIOS[self.sensitivity]

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> MaskConfig:
        """Build a config from loose options, ignoring unknown keys."""
        if not isinstance(options, Mapping):
            return cls()
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key)
            if name is not None:
                kwargs[name] = value
        return cls(**kwargs)

    def replace(self, **changes: Any) -> MaskConfig:
        """Return a copy with *changes* applied (unknown keys ignored)."""
        merged = self.to_dict()
        merged["mask_char"] = self.mask_char
        merged.update(changes)
        return MaskConfig.from_mapping(merged)

    def to_dict(self) -> dict[str, Any]:
        """Wire form; a generator mask char is reported by its repr."""
        mask_char = self.mask_char if isinstance(self.mask_char, str) else repr(self.mask_char)
        return {
            "visible_start": self.visible_start,
            "visible_end": self.visible_end,
            "mask_char": mask_char,
            "sensitivity": self.sensitivity.value,
        }
