"""Application masking – the masking function."""
from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from ironclad.application.masking.config import MaskConfig
from ironclad.kernel.errors import MaskGeneratorError

__all__ = ["mask", "masked_length", "resolve_config"]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def resolve_config(
    config: MaskConfig | Mapping[str, Any] | None = None,
    **options: Any,
) -> MaskConfig:
    """Coerce *config* plus keyword overrides into a :class:`MaskConfig`."""
    if isinstance(config, MaskConfig):
        return config.replace(**options) if options else config
    base = dict(config) if isinstance(config, Mapping) else {}
    base.update(options)
    return MaskConfig.from_mapping(base)


def masked_length(hidden_span: int, config: MaskConfig) -> int:
    """Number of mask characters requested for a hidden span."""
    return _round_half_up(hidden_span * config.ratio)


def mask(
    value: Any,
    config: MaskConfig | Mapping[str, Any] | None = None,
    **options: Any,
) -> str:
    """Mask the middle of *value*, keeping its edges visible.

    Returns ``""`` for non-string input and *value* unchanged when the
    visible edges cover it. Otherwise only ``round(hidden * ratio)`` mask
    characters replace the hidden span; the rest of the span is dropped, so
    lower sensitivities also shorten the output::

        >>> mask("secret1234")
        'se****34'
        >>> mask("confidential", visible_start=3, visible_end=1, mask_char="#")
        'con######l'
    """
    if not isinstance(value, str):
        return ""

    cfg = resolve_config(config, **options)
    length = len(value)
    if cfg.visible_start + cfg.visible_end >= length:
        return value

    hidden_span = length - cfg.visible_start - cfg.visible_end
    masked_part = cfg.generator(masked_length(hidden_span, cfg))
    if not isinstance(masked_part, str):
        raise MaskGeneratorError(
            f"Mask generator returned {type(masked_part).__name__}, expected str",
            detail={"generator": repr(cfg.generator)},
        )
    return value[: cfg.visible_start] + masked_part + value[length - cfg.visible_end :]
