"""Domain errors – bad input and unsupported configuration."""

from __future__ import annotations

from typing import Any

from ironclad.kernel.errors.base import IroncladError


class DomainError(IroncladError):
    """Raised when a caller-supplied value violates a primitive's contract."""

    default_code = "domain_error"


class InvalidInputError(DomainError, TypeError):
    """An argument has the wrong type or an out-of-range value.

    Subclasses :class:`TypeError` so plain ``except TypeError`` callers keep
    working.
    """

    default_code = "invalid_input"

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.argument = argument
        if argument is not None:
            self.detail.setdefault("argument", argument)


class UnsupportedConfigurationError(DomainError, ValueError):
    """A configuration value names something this library does not support."""

    default_code = "unsupported_configuration"

    def __init__(
        self,
        message: str,
        *,
        option: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.option = option
        self.value = value
        if option is not None:
            self.detail.setdefault("option", option)
            self.detail.setdefault("value", value)


class UnsupportedAlgorithmError(UnsupportedConfigurationError):
    """Unknown digest algorithm."""

    default_code = "unsupported_algorithm"

    def __init__(self, algorithm: Any, **kwargs: Any) -> None:
        super().__init__(
            f"Unsupported hashing algorithm: {algorithm}",
            option="algorithm",
            value=algorithm,
            **kwargs,
        )
        self.algorithm = algorithm


__all__ = [
    "DomainError",
    "InvalidInputError",
    "UnsupportedAlgorithmError",
    "UnsupportedConfigurationError",
]
