"""Infrastructure errors – file I/O and payload decoding."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ironclad.kernel.errors.base import IroncladError


class InfrastructureError(IroncladError):
    """I/O failure that is not a contract violation."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """Failed to decode a payload (e.g. a JSON rule set)."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class RedactionIOError(InfrastructureError):
    """Reading or writing a file failed."""

    default_code = "io_error"
    operation = "access"

    def __init__(
        self,
        path: str | Path,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        cause = kwargs.get("cause")
        reason = getattr(cause, "strerror", None) or (str(cause) if cause else None)
        default = f"Could not {self.operation} '{path}'"
        if reason:
            default = f"{default}: {reason}"
        super().__init__(message or default, **kwargs)
        self.path = Path(path)
        self.detail.setdefault("path", str(path))


class FileReadError(RedactionIOError):
    default_code = "file_read_error"
    operation = "read"


class FileWriteError(RedactionIOError):
    default_code = "file_write_error"
    operation = "write"


__all__ = [
    "FileReadError",
    "FileWriteError",
    "InfrastructureError",
    "RedactionIOError",
    "SerializationError",
]
