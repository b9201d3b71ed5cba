"""Observability – structlog configuration and logger helper."""
from ironclad.observability.logging.factory import LOG_FORMATS, configure_logging
from ironclad.observability.logging.processors import get_logger

__all__ = ["LOG_FORMATS", "configure_logging", "get_logger"]
