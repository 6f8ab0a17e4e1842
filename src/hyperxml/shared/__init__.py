"""Shared configuration and logging utilities for HyperXML."""

from .config import (
    CodecConfig,
    ConfigError,
    ConfigValidationError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "CodecConfig",
    "ConfigError",
    "ConfigValidationError",
    "CorrelationLogger",
    "get_logger",
]
