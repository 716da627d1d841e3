"""Shared kernel: exceptions used across layers."""

from __future__ import annotations

from .exceptions import (
    ConfigurationError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    FeelingArtError,
    ParseError,
    ProviderError,
    TransportError,
)

__all__ = [
    "ConfigurationError",
    "ErrorCategory",
    "ErrorContext",
    "ErrorSeverity",
    "FeelingArtError",
    "ParseError",
    "ProviderError",
    "TransportError",
]
