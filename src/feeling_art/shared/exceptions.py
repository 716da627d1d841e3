"""
Unified Exception Hierarchy for Feeling Art Search.

Exception Hierarchy:
    FeelingArtError (base)
    ├── ProviderError
    │   ├── TransportError
    │   └── ParseError
    └── ConfigurationError

A ProviderError is only raised for faults of a provider's *search* call.
Per-record faults (a detail fetch that fails, a record without an image)
are dropped by the provider clients and never surface as exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    WARNING = auto()  # Recoverable, can continue
    ERROR = auto()  # Failed for this attempt
    CRITICAL = auto()  # Cannot continue


class ErrorCategory(Enum):
    """Categories for error classification."""

    PROVIDER = "provider"
    DATA = "data"
    CONFIGURATION = "config"


@dataclass(frozen=True)
class ErrorContext:
    """
    Rich context for error messages.
    """

    provider: str | None = None
    operation: str | None = None
    url: str | None = None
    status_code: int | None = None
    suggestion: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


class FeelingArtError(Exception):
    """
    Base exception for all Feeling Art errors.

    Provides:
    - Structured error context
    - Severity classification
    - JSON-friendly formatting
    """

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        category: ErrorCategory = ErrorCategory.PROVIDER,
    ) -> None:
        super().__init__(message)
        self.context = context or ErrorContext()
        self.severity = severity
        self.category = category

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "error": str(self),
            "category": self.category.value,
            "severity": self.severity.name.lower(),
        }
        if self.context.provider:
            result["provider"] = self.context.provider
        if self.context.status_code is not None:
            result["status_code"] = self.context.status_code
        if self.context.suggestion:
            result["suggestion"] = self.context.suggestion
        return result


# =============================================================================
# Provider Errors
# =============================================================================


class ProviderError(FeelingArtError):
    """Base class for faults of a provider's search call."""

    def __init__(
        self,
        message: str,
        *,
        provider: str = "provider",
        context: ErrorContext | None = None,
        category: ErrorCategory = ErrorCategory.PROVIDER,
    ) -> None:
        ctx = context or ErrorContext()
        ctx = ErrorContext(
            provider=provider,
            operation=ctx.operation,
            url=ctx.url,
            status_code=ctx.status_code,
            suggestion=ctx.suggestion,
            metadata=ctx.metadata,
        )
        super().__init__(
            f"{provider}: {message}",
            context=ctx,
            severity=ErrorSeverity.ERROR,
            category=category,
        )
        self.provider = provider


class TransportError(ProviderError):
    """Raised when the search call fails to connect or returns a non-success status."""

    def __init__(
        self,
        message: str = "Search request failed",
        *,
        provider: str = "provider",
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(
            message,
            provider=provider,
            context=ErrorContext(operation="search", url=url, status_code=status_code),
        )
        self.status_code = status_code


class ParseError(ProviderError):
    """Raised when the search call returns a body that is not valid JSON."""

    def __init__(
        self,
        message: str = "Invalid JSON response",
        *,
        provider: str = "provider",
        url: str | None = None,
    ) -> None:
        super().__init__(
            f"Parse error: {message}",
            provider=provider,
            context=ErrorContext(operation="search", url=url),
            category=ErrorCategory.DATA,
        )


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(FeelingArtError):
    """Raised for configuration-related errors."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.CONFIGURATION,
        )
