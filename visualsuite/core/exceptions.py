"""
Exception hierarchy for the TextToVisual suite.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class VisualSuiteException(Exception):
    """Base exception for all TextToVisual application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(VisualSuiteException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class UpstreamModelError(VisualSuiteException):
    """Raised when a hosted model call errors or returns unusable output."""

    def __init__(
        self,
        message: str,
        provider: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize upstream model error.

        Args:
            message: Error message
            provider: Provider label (gemini, huggingface)
            status_code: Upstream HTTP status when one was received
            details: Upstream error payload, passed through best-effort
        """
        self.provider = provider
        self.status_code = status_code
        self.upstream_details = details or {}
        context: dict[str, Any] = {"provider": provider}
        if status_code is not None:
            context["status_code"] = status_code
        super().__init__(message, context)


class ImageCredentialMissingError(VisualSuiteException):
    """Raised when the image model has no API credential configured."""

    def __init__(self, provider: str = "huggingface") -> None:
        self.provider = provider
        super().__init__("HF Key missing", {"provider": provider})


class VisualNotFoundError(VisualSuiteException):
    """Raised when an archived visual cannot be found."""

    def __init__(self, visual_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize visual not found error.

        Args:
            visual_id: ID of the missing archive entry
            details: Additional context
        """
        details = details or {}
        details["visual_id"] = visual_id
        super().__init__(f"Visual not found: {visual_id}", details)


class ArchiveError(VisualSuiteException):
    """Raised client-side when an archive operation fails."""

    pass


class PartialManifestationError(VisualSuiteException):
    """Raised client-side when either half of a manifestation fails."""

    pass
