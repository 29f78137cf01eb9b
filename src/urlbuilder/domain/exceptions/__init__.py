"""
Exception hierarchy for the URL builder.

The composer itself never raises. These errors belong to the collaborators
that fetch page bodies and materialize static sites:
1. Base exception with an error code and context
2. Specific exception types for configuration, input and status failures
3. A helper to wrap foreign exceptions into the hierarchy
"""

from typing import Any, Dict, Optional


class UrlBuilderError(Exception):
    """
    Base exception for all URL builder errors.

    Provides a standardized interface with error codes and context.
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.original_exception = original_exception

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
            "original_exception": (
                str(self.original_exception) if self.original_exception else None
            ),
        }


class ConfigurationError(UrlBuilderError):
    """Raised when a required setting (such as the base URL) is missing."""

    def __init__(self, message: str, config_key: str, **kwargs):
        super().__init__(
            message=f"Configuration error for '{config_key}': {message}",
            error_code="CONFIG_ERROR",
            context={"config_key": config_key},
            **kwargs,
        )


class InvalidUrlError(UrlBuilderError):
    """Raised when a URL cannot be fetched or written as part of a static site."""

    def __init__(self, url: str, reason: str, **kwargs):
        super().__init__(
            message=f"Invalid URL {url}: {reason}",
            error_code="INVALID",
            context={"url": url},
            **kwargs,
        )


class InvalidStatusError(UrlBuilderError):
    """Raised when an in-process request answers with anything but success."""

    def __init__(self, url: str, status_code: int, **kwargs):
        super().__init__(
            message=(
                f"Status code {status_code} is not supported for static builds "
                f"({url})"
            ),
            error_code="INVALID_STATUS",
            context={"url": url, "status_code": status_code},
            **kwargs,
        )


def wrap_exception(
    original_exception: Exception,
    error_code: str,
    message: str,
    context: Optional[Dict[str, Any]] = None,
) -> UrlBuilderError:
    """
    Wrap a generic exception in a UrlBuilderError.

    Args:
        original_exception: The original exception to wrap
        error_code: Error code for the new exception
        message: Human-readable error message
        context: Additional context information

    Returns:
        UrlBuilderError: Wrapped exception with standardized interface
    """
    if isinstance(original_exception, UrlBuilderError):
        return original_exception
    return UrlBuilderError(
        message=message,
        error_code=error_code,
        context=context,
        original_exception=original_exception,
    )


__all__ = [
    "UrlBuilderError",
    "ConfigurationError",
    "InvalidUrlError",
    "InvalidStatusError",
    "wrap_exception",
]
