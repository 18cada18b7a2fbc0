"""
Custom exceptions for the plug board application.

This module defines the exception hierarchy used throughout the application,
along with the mapping of exceptions to HTTP status codes.
"""

from typing import Optional, Dict, Any


class PlugBoardError(Exception):
    """Base exception for all plug board errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.error_code = error_code


class ConfigurationError(PlugBoardError):
    """Raised when there are configuration or setup issues."""
    pass


class ValidationError(PlugBoardError):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class ContractViolationError(PlugBoardError):
    """Base class for contract programming violations."""
    pass


class PreconditionError(ContractViolationError):
    """Raised when a function precondition is violated."""
    pass


class BindingNotFoundError(PlugBoardError):
    """Raised when the container is asked for an identifier nobody bound."""

    def __init__(self, identifier: Any, **kwargs):
        super().__init__(
            f"No binding registered for: {describe_identifier(identifier)}",
            error_code=kwargs.pop("error_code", "binding_not_found"),
            **kwargs
        )
        self.identifier = identifier


class ServiceAlreadyExistsError(PlugBoardError):
    """Raised when scaffolding a service whose module already exists."""

    def __init__(self, name: str, path: str, **kwargs):
        super().__init__(f"Service {name} already exists!", **kwargs)
        self.name = name
        self.path = path


def describe_identifier(identifier: Any) -> str:
    """Human readable form of a binding identifier (type tokens by name)."""
    return getattr(identifier, "__name__", None) or str(identifier)


# Exception mapping for HTTP status codes
EXCEPTION_STATUS_MAP = {
    ValidationError: 400,
    PreconditionError: 500,
    ContractViolationError: 500,
    ConfigurationError: 500,
    BindingNotFoundError: 500,
    ServiceAlreadyExistsError: 409,
}


def get_http_status_code(exception: Exception) -> int:
    """Get appropriate HTTP status code for an exception."""
    exception_type = type(exception)
    return EXCEPTION_STATUS_MAP.get(exception_type, 500)


def should_log_error(exception: Exception) -> bool:
    """Determine if an error should be logged."""
    # User input errors are expected, missing bindings are programming errors
    low_priority_exceptions = (
        ValidationError,
        ServiceAlreadyExistsError,
    )

    return not isinstance(exception, low_priority_exceptions)
