"""Custom exceptions for the model catalog."""

from __future__ import annotations


class CatalogError(Exception):
    """Base exception for catalog operations.

    Attributes:
        message: Error description
        cause: Original exception that caused this error
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        """Initialize catalog error.

        Args:
            message: Error description
            cause: Original exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        return self.message


class ModelValidationError(CatalogError, ValueError):
    """Model record failed validation.

    Raised when a record is built with an empty name, a negative
    price, or a provider outside the supported set.
    """

    pass


class DuplicateModelError(CatalogError, ValueError):
    """Two records share the same model name."""

    pass


class DefaultModelNotFoundError(CatalogError, LookupError):
    """The configured default model is not in the registry."""

    pass


class ModelNotFoundError(CatalogError, KeyError):
    """Requested model is not in the registry.

    Only raised by ``ModelRegistry.require``; ``ModelRegistry.get``
    returns None instead.
    """

    pass
