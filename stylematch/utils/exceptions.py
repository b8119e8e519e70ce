"""
Custom exception hierarchy for StyleMatch.

Provides a structured exception hierarchy for different error scenarios:
- AppException: Base for all application errors
- ConfigError: Configuration-related errors
- CatalogError: Product catalog loading errors
- PreferenceStoreError: Saved items / recent searches persistence errors
- ValidationError: Input validation errors

Each exception includes:
- Descriptive message
- Optional error code for programmatic handling
- Optional context dictionary for debugging

Example:
    >>> from stylematch.utils.exceptions import CatalogLoadError
    >>> raise CatalogLoadError("Catalog is not a list", path="data/products.json")
"""

from __future__ import annotations

from typing import Any, Dict, Optional


# ============================================
# Base Exception
# ============================================


class AppException(Exception):
    """
    Base exception for all StyleMatch application errors.

    Attributes:
        message: Human-readable error description.
        code: Optional error code for programmatic handling.
        context: Optional dictionary with debugging context.

    Example:
        >>> try:
        ...     raise AppException("Something went wrong", code="APP_001")
        ... except AppException as e:
        ...     print(f"Error {e.code}: {e.message}")
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code or self._default_code()
        self.context = context or {}
        super().__init__(self.message)

    def _default_code(self) -> str:
        """Generate default error code from class name."""
        # CamelCase -> UPPER_SNAKE_CASE
        name = self.__class__.__name__
        code = ""
        for i, char in enumerate(name):
            if char.isupper() and i > 0:
                code += "_"
            code += char.upper()
        return code

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code!r}, "
            f"context={self.context!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "code": self.code,
            "context": self.context,
        }


# ============================================
# Configuration Errors
# ============================================


class ConfigError(AppException):
    """Base exception for configuration-related errors."""

    pass


class ConfigValidationError(ConfigError):
    """
    Raised when configuration values fail validation.

    Example:
        >>> raise ConfigValidationError(
        ...     "recent_searches_limit must be positive",
        ...     field="preferences.recent_searches_limit",
        ...     value=0
        ... )
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if field:
            context["field"] = field
        if value is not None:
            context["value"] = value
        super().__init__(message, code="CONFIG_VALIDATION", context=context, **kwargs)


# ============================================
# Catalog Errors
# ============================================


class CatalogError(AppException):
    """Base exception for product catalog errors."""

    pass


class CatalogLoadError(CatalogError):
    """
    Raised when the static product catalog cannot be read or parsed.

    Example:
        >>> raise CatalogLoadError(
        ...     "Invalid JSON in catalog",
        ...     path="data/products.json",
        ...     reason="Expecting value: line 1 column 1"
        ... )
    """

    def __init__(
        self,
        message: str = "Failed to load product catalog",
        path: Optional[str] = None,
        reason: Optional[str] = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if path:
            context["path"] = path
        if reason:
            context["reason"] = reason
        super().__init__(message, code="CATALOG_LOAD", context=context, **kwargs)


# ============================================
# Preference Storage Errors
# ============================================


class PreferenceStoreError(AppException):
    """Raised when saved items or recent searches cannot be persisted."""

    def __init__(
        self,
        message: str = "Failed to persist preferences",
        path: Optional[str] = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if path:
            context["path"] = path
        super().__init__(message, code="PREFERENCE_STORE", context=context, **kwargs)


# ============================================
# Validation Errors
# ============================================


class ValidationError(AppException):
    """Base exception for input validation errors."""

    pass


class InvalidInputError(ValidationError):
    """Raised when input data is invalid."""

    def __init__(
        self,
        message: str = "Invalid input",
        field: Optional[str] = None,
        value: Any = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if field:
            context["field"] = field
        if value is not None:
            context["value"] = str(value)[:100]  # Limit value length
        super().__init__(message, code="INVALID_INPUT", context=context, **kwargs)
