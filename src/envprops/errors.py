"""Error hierarchy for envprops."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "PropertyError",
    "InvalidKeyError",
    "PropertyNotFoundError",
    "ConfigNotFoundError",
    "ConfigError",
    "ErrorCodes",
]


class PropertyError(Exception):
    """Base error for all envprops errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidKeyError(PropertyError, ValueError):
    """Raised when a property key violates the naming rules."""

    def __init__(self, key: Any, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_KEY",
            message=f"Invalid property key {key!r}: {reason}",
            details={"key": key, "reason": reason},
            **kwargs,
        )

    @property
    def key(self) -> Any:
        """The rejected key, as passed by the caller."""
        return self.details["key"]

    @property
    def reason(self) -> str:
        """Which validation rule failed."""
        return self.details["reason"]


class PropertyNotFoundError(PropertyError):
    """Raised when a required property has no value in any source."""

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(
            code="PROPERTY_NOT_FOUND",
            message=f"No override or environment variable found for key {key}",
            details={"key": key},
            **kwargs,
        )

    @property
    def key(self) -> str:
        """The key that could not be resolved."""
        return self.details["key"]


class ConfigNotFoundError(PropertyError):
    """Raised when a resolver settings file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(PropertyError):
    """Raised when resolver settings are invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class ErrorCodes:
    """All envprops error codes as constants.

    Example:
        if error.code == ErrorCodes.INVALID_KEY:
            reject_request()
    """

    INVALID_KEY = "INVALID_KEY"
    PROPERTY_NOT_FOUND = "PROPERTY_NOT_FOUND"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
