"""envprops - Resolve properties from local overrides and the process environment."""

from __future__ import annotations

# Resolution
from envprops.resolver import (
    PropertyResolver,
    clear_override,
    default_resolver,
    get_property,
    process_overrides,
    set_override,
)

# Keys
from envprops.keys import KEY_PATTERN, is_valid_key, validate_key

# Sources
from envprops.sources import EnvironmentSource, OverrideStore, PropertySource

# Config
from envprops.config import REDACTED_VALUE, ResolverConfig

# Errors
from envprops.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    InvalidKeyError,
    PropertyError,
    PropertyNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    # Resolution
    "PropertyResolver",
    "default_resolver",
    "get_property",
    "set_override",
    "clear_override",
    "process_overrides",
    # Keys
    "KEY_PATTERN",
    "validate_key",
    "is_valid_key",
    # Sources
    "PropertySource",
    "OverrideStore",
    "EnvironmentSource",
    # Config
    "ResolverConfig",
    "REDACTED_VALUE",
    # Errors
    "ErrorCodes",
    "PropertyError",
    "InvalidKeyError",
    "PropertyNotFoundError",
    "ConfigError",
    "ConfigNotFoundError",
]
