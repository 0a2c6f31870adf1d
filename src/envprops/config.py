"""Resolver settings loading and validation."""

from __future__ import annotations

import os
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from envprops.errors import ConfigError, ConfigNotFoundError
from envprops.utils.pattern import match_pattern

__all__ = ["ResolverConfig", "REDACTED_VALUE"]

REDACTED_VALUE = "***REDACTED***"


class ResolverConfig(BaseModel):
    """Settings for the resolver's diagnostic output.

    Attributes:
        redact_values: Replace every found value in log records.
        redact_keys: Wildcard patterns of keys whose values are always
            replaced in log records, e.g. ``"*_PASSWORD"``.
        logger_name: Name of the logger used when none is injected.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    redact_values: bool = False
    redact_keys: tuple[str, ...] = ()
    logger_name: str = "envprops.resolver"

    @classmethod
    def load(cls, yaml_path: str) -> ResolverConfig:
        """Load resolver settings from a YAML file.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the YAML is invalid or contains unknown or
                mistyped settings.
        """
        if not os.path.isfile(yaml_path):
            raise ConfigNotFoundError(config_path=yaml_path)

        with open(yaml_path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {yaml_path}: {e}", cause=e) from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"Resolver config must be a mapping, got {type(data).__name__}")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResolverConfig:
        """Build settings from a plain dict, wrapping validation failures."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(
                f"Invalid resolver config: {e.error_count()} error(s)",
                details={"errors": e.errors(include_url=False)},
                cause=e,
            ) from e

    def should_redact(self, key: str) -> bool:
        """Return True if values for key must not appear in log output."""
        if self.redact_values:
            return True
        return any(match_pattern(pattern, key) for pattern in self.redact_keys)

    def display_value(self, key: str, value: str) -> str:
        """Return value as it may be written to logs."""
        return REDACTED_VALUE if self.should_redact(key) else value
