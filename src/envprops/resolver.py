"""Property resolution: local overrides first, then the process environment."""

from __future__ import annotations

import logging

from envprops.config import ResolverConfig
from envprops.errors import PropertyNotFoundError
from envprops.keys import validate_key
from envprops.sources import EnvironmentSource, OverrideStore, PropertySource

__all__ = [
    "PropertyResolver",
    "default_resolver",
    "get_property",
    "set_override",
    "clear_override",
    "process_overrides",
]


class PropertyResolver:
    """Looks up property values by key across two ordered sources.

    The override source is consulted first and wins when it holds a value.
    Otherwise the environment source is consulted. A key missing from both
    resolves to None, which is not an error.

    The resolver keeps no state between calls and does no locking across
    its two reads; each source provides its own read consistency.
    """

    def __init__(
        self,
        overrides: PropertySource | None = None,
        environment: PropertySource | None = None,
        logger: logging.Logger | None = None,
        config: ResolverConfig | None = None,
    ) -> None:
        self._config = config or ResolverConfig()
        self._overrides = overrides if overrides is not None else process_overrides
        self._environment = environment if environment is not None else EnvironmentSource()
        self._logger = logger or logging.getLogger(self._config.logger_name)

    @property
    def config(self) -> ResolverConfig:
        return self._config

    @property
    def sources(self) -> tuple[PropertySource, PropertySource]:
        """The sources in lookup order."""
        return (self._overrides, self._environment)

    def _lookup(self, key: str) -> tuple[PropertySource, str] | tuple[None, None]:
        self._logger.debug("Fetching property with key: %s", key, extra={"key": key})
        validate_key(key)
        for source in self.sources:
            value = source.get(key)
            if value is not None:
                if not self._logger.isEnabledFor(logging.INFO):
                    return source, value
                self._logger.info(
                    "Found %s value for key %s with value %s",
                    source.name,
                    key,
                    self._config.display_value(key, value),
                    extra={"key": key, "source": source.name},
                )
                return source, value
        self._logger.info(
            "Unable to find override or environment variable for key %s",
            key,
            extra={"key": key, "source": None},
        )
        return None, None

    def resolve(self, key: str) -> str | None:
        """Resolve key to its value.

        Args:
            key: The property key. Must satisfy ``validate_key``.

        Returns:
            The override value if one is set, else the environment value,
            else None.

        Raises:
            InvalidKeyError: If key is malformed. No source is queried.
        """
        _, value = self._lookup(key)
        return value

    def get(self, key: str, default: str | None = None) -> str | None:
        """Resolve key, returning default when no source has a value."""
        value = self.resolve(key)
        return default if value is None else value

    def require(self, key: str) -> str:
        """Resolve key, raising PropertyNotFoundError when no source has a value."""
        value = self.resolve(key)
        if value is None:
            raise PropertyNotFoundError(key)
        return value

    def source_of(self, key: str) -> str | None:
        """Return the name of the source that supplies key, or None."""
        source, _ = self._lookup(key)
        return source.name if source is not None else None


process_overrides = OverrideStore()

_default_resolver: PropertyResolver | None = None


def default_resolver() -> PropertyResolver:
    """Return the resolver bound to the process-wide overrides and os.environ."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = PropertyResolver(overrides=process_overrides, environment=EnvironmentSource())
    return _default_resolver


def get_property(key: str) -> str | None:
    """Resolve key against the process-wide overrides and the environment."""
    return default_resolver().resolve(key)


def set_override(key: str, value: str) -> None:
    """Set a process-wide override for key."""
    process_overrides.set(key, value)


def clear_override(key: str) -> None:
    """Remove the process-wide override for key, if any."""
    process_overrides.unset(key)
