"""Value sources queried by the property resolver."""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Iterator, Mapping
from contextlib import contextmanager

from envprops.keys import validate_key

__all__ = ["PropertySource", "OverrideStore", "EnvironmentSource"]

logger = logging.getLogger(__name__)


class PropertySource:
    """Base class for a read-only key-value source.

    Subclasses override ``get``. The base implementation holds nothing.
    """

    name: str = "source"

    def get(self, key: str) -> str | None:
        """Return the value for key, or None if the source has none."""
        return None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None


class OverrideStore(PropertySource):
    """Process-scoped local overrides that take precedence over the environment.

    Thread safety:
        Internally synchronized. All public methods are safe to call
        concurrently.
    """

    name = "override"

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = {}
        self._lock = threading.Lock()
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        """Set an override for key.

        Raises:
            InvalidKeyError: If key is not a valid property key.
            TypeError: If value is not a string.
        """
        validate_key(key)
        if not isinstance(value, str):
            raise TypeError(f"Override value for {key} must be a str, got {type(value).__name__}")
        with self._lock:
            self._values[key] = value
        logger.debug("Set override for key %s", key)

    def unset(self, key: str) -> None:
        """Remove the override for key. Missing keys are ignored."""
        with self._lock:
            self._values.pop(key, None)

    def clear(self) -> None:
        """Remove every override."""
        with self._lock:
            self._values.clear()

    def snapshot(self) -> dict[str, str]:
        """Return a copy of the current overrides."""
        with self._lock:
            return dict(self._values)

    @contextmanager
    def scoped(self, **values: str) -> Iterator[OverrideStore]:
        """Apply overrides for the duration of a ``with`` block.

        On exit each key is restored to its previous value, or removed if it
        had none before.
        """
        for key in values:
            validate_key(key)
        with self._lock:
            previous = {key: self._values.get(key) for key in values}
        try:
            for key, value in values.items():
                self.set(key, value)
            yield self
        finally:
            with self._lock:
                for key, old in previous.items():
                    if old is None:
                        self._values.pop(key, None)
                    else:
                        self._values[key] = old

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)


class EnvironmentSource(PropertySource):
    """The process environment, read live on every lookup.

    Pass ``environ`` to read from another mapping instead of ``os.environ``.
    The mapping is never modified.
    """

    name = "environment"

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def get(self, key: str) -> str | None:
        environ = self._environ if self._environ is not None else os.environ
        return environ.get(key)
