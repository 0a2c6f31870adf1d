"""Shared test fixtures for the envprops test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

import envprops.resolver
from envprops.resolver import PropertyResolver
from envprops.sources import EnvironmentSource, OverrideStore


@pytest.fixture(autouse=True)
def _reset_process_state() -> Iterator[None]:
    """Isolate tests from the process-wide overrides and default resolver."""
    envprops.resolver.process_overrides.clear()
    envprops.resolver._default_resolver = None
    yield
    envprops.resolver.process_overrides.clear()
    envprops.resolver._default_resolver = None


@pytest.fixture
def overrides() -> OverrideStore:
    """An empty, private override store."""
    return OverrideStore()


@pytest.fixture
def environ() -> dict[str, str]:
    """A plain dict standing in for the process environment."""
    return {}


@pytest.fixture
def resolver(overrides: OverrideStore, environ: dict[str, str]) -> PropertyResolver:
    """Resolver over the private override store and the fake environment."""
    return PropertyResolver(
        overrides=overrides,
        environment=EnvironmentSource(environ),
        logger=logging.getLogger("envprops.test"),
    )

