"""Wildcard pattern matching for property keys."""

from __future__ import annotations

import re
from functools import lru_cache

__all__ = ["match_pattern"]


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    parts = (re.escape(part) for part in pattern.split("*"))
    return re.compile(".*".join(parts), re.DOTALL)


def match_pattern(pattern: str, key: str) -> bool:
    """Match a property key against a wildcard pattern.

    '*' matches any sequence of characters, including none, so
    ``"*_TOKEN"`` matches ``"GITHUB_TOKEN"`` and ``"DB_*"`` matches
    ``"DB_PASSWORD"``. Every other character matches only itself and the
    whole key must be covered; literal segments never overlap.

    Args:
        pattern: The pattern to match against. May contain '*' wildcards.
        key: The property key to test.

    Returns:
        True if the key matches the pattern, False otherwise.
    """
    if pattern == "*":
        return True
    if "*" not in pattern:
        return pattern == key
    return _compile(pattern).fullmatch(key) is not None
