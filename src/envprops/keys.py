"""Property key validation.

Keys follow the POSIX convention for environment variable names restricted
to uppercase: letters ``A-Z``, digits and underscores, never starting with a
digit.
"""

from __future__ import annotations

import re
from typing import Any

from envprops.errors import InvalidKeyError

__all__ = ["KEY_PATTERN", "validate_key", "is_valid_key"]

KEY_PATTERN = re.compile(r"^[A-Z_]+[A-Z0-9_]*$")


def validate_key(key: Any) -> str:
    """Validate a property key and return it unchanged.

    Rules are checked in order and the first failure is reported:

    1. the key must not be None (or a non-string)
    2. the key must not contain a dot
    3. the key must not start with a digit
    4. the key must match ``KEY_PATTERN``

    Args:
        key: The candidate key.

    Returns:
        The key, unchanged.

    Raises:
        InvalidKeyError: If any rule fails.
    """
    if key is None:
        raise InvalidKeyError(key, "key may not be None")
    if not isinstance(key, str):
        raise InvalidKeyError(key, f"key must be a string, got {type(key).__name__}")
    if "." in key:
        raise InvalidKeyError(key, "key may not contain dots")
    if key[:1].isdigit():
        raise InvalidKeyError(key, "key may not start with a digit")
    # fullmatch: '$' alone would accept a trailing newline
    if KEY_PATTERN.fullmatch(key) is None:
        raise InvalidKeyError(key, "key must consist of A-Z, 0-9 and '_'")
    return key


def is_valid_key(key: Any) -> bool:
    """Return True if ``validate_key`` would accept the key."""
    try:
        validate_key(key)
    except InvalidKeyError:
        return False
    return True
