"""
Safe environment variable parsing with validation.

Instead of unsafe direct environment access:

    # DANGEROUS - no validation
    timeout = float(os.environ.get("INDEXCONSOLE_TIMEOUT", "30"))

Use safe getters:

    from indexconsole.core.security.env import get_env_float
    timeout = get_env_float("INDEXCONSOLE_TIMEOUT", default=None, min_value=0.1)
"""

from __future__ import annotations

import logging
import os
from typing import FrozenSet, Optional

logger = logging.getLogger(__name__)


def get_env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get a non-empty, stripped string from an environment variable.

    Args:
        name: Environment variable name.
        default: Default value if not set or blank.

    Returns:
        Stripped value or default.
    """
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def get_env_float(
    name: str,
    default: Optional[float] = None,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
) -> Optional[float]:
    """
    Get float from environment variable with bounds validation.

    Args:
        name: Environment variable name.
        default: Default value if not set or invalid.
        min_value: Minimum allowed value (clamped if exceeded).
        max_value: Maximum allowed value (clamped if exceeded).

    Returns:
        Validated float or default.

    Example:
        >>> get_env_float("INDEXCONSOLE_TIMEOUT", default=None, min_value=0.1)
        None  # If INDEXCONSOLE_TIMEOUT not set
    """
    value = os.environ.get(name)
    if value is None:
        return default

    try:
        float_value = float(value)
    except ValueError:
        logger.warning(
            f"Invalid float value for {name}={value}: Returning default {default}"
        )
        return default

    if float_value != float_value:  # NaN check
        return default

    if min_value is not None and float_value < min_value:
        return min_value
    if max_value is not None and float_value > max_value:
        return max_value

    return float_value


def get_env_whitelist(
    name: str,
    allowed: FrozenSet[str],
    default: Optional[str] = None,
    case_sensitive: bool = False,
) -> Optional[str]:
    """
    Get string from environment variable with whitelist validation.

    Only returns value if it matches one of the allowed values.

    Args:
        name: Environment variable name.
        allowed: Set of allowed values.
        default: Default value if not set or not in whitelist.
        case_sensitive: If False (default), comparison is case-insensitive.

    Returns:
        Validated string or default.
    """
    value = os.environ.get(name)
    if value is None:
        return default

    if case_sensitive:
        if value in allowed:
            return value
    else:
        normalized = value.lower()
        for allowed_value in allowed:
            if normalized == allowed_value.lower():
                return allowed_value

    logger.warning(f"Ignoring {name}={value}: expected one of {sorted(allowed)}")
    return default
