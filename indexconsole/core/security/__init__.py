"""Security helpers: safe environment access."""

from indexconsole.core.security.env import (
    get_env_float,
    get_env_str,
    get_env_whitelist,
)

__all__ = ["get_env_float", "get_env_str", "get_env_whitelist"]
