"""Configuration package.

Re-exports the configuration dataclasses so callers can write:

    from indexconsole.core.config import ConsoleConfig
"""

from indexconsole.core.config.config import (
    DEFAULT_BASE_URL,
    DEFAULT_DATE_FORMAT,
    ConsoleConfig,
    DisplayConfig,
    LoggingConfig,
    ServiceConfig,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_DATE_FORMAT",
    "ConsoleConfig",
    "DisplayConfig",
    "LoggingConfig",
    "ServiceConfig",
]
