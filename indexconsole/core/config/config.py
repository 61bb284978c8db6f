"""
Main configuration class for IndexConsole.

The ConsoleConfig dataclass aggregates the sub-configs and validates them
at construction time, so a bad value fails at startup and never halfway
through a command.

Configuration Hierarchy
-----------------------
    ConsoleConfig
    ├── ServiceConfig   # Base URL of the indexing service, request timeout
    ├── LoggingConfig   # Log level, optional log file
    └── DisplayConfig   # Timestamp format used by the CLI

Usage Example
-------------
    config = load_config()                       # ./indexconsole.yaml + env
    config = load_config(Path("other.yaml"))
    config.service.base_url
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from indexconsole.core.exceptions import ConfigValidationError
from indexconsole.core.logging import LOG_LEVELS

DEFAULT_BASE_URL = "http://localhost:5278"
DEFAULT_DATE_FORMAT = "%d/%m/%Y %H:%M:%S"


@dataclass
class ServiceConfig:
    """Connection settings for the document-indexing service."""

    base_url: str = DEFAULT_BASE_URL
    timeout_sec: Optional[float] = None

    def __post_init__(self) -> None:
        self.base_url = (self.base_url or "").strip().rstrip("/")
        parsed = urlparse(self.base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigValidationError(
                f"service.base_url must be an http(s) URL, got '{self.base_url}'",
                field="service.base_url",
                value=self.base_url,
            )
        if self.timeout_sec is not None and self.timeout_sec <= 0:
            raise ConfigValidationError(
                "service.timeout_sec must be positive",
                field="service.timeout_sec",
                value=self.timeout_sec,
            )


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "WARNING"
    file: Optional[Path] = None

    def __post_init__(self) -> None:
        self.level = str(self.level).upper()
        if self.level not in LOG_LEVELS:
            raise ConfigValidationError(
                f"logging.level must be one of {sorted(LOG_LEVELS)}",
                field="logging.level",
                value=self.level,
            )
        if self.file is not None:
            self.file = Path(self.file).expanduser()


@dataclass
class DisplayConfig:
    """Presentation settings."""

    date_format: str = DEFAULT_DATE_FORMAT


@dataclass
class ConsoleConfig:
    """Top-level configuration."""

    service: ServiceConfig = field(default_factory=ServiceConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConsoleConfig":
        """Build a config from a parsed YAML mapping.

        Unknown sections and keys are ignored.

        Raises:
            ConfigValidationError: If a section is not a mapping or a
                value is invalid
        """
        return cls(
            service=ServiceConfig(**_section(data, "service", ServiceConfig)),
            logging=LoggingConfig(**_section(data, "logging", LoggingConfig)),
            display=DisplayConfig(**_section(data, "display", DisplayConfig)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to plain types (paths become strings)."""
        data = asdict(self)
        if self.logging.file is not None:
            data["logging"]["file"] = str(self.logging.file)
        return data


def _section(data: Dict[str, Any], name: str, section_cls: type) -> Dict[str, Any]:
    raw = data.get(name) or {}
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Configuration section '{name}' must be a mapping",
            field=name,
            value=raw,
        )
    known = section_cls.__dataclass_fields__
    return {k: v for k, v in raw.items() if k in known}
