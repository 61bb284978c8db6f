"""Standard initialization for CLI commands.

The root callback records the global options (--config, --base-url,
--verbose) here; commands then call CLIInitializer.load_config() and get
the same effective configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from indexconsole.core.config import ConsoleConfig
from indexconsole.core.config_loaders import load_config
from indexconsole.core.logging import configure_logging


class CLIInitializer:
    """Holds global CLI options and builds the configuration from them."""

    _config_path: Optional[Path] = None
    _base_url: Optional[str] = None
    _verbose: bool = False

    @classmethod
    def set_global_options(
        cls,
        config_path: Optional[Path] = None,
        base_url: Optional[str] = None,
        verbose: bool = False,
    ) -> None:
        cls._config_path = config_path
        cls._base_url = base_url
        cls._verbose = verbose

    @classmethod
    def reset(cls) -> None:
        cls.set_global_options()

    @classmethod
    def load_config(cls) -> ConsoleConfig:
        """Load configuration and apply its logging settings.

        Raises:
            ConfigValidationError: If the configuration is invalid
        """
        config = load_config(config_path=cls._config_path, base_url=cls._base_url)
        level = "DEBUG" if cls._verbose else config.logging.level
        configure_logging(level=level, log_file=config.logging.file)
        return config
