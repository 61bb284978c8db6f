"""Config command group - Configuration inspection."""

from __future__ import annotations

from indexconsole.cli.config.main import app as config_app

__all__ = ["config_app"]
