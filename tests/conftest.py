"""
Shared pytest fixtures for IndexConsole tests.

Fixture Organization
--------------------
- **isolated_env**: (autouse) clean INDEXCONSOLE_* variables, cwd in tmp_path,
  global CLI options reset
- **client**: IndexServiceClient pointed at BASE_URL (mock it with respx)
- **session**: ConsoleSession around that client
- **sample_file**: a small file on disk to upload

HTTP is never real: tests wrap calls in ``respx.mock(base_url=BASE_URL)``.
"""

from __future__ import annotations

from pathlib import Path
import pytest
import pytest_asyncio

from indexconsole.cli.console import set_verbose_mode
from indexconsole.cli.core.initializers import CLIInitializer
from indexconsole.client.api import IndexServiceClient
from indexconsole.session import ConsoleSession
from tests.fixtures.payloads import BASE_URL


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep tests independent of the developer's shell and config files."""
    for name in ("INDEXCONSOLE_BASE_URL", "INDEXCONSOLE_TIMEOUT", "INDEXCONSOLE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    CLIInitializer.reset()
    set_verbose_mode(False)
    yield
    CLIInitializer.reset()
    set_verbose_mode(False)


# ============================================================================
# File Fixtures
# ============================================================================


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "brief.txt"
    path.write_text("Cruise line RFP brief", encoding="utf-8")
    return path


# ============================================================================
# Client and Session Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def client():
    async with IndexServiceClient(BASE_URL) as c:
        yield c


@pytest_asyncio.fixture
async def session(client: IndexServiceClient) -> ConsoleSession:
    return ConsoleSession(client)
