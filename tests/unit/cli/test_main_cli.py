"""Tests for the root CLI, config show and the interactive shell."""

from __future__ import annotations

import json

import respx
from httpx import Response
from typer.testing import CliRunner

from indexconsole import __version__
from indexconsole.cli.main import app
from tests.fixtures.payloads import BASE_URL, make_index

runner = CliRunner()


class TestRootCommand:
    """Tests for global options."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_command_shows_help(self) -> None:
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "index" in result.output

    def test_bad_base_url(self) -> None:
        result = runner.invoke(app, ["--base-url", "not-a-url", "index", "list"])

        assert result.exit_code == 1
        assert "IC-VAL-001" in result.output

    def test_base_url_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("INDEXCONSOLE_BASE_URL", BASE_URL)

        with respx.mock(base_url=BASE_URL) as mock:
            route = mock.get("/indexes/").mock(return_value=Response(200, json=[]))
            result = runner.invoke(app, ["index", "list"])

        assert result.exit_code == 0
        assert route.called


class TestConfigShow:
    """Tests for config show."""

    def test_show_json(self, tmp_path) -> None:
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("display:\n  date_format: '%Y'\n", encoding="utf-8")

        result = runner.invoke(
            app, ["--config", str(config_file), "--base-url", BASE_URL, "config", "show", "-f", "json"]
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["service"]["base_url"] == BASE_URL
        assert data["display"]["date_format"] == "%Y"

    def test_show_table(self) -> None:
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "service.base_url" in result.output


class TestShell:
    """Tests for the interactive shell."""

    def test_shell_create_then_quit(self) -> None:
        with respx.mock(base_url=BASE_URL) as mock:
            mock.get("/indexes/").mock(
                side_effect=[
                    Response(200, json=[]),
                    Response(200, json=[make_index("RFP-2024", 0, "cruise line")]),
                ]
            )
            post = mock.post("/indexes/").mock(
                return_value=Response(201, json=make_index("RFP-2024", 0, "cruise line"))
            )
            result = runner.invoke(
                app,
                ["--base-url", BASE_URL, "shell"],
                input="create RFP-2024 'cruise line'\nquit\n",
            )

        assert result.exit_code == 0
        assert json.loads(post.calls.last.request.content) == {
            "name": "RFP-2024",
            "description": "cruise line",
        }
        assert "create RFP-2024: done" in result.output

    def test_shell_form_flow_and_error_slot(self) -> None:
        with respx.mock(base_url=BASE_URL) as mock:
            mock.get("/indexes/").mock(return_value=Response(200, json=[]))
            result = runner.invoke(
                app,
                ["--base-url", BASE_URL, "shell"],
                input="tab create\nset description only a description\nsubmit\nbogus\n",
            )

        assert result.exit_code == 0
        assert "Create index" in result.output
        assert "Index name is required." in result.output
        assert "Unknown command: bogus" in result.output

    def test_shell_info_and_clear(self) -> None:
        with respx.mock(base_url=BASE_URL) as mock:
            mock.get("/indexes/").mock(return_value=Response(200, json=[make_index("A")]))
            mock.get("/indexes/A").mock(return_value=Response(200, json=make_index("A", 4)))
            result = runner.invoke(
                app,
                ["--base-url", BASE_URL, "shell"],
                input="info A\nclear\nexit\n",
            )

        assert result.exit_code == 0
        assert "Index details" in result.output
        assert "Detail pane closed" in result.output
