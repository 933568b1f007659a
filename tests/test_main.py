"""Tests for the command line entry point."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from todocli.__main__ import main, parse_args


class TestParseArgs:
    """Tests for argument parsing."""

    def test_no_command(self):
        """No arguments selects interactive mode."""
        args = parse_args([])
        assert args.command is None
        assert args.tui is False

    def test_global_options_before_command(self, tmp_path: Path):
        """--file and -v go before the command."""
        args = parse_args(["--file", str(tmp_path / "t.json"), "-vv", "add", "a", "b"])

        assert args.file == tmp_path / "t.json"
        assert args.verbose == 2
        assert args.command == "add"
        assert args.title == ["a", "b"]

    def test_list_json_flag(self):
        """list accepts --json."""
        assert parse_args(["list", "--json"]).json is True


class TestMain:
    """Tests for mode selection in main."""

    def test_oneshot_exit_code(self, tmp_path: Path, capsys):
        """One-shot commands exit with their status code."""
        todo_file = tmp_path / "todos.json"

        with pytest.raises(SystemExit) as exc_info:
            main(["--file", str(todo_file), "add", "buy", "milk"])
        assert exc_info.value.code == 0

        with pytest.raises(SystemExit) as exc_info:
            main(["--file", str(todo_file), "complete", "5"])
        assert exc_info.value.code == 1

        capsys.readouterr()
        with pytest.raises(SystemExit):
            main(["--file", str(todo_file), "list", "--json"])
        assert json.loads(capsys.readouterr().out)["todos"][0]["title"] == "buy milk"

    def test_no_command_runs_interactive(self, tmp_path: Path):
        """Without a command the interactive loop is started."""
        with (
            patch("todocli.cli.run_interactive", return_value=0) as run_interactive,
            pytest.raises(SystemExit) as exc_info,
        ):
            main(["--file", str(tmp_path / "todos.json")])

        run_interactive.assert_called_once()
        service = run_interactive.call_args.args[0]
        assert service.repository.path == tmp_path / "todos.json"
        assert exc_info.value.code == 0

    def test_tui_flag_runs_app(self, tmp_path: Path):
        """--tui starts the terminal UI with the configured file."""
        with patch("todocli.app.run") as run:
            main(["--tui", "--file", str(tmp_path / "todos.json")])

        settings = run.call_args.args[0]
        assert settings.todo_file == tmp_path / "todos.json"
