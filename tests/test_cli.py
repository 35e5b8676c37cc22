"""Tests for the command-line entry point.

``main()`` is tested in-process with explicit argument lists; one test
goes through ``python -m py_envdir`` to cover the real entry point.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

from py_envdir.cli import EXIT_ERROR_CODE, EXIT_SUCCESS_CODE, USAGE, main
from py_envdir.logging import Logger, LogLevel

_SRC = Path(__file__).resolve().parents[1] / "src"


def _envdir(tmp_path: Path, files: dict[str, str]) -> Path:
    """Create an envdir under *tmp_path* holding *files*."""
    envdir = tmp_path / "env"
    envdir.mkdir()
    for name, content in files.items():
        (envdir / name).write_text(content)
    return envdir


class TestUsage:
    """Verify argument checking."""

    @pytest.mark.parametrize("argv", [[], ["some/dir"], ["", "true"]])
    def test_missing_arguments(self, argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
        """Missing directory or command prints usage and fails."""
        assert main(argv) == EXIT_ERROR_CODE
        assert capsys.readouterr().err == USAGE + "\n"


class TestMain:
    """Verify the full read-then-run flow."""

    def test_success(self, tmp_path: Path) -> None:
        """A command that sees its variable and exits 0 succeeds."""
        envdir = _envdir(tmp_path, {"A": "1\n"})
        check = "import os, sys; sys.exit(0 if os.environ['A'] == '1' else 5)"
        assert main([str(envdir), sys.executable, "-c", check]) == EXIT_SUCCESS_CODE

    def test_child_output_passes_through(
        self,
        tmp_path: Path,
        capfd: pytest.CaptureFixture[str],
    ) -> None:
        """The child's output goes to our standard output."""
        envdir = _envdir(tmp_path, {"GREETING": "hello\n"})
        code = "import os; print(os.environ['GREETING'])"
        assert main([str(envdir), sys.executable, "-c", code]) == EXIT_SUCCESS_CODE
        assert capfd.readouterr().out == "hello\n"

    def test_missing_dir(self, capsys: pytest.CaptureFixture[str]) -> None:
        """An unreadable envdir is reported on stderr."""
        assert main(["/not/existing/path", "true"]) == EXIT_ERROR_CODE
        assert capsys.readouterr().err == "open /not/existing/path: no such file or directory\n"

    def test_command_failure(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A failing command is reported on stderr."""
        envdir = _envdir(tmp_path, {})
        assert main([str(envdir), sys.executable, "-c", "raise SystemExit(5)"]) == EXIT_ERROR_CODE
        assert capsys.readouterr().err == "exit status 5\n"

    def test_command_not_found(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A missing executable is reported on stderr."""
        envdir = _envdir(tmp_path, {})
        assert main([str(envdir), "unknown_command"]) == EXIT_ERROR_CODE
        assert "executable file not found" in capsys.readouterr().err

    def test_errors_are_logged(self, tmp_path: Path) -> None:
        """The failure is recorded as an ERROR entry from the cli."""
        envdir = _envdir(tmp_path, {})
        logger = Logger()
        code = main([str(envdir), sys.executable, "-c", "raise SystemExit(4)"], logger=logger)
        assert code == EXIT_ERROR_CODE
        errors = logger.filter(min_level=LogLevel.ERROR, source="cli")
        assert [e.message for e in errors] == ["exit status 4"]


class TestModuleEntryPoint:
    """Verify ``python -m py_envdir``."""

    def test_exit_codes(self, tmp_path: Path) -> None:
        """The process exit status mirrors the command's success."""
        envdir = _envdir(tmp_path, {"A": "322"})
        env = {**os.environ, "PYTHONPATH": str(_SRC)}
        ok = subprocess.run(
            [sys.executable, "-m", "py_envdir", str(envdir), "env"],
            env=env,
            capture_output=True,
            text=True,
            check=False,
        )
        assert ok.returncode == EXIT_SUCCESS_CODE
        assert "A=322" in ok.stdout.splitlines()

        usage = subprocess.run(
            [sys.executable, "-m", "py_envdir"],
            env=env,
            capture_output=True,
            text=True,
            check=False,
        )
        assert usage.returncode == EXIT_ERROR_CODE
        assert USAGE in usage.stderr
