"""Regression tests for the optional Rich dependency.

Bootstrap paths (``--help``, ``--version``, the roff dump) and the
error boundary must work without Rich; only the Rich logger variant
fails, and it fails cleanly.
"""

from __future__ import annotations

import sys

import pytest

from manopt.cli import exit_codes
from manopt.cli.app import cli, main
from manopt.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_roff_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--roff"])
    assert exc_info.value.code == 0


def test_rich_logger_type_errors_cleanly(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        main(["--logger-type=rich"])


def test_error_boundary_falls_back_to_plain_stderr(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    monkeypatch.setattr(sys, "argv", ["manopt", "--logger-type=rich"])

    with pytest.raises(SystemExit) as exc_info:
        cli()
    assert exc_info.value.code == exit_codes.GENERAL_ERROR
    err = capsys.readouterr().err
    assert "[bold red]Error:[/bold red] rich is not installed" in err
