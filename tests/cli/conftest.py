# topmark:header:start
#
#   project      : DiagStyle
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running DiagStyle through Click's `CliRunner`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from diagstyle.cli.main import cli
from diagstyle.cli_shared.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Sequence


@pytest.fixture(autouse=True)
def clean_color_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's color environment out of CLI tests."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI and return Click's result.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--no-color", "styles"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output
