from __future__ import annotations

import pytest
import typer

from relcfg.cli.commands._helpers import exit_on_error
from relcfg.core.config import ConfigError
from relcfg.core.errors import ErrorCode
from relcfg.core.result import Err, Ok
from relcfg.git.repository import GitError
from relcfg.output.console import MockConsole


def test_exit_on_error_returns_ok_value() -> None:
    console = MockConsole()

    assert exit_on_error(Ok(["origin/mc/1.21.7"]), console, ErrorCode.ENV_ERROR) == [
        "origin/mc/1.21.7"
    ]
    assert console.outputs == []


def test_exit_on_error_reports_and_exits() -> None:
    console = MockConsole()
    result: Err[GitError] = Err(GitError(command="branch -r", message="fatal: boom"))

    with pytest.raises(typer.Exit) as exc:
        exit_on_error(result, console, ErrorCode.ENV_ERROR, what="could not list remote branches")

    assert exc.value.exit_code == int(ErrorCode.ENV_ERROR)
    assert console.messages == ["error: could not list remote branches: fatal: boom"]


def test_exit_on_error_without_context() -> None:
    console = MockConsole()

    with pytest.raises(typer.Exit) as exc:
        exit_on_error(Err(ConfigError("Invalid TOML syntax")), console, ErrorCode.USER_ERROR)

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)
    assert console.messages == ["error: Invalid TOML syntax"]
