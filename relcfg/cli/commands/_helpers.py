"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import typer

from relcfg.core.errors import ErrorCode
from relcfg.core.result import Err, Result

if TYPE_CHECKING:
    from relcfg.output.console import ConsoleProtocol

T = TypeVar("T")
E = TypeVar("E")


REPO_OPTION = typer.Option(
    None,
    "--repo",
    help="Directory inside the git clone to inspect (default: current directory).",
)

CONFIG_OPTION = typer.Option(
    None,
    "--config",
    help="Settings file (default: relcfg.toml at the repository root, if present).",
)


def exit_on_error(
    result: Result[T, E],
    console: ConsoleProtocol,
    error_code: ErrorCode,
    *,
    what: str | None = None,
) -> T:
    """Return the value of an Ok result, or report the error and exit.

    Replaces the pattern:
        match result:
            case Err(e):
                console.error(f"{what}: {e.message}")
                raise typer.Exit(code=int(error_code))
            case Ok(value):
                ...

    Expects error objects to have a 'message' attribute.
    """
    if isinstance(result, Err):
        error = result.error
        message: str = getattr(error, "message", str(error))
        console.error(f"{what}: {message}" if what else message)
        raise typer.Exit(code=int(error_code))
    return result.value
