from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from relcfg.cli.commands._helpers import exit_on_error
from relcfg.core.config import CONFIG_FILE_NAME, Settings, load_settings, load_settings_or_default
from relcfg.core.errors import ErrorCode
from relcfg.git.repository import RefReader, Repository
from relcfg.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    root: Path
    refs: RefReader
    settings: Settings
    console: ConsoleProtocol


def build_context(repo: Path | None = None, config: Path | None = None) -> CLIContext:
    console = RichConsole()
    root = (repo or Path.cwd()).expanduser().resolve()

    repository = Repository(root)
    if not root.is_dir() or not repository.is_work_tree():
        console.error(f"'{root}' is not inside a git repository")
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    if config is not None:
        settings_result = load_settings(config.expanduser())
    else:
        settings_result = load_settings_or_default(root / CONFIG_FILE_NAME)

    settings = exit_on_error(settings_result, console, ErrorCode.USER_ERROR)

    return CLIContext(
        root=root,
        refs=repository,
        settings=settings,
        console=console,
    )
