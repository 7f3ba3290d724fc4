from __future__ import annotations

from pathlib import Path

import typer

from relcfg.branches.assembler import display_name
from relcfg.branches.service import BranchConfigService, BranchVersion
from relcfg.cli.commands._helpers import CONFIG_OPTION, REPO_OPTION, exit_on_error
from relcfg.cli.context import build_context
from relcfg.core.config import Settings
from relcfg.core.errors import ErrorCode


def versions(
    repo: Path | None = REPO_OPTION,
    config: Path | None = CONFIG_OPTION,
) -> None:
    """Show the version resolved on main and on each maintenance branch."""
    ctx = build_context(repo, config)

    service = BranchConfigService(refs=ctx.refs, settings=ctx.settings, console=ctx.console)
    resolved = exit_on_error(
        service.resolve_all(),
        ctx.console,
        ErrorCode.ENV_ERROR,
        what="could not list remote branches",
    )

    for branch in resolved:
        typer.echo(_format_line(branch, ctx.settings))


def _format_line(branch: BranchVersion, settings: Settings) -> str:
    name = settings.main_name if branch.is_main else display_name(branch.ref, settings.remote_prefix)
    if branch.version is None:
        return f"{name}\t-"
    return f"{name}\t{branch.version}\t{branch.version.release_range(settings.range_suffix)}"
