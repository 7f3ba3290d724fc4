from __future__ import annotations

from pathlib import Path

import typer

from relcfg.branches.service import BranchConfigService
from relcfg.cli.commands._helpers import CONFIG_OPTION, REPO_OPTION, exit_on_error
from relcfg.cli.context import build_context
from relcfg.core.errors import ErrorCode


def generate(
    repo: Path | None = REPO_OPTION,
    config: Path | None = CONFIG_OPTION,
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the generated JSON to this file.",
    ),
) -> None:
    """Print the semantic-release configuration for this repository's branches."""
    ctx = build_context(repo, config)

    service = BranchConfigService(refs=ctx.refs, settings=ctx.settings, console=ctx.console)
    release_config = exit_on_error(
        service.generate(),
        ctx.console,
        ErrorCode.ENV_ERROR,
        what="could not list remote branches",
    )

    document = release_config.to_json()

    target = output.expanduser() if output is not None else None
    if target is not None:
        try:
            target.write_text(document + "\n", encoding="utf-8")
        except OSError as e:
            ctx.console.error(f"cannot write {target}: {e}")
            raise typer.Exit(code=int(ErrorCode.IO_ERROR))
        ctx.console.success(f"wrote {target}")

    ctx.console.info(f"{len(release_config.branches)} release branch(es)")
    typer.echo(document)
