from __future__ import annotations

from dataclasses import dataclass

from relcfg.branches.assembler import ReleaseConfig, assemble
from relcfg.branches.enumerator import list_maintenance_branches
from relcfg.branches.resolver import BranchVersionResolver
from relcfg.core.config import Settings
from relcfg.core.result import Err, Ok, Result
from relcfg.core.version import Version
from relcfg.git.repository import GitError, RefReader
from relcfg.output.console import ConsoleProtocol


@dataclass(frozen=True, slots=True)
class BranchVersion:
    ref: str
    version: Version | None
    is_main: bool = False


class BranchConfigService:
    """Enumerate, resolve and assemble in one sequential pass."""

    def __init__(self, *, refs: RefReader, settings: Settings, console: ConsoleProtocol) -> None:
        self._refs = refs
        self._settings = settings
        self._resolver = BranchVersionResolver(refs=refs, settings=settings, console=console)

    def resolve_all(self) -> Result[list[BranchVersion], GitError]:
        """Resolve main, then every maintenance branch in listing order.

        The listing is taken first: without it there is nothing to generate.
        """
        listed = list_maintenance_branches(self._refs, self._settings.maintenance_prefix)
        if isinstance(listed, Err):
            return listed

        main = BranchVersion(
            ref=self._settings.main_ref,
            version=self._resolver.resolve(self._settings.main_ref),
            is_main=True,
        )
        resolved = [main]
        for ref in listed.value:
            resolved.append(BranchVersion(ref=ref, version=self._resolver.resolve(ref)))
        return Ok(resolved)

    def generate(self) -> Result[ReleaseConfig, GitError]:
        result = self.resolve_all()
        if isinstance(result, Err):
            return result

        main, *maintenance = result.value
        return Ok(
            assemble(
                main.version,
                [(b.ref, b.version) for b in maintenance],
                self._settings,
            )
        )
