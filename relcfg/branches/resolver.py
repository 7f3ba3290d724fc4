from __future__ import annotations

from relcfg.core.config import Settings
from relcfg.core.result import Err
from relcfg.core.version import Version, parse_version
from relcfg.git.repository import RefReader
from relcfg.output.console import ConsoleProtocol


class BranchVersionResolver:
    """Read the version of a branch from its committed version file.

    Every failure degrades to None with a warning, so one bad branch never
    stops the others from being resolved.
    """

    def __init__(self, *, refs: RefReader, settings: Settings, console: ConsoleProtocol) -> None:
        self._refs = refs
        self._settings = settings
        self._console = console

    def resolve(self, ref: str) -> Version | None:
        path = self._settings.version_file
        result = self._refs.show_file(ref, path)
        if isinstance(result, Err):
            self._console.warning(
                f"Could not read version from branch '{ref}'. Does it have a '{path}'?"
            )
            return None

        version = parse_version(result.value, self._settings.version_key)
        if version is None:
            self._console.warning(
                f"No '{self._settings.version_key} = X.Y.Z' in '{path}' on branch '{ref}'"
            )
        return version
