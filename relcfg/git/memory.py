"""In-memory RefReader for tests and dry runs."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from relcfg.core.result import Err, Ok, Result
from relcfg.git.repository import GitError

__all__ = ["MemoryRefs"]


def _empty_refs() -> dict[str, dict[str, str]]:
    return {}


@dataclass
class MemoryRefs:
    """RefReader backed by a `{ref: {path: content}}` mapping.

    The remote listing is rendered the way `git branch -r` prints it, in
    insertion order of `refs`. Set `listing` to override it verbatim, or
    `listing_error` to make listing fail.

    Every `show_file` call is recorded in `shown` so tests can assert on
    which refs were read.
    """

    refs: dict[str, dict[str, str]] = field(default_factory=_empty_refs)
    listing: str | None = None
    listing_error: str | None = None
    shown: list[tuple[str, str]] = field(default_factory=list)

    @classmethod
    def with_file(cls, path: str, contents: Mapping[str, str]) -> MemoryRefs:
        """Build refs that each hold a single file at `path`."""
        return cls(refs={ref: {path: text} for ref, text in contents.items()})

    def show_file(self, ref: str, path: str) -> Result[str, GitError]:
        self.shown.append((ref, path))
        files = self.refs.get(ref)
        if files is None:
            return Err(
                GitError(
                    command=f"show {ref}:{path}",
                    message=f"fatal: invalid object name '{ref}'.",
                    returncode=128,
                )
            )
        if path not in files:
            return Err(
                GitError(
                    command=f"show {ref}:{path}",
                    message=f"fatal: path '{path}' does not exist in '{ref}'",
                    returncode=128,
                )
            )
        return Ok(files[path])

    def remote_branches(self) -> Result[str, GitError]:
        if self.listing_error is not None:
            return Err(GitError(command="branch -r", message=self.listing_error, returncode=128))
        if self.listing is not None:
            return Ok(self.listing)
        return Ok("".join(f"  {ref}\n" for ref in self.refs))
