from __future__ import annotations

from relcfg.core.result import Err, Ok, Result
from relcfg.git.repository import GitError, RefReader


def parse_branch_listing(listing: str) -> list[str]:
    """Split a `git branch -r` listing into trimmed, non-blank entries."""
    return [s for s in (line.strip() for line in listing.splitlines()) if s]


def list_maintenance_branches(refs: RefReader, prefix: str) -> Result[list[str], GitError]:
    """List remote branches under the maintenance prefix, in listing order.

    A failed listing is returned as Err; callers treat it as fatal.
    """
    result = refs.remote_branches()
    if isinstance(result, Err):
        return result
    return Ok([b for b in parse_branch_listing(result.value) if b.startswith(prefix)])
