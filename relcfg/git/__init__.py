"""Git operations module.

- RefReader: read-only capability used by branch resolution
- Repository: RefReader backed by the git executable
- MemoryRefs: RefReader backed by a dict, for tests

Usage:
    from relcfg.git import Repository

    repo = Repository(Path("."))
    listing = repo.remote_branches()
"""

from relcfg.git.memory import MemoryRefs
from relcfg.git.repository import GitError, RefReader, Repository

__all__ = [
    "GitError",
    "MemoryRefs",
    "RefReader",
    "Repository",
]
