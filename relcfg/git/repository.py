"""Read-only git access.

`RefReader` is the narrow capability branch resolution needs: read a file as
committed on a ref, and list remote-tracking refs. `Repository` implements it
by shelling out to git; nothing here checks out, fetches or commits.

Usage:
    repo = Repository(Path("."))

    match repo.show_file("origin/mc/1.21.7", "gradle.properties"):
        case Ok(content):
            print(content)
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from relcfg.core.result import Err, Ok, Result
from relcfg.platform.process import ProcessError
from relcfg.platform.process import run as run_process

_GIT_TIMEOUT_SECONDS = 30.0

__all__ = [
    "GitError",
    "RefReader",
    "Repository",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


class RefReader(Protocol):
    """Read-only view of refs and their committed files."""

    def show_file(self, ref: str, path: str) -> Result[str, GitError]:
        """Return the content of `path` as committed on `ref`."""
        ...

    def remote_branches(self) -> Result[str, GitError]:
        """Return the raw remote branch listing, one ref per line."""
        ...


class Repository:
    """Git clone accessed through the git executable.

    Attributes:
        path: Any directory inside the clone
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def is_work_tree(self) -> bool:
        """Check that `path` lies inside a git work tree."""
        result = self._run(["rev-parse", "--is-inside-work-tree"])
        match result:
            case Ok(stdout):
                return stdout.strip() == "true"
            case Err(_):
                return False

    def show_file(self, ref: str, path: str) -> Result[str, GitError]:
        """Read a file from a ref without touching the working tree.

        Runs `git show <ref>:<path>`.

        Returns:
            Ok(content) on success
            Err(GitError) if the ref or the file does not exist, or git fails
        """
        result = self._run(["show", f"{ref}:{path}"])
        match result:
            case Err(e):
                return Err(
                    GitError(
                        command=f"show {ref}:{path}",
                        message=e.stderr.strip() or str(e),
                        returncode=e.returncode,
                    )
                )
            case Ok(stdout):
                return Ok(stdout)

    def remote_branches(self) -> Result[str, GitError]:
        """List remote-tracking branches.

        Runs `git branch -r --no-color` so `color.branch=always` cannot
        wrap refs in escape codes. Entries are indented and may include a
        symbolic `origin/HEAD -> origin/main` line.
        """
        result = self._run(["branch", "-r", "--no-color"])
        match result:
            case Err(e):
                return Err(
                    GitError(
                        command="branch -r",
                        message=e.stderr.strip() or str(e),
                        returncode=e.returncode,
                    )
                )
            case Ok(stdout):
                return Ok(stdout)

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        return run_process(
            ["git", "-C", str(self.path), *args],
            cwd=self.path,
            timeout=_GIT_TIMEOUT_SECONDS,
        )
