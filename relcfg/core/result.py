"""Result type for explicit error handling.

Git calls, config loading and branch listing all return a Result instead of
raising, so callers decide at the edge (usually the CLI) what a failure means.

Usage:
    match repo.show_file("origin/main", "gradle.properties"):
        case Ok(content):
            version = parse_version(content, "mod_version")
        case Err(error):
            console.warning(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result.

    Attributes:
        error: The error value.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Union[Ok[T], Err[E]]
