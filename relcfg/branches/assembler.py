"""Build the semantic-release configuration document.

Main comes first when its version resolved, then maintenance branches in
the order they were listed. Branches without a version contribute nothing.
"""

from __future__ import annotations

import copy
import json
from collections.abc import Sequence
from dataclasses import dataclass

from relcfg.core.config import Settings
from relcfg.core.version import Version

__all__ = [
    "BranchDescriptor",
    "ReleaseConfig",
    "assemble",
    "display_name",
]


@dataclass(frozen=True, slots=True)
class BranchDescriptor:
    """One entry of the semantic-release `branches` list.

    Attributes:
        name: Branch name as semantic-release sees it (no remote prefix).
        range: Accepted release range, e.g. "1.6.x".
        prerelease: Omitted from the output when None.
    """

    name: str
    range: str
    prerelease: bool | None = None

    def to_dict(self) -> dict[str, object]:
        out: dict[str, object] = {"name": self.name, "range": self.range}
        if self.prerelease is not None:
            out["prerelease"] = self.prerelease
        return out


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """The generated document: static plugins plus resolved branches."""

    plugins: tuple[object, ...]
    branches: tuple[BranchDescriptor, ...]

    def to_dict(self) -> dict[str, object]:
        return {
            "plugins": copy.deepcopy(list(self.plugins)),
            "branches": [b.to_dict() for b in self.branches],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)


def display_name(ref: str, remote_prefix: str) -> str:
    """Strip the first occurrence of the remote prefix from a ref."""
    return ref.replace(remote_prefix, "", 1) if remote_prefix else ref


def assemble(
    main_version: Version | None,
    maintenance: Sequence[tuple[str, Version | None]],
    settings: Settings,
) -> ReleaseConfig:
    """Combine resolved versions into a ReleaseConfig.

    Args:
        main_version: Version on the main ref, or None if it did not resolve.
        maintenance: (ref, version) pairs in enumeration order.
        settings: Naming and static plugin configuration.
    """
    branches: list[BranchDescriptor] = []

    if main_version is not None:
        branches.append(
            BranchDescriptor(
                name=settings.main_name,
                range=main_version.release_range(settings.range_suffix),
            )
        )

    for ref, version in maintenance:
        if version is None:
            continue
        branches.append(
            BranchDescriptor(
                name=display_name(ref, settings.remote_prefix),
                range=version.release_range(settings.range_suffix),
                prerelease=False,
            )
        )

    return ReleaseConfig(plugins=settings.plugins, branches=tuple(branches))
