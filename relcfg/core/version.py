"""Version triple read from a branch's version file.

Components are kept as the digit strings found in the file, so the version
and its release range are written back exactly as the branch spells them
("1.06.3" stays "1.06.3").
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True, slots=True)
class Version:
    major: str
    minor: str
    patch: str

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def release_range(self, suffix: str = "x") -> str:
        # patch is dropped: every patch release of a line shares one range
        return f"{self.major}.{self.minor}.{suffix}"


@lru_cache(maxsize=None)
def version_pattern(key: str) -> re.Pattern[str]:
    """Pattern matching `<key> = MAJOR.MINOR.PATCH` anywhere in a file."""
    return re.compile(rf"{re.escape(key)}\s*=\s*(\d+)\.(\d+)\.(\d+)")


def parse_version(content: str, key: str) -> Version | None:
    """Extract the first `<key> = X.Y.Z` assignment from file content.

    Returns None when no full triple is present.
    """
    m = version_pattern(key).search(content)
    if m is None:
        return None
    return Version(m.group(1), m.group(2), m.group(3))
