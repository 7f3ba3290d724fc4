"""Helpers for safely reading untyped TOML data.

Used by the config loader to validate values at the boundary and narrow
their static types.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]
ObjList = list[object]


class StructureError(ValueError):
    """Raised when a config value has the wrong type."""


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table from a mapping.

    Returns None if the key is missing. Raises StructureError if the key is
    present but is not a table.
    """
    if key not in table:
        return None
    value = as_str_dict(table[key])
    if value is None:
        raise StructureError(f"'{key}' must be a table")
    return value


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value, stripping whitespace.

    Returns None if missing or empty after stripping. Raises StructureError
    if present with another type.
    """
    if key not in table:
        return None
    value = table[key]
    if not isinstance(value, str):
        raise StructureError(f"'{key}' must be a string")
    s = value.strip()
    return s or None


def get_list(table: Mapping[str, object], key: str) -> ObjList | None:
    """Get a list value, or None if missing."""
    if key not in table:
        return None
    value = table[key]
    if not isinstance(value, list):
        raise StructureError(f"'{key}' must be an array")
    return cast(ObjList, value)
