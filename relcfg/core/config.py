"""Typed configuration loading and access.

Every static value the branch resolution depends on lives in `Settings`, so
tests and alternate repositories can substitute their own without touching
module constants. Values can be overridden from a `relcfg.toml` file.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, StructureError, as_str_dict, get_list, get_str, get_table

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "Settings",
    "default_plugins",
    "load_settings",
    "load_settings_or_default",
]

CONFIG_FILE_NAME = "relcfg.toml"

DEFAULT_VERSION_FILE = "gradle.properties"
DEFAULT_VERSION_KEY = "mod_version"
DEFAULT_MAIN_REF = "origin/main"
DEFAULT_MAIN_NAME = "main"
DEFAULT_MAINTENANCE_PREFIX = "origin/mc/"
DEFAULT_REMOTE_PREFIX = "origin/"
DEFAULT_RANGE_SUFFIX = "x"


def default_plugins() -> tuple[object, ...]:
    """Static semantic-release plugin list emitted alongside the branches."""
    return (
        "@semantic-release/commit-analyzer",
        "@semantic-release/release-notes-generator",
        [
            "@semantic-release/github",
            {
                "assets": [{"path": "build/libs/*.jar", "label": "Mod Jar File"}],
            },
        ],
        [
            "@semantic-release/git",
            {
                "assets": [DEFAULT_VERSION_FILE],
                "message": "chore(release): ${nextRelease.version} [skip ci]\n\n${nextRelease.notes}",
            },
        ],
    )


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class Settings:
    """Static inputs of branch resolution.

    Attributes:
        version_file: Path of the versioned file, relative to the repo root.
        version_key: Key whose `= X.Y.Z` value is the branch version.
        main_ref: Ref holding the main line.
        main_name: Display name of the main branch descriptor.
        maintenance_prefix: Remote refs starting with this are maintenance branches.
        remote_prefix: Stripped from maintenance refs to form display names.
        range_suffix: Last component of every release range.
        plugins: Opaque semantic-release plugin list, passed through untouched.
    """

    version_file: str = DEFAULT_VERSION_FILE
    version_key: str = DEFAULT_VERSION_KEY
    main_ref: str = DEFAULT_MAIN_REF
    main_name: str = DEFAULT_MAIN_NAME
    maintenance_prefix: str = DEFAULT_MAINTENANCE_PREFIX
    remote_prefix: str = DEFAULT_REMOTE_PREFIX
    range_suffix: str = DEFAULT_RANGE_SUFFIX
    plugins: tuple[object, ...] = field(default_factory=default_plugins)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Settings:
        """Create Settings from a mapping (parsed TOML).

        Raises:
            StructureError: if a known key has the wrong type.
        """
        version: StrDict = get_table(data, "version") or {}
        branches: StrDict = get_table(data, "branches") or {}
        release: StrDict = get_table(data, "release") or {}

        plugins = get_list(release, "plugins")

        return cls(
            version_file=get_str(version, "file") or DEFAULT_VERSION_FILE,
            version_key=get_str(version, "key") or DEFAULT_VERSION_KEY,
            main_ref=get_str(branches, "main_ref") or DEFAULT_MAIN_REF,
            main_name=get_str(branches, "main_name") or DEFAULT_MAIN_NAME,
            maintenance_prefix=get_str(branches, "maintenance_prefix")
            or DEFAULT_MAINTENANCE_PREFIX,
            remote_prefix=get_str(branches, "remote_prefix") or DEFAULT_REMOTE_PREFIX,
            range_suffix=get_str(branches, "range_suffix") or DEFAULT_RANGE_SUFFIX,
            plugins=tuple(plugins) if plugins is not None else default_plugins(),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_settings(path: Path) -> Result[Settings, ConfigError]:
    """Load settings from a TOML file.

    Args:
        path: Path to relcfg.toml

    Returns:
        Ok(Settings) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Settings.from_dict(result.value))
    except StructureError as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_settings_or_default(path: Path) -> Result[Settings, ConfigError]:
    """Load settings, falling back to defaults when the file does not exist.

    A file that exists but cannot be parsed is still an error.
    """
    if not path.exists():
        return Ok(Settings())
    return load_settings(path)
