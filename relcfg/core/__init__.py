"""Core domain types and logic."""

from .config import ConfigError, Settings, load_settings, load_settings_or_default
from .errors import ErrorCode
from .result import Err, Ok, Result
from .version import Version, parse_version, version_pattern

__all__ = [
    # config
    "ConfigError",
    "Settings",
    "load_settings",
    "load_settings_or_default",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
    # version
    "Version",
    "parse_version",
    "version_pattern",
]
