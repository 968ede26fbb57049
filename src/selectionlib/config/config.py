"""Configuration loading for SQLite connection profiles."""

import sys
from pathlib import Path
from typing import Dict, Union, Optional, Any

# Use tomllib for Python 3.11+, fallback to tomli for older versions
if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        raise ImportError(
            "Python < 3.11 requires 'tomli' package. " +
            "Install it with: pip install tomli"
        )

from .paths import resolve_config_path


def _read_profiles(config_file: Path) -> Dict[str, Any]:
    with open(config_file, "rb") as f:
        return tomllib.load(f)


def load_profile(
    profile: str,
    path: Optional[Union[str, Path]] = None
) -> Dict[str, Any]:
    """
    Load a SQLite connection profile from connections.toml file.

    Args:
        profile: Name of the profile to load
        path: Optional explicit path to connections.toml file.
              If None, uses the configuration directory.

    Returns:
        Dictionary containing connection parameters for the profile

    Raises:
        FileNotFoundError: If connections.toml file is not found
        KeyError: If the specified profile doesn't exist in the file
        ValueError: If the profile has no 'database' entry

    Example:
        >>> config = load_profile("dev")
        >>> config
        {'database': '~/data/dev.db', 'timeout': 5.0, ...}
    """
    config_file = resolve_config_path(path)

    if not config_file.exists():
        raise FileNotFoundError(
            f"SQLite configuration file not found at {config_file}. " +
            "Create a connections.toml file or see connections.toml.example for template."
        )

    all_profiles = _read_profiles(config_file)

    if profile not in all_profiles:
        available = ", ".join(all_profiles.keys())
        raise KeyError(
            f"Profile '{profile}' not found in {config_file}. " +
            f"Available profiles: {available}"
        )

    cfg = dict(all_profiles[profile])
    if "database" not in cfg:
        raise ValueError(
            f"Profile '{profile}' in {config_file} has no 'database' entry. " +
            "Set it to a file path or ':memory:'."
        )

    return cfg


def list_profiles(path: Optional[Union[str, Path]] = None) -> list[str]:
    """
    List all available profiles in connections.toml file.

    Example:
        >>> list_profiles()
        ['default', 'dev', 'scratch']
    """
    config_file = resolve_config_path(path)

    if not config_file.exists():
        return []

    return list(_read_profiles(config_file).keys())
