"""Base connector class with shared profile handling."""

import warnings
from pathlib import Path
from typing import Optional, Any, Dict

from selectionlib.config.config import load_profile
from selectionlib.utils.identifiers import is_valid_identifier

MEMORY_DATABASE = ":memory:"

# Keyword arguments accepted by sqlite3.connect()
CONNECT_KEYS = (
    "timeout",
    "detect_types",
    "isolation_level",
    "check_same_thread",
    "cached_statements",
    "uri",
)


def pragma_statements(pragmas: Optional[Dict[str, Any]]) -> list[str]:
    """Render a profile's [pragmas] table as PRAGMA statements, skipping invalid names"""
    statements: list[str] = []
    for name, value in (pragmas or {}).items():
        if not is_valid_identifier(name):
            msg = f"Ignoring PRAGMA '{name}': not a valid SQLite identifier"
            warnings.warn(msg, UserWarning, stacklevel=2)
            continue

        if isinstance(value, bool):
            rendered = str(int(value))
        elif isinstance(value, (int, float)):
            rendered = str(value)
        else:
            rendered = "'" + str(value).replace("'", "''") + "'"
        statements.append(f"PRAGMA {name} = {rendered}")
    return statements


class BaseConnector:
    """Base class for SQLite connectors with TOML profile support"""

    def __init__(self, profile: str, **kwargs: Any) -> None:
        """Initialize the connector with a configuration profile and optional parameter overrides"""
        self._cfg: Dict[str, Any] = load_profile(profile)
        self._cfg.update(kwargs)
        self._profile = profile

    @property
    def database(self) -> str:
        """Database location from the profile, with ~ expanded for plain file paths"""
        database = str(self._cfg["database"])
        if database == MEMORY_DATABASE or self._cfg.get("uri", False):
            return database
        return str(Path(database).expanduser())

    @property
    def pragmas(self) -> Dict[str, Any]:
        """PRAGMA settings applied after each connection is opened"""
        return dict(self._cfg.get("pragmas", {}))

    def connect_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for sqlite3.connect() built from the profile"""
        kwargs: Dict[str, Any] = {"database": self.database}
        for key, value in self._cfg.items():
            if key in CONNECT_KEYS:
                kwargs[key] = value
            elif key not in ("database", "pragmas"):
                msg = f"Profile '{self._profile}' has unsupported setting '{key}', ignoring it"
                warnings.warn(msg, UserWarning, stacklevel=2)
        return kwargs
