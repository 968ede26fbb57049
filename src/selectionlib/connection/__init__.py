"""Connection module exports."""

from .base import BaseConnector, MEMORY_DATABASE, pragma_statements
from .connection import SQLiteConnector
from selectionlib.config import load_profile, list_profiles, resolve_config_path, get_default_config_path, CONF_DIR

__all__ = [
    "BaseConnector",
    "SQLiteConnector",
    "MEMORY_DATABASE",
    "pragma_statements",
    "load_profile",
    "list_profiles",
    "resolve_config_path",
    "get_default_config_path",
    "CONF_DIR",
]
