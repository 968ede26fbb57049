"""Utilities for validating SQLite identifiers"""

import re

_IDENTIFIER = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')


def is_valid_identifier(name: str) -> bool:
    """Check if a string is a valid SQLite unquoted identifier"""
    if not name:
        return False

    # Starts with letter or underscore, followed by letters, digits, or underscores
    return bool(_IDENTIFIER.match(name))


def quote_identifier(name: str) -> str:
    """Quote a name for SQLite, doubling embedded double quotes"""
    return '"' + name.replace('"', '""') + '"'
