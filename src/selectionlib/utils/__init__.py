"""Small SQL helpers shared across selectionlib."""

from .identifiers import is_valid_identifier, quote_identifier
from .query import SafeQuery

__all__ = [
    "is_valid_identifier",
    "quote_identifier",
    "SafeQuery",
]
