"""Core utilities for the SQL loader."""

from sqlloader.core.comments import clean_sql, strip_comments
from sqlloader.core.paths import ensure_trailing_separator, lookup_path, resolved_path

__all__ = [
    "clean_sql",
    "ensure_trailing_separator",
    "lookup_path",
    "resolved_path",
    "strip_comments",
]
