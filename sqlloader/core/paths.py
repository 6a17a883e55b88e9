from __future__ import annotations

SEPARATOR = "/"
SQL_SUFFIX = ".sql"


def ensure_trailing_separator(value: str) -> str:
    """Return ``value`` with exactly the one trailing ``/`` it may be missing."""
    return value if value.endswith(SEPARATOR) else value + SEPARATOR


def lookup_path(key: str) -> str:
    """Translate a lookup key into a relative resource path.

    ``users.by-id``, ``users/by-id`` and ``users/by-id.sql`` all become
    ``users/by-id.sql``.
    """
    if key.endswith(SQL_SUFFIX):
        key = key[: -len(SQL_SUFFIX)]
    return key.replace(".", SEPARATOR) + SQL_SUFFIX


def resolved_path(base_path: str, key: str) -> str:
    return base_path + lookup_path(key)


__all__ = ["SEPARATOR", "SQL_SUFFIX", "ensure_trailing_separator", "lookup_path", "resolved_path"]
