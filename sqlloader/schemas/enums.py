from __future__ import annotations

from enum import Enum


class Verb(str, Enum):
    insert = "insert"
    delete = "delete"
    update = "update"
    select = "select"
    merge = "merge"
    create = "create"
    alter = "alter"
    rename = "rename"
    truncate = "truncate"
    drop = "drop"
    grant = "grant"
    revoke = "revoke"

    @property
    def default_prefix(self) -> str:
        return f"{self.value}/"


__all__ = ["Verb"]
