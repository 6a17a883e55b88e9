from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Union

import psycopg
from psycopg import sql

from sqlloader.db.query_loader import QueryLoader, get_loader
from sqlloader.schemas.enums import Verb

Params = Union[Sequence[Any], Mapping[str, Any], None]


@dataclass(frozen=True, slots=True)
class PreparedQuery:
    """SQL loaded from resources and bound to one connection.

    Every execution passes ``prepare=True`` so psycopg prepares the statement
    on the server once per connection and reuses it afterwards.
    """

    conn: psycopg.AsyncConnection
    key: str
    text: str

    @property
    def query(self) -> sql.SQL:
        return sql.SQL(self.text)

    async def execute(self, params: Params = None) -> psycopg.AsyncCursor:
        return await self.conn.execute(self.query, params, prepare=True)

    async def fetchone(self, params: Params = None) -> Optional[Any]:
        cursor = await self.execute(params)
        return await cursor.fetchone()

    async def fetchall(self, params: Params = None) -> list[Any]:
        cursor = await self.execute(params)
        rows = await cursor.fetchall()
        return list(rows or [])


def prepare(
    conn: psycopg.AsyncConnection,
    key: str,
    *,
    loader: Optional[QueryLoader] = None,
) -> PreparedQuery:
    """Load ``key`` and bind it to ``conn``.

    ``key`` is resolved as is, without a verb prefix. Missing resources raise
    :class:`~sqlloader.db.query_loader.QueryNotFoundError` before the
    connection is used.
    """

    text = (loader or get_loader()).resolve(key)
    return PreparedQuery(conn=conn, key=key, text=text)


def _prepare_verb(
    verb: Verb,
    conn: psycopg.AsyncConnection,
    path: str,
    loader: Optional[QueryLoader],
) -> PreparedQuery:
    resolved_loader = loader or get_loader()
    return prepare(conn, resolved_loader.prefix(verb) + path, loader=resolved_loader)


def prepare_select(
    conn: psycopg.AsyncConnection, path: str, *, loader: Optional[QueryLoader] = None
) -> PreparedQuery:
    return _prepare_verb(Verb.select, conn, path, loader)


def prepare_insert(
    conn: psycopg.AsyncConnection, path: str, *, loader: Optional[QueryLoader] = None
) -> PreparedQuery:
    return _prepare_verb(Verb.insert, conn, path, loader)


def prepare_update(
    conn: psycopg.AsyncConnection, path: str, *, loader: Optional[QueryLoader] = None
) -> PreparedQuery:
    return _prepare_verb(Verb.update, conn, path, loader)


def prepare_delete(
    conn: psycopg.AsyncConnection, path: str, *, loader: Optional[QueryLoader] = None
) -> PreparedQuery:
    return _prepare_verb(Verb.delete, conn, path, loader)


__all__ = [
    "PreparedQuery",
    "prepare",
    "prepare_delete",
    "prepare_insert",
    "prepare_select",
    "prepare_update",
]
