"""Загрузка SQL-ресурсов и их привязка к подключениям psycopg."""

from sqlloader.db.query_loader import (
    QueryLoader,
    QueryNotFoundError,
    get_loader,
    load_query,
    load_verb,
)
from sqlloader.db.resources import DirectoryResourceStore, PackageResourceStore, ResourceStore
from sqlloader.db.statements import (
    PreparedQuery,
    prepare,
    prepare_delete,
    prepare_insert,
    prepare_select,
    prepare_update,
)

__all__ = [
    "DirectoryResourceStore",
    "PackageResourceStore",
    "PreparedQuery",
    "QueryLoader",
    "QueryNotFoundError",
    "ResourceStore",
    "get_loader",
    "load_query",
    "load_verb",
    "prepare",
    "prepare_delete",
    "prepare_insert",
    "prepare_select",
    "prepare_update",
]
