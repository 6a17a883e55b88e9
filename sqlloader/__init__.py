"""Load SQL queries from a resource tree organized by statement type."""

from sqlloader.db import (
    DirectoryResourceStore,
    PackageResourceStore,
    PreparedQuery,
    QueryLoader,
    QueryNotFoundError,
    get_loader,
    load_query,
    load_verb,
    prepare,
)
from sqlloader.schemas import Verb

__all__ = [
    "DirectoryResourceStore",
    "PackageResourceStore",
    "PreparedQuery",
    "QueryLoader",
    "QueryNotFoundError",
    "Verb",
    "get_loader",
    "load_query",
    "load_verb",
    "prepare",
]
