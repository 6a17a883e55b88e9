"""Load SQL queries from a resource tree organized by statement type.

Resources are expected to be laid out as follows::

    /{base_path}
     ├─ delete/
     │   ├─ comments/
     │   │   ├─ by-id.sql
     │   │   └─ by-user.sql
     │   └─ users/
     │       └─ by-id.sql
     ├─ insert/
     │   ├─ comment.sql
     │   └─ user.sql
     └─ select/ ...

``loader.delete("users.by-id")`` then returns the cleaned text of
``/{base_path}/delete/users/by-id.sql``. Loaded queries are cached by lookup
key for the lifetime of the loader, so each file is read at most once per key
(modulo concurrent first lookups, which may read it more than once).
"""

from __future__ import annotations

import os
import threading
from functools import lru_cache
from typing import Mapping, Optional, Union

from sqlloader.core.comments import strip_comments
from sqlloader.core.logging import bind_logger
from sqlloader.core.paths import ensure_trailing_separator, resolved_path
from sqlloader.db.resources import DirectoryResourceStore, PackageResourceStore, ResourceStore
from sqlloader.schemas.enums import Verb
from sqlloader.settings import Settings, get_settings


class QueryNotFoundError(FileNotFoundError):
    """Возникает, если запрошенный SQL-файл отсутствует."""

    def __init__(self, key: str, path: str) -> None:
        super().__init__(f"SQL-шаблон '{key}' не найден ({path})")
        self.key = key
        self.path = path


def _prefix_property(verb: Verb) -> property:
    def getter(self: "QueryLoader") -> str:
        return self._prefixes[verb]

    def setter(self: "QueryLoader", value: str) -> None:
        self._prefixes[verb] = ensure_trailing_separator(value)

    return property(getter, setter, doc=f"Path prefix for ``{verb.value.upper()}`` queries.")


class QueryLoader:
    def __init__(
        self,
        base_path: str = "/sql/",
        *,
        store: Optional[ResourceStore] = None,
        prefixes: Optional[Mapping[Union[Verb, str], str]] = None,
        line_separator: str = os.linesep,
    ) -> None:
        self._base_path = ensure_trailing_separator(base_path)
        self._store: ResourceStore = store if store is not None else DirectoryResourceStore(".")
        self._line_separator = line_separator
        self._prefixes: dict[Verb, str] = {verb: verb.default_prefix for verb in Verb}
        for verb, value in (prefixes or {}).items():
            self.set_prefix(verb, value)

        self._cache: dict[str, str] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "QueryLoader":
        store: ResourceStore
        if settings.resource_package:
            store = PackageResourceStore(settings.resource_package)
        else:
            store = DirectoryResourceStore(settings.resource_dir)

        return cls(
            settings.base_path,
            store=store,
            prefixes=settings.prefixes(),
            line_separator=settings.line_separator,
        )

    @property
    def store(self) -> ResourceStore:
        return self._store

    @property
    def base_path(self) -> str:
        """Root prepended to every resolved resource path."""
        return self._base_path

    @base_path.setter
    def base_path(self, value: str) -> None:
        self._base_path = ensure_trailing_separator(value)

    def set_base_path(self, value: str) -> "QueryLoader":
        self.base_path = value
        return self

    def prefix(self, verb: Union[Verb, str]) -> str:
        return self._prefixes[Verb(verb)]

    def set_prefix(self, verb: Union[Verb, str], value: str) -> "QueryLoader":
        self._prefixes[Verb(verb)] = ensure_trailing_separator(value)
        return self

    insert_path = _prefix_property(Verb.insert)
    delete_path = _prefix_property(Verb.delete)
    update_path = _prefix_property(Verb.update)
    select_path = _prefix_property(Verb.select)
    merge_path = _prefix_property(Verb.merge)
    create_path = _prefix_property(Verb.create)
    alter_path = _prefix_property(Verb.alter)
    rename_path = _prefix_property(Verb.rename)
    truncate_path = _prefix_property(Verb.truncate)
    drop_path = _prefix_property(Verb.drop)
    grant_path = _prefix_property(Verb.grant)
    revoke_path = _prefix_property(Verb.revoke)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cache

    def cached_keys(self) -> list[str]:
        with self._lock:
            return list(self._cache)

    def resolve(self, key: str) -> str:
        """Return the comment-free SQL stored under ``key``.

        ``key`` may use dots or slashes as separators and may end in ``.sql``.
        Raises :class:`QueryNotFoundError` when no such resource exists; read
        and decoding errors propagate as is. Neither case touches the cache.
        """

        with self._lock:
            cached = self._cache.get(key)
        if cached is not None:
            return cached

        path = resolved_path(self._base_path, key)
        log = bind_logger(component="sql_loader", key=key, path=path)

        stream = self._store.open_text(path)
        if stream is None:
            log.warning("SQL resource not found")
            raise QueryNotFoundError(key, path)

        with stream:
            text = self._line_separator.join(strip_comments(stream))

        with self._lock:
            self._cache[key] = text
        log.debug("SQL resource loaded")
        return text

    def find(self, key: str) -> Optional[str]:
        """Same as :meth:`resolve`, but returns ``None`` for a missing resource."""
        try:
            return self.resolve(key)
        except QueryNotFoundError:
            return None

    def load(self, verb: Union[Verb, str], path: str) -> str:
        return self.resolve(self.prefix(verb) + path)

    def insert(self, path: str) -> str:
        return self.load(Verb.insert, path)

    def delete(self, path: str) -> str:
        return self.load(Verb.delete, path)

    def update(self, path: str) -> str:
        return self.load(Verb.update, path)

    def select(self, path: str) -> str:
        return self.load(Verb.select, path)

    def merge(self, path: str) -> str:
        return self.load(Verb.merge, path)

    def create(self, path: str) -> str:
        return self.load(Verb.create, path)

    def alter(self, path: str) -> str:
        return self.load(Verb.alter, path)

    def rename(self, path: str) -> str:
        return self.load(Verb.rename, path)

    def truncate(self, path: str) -> str:
        return self.load(Verb.truncate, path)

    def drop(self, path: str) -> str:
        return self.load(Verb.drop, path)

    def grant(self, path: str) -> str:
        return self.load(Verb.grant, path)

    def revoke(self, path: str) -> str:
        return self.load(Verb.revoke, path)

    def __repr__(self) -> str:
        return f"QueryLoader(base_path={self._base_path!r}, store={self._store!r})"


@lru_cache
def get_loader() -> QueryLoader:
    """Общий загрузчик процесса, создаётся из настроек при первом вызове."""

    return QueryLoader.from_settings(get_settings())


def load_query(key: str) -> str:
    return get_loader().resolve(key)


def load_verb(verb: Union[Verb, str], path: str) -> str:
    return get_loader().load(verb, path)


__all__ = [
    "QueryLoader",
    "QueryNotFoundError",
    "get_loader",
    "load_query",
    "load_verb",
]
