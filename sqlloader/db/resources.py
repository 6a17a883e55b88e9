"""Источники SQL-ресурсов: пакет Python или каталог файловой системы."""

from __future__ import annotations

from functools import reduce
from importlib import resources
from pathlib import Path
from typing import Optional, Protocol, TextIO, Union


class ResourceStore(Protocol):
    def open_text(self, path: str) -> Optional[TextIO]:
        """Open ``path`` for reading, or return ``None`` if it does not exist."""


def _split_path(path: str) -> Optional[list[str]]:
    parts = [part for part in path.split("/") if part and part != "."]
    if not parts or ".." in parts:
        return None
    return parts


class PackageResourceStore:
    """Resources bundled inside an importable package."""

    def __init__(self, package: str, *, encoding: str = "utf-8") -> None:
        self.package = package
        self.encoding = encoding

    def open_text(self, path: str) -> Optional[TextIO]:
        parts = _split_path(path)
        if parts is None:
            return None

        try:
            root = resources.files(self.package)
        except (FileNotFoundError, ModuleNotFoundError):  # pragma: no cover - зависимость от окружения
            return None

        # MultiplexedPath.joinpath accepts a single part before Python 3.12
        resource = reduce(lambda node, part: node.joinpath(part), parts, root)
        if not resource.is_file():
            return None
        return resource.open("r", encoding=self.encoding)

    def __repr__(self) -> str:
        return f"PackageResourceStore({self.package!r})"


class DirectoryResourceStore:
    """Resources stored under a directory on disk."""

    def __init__(self, root: Union[str, Path], *, encoding: str = "utf-8") -> None:
        self.root = Path(root)
        self.encoding = encoding

    def open_text(self, path: str) -> Optional[TextIO]:
        parts = _split_path(path)
        if parts is None:
            return None

        candidate = self.root.joinpath(*parts)
        if not candidate.is_file():
            return None
        return candidate.open("r", encoding=self.encoding)

    def __repr__(self) -> str:
        return f"DirectoryResourceStore({str(self.root)!r})"


__all__ = ["DirectoryResourceStore", "PackageResourceStore", "ResourceStore"]
