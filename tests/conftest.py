from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Iterator, Optional

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from sqlloader.db.query_loader import get_loader
from sqlloader.settings import get_settings


class CountingStore:
    """In-memory resource store that records every open attempt."""

    def __init__(self, files: dict[str, str]) -> None:
        self.files = files
        self.opened: list[str] = []

    def open_text(self, path: str) -> Optional[io.StringIO]:
        self.opened.append(path)
        text = self.files.get(path)
        return io.StringIO(text) if text is not None else None


@pytest.fixture
def counting_store() -> CountingStore:
    return CountingStore(
        {
            "/sql/select/users/by-id.sql": "-- users by id\nSELECT * FROM users\nWHERE id = %s\n",
            "/sql/insert/user.sql": "INSERT INTO users (name) VALUES (%s)\n",
            "/other/select/users/by-id.sql": "SELECT 2\n",
        }
    )


@pytest.fixture(autouse=True)
def _reset_shared_state() -> Iterator[None]:
    get_settings.cache_clear()
    get_loader.cache_clear()
    try:
        yield
    finally:
        get_settings.cache_clear()
        get_loader.cache_clear()
