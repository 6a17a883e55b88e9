from __future__ import annotations

import logging
from typing import Iterator

import pytest

from sqlloader.core.logging import bind_logger, configure_logging, logger
from sqlloader.db.query_loader import QueryLoader, QueryNotFoundError
from sqlloader.settings import Settings


@pytest.fixture
def captured() -> Iterator[list[dict]]:
    configure_logging(Settings(log_level="debug", app_env="test"))
    records: list[dict] = []
    sink_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    try:
        yield records
    finally:
        logger.remove(sink_id)


def test_loader_logs_loads_and_misses(captured: list[dict], counting_store) -> None:
    loader = QueryLoader(store=counting_store)

    loader.insert("user")
    with pytest.raises(QueryNotFoundError):
        loader.insert("nobody")

    levels = [(record["level"].name, record["extra"]["key"]) for record in captured]
    assert levels == [("DEBUG", "insert/user"), ("WARNING", "insert/nobody")]
    assert captured[1]["extra"]["path"] == "/sql/insert/nobody.sql"
    assert {record["extra"]["component"] for record in captured} == {"sql_loader"}


def test_stdlib_logging_is_intercepted(captured: list[dict]) -> None:
    logging.getLogger("psycopg").warning("connection lost")
    bind_logger(component="tests").info("bound")

    messages = [record["message"] for record in captured]
    assert "connection lost" in messages
    assert captured[-1]["extra"] == {"component": "tests"}
