"""Unit tests for structured logging."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest

from netflix_conductor_client.logging import JsonFormatter, configure_logging


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.LogRecord(
        name="netflix_conductor_client.services.task_metadata",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Registering task definition",
        args=(),
        exc_info=None,
    )
    record.task = "encode"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["message"] == "Registering task definition"
    assert payload["extra"] == {"task": "encode"}


def test_configure_logging_replaces_handlers(restore_root_logger: None) -> None:
    configure_logging("debug")
    configure_logging("warning")

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonFormatter)
    assert root.level == logging.WARNING
    assert logging.getLogger("urllib3").level == logging.WARNING
