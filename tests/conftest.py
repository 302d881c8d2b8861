"""Test configuration and fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any
from unittest.mock import Mock

import pytest
import requests

from netflix_conductor_client.config import ConductorSettings

API = "http://conductor.test/api"


def _make_response(
    status_code: int = 200,
    payload: Any = None,
    text: str | None = None,
) -> Mock:
    resp = Mock(spec=requests.Response)
    resp.status_code = status_code
    if payload is not None:
        body = json.dumps(payload).encode("utf-8")
    elif text is not None:
        body = text.encode("utf-8")
    else:
        body = b""
    resp.content = body
    resp.text = body.decode("utf-8")
    resp.json.return_value = payload
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error", response=resp
        )
    return resp


@pytest.fixture
def make_response() -> Callable[..., Mock]:
    """Build a mocked ``requests.Response`` with a JSON or text body."""
    return _make_response


@pytest.fixture
def settings() -> ConductorSettings:
    """Provide settings pointing at a fake server (trailing slash on purpose)."""
    return ConductorSettings(api_endpoint=API + "/", request_timeout_seconds=30.0)


@pytest.fixture
def session() -> Mock:
    """Provide a mocked HTTP session; no request ever leaves the process."""
    return Mock(spec=requests.Session)
