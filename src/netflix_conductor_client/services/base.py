"""Shared plumbing for the Conductor service façades."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests

from netflix_conductor_client import __version__
from netflix_conductor_client.config import ConductorSettings


class EndpointLoggerAdapter(logging.LoggerAdapter):
    """Stamp every record with the Conductor endpoint a façade talks to.

    Call-site ``extra`` fields are kept; the endpoint is added alongside them.
    """

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        kwargs["extra"] = {**(self.extra or {}), **kwargs.get("extra", {})}
        return msg, kwargs


def build_session() -> requests.Session:
    """Return a session carrying the JSON headers every façade sends."""

    session = requests.Session()
    session.headers.update(
        {
            "Accept": "application/json",
            "User-Agent": f"netflix-conductor-client/{__version__}",
        }
    )
    return session


class ConductorService:
    """Base class holding the endpoint, the HTTP session and URL helpers.

    Args:
        options: Settings carrying the API endpoint and request timeout.
        session: Optional pre-built session; several façades may share one.

    Raises:
        ValueError: If no API endpoint is configured.
    """

    def __init__(
        self,
        options: ConductorSettings,
        *,
        session: requests.Session | None = None,
    ) -> None:
        api_endpoint = (options.api_endpoint or "").strip()
        if not api_endpoint:
            raise ValueError("no api_endpoint given")

        self._api_endpoint = api_endpoint.rstrip("/")
        self._timeout = options.request_timeout_seconds
        self._owns_session = session is None
        self._session = session if session is not None else build_session()
        self._log = EndpointLoggerAdapter(
            logging.getLogger(type(self).__module__), {"endpoint": self._api_endpoint}
        )

    @property
    def api_endpoint(self) -> str:
        """Return the normalized base endpoint (no trailing slash)."""

        return self._api_endpoint

    def _url(self, *segments: str) -> str:
        path = "/".join(quote(segment, safe="") for segment in segments)
        return f"{self._api_endpoint}/{path}"

    @staticmethod
    def _decode(resp: requests.Response) -> Any:
        """Raise on HTTP errors, then return the JSON body (``None`` when empty)."""

        resp.raise_for_status()
        if not resp.content:
            return None
        return resp.json()

    def close(self) -> None:
        """Close the session if this façade created it."""

        if self._owns_session:
            self._session.close()
            self._log.debug("Closed Conductor HTTP session")
