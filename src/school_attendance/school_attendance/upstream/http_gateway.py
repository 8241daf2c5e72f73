from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Mapping, Optional

import requests

from ..core.exceptions import UpstreamError
from .gateway import UpstreamResponse

logger = logging.getLogger(__name__)


class RequestsUpstreamGateway:
    """``requests`` based gateway.

    ``requests.Session`` is not documented as thread-safe, and the dashboard
    fans out from worker threads while Flask serves requests concurrently, so
    every thread gets its own pooled session.
    """

    def __init__(
        self,
        *,
        timeout: float = 15.0,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ):
        self._timeout = float(timeout)
        self._session_factory = session_factory
        self._local = threading.local()

    def _session(self) -> requests.Session:
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._session_factory()
            self._local.session = session
        return session

    def _send(self, method: str, url: str, **kwargs: Any) -> UpstreamResponse:
        try:
            resp = self._session().request(method, url, timeout=self._timeout, **kwargs)
        except requests.RequestException as e:
            logger.error("Upstream %s %s failed: %s", method, url, e)
            raise UpstreamError(str(e) or "Upstream request failed", status_code=502, transport=True) from e

        if not resp.ok:
            logger.warning("Upstream %s %s answered %s", method, url, resp.status_code)

        return UpstreamResponse(
            status_code=resp.status_code,
            content=resp.content,
            headers=dict(resp.headers),
        )

    def get(
        self,
        url: str,
        *,
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> UpstreamResponse:
        return self._send("GET", url, params=dict(params or {}), headers=dict(headers or {}))

    def post(
        self,
        url: str,
        *,
        payload: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> UpstreamResponse:
        return self._send("POST", url, json=payload, headers=dict(headers or {}))
