from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Protocol


@dataclass(frozen=True)
class UpstreamResponse:
    status_code: int
    content: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json_or(self, default: Any) -> Any:
        """Decoded JSON body, or ``default`` when the body is not JSON."""
        try:
            return json.loads(self.text)
        except ValueError:
            return default


class UpstreamGateway(Protocol):
    """Port to the upstream data service.

    Implementations raise ``UpstreamError`` for transport failures and return
    non-2xx answers as regular responses. ``post`` sends ``payload`` as JSON.
    """

    def get(
        self,
        url: str,
        *,
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> UpstreamResponse:
        raise NotImplementedError

    def post(
        self,
        url: str,
        *,
        payload: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> UpstreamResponse:
        raise NotImplementedError
