from __future__ import annotations

import logging
from typing import Any, Tuple

from ..common.validators import require_non_empty
from ..core.exceptions import ConfigurationError, UpstreamError
from ..upstream.config import UpstreamConfig
from ..upstream.gateway import UpstreamGateway
from .model import UserProfile

logger = logging.getLogger(__name__)


class ProfileService:
    """Use case: look up users in the upstream directory."""

    def __init__(self, gateway: UpstreamGateway, config: UpstreamConfig):
        self._gateway = gateway
        self._config = config

    def verify(self, email: str) -> UserProfile:
        email = require_non_empty(email, "Email parameter")
        if not self._config.verify_user_url:
            raise ConfigurationError("Verify user endpoint is not configured")

        resp = self._gateway.get(
            self._config.verify_user_url,
            params={"email": email},
            headers=self._config.headers(),
        )
        if not resp.ok:
            raise UpstreamError("Failed to verify user credentials", status_code=resp.status_code, body=resp.text)
        return UserProfile.decode(resp.json_or(None))

    def admin_check(self, email: str) -> Tuple[Any, int]:
        email = require_non_empty(email, "Email")
        if not self._config.admin_check_url:
            raise ConfigurationError("Admin check endpoint is not configured")

        resp = self._gateway.get(
            self._config.admin_check_url,
            params={"email": email},
            headers=self._config.headers(),
        )
        return resp.json_or({}), resp.status_code
