from __future__ import annotations

import logging
from typing import Any, Mapping, Tuple

from ..common.scope import ScopeParams
from ..common.validators import require_fields
from ..core.exceptions import ConfigurationError
from ..upstream.config import UpstreamConfig
from ..upstream.gateway import UpstreamGateway
from .model import decode_substitutes

logger = logging.getLogger(__name__)

UNRESTRICT_FIELDS = (
    "admin_email",
    "teacher_email",
    "sub_email",
    "class_id",
    "class_name",
    "school_code",
    "district_code",
)


def count_distinct_substitutes(payload: Any) -> int:
    """Distinct substitutes by lower-cased email or name."""
    return len({r.identifier for r in decode_substitutes(payload) if r.identifier})


class SubstituteService:
    """Use case: substitute assignments, proxied to the upstream service.

    Every method returns ``(payload, status_code)`` so controllers can pass the
    upstream status through unchanged.
    """

    def __init__(self, gateway: UpstreamGateway, config: UpstreamConfig):
        self._gateway = gateway
        self._config = config

    @staticmethod
    def _require_url(url: str, what: str) -> str:
        if not url:
            raise ConfigurationError(f"{what} endpoint is not configured")
        return url

    def list_assignments(self, scope: ScopeParams) -> Tuple[Any, int]:
        scope.require(email=True)
        resp = self._gateway.get(
            self._require_url(self._config.subs_list_url, "Substitute list"),
            params={
                "district_code": scope.district_code,
                "school_code": scope.school_code,
                "admin_email": scope.email,
            },
            headers=self._config.headers(),
        )
        return resp.json_or({}), resp.status_code

    def unrestrict_teacher(self, scope: ScopeParams, body: Mapping[str, Any]) -> Tuple[Any, int]:
        """Grant a substitute access to a teacher's class."""
        fields = {
            "admin_email": scope.email,
            "teacher_email": str(body.get("teacher_email") or "").strip(),
            "sub_email": str(body.get("sub_email") or "").strip(),
            "class_id": str(body.get("class_id") or "").strip(),
            "class_name": str(body.get("class_name") or "").strip(),
            "school_code": scope.school_code,
            "district_code": scope.district_code,
        }
        require_fields(fields, UNRESTRICT_FIELDS)

        # The upstream endpoint only accepts GET with query parameters.
        resp = self._gateway.get(
            self._require_url(self._config.subs_unrestrict_url, "Unrestrict teacher"),
            params=fields,
            headers=self._config.headers(),
        )
        data = resp.json_or(None)
        if data is None:
            data = {"message": resp.text or None}
        logger.info(
            "Sub %s unrestricted for class %s by %s (upstream %s)",
            fields["sub_email"], fields["class_id"], fields["admin_email"], resp.status_code,
        )
        return data, resp.status_code

    def view_all(self, scope: ScopeParams) -> Tuple[Any, int]:
        scope.require(school=False)
        resp = self._gateway.get(
            self._require_url(self._config.view_all_subs_url, "Substitutes directory"),
            params={"district_code": scope.district_code},
            headers=self._config.headers(),
        )
        data = resp.json_or(None)
        if data is None:
            logger.warning("Substitutes directory answered %s without JSON", resp.status_code)
            return {"error": "Failed to fetch substitutes"}, 500
        if not resp.ok:
            error = data.get("error") if isinstance(data, dict) else None
            return {"error": error or f"Failed to fetch substitutes ({resp.status_code})"}, resp.status_code
        return data, resp.status_code

    def _admin_params(self, scope: ScopeParams) -> dict:
        scope.require(email=True)
        return {
            "district_code": scope.district_code,
            "school_code": scope.school_code,
            "admin_email": scope.email,
        }

    def assign_lookup(self, scope: ScopeParams, query: Mapping[str, str]) -> Tuple[Any, int]:
        """Forward the caller's query (sub_email, class_id, ...) to the assign endpoint."""
        url = self._require_url(self._config.assign_sub_url, "Assign sub")
        params = self._admin_params(scope)
        params.update(query)
        resp = self._gateway.get(url, params=params, headers=self._config.headers())
        # An empty body means "nothing assigned yet".
        return resp.json_or(None), resp.status_code

    def assign(self, scope: ScopeParams, body: Mapping[str, Any]) -> Tuple[Any, int]:
        """Create a substitute assignment; scope always overrides the body."""
        url = self._require_url(self._config.assign_sub_url, "Assign sub")
        payload = dict(body)
        payload.update(self._admin_params(scope))
        resp = self._gateway.post(url, payload=payload, headers=self._config.headers())
        logger.info(
            "Sub assignment by %s for %s/%s (upstream %s)",
            scope.email, scope.district_code, scope.school_code, resp.status_code,
        )
        return resp.json_or(None), resp.status_code
