from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional

from ..common.scope import ScopeParams
from ..core.exceptions import ConfigurationError, UpstreamError
from ..upstream.config import UpstreamConfig
from ..upstream.gateway import UpstreamGateway, UpstreamResponse
from .aggregator import DashboardAggregator
from .model import DashboardSummary

logger = logging.getLogger(__name__)


class LiveDashboardService:
    """Use case: live attendance numbers for the admin dashboard.

    Fetches the attendance export and the substitute list side by side, then
    hands the raw bodies to the aggregator.
    """

    def __init__(
        self,
        gateway: UpstreamGateway,
        config: UpstreamConfig,
        *,
        aggregator: Optional[DashboardAggregator] = None,
    ):
        self._gateway = gateway
        self._config = config
        self._aggregator = aggregator or DashboardAggregator()

    def _fetch_csv(self, scope: ScopeParams) -> UpstreamResponse:
        return self._gateway.get(
            self._config.attendance_export_url,
            params=scope.query_params(),
            headers=self._config.headers("text/csv"),
        )

    def _fetch_subs(self, scope: ScopeParams) -> Any:
        if not self._config.subs_list_url:
            return []
        try:
            resp = self._gateway.get(
                self._config.subs_list_url,
                params=scope.query_params(),
                headers=self._config.headers("application/json"),
            )
        except UpstreamError:
            logger.warning("Substitute list unavailable for %s/%s", scope.district_code, scope.school_code)
            return []
        return resp.json_or([])

    def live_summary(self, scope: ScopeParams, *, now_ms: Optional[int] = None) -> DashboardSummary:
        scope.require()
        if not self._config.attendance_export_url:
            raise ConfigurationError("Attendance export endpoint is not configured")

        with ThreadPoolExecutor(max_workers=2) as executor:
            future_csv = executor.submit(self._fetch_csv, scope)
            future_subs = executor.submit(self._fetch_subs, scope)

            csv_resp = future_csv.result()
            subs_payload = future_subs.result()

        if not csv_resp.ok:
            raise UpstreamError("Failed to fetch CSV", status_code=csv_resp.status_code, body=csv_resp.text)

        return self._aggregator.summarize(csv_resp.text, subs_payload, now_ms=now_ms)
