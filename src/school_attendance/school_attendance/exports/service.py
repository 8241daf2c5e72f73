from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from ..common.scope import ScopeParams
from ..core.exceptions import ConfigurationError, UpstreamError
from ..upstream.config import UpstreamConfig
from ..upstream.gateway import UpstreamGateway


@dataclass(frozen=True)
class CsvExport:
    content: bytes
    filename: str = "attendance.csv"


class AttendanceExportService:
    """Use case: download raw attendance exports (whole school or one teacher)."""

    def __init__(self, gateway: UpstreamGateway, config: UpstreamConfig):
        self._gateway = gateway
        self._config = config

    def _download(self, url: str, params: Mapping[str, str], filename: str) -> CsvExport:
        resp = self._gateway.get(url, params=params, headers=self._config.headers("text/csv"))
        if not resp.ok:
            raise UpstreamError("Upstream error", status_code=resp.status_code, body=resp.text)
        return CsvExport(content=resp.content, filename=filename)

    def download(self, scope: ScopeParams) -> CsvExport:
        if not self._config.attendance_export_url:
            raise ConfigurationError("Attendance export endpoint is not configured")

        return self._download(
            self._config.attendance_export_url,
            {
                "district_code": scope.district_code,
                "school_code": scope.school_code,
                "admin_email": scope.email,
            },
            "attendance.csv",
        )

    def download_for_teacher(self, scope: ScopeParams, teacher_email: str) -> CsvExport:
        if not self._config.teacher_export_url:
            raise ConfigurationError("Teacher export endpoint is not configured")

        return self._download(
            self._config.teacher_export_url,
            {
                "teacher_email": teacher_email,
                "district_code": scope.district_code,
                "school_code": scope.school_code,
            },
            "teacher_attendance.csv",
        )
