from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .dashboard.aggregator import DashboardAggregator
from .dashboard.service import LiveDashboardService
from .directory.service import DirectoryService
from .exports.service import AttendanceExportService
from .profiles.service import ProfileService
from .substitutes.service import SubstituteService
from .upstream.config import UpstreamConfig
from .upstream.gateway import UpstreamGateway
from .upstream.http_gateway import RequestsUpstreamGateway


@dataclass(frozen=True)
class Container:
    upstream_config: UpstreamConfig
    gateway: UpstreamGateway

    aggregator: DashboardAggregator
    dashboard_service: LiveDashboardService
    substitute_service: SubstituteService
    export_service: AttendanceExportService
    profile_service: ProfileService
    directory_service: DirectoryService


def build_container(*, upstream_config: UpstreamConfig, gateway: Optional[UpstreamGateway] = None) -> Container:
    gateway = gateway or RequestsUpstreamGateway(timeout=upstream_config.timeout)

    aggregator = DashboardAggregator()
    dashboard_service = LiveDashboardService(gateway, upstream_config, aggregator=aggregator)
    substitute_service = SubstituteService(gateway, upstream_config)
    export_service = AttendanceExportService(gateway, upstream_config)
    profile_service = ProfileService(gateway, upstream_config)
    directory_service = DirectoryService(gateway, upstream_config)

    return Container(
        upstream_config=upstream_config,
        gateway=gateway,
        aggregator=aggregator,
        dashboard_service=dashboard_service,
        substitute_service=substitute_service,
        export_service=export_service,
        profile_service=profile_service,
        directory_service=directory_service,
    )
