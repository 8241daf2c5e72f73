from __future__ import annotations

import logging

from flask import Flask

from ..container import Container
from ..core.exceptions import ConfigurationError, ScopeError, UpstreamError
from ..web import current_scope, error_json, no_store_json

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/live-dashboard", methods=["GET"], endpoint="live_dashboard")
    def live_dashboard():
        try:
            summary = container.dashboard_service.live_summary(current_scope())
            return no_store_json(summary.to_dict())
        except ScopeError as e:
            return error_json(str(e), 401)
        except UpstreamError as e:
            if e.transport:
                return error_json("Failed to fetch data", 502)
            return error_json(str(e), e.status_code)
        except ConfigurationError as e:
            logger.error("Live dashboard misconfigured: %s", e)
            return error_json("Server configuration error", 500)
        except Exception:
            logger.exception("Live dashboard failed")
            return error_json("Failed to fetch data", 500)
