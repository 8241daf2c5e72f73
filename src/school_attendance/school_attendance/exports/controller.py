from __future__ import annotations

import logging
from typing import Callable

from flask import Flask, request

from ..container import Container
from ..core.exceptions import ConfigurationError, UpstreamError
from ..web import current_scope, error_json
from .service import CsvExport

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def send_export(fetch: Callable[[], CsvExport]):
        try:
            export = fetch()
        except UpstreamError as e:
            if e.transport:
                return error_json("Proxy error", 500, message=str(e))
            return error_json("Upstream error", e.status_code, status=e.status_code, message=e.body)
        except ConfigurationError as e:
            logger.error("Export misconfigured: %s", e)
            return error_json("Proxy error", 500, message=str(e))

        return app.response_class(
            export.content,
            status=200,
            mimetype="text/csv",
            headers={
                "Content-Disposition": f"attachment; filename={export.filename}",
            },
        )

    @app.route("/api/csv", methods=["GET"], endpoint="attendance_csv")
    def attendance_csv():
        """Proxy the attendance export as a file download."""
        scope = current_scope(args_first=True)
        return send_export(lambda: container.export_service.download(scope))

    @app.route("/api/teacher-csv", methods=["GET"], endpoint="teacher_csv")
    def teacher_csv():
        scope = current_scope(args_first=True)
        teacher_email = (
            request.args.get("teacher_email") or request.cookies.get("teacher_email") or scope.email
        ).strip()
        return send_export(lambda: container.export_service.download_for_teacher(scope, teacher_email))
