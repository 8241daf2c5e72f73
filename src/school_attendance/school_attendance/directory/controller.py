from __future__ import annotations

import logging
from typing import Any, Callable, Tuple

from flask import Flask, request

from ..container import Container
from ..core.exceptions import ConfigurationError, ScopeError, UpstreamError, ValidationError
from ..web import current_scope, error_json, no_store_json

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    directory = container.directory_service

    def proxy(lookup: Callable[[], Tuple[Any, int]], *, scope_error: str = "Missing admin scope"):
        try:
            data, status = lookup()
            return no_store_json(data, status)
        except ValidationError as e:
            return error_json(str(e), 400)
        except ScopeError:
            return error_json(scope_error, 401)
        except ConfigurationError as e:
            logger.error("Directory lookup misconfigured: %s", e)
            return error_json(str(e), 500)
        except UpstreamError:
            logger.exception("Directory lookup failed")
            return error_json("Upstream request failed", 502)

    @app.route("/api/classes", methods=["GET"], endpoint="search_classes")
    def search_classes():
        return proxy(lambda: directory.search_classes(current_scope(), request.args.get("q", "")))

    @app.route("/api/students", methods=["GET"], endpoint="search_students")
    def search_students():
        return proxy(lambda: directory.search_students(current_scope(), request.args.get("q", "")))

    @app.route("/api/student", methods=["GET"], endpoint="find_student")
    def find_student():
        return proxy(lambda: directory.find_student(current_scope(), request.args.get("q", "")))

    @app.route("/api/teachers", methods=["GET"], endpoint="search_teachers")
    def search_teachers():
        return proxy(lambda: directory.search_teachers(current_scope(), request.args.get("q", "")))

    @app.route("/api/student-classes", methods=["GET"], endpoint="student_classes")
    def student_classes():
        return proxy(
            lambda: directory.student_classes(
                current_scope(),
                request.args.get("student_id", ""),
                request.args.get("parent_email", ""),
            ),
            scope_error="Missing admin scope (district_code/admin_email)",
        )

    @app.route("/api/class-students", methods=["GET"], endpoint="class_students")
    def class_students():
        return proxy(
            lambda: directory.class_students(
                current_scope(),
                request.args.get("class_id", ""),
                request.args.get("teacher_email", ""),
            )
        )
