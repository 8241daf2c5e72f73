from __future__ import annotations

import logging

from flask import Flask, request

from ..container import Container
from ..core.exceptions import ConfigurationError, ScopeError, UpstreamError, ValidationError
from ..web import admin_required, current_scope, error_json, no_store_json

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin-subs", methods=["GET"], endpoint="admin_subs")
    @admin_required
    def admin_subs():
        try:
            data, status = container.substitute_service.list_assignments(current_scope())
            return no_store_json(data, status)
        except ScopeError:
            return error_json("Missing admin scope (district_code/school_code/admin_email)", 401)
        except UpstreamError as e:
            return error_json("Upstream request failed", e.status_code)
        except ConfigurationError as e:
            return error_json(str(e), 500)

    @app.route("/api/admin-subs", methods=["POST"], endpoint="admin_subs_unrestrict")
    @admin_required
    def admin_subs_unrestrict():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            body = {}
        try:
            data, status = container.substitute_service.unrestrict_teacher(current_scope(body=body), body)
            return no_store_json(data, status)
        except ValidationError as e:
            return error_json(str(e), 400)
        except UpstreamError as e:
            return error_json("Upstream request failed", e.status_code)
        except ConfigurationError as e:
            return error_json(str(e), 500)

    @app.route("/api/view-all-subs", methods=["GET"], endpoint="view_all_subs")
    @admin_required
    def view_all_subs():
        try:
            data, status = container.substitute_service.view_all(current_scope())
            return no_store_json(data, status)
        except ScopeError:
            return error_json("Missing district_code", 401)
        except UpstreamError as e:
            return error_json(str(e), 500)
        except ConfigurationError as e:
            return error_json(str(e), 500)

    @app.route("/api/assign-sub", methods=["GET"], endpoint="assign_sub_lookup")
    @admin_required
    def assign_sub_lookup():
        try:
            data, status = container.substitute_service.assign_lookup(current_scope(), request.args.to_dict())
            return no_store_json(data, status)
        except ConfigurationError as e:
            return error_json(str(e), 500)
        except ScopeError:
            return error_json("Missing admin cookies (district / school / email)", 401)
        except UpstreamError as e:
            return error_json("Upstream request failed", e.status_code)

    @app.route("/api/assign-sub", methods=["POST"], endpoint="assign_sub")
    @admin_required
    def assign_sub():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            body = {}
        try:
            data, status = container.substitute_service.assign(current_scope(), body)
            return no_store_json(data, status)
        except ConfigurationError as e:
            return error_json(str(e), 500)
        except ScopeError:
            return error_json("Missing admin cookies (district / school / email)", 401)
        except UpstreamError as e:
            return error_json("Upstream request failed", e.status_code)
