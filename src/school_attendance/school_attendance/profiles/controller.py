from __future__ import annotations

import logging

from flask import Flask, request, session

from ..container import Container
from ..core.exceptions import ConfigurationError, UpstreamError, ValidationError
from ..web import current_scope, error_json, no_store_json

logger = logging.getLogger(__name__)

SESSION_PROFILE_KEYS = ("email", "full_name", "role", "district_code", "school_code", "sub_assigned")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/verify", methods=["GET"], endpoint="verify_user")
    def verify_user():
        try:
            profile = container.profile_service.verify(request.args.get("email", ""))
            return no_store_json(profile.to_dict())
        except ValidationError:
            return error_json("Email parameter is required", 400)
        except ConfigurationError:
            logger.error("Missing verify user endpoint configuration")
            return error_json("Server configuration error", 500)
        except UpstreamError as e:
            return error_json("Failed to verify user credentials", e.status_code)
        except Exception:
            logger.exception("User verification error")
            return error_json("Internal server error during user verification", 500)

    @app.route("/api/session", methods=["GET"], endpoint="session_profile")
    def session_profile():
        """Refresh the session scope from the user directory."""
        email = current_scope().email
        if not email:
            return error_json("No session", 401)

        try:
            profile = container.profile_service.verify(email)
        except (UpstreamError, ConfigurationError) as e:
            logger.warning("Verify failed for %s: %s", email, e)
            return error_json("Verify failed", 502)

        data = profile.to_dict()
        data["email"] = profile.email or email
        for key in SESSION_PROFILE_KEYS:
            if data.get(key):
                session[key] = data[key]
        return no_store_json({"success": True, "profile": data})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return no_store_json({"success": True})

    @app.route("/api/admin/check", methods=["GET"], endpoint="admin_check")
    def admin_check():
        email = request.args.get("email", "")
        if not email.strip():
            return error_json("Missing email", 400)
        try:
            data, status = container.profile_service.admin_check(email)
            return no_store_json(data, status)
        except ConfigurationError as e:
            return error_json(str(e), 500)
        except UpstreamError:
            logger.exception("Admin check proxy failed")
            return error_json("Upstream request failed", 502)
