"""Flask helpers shared by the feature controllers."""

from __future__ import annotations

from functools import wraps
from typing import Any, Mapping, Optional

from flask import jsonify, request, session

from .common.scope import ScopeParams, resolve_scope
from .core.constants import NO_STORE_HEADERS
from .core.enums import Role


def no_store_json(payload: Any, status_code: int = 200):
    resp = jsonify(payload)
    resp.status_code = int(status_code)
    resp.headers.update(NO_STORE_HEADERS)
    return resp


def error_json(message: str, status_code: int, /, **extra: Any):
    return no_store_json({"error": message, **extra}, status_code)


def current_scope(*, args_first: bool = False, body: Optional[Mapping[str, Any]] = None) -> ScopeParams:
    """Scope from query args (optional), Flask session, cookies, then request body."""
    sources = [dict(session), request.cookies, body]
    if args_first:
        sources.insert(0, request.args)
    return resolve_scope(*sources)


def current_role() -> Optional[Role]:
    raw = session.get("role") or request.cookies.get("role") or ""
    try:
        return Role(str(raw).lower())
    except ValueError:
        return None


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_role() != Role.ADMIN:
            return error_json("Admin access required", 403)
        return view(*args, **kwargs)

    return wrapper
