from __future__ import annotations

import logging
from typing import Any, Mapping, Tuple

from ..common.scope import ScopeParams
from ..core.exceptions import ConfigurationError, ValidationError
from ..upstream.config import UpstreamConfig
from ..upstream.gateway import UpstreamGateway, UpstreamResponse
from .queries import classify_class_query, student_lookup_params, student_search_params

logger = logging.getLogger(__name__)

SNIPPET_LENGTH = 300


class DirectoryService:
    """Use case: search and look up classes, students and teachers in one school.

    Results are the upstream's JSON, returned as ``(payload, status_code)``.
    """

    def __init__(self, gateway: UpstreamGateway, config: UpstreamConfig):
        self._gateway = gateway
        self._config = config

    def _get(self, url: str, what: str, params: Mapping[str, str]) -> UpstreamResponse:
        if not url:
            raise ConfigurationError(f"{what} endpoint is not configured")
        return self._gateway.get(url, params=params, headers=self._config.headers())

    @staticmethod
    def _query(q: str) -> str:
        q = (q or "").strip()
        if not q:
            raise ValidationError("Missing query (q)")
        return q

    @staticmethod
    def _school_params(scope: ScopeParams) -> dict:
        scope.require()
        return {"district_code": scope.district_code, "school_code": scope.school_code}

    def search_classes(self, scope: ScopeParams, q: str) -> Tuple[Any, int]:
        q = self._query(q)
        params = self._school_params(scope)
        params.update(classify_class_query(q))
        if scope.email:
            params["admin_email"] = scope.email

        resp = self._get(self._config.class_search_url, "Class search", params)
        return resp.json_or({}), resp.status_code

    def search_students(self, scope: ScopeParams, q: str) -> Tuple[Any, int]:
        q = self._query(q)
        params = self._school_params(scope)
        params.update(student_search_params(q))
        if scope.email:
            params["admin_email"] = scope.email
            params["email"] = scope.email

        resp = self._get(self._config.student_search_url, "Student search", params)
        # Error pages come back as text; pass them through as a JSON string.
        return resp.json_or(resp.text), resp.status_code

    def find_student(self, scope: ScopeParams, q: str) -> Tuple[Any, int]:
        q = self._query(q)
        params = self._school_params(scope)
        params.update(student_lookup_params(q))

        resp = self._get(self._config.student_search_url, "Student search", params)
        data = resp.json_or(None)
        if data is None:
            logger.warning("Student lookup answered %s without JSON", resp.status_code)
            return {
                "error": "Upstream returned non-JSON",
                "upstreamStatus": resp.status_code,
                "snippet": resp.text[:SNIPPET_LENGTH],
            }, 502
        return data, resp.status_code

    def search_teachers(self, scope: ScopeParams, q: str) -> Tuple[Any, int]:
        q = self._query(q)
        params = {"teacher_email": q, "teacher_name": q}
        params.update(self._school_params(scope))
        if scope.email:
            params["email"] = scope.email

        resp = self._get(self._config.teacher_search_url, "Teacher search", params)
        return resp.json_or({}), resp.status_code

    def student_classes(self, scope: ScopeParams, student_id: str, parent_email: str = "") -> Tuple[Any, int]:
        student_id = (student_id or "").strip()
        if not student_id:
            raise ValidationError("Missing student_id")
        scope.require(school=False, email=True)

        params = {
            "student_id": student_id,
            "district_code": scope.district_code,
            "admin_email": scope.email,
        }
        parent_email = (parent_email or "").strip()
        if parent_email:
            params["parent_email"] = parent_email

        resp = self._get(self._config.student_classes_url, "Student classes", params)
        return resp.json_or({}), resp.status_code

    def class_students(self, scope: ScopeParams, class_id: str, teacher_email: str) -> Tuple[Any, int]:
        class_id, teacher_email = (class_id or "").strip(), (teacher_email or "").strip()
        if not class_id or not teacher_email:
            raise ValidationError("Missing class_id or teacher_email")

        params = {"Teacher_Email": teacher_email, "Class_ID": class_id}
        params.update(self._school_params(scope))
        if scope.email:
            params["admin_email"] = scope.email
            params["email"] = scope.email

        resp = self._get(self._config.class_students_url, "Class roster", params)
        return resp.json_or({}), resp.status_code
