"""Submission of report jobs to AppChains."""
from __future__ import annotations

import json
import logging
import re
from typing import Any, Mapping

from appchains.core.errors import ProtocolError, RemoteServiceError
from appchains.core.schema import AppStartRequest
from appchains.core.urls import job_submission_url
from appchains.domain import Job
from appchains.infrastructure.http import HttpClient

logger = logging.getLogger(__name__)

_NUMERIC_ID = re.compile(r"[0-9]+")


def build_request_body(app_code: str, data_source_id: str) -> dict[str, Any]:
    """Request body starting ``app_code`` against a single data source."""

    return AppStartRequest.for_data_source(app_code, data_source_id).to_payload()


def is_numeric_job_id(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and _NUMERIC_ID.fullmatch(value) is not None


class JobSubmitter:
    """Posts job requests and extracts the identifier assigned by the server."""

    def __init__(self, http: HttpClient, base_url: str) -> None:
        self._http = http
        self._base_url = base_url

    def submit(self, endpoint_name: str, request_body: Mapping[str, Any] | str) -> Job:
        url = job_submission_url(self._base_url, endpoint_name)
        response = self._http.post(url, request_body)
        if not response.ok:
            raise RemoteServiceError(response.status_code, response.body)

        try:
            decoded = json.loads(response.body)
        except json.JSONDecodeError as exc:
            raise ProtocolError("AppChains returned invalid job identifier") from exc

        job_id = decoded.get("jobId") if isinstance(decoded, dict) else None
        if not is_numeric_job_id(job_id):
            raise ProtocolError("AppChains returned invalid job identifier")

        logger.info("Submitted job %s to %s", job_id, endpoint_name)
        return Job(job_id)

    def submit_app(self, endpoint_name: str, app_code: str, data_source_id: str) -> Job:
        return self.submit(endpoint_name, build_request_body(app_code, data_source_id))


__all__ = ["JobSubmitter", "build_request_body", "is_numeric_job_id"]
