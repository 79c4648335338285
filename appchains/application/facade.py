"""High level entry point combining submission, polling and transformation."""
from __future__ import annotations

import logging
import threading
import time
from dataclasses import replace
from pathlib import Path
from typing import Any, Callable, Mapping

import httpx

from appchains.core.config import AppChainsSettings
from appchains.core.urls import base_chains_url
from appchains.domain import Job, RawJobResult, Report
from appchains.infrastructure.beacons import BeaconClient
from appchains.infrastructure.http import HttpClient

from .polling import JobPoller
from .submission import JobSubmitter
from .transform import ResultTransformer

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "StartApp"


class AppChains:
    """Client for AppChains reports and beacon lookups.

    A token and a chains hostname are only needed for report requests; an
    instance built without them can still answer beacon queries.
    """

    def __init__(
        self,
        token: str | None = None,
        chains_hostname: str | None = None,
        *,
        beacon_hostname: str | None = None,
        settings: AppChainsSettings | None = None,
        http_client: httpx.Client | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        overrides = {
            "token": token,
            "chains_hostname": chains_hostname,
            "beacon_hostname": beacon_hostname,
        }
        self.settings = replace(
            settings or AppChainsSettings(),
            **{key: value for key, value in overrides.items() if value},
        )

        self._http = HttpClient(
            self.settings.token,
            timeout=self.settings.http_timeout,
            http_client=http_client,
        )
        self._beacons = BeaconClient(self._http, self.settings)
        self._sleep = sleep
        self._pipeline: tuple[JobSubmitter, JobPoller, ResultTransformer] | None = None

    @classmethod
    def from_env(cls, **kwargs: Any) -> "AppChains":
        return cls(settings=AppChainsSettings.from_env(), **kwargs)

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------
    def _report_pipeline(self) -> tuple[JobSubmitter, JobPoller, ResultTransformer]:
        if self._pipeline is None:
            self.settings.require_chains()
            base_url = base_chains_url(self.settings)
            self._pipeline = (
                JobSubmitter(self._http, base_url),
                JobPoller(self._http, base_url, interval=self.settings.poll_interval, sleep=self._sleep),
                ResultTransformer(base_url, downloader=self._http),
            )
        return self._pipeline

    @property
    def transformer(self) -> ResultTransformer:
        return self._report_pipeline()[2]

    # ------------------------------------------------------------------
    # reports
    # ------------------------------------------------------------------
    def submit(self, app_code: str, data_source_id: str, *, endpoint: str = DEFAULT_ENDPOINT) -> Job:
        submitter, _, _ = self._report_pipeline()
        return submitter.submit_app(endpoint, app_code, data_source_id)

    def await_job(
        self,
        job: Job,
        *,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> RawJobResult:
        _, poller, _ = self._report_pipeline()
        return poller.await_completion(job, timeout=timeout, cancel_event=cancel_event)

    def get_raw_report(
        self,
        app_code: str,
        data_source_id: str,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> RawJobResult:
        job = self.submit(app_code, data_source_id, endpoint=endpoint)
        return self.await_job(job, timeout=timeout, cancel_event=cancel_event)

    def get_raw_report_ex(
        self,
        endpoint: str,
        request_body: Mapping[str, Any] | str,
        *,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> RawJobResult:
        submitter, _, _ = self._report_pipeline()
        job = submitter.submit(endpoint, request_body)
        return self.await_job(job, timeout=timeout, cancel_event=cancel_event)

    def get_report(
        self,
        app_code: str,
        data_source_id: str,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> Report:
        raw = self.get_raw_report(
            app_code,
            data_source_id,
            endpoint=endpoint,
            timeout=timeout,
            cancel_event=cancel_event,
        )
        report = self.transformer.classify(raw)
        logger.info("Job %s produced %d report results", raw.job_id, len(report.results))
        return report

    def get_report_ex(
        self,
        endpoint: str,
        request_body: Mapping[str, Any] | str,
        *,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> Report:
        raw = self.get_raw_report_ex(endpoint, request_body, timeout=timeout, cancel_event=cancel_event)
        return self.transformer.classify(raw)

    # ------------------------------------------------------------------
    # beacons
    # ------------------------------------------------------------------
    def get_sequencing_beacon(self, chrom: int, pos: int, allele: str) -> str:
        return self._beacons.get_sequencing_beacon(chrom, pos, allele)

    def get_public_beacon(self, chrom: int, pos: int, allele: str) -> str:
        return self._beacons.get_public_beacon(chrom, pos, allele)

    def get_beacon(self, method_name: str, parameters: Mapping[str, object]) -> str:
        return self._beacons.get_beacon(method_name, parameters)

    def get_beacon_ex(self, method_name: str, query: str) -> str:
        return self._beacons.get_beacon_ex(method_name, query)

    # ------------------------------------------------------------------
    # files & lifecycle
    # ------------------------------------------------------------------
    def download_file(self, url: str, destination: str | Path) -> Path:
        return self._http.download(url, Path(destination))

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "AppChains":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["AppChains", "DEFAULT_ENDPOINT"]
