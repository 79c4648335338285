"""Client for the genomic beacon lookup service."""
from __future__ import annotations

import logging
from typing import Mapping

from appchains.core.config import AppChainsSettings
from appchains.core.errors import RemoteServiceError
from appchains.core.urls import beacon_url, query_string

from .http import HttpClient

logger = logging.getLogger(__name__)

SEQUENCING_BEACON = "SequencingBeacon"
PUBLIC_BEACONS = "PublicBeacons"


class BeaconClient:
    """Queries beacon endpoints and hands back the body unparsed."""

    def __init__(self, http: HttpClient, settings: AppChainsSettings | None = None) -> None:
        self._http = http
        self._settings = settings or AppChainsSettings()

    @staticmethod
    def beacon_parameters(chrom: int, pos: int, allele: str) -> dict[str, object]:
        return {"chrom": chrom, "pos": pos, "allele": allele}

    def build_url(self, method_name: str, parameters: Mapping[str, object]) -> str:
        return beacon_url(self._settings, method_name, query_string(parameters))

    def get_sequencing_beacon(self, chrom: int, pos: int, allele: str) -> str:
        return self.get_beacon(SEQUENCING_BEACON, self.beacon_parameters(chrom, pos, allele))

    def get_public_beacon(self, chrom: int, pos: int, allele: str) -> str:
        return self.get_beacon(PUBLIC_BEACONS, self.beacon_parameters(chrom, pos, allele))

    def get_beacon(self, method_name: str, parameters: Mapping[str, object]) -> str:
        return self.get_beacon_ex(method_name, query_string(parameters))

    def get_beacon_ex(self, method_name: str, query: str) -> str:
        """Query ``method_name`` with an already encoded query string."""

        url = beacon_url(self._settings, method_name, query)
        response = self._http.get(url)
        if not response.ok:
            raise RemoteServiceError(response.status_code, response.body)
        logger.debug("Beacon %s answered %d bytes", method_name, len(response.body))
        return response.body


__all__ = ["BeaconClient", "PUBLIC_BEACONS", "SEQUENCING_BEACON"]
