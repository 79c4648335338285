"""Infrastructure layer exports."""

from .beacons import BeaconClient
from .http import HttpClient, HttpResponse

__all__ = [
    "BeaconClient",
    "HttpClient",
    "HttpResponse",
]
