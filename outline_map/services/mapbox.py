"""Thin client for the Mapbox geocoding and directions APIs."""

from __future__ import annotations

import logging
from typing import Dict, Optional, Protocol, Sequence
from urllib import parse as urllib_parse

import requests

from ..core import LatLng, MapboxError
from ..utils import format_waypoints, swap_axes

logger = logging.getLogger(__name__)


class HTTPClient(Protocol):
    def get_json(self, url: str, params: Dict[str, object], timeout: int) -> Dict[str, object]:
        ...


class _HTTPClient:
    """Small wrapper around :func:`requests.get` with headers."""

    _DEFAULT_HEADERS = {"User-Agent": "OutlineMap/1.0", "Accept": "application/json"}

    def get_json(self, url: str, params: Dict[str, object], timeout: int) -> Dict[str, object]:
        response = requests.get(url, params=params, headers=self._DEFAULT_HEADERS, timeout=timeout)
        response.raise_for_status()
        return response.json()


class MapboxClient:
    """Resolve place names and driving routes through Mapbox."""

    def __init__(
        self,
        access_token: str,
        *,
        base_url: str = "https://api.mapbox.com",
        geocoding_provider: str = "mapbox.places",
        directions_provider: str = "mapbox",
        timeout: int = 10,
        http_client: Optional[HTTPClient] = None,
    ):
        self.access_token = access_token
        self.base_url = base_url.rstrip("/")
        self.geocoding_provider = geocoding_provider
        self.directions_provider = directions_provider
        self.timeout = timeout
        self.http_client = http_client or _HTTPClient()

    def geocoding_url(self, name: str) -> str:
        quoted = urllib_parse.quote(name, safe="")
        return f"{self.base_url}/geocoding/v5/{self.geocoding_provider}/{quoted}.json"

    def directions_url(self, waypoints: Sequence[LatLng]) -> str:
        path = format_waypoints(list(waypoints))
        return f"{self.base_url}/directions/v5/{self.directions_provider}/driving/{path}"

    def geocode(self, name: str) -> Optional[LatLng]:
        """Return the first candidate for ``name`` as ``(lat, lon)``."""

        url = self.geocoding_url(name)
        payload = self._get_json(url, {})

        features = payload.get("features")
        if not isinstance(features, list):
            raise MapboxError("Geocoding response has no feature list", details={"url": url})
        if not features:
            return None

        first = features[0]
        center = first.get("center") if isinstance(first, dict) else None
        try:
            return swap_axes(center)
        except (TypeError, ValueError) as exc:
            raise MapboxError(
                "Geocoding candidate has no usable center",
                details={"url": url, "center": center},
            ) from exc

    def directions(self, waypoints: Sequence[LatLng]) -> Dict[str, object]:
        """Return the raw directions payload for ``waypoints`` in order."""

        url = self.directions_url(waypoints)
        return self._get_json(url, {"geometries": "geojson"})

    def _get_json(self, url: str, params: Dict[str, object]) -> Dict[str, object]:
        query = dict(params, access_token=self.access_token)
        logger.debug("GET %s", url)
        try:
            payload = self.http_client.get_json(url, query, self.timeout)
        except (requests.RequestException, ValueError) as exc:
            # requests embeds the full URL, token included, in its messages
            response = getattr(exc, "response", None)
            raise MapboxError(
                f"Mapbox request failed ({type(exc).__name__})",
                details={"url": url, "status": getattr(response, "status_code", None)},
            ) from exc

        if not isinstance(payload, dict):
            raise MapboxError(
                "Mapbox response is not an object",
                details={"url": url, "type": type(payload).__name__},
            )
        return payload
