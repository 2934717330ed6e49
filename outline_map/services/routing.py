"""Fetch driving routes between resolved locations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..core import LatLng, Location, MapboxError
from ..utils import swap_axes
from .mapbox import MapboxClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Route:
    """Decoded geometry of the first route returned by the directions API."""

    points: tuple[LatLng, ...]
    distance: float | None = None
    duration: float | None = None


class RouteResolver:
    """Request one driving route through an ordered list of locations."""

    def __init__(self, client: MapboxClient):
        self.client = client

    def resolve(self, locations: Sequence[Location]) -> list[LatLng]:
        route = self.fetch(locations)
        return list(route.points) if route else []

    def fetch(self, locations: Sequence[Location]) -> Route | None:
        if len(locations) < 2:
            return None

        waypoints = [location.coordinates for location in locations]
        try:
            payload = self.client.directions(waypoints)
        except MapboxError as exc:
            logger.warning("Error fetching route: %s", exc)
            return None

        try:
            return self._decode(payload)
        except (AttributeError, KeyError, IndexError, TypeError, ValueError) as exc:
            logger.warning("Malformed directions response: %s", exc)
            return None

    def _decode(self, payload: dict) -> Route | None:
        code = payload.get("code")
        routes = payload.get("routes") or []
        if code != "Ok" or not routes:
            logger.warning("Invalid response from Mapbox: code=%s routes=%d", code, len(routes))
            return None

        first = routes[0]
        coordinates = (first.get("geometry") or {}).get("coordinates")
        if not coordinates:
            logger.warning("Mapbox route has no geometry")
            return None

        return Route(
            points=tuple(swap_axes(pair) for pair in coordinates),
            distance=_optional_float(first.get("distance")),
            duration=_optional_float(first.get("duration")),
        )


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        logger.debug("Ignoring non-numeric route summary value %r", value)
        return None
