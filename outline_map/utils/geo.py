"""Geospatial helpers."""

from __future__ import annotations

import re
from decimal import Decimal

_COORDINATE_PAIR = re.compile(r"([-+]?\d+(?:\.\d+)?)\s*,\s*([-+]?\d+(?:\.\d+)?)")


def parse_coordinate_pair(text: str | None) -> tuple[float, float] | None:
    """Return the first ``lat, lon`` pair embedded in ``text``."""

    if not text:
        return None
    match = _COORDINATE_PAIR.search(text)
    if match is None:
        return None
    return float(match.group(1)), float(match.group(2))


def format_waypoints(points: list[tuple[float, float]]) -> str:
    """Join (lat, lon) pairs as ``lon,lat;lon,lat`` for Mapbox paths."""

    return ";".join(
        f"{_plain_decimal(longitude)},{_plain_decimal(latitude)}" for latitude, longitude in points
    )


def _plain_decimal(value: float) -> str:
    """Render ``value`` without exponent notation, keeping its shortest digits."""

    return format(Decimal(repr(float(value))), "f")


def swap_axes(pair: object) -> tuple[float, float]:
    """Convert a ``[lon, lat]`` pair into ``(lat, lon)``."""

    longitude, latitude = pair  # type: ignore[misc]
    return float(latitude), float(longitude)
