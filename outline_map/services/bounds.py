"""Viewport fitting for resolved markers and route geometry."""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Iterable

from ..core import BoundingRegion, LatLng


@dataclass(frozen=True, slots=True)
class FitBoundsCommand:
    """Instruction for the map widget to frame ``bounds``."""

    bounds: BoundingRegion
    padding: tuple[int, int] = (50, 50)

    def as_dict(self) -> dict:
        return {"bounds": self.bounds.as_list(), "padding": list(self.padding)}


def compute_bounds(points: Iterable[LatLng]) -> BoundingRegion | None:
    """Return the smallest region covering ``points``, or ``None`` if empty."""

    points = list(points)
    if not points:
        return None
    return reduce(
        lambda bounds, point: bounds.extend(point),
        points[1:],
        BoundingRegion.from_point(points[0]),
    )


def fit_bounds_command(
    points: Iterable[LatLng], padding: tuple[int, int] = (50, 50)
) -> FitBoundsCommand | None:
    bounds = compute_bounds(points)
    if bounds is None:
        return None
    return FitBoundsCommand(bounds=bounds, padding=padding)
