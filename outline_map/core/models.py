"""Domain models used throughout the outline map service."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Mapping

from .exceptions import TreeFormatError

LatLng = tuple[float, float]


@dataclass(slots=True)
class OutlineNode:
    """A text node from the host outline, with ordered children."""

    text: str
    children: list["OutlineNode"] = field(default_factory=list)
    uid: str | None = None

    @classmethod
    def from_dict(cls, payload: object) -> "OutlineNode":
        if not isinstance(payload, Mapping):
            raise TreeFormatError(
                "Outline node must be an object",
                details={"type": type(payload).__name__},
            )

        children = payload.get("children")
        if children is None:
            children = []
        if not isinstance(children, list):
            raise TreeFormatError(
                "Outline node children must be a list",
                details={"uid": payload.get("uid")},
            )

        text = payload.get("text")
        uid = payload.get("uid") or payload.get("id")
        return cls(
            text="" if text is None else str(text),
            children=[cls.from_dict(child) for child in children],
            uid=str(uid) if uid not in (None, "") else None,
        )

    def first_child_text(self) -> str | None:
        if not self.children:
            return None
        return self.children[0].text


@dataclass(frozen=True, slots=True)
class Location:
    """A named place with resolved coordinates."""

    name: str
    coordinates: LatLng
    source_id: str | None = None

    @property
    def latitude(self) -> float:
        return self.coordinates[0]

    @property
    def longitude(self) -> float:
        return self.coordinates[1]

    def as_dict(self) -> dict:
        return {
            "name": self.name,
            "coordinates": list(self.coordinates),
            "source_id": self.source_id,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, object]) -> "Location":
        latitude, longitude = payload["coordinates"]  # type: ignore[misc]
        return cls(
            name=str(payload["name"]),
            coordinates=(float(latitude), float(longitude)),
            source_id=payload.get("source_id"),  # type: ignore[arg-type]
        )


@dataclass(frozen=True, slots=True)
class BoundingRegion:
    """Axis-aligned latitude/longitude rectangle."""

    south: float
    west: float
    north: float
    east: float

    @classmethod
    def from_point(cls, point: LatLng) -> "BoundingRegion":
        latitude, longitude = point
        return cls(south=latitude, west=longitude, north=latitude, east=longitude)

    def extend(self, point: LatLng) -> "BoundingRegion":
        latitude, longitude = point
        return BoundingRegion(
            south=min(self.south, latitude),
            west=min(self.west, longitude),
            north=max(self.north, latitude),
            east=max(self.east, longitude),
        )

    def contains(self, point: LatLng) -> bool:
        latitude, longitude = point
        return self.south <= latitude <= self.north and self.west <= longitude <= self.east

    def as_list(self) -> list[list[float]]:
        return [[self.south, self.west], [self.north, self.east]]


class LayerPhase(str, Enum):
    """Resolution stages of a map layer."""

    IDLE = "idle"
    RESOLVING_LOCATIONS = "resolving-locations"
    RESOLVING_ROUTE = "resolving-route"
    READY = "ready"


@dataclass(frozen=True, slots=True)
class LayerSnapshot:
    """State of one map layer for a single input generation."""

    layer_id: str
    generation: int
    phase: LayerPhase = LayerPhase.IDLE
    places: tuple[Location, ...] = ()
    route_locations: tuple[Location, ...] = ()
    route_points: tuple[LatLng, ...] = ()
    route_distance: float | None = None
    route_duration: float | None = None

    @property
    def locations(self) -> tuple[Location, ...]:
        """Route locations followed by standalone places."""
        return self.route_locations + self.places

    def points(self) -> list[LatLng]:
        """Every coordinate the layer currently draws."""
        return [location.coordinates for location in self.locations] + list(self.route_points)

    def as_dict(self) -> dict:
        return {
            "layer_id": self.layer_id,
            "generation": self.generation,
            "phase": self.phase.value,
            "places": [location.as_dict() for location in self.places],
            "route_locations": [location.as_dict() for location in self.route_locations],
            "route_points": [list(point) for point in self.route_points],
            "route_distance": self.route_distance,
            "route_duration": self.route_duration,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, object]) -> "LayerSnapshot":
        def locations(key: str) -> tuple[Location, ...]:
            return tuple(Location.from_dict(item) for item in _as_list(payload.get(key)))

        return cls(
            layer_id=str(payload["layer_id"]),
            generation=int(payload["generation"]),  # type: ignore[arg-type]
            phase=LayerPhase(payload.get("phase", LayerPhase.IDLE.value)),
            places=locations("places"),
            route_locations=locations("route_locations"),
            route_points=tuple(
                (float(lat), float(lon)) for lat, lon in _as_list(payload.get("route_points"))
            ),
            route_distance=payload.get("route_distance"),  # type: ignore[arg-type]
            route_duration=payload.get("route_duration"),  # type: ignore[arg-type]
        )


def _as_list(value: object) -> Iterable:
    return value if isinstance(value, list) else []
