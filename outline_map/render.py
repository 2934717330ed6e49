"""Project layer snapshots into map widget primitives."""

from __future__ import annotations

from dataclasses import dataclass

from .config import LAYER_STYLE, LayerStyle
from .core import LatLng, LayerPhase, LayerSnapshot
from .services import FitBoundsCommand, fit_bounds_command
from .utils import route_label


@dataclass(frozen=True, slots=True)
class Marker:
    key: str
    position: LatLng
    title: str
    popup: str
    source_id: str | None = None

    def as_dict(self) -> dict:
        return {
            "key": self.key,
            "position": list(self.position),
            "title": self.title,
            "popup": self.popup,
            "source_id": self.source_id,
        }


@dataclass(frozen=True, slots=True)
class Polyline:
    positions: tuple[LatLng, ...]
    color: str
    weight: int
    opacity: float
    label: str | None = None

    def as_dict(self) -> dict:
        return {
            "positions": [list(point) for point in self.positions],
            "color": self.color,
            "weight": self.weight,
            "opacity": self.opacity,
            "label": self.label,
        }


@dataclass(frozen=True, slots=True)
class RenderedLayer:
    layer_id: str
    generation: int
    phase: LayerPhase
    markers: tuple[Marker, ...]
    polyline: Polyline | None
    fit_bounds: FitBoundsCommand | None

    def as_dict(self) -> dict:
        return {
            "layer_id": self.layer_id,
            "generation": self.generation,
            "phase": self.phase.value,
            "markers": [marker.as_dict() for marker in self.markers],
            "polyline": self.polyline.as_dict() if self.polyline else None,
            "fit_bounds": self.fit_bounds.as_dict() if self.fit_bounds else None,
        }


def render_layer(snapshot: LayerSnapshot, style: LayerStyle = LAYER_STYLE) -> RenderedLayer:
    """Build markers, route line and viewport command for ``snapshot``.

    The fit command is only produced once the layer is ready, so the widget
    reframes after state settles rather than at every intermediate stage.
    """

    markers = tuple(
        Marker(
            key=f"{location.name}-{index}",
            position=location.coordinates,
            title=location.name,
            popup=location.name,
            source_id=location.source_id,
        )
        for index, location in enumerate(snapshot.locations)
    )

    polyline = None
    if snapshot.route_points:
        polyline = Polyline(
            positions=snapshot.route_points,
            color=style.route_color,
            weight=style.route_weight,
            opacity=style.route_opacity,
            label=route_label(snapshot.route_distance, snapshot.route_duration),
        )

    fit_bounds = None
    if snapshot.phase is LayerPhase.READY:
        fit_bounds = fit_bounds_command(snapshot.points(), padding=style.fit_padding)

    return RenderedLayer(
        layer_id=snapshot.layer_id,
        generation=snapshot.generation,
        phase=snapshot.phase,
        markers=markers,
        polyline=polyline,
        fit_bounds=fit_bounds,
    )
