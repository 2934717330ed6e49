from __future__ import annotations

from outline_map.config import LayerStyle
from outline_map.core import LayerPhase, LayerSnapshot, Location
from outline_map.render import render_layer

CAFE = Location(name="CafeX", coordinates=(40.73, -73.99), source_id="uid-1")
START = Location(name="Start", coordinates=(40.7, -74.0))
END = Location(name="End", coordinates=(40.8, -73.9))


def test_route_locations_precede_places_in_marker_list():
    snapshot = LayerSnapshot(
        layer_id="layer",
        generation=3,
        phase=LayerPhase.READY,
        places=(CAFE,),
        route_locations=(START, END),
    )

    rendered = render_layer(snapshot)

    assert [marker.key for marker in rendered.markers] == ["Start-0", "End-1", "CafeX-2"]
    assert rendered.markers[2].popup == "CafeX"
    assert rendered.markers[2].source_id == "uid-1"


def test_polyline_uses_fixed_style():
    snapshot = LayerSnapshot(
        layer_id="layer",
        generation=1,
        phase=LayerPhase.READY,
        route_locations=(START, END),
        route_points=((40.7, -74.0), (40.8, -73.9)),
    )

    polyline = render_layer(snapshot).polyline

    assert polyline.as_dict() == {
        "positions": [[40.7, -74.0], [40.8, -73.9]],
        "color": "blue",
        "weight": 3,
        "opacity": 0.7,
        "label": None,
    }


def test_fit_bounds_covers_markers_and_route_points():
    snapshot = LayerSnapshot(
        layer_id="layer",
        generation=1,
        phase=LayerPhase.READY,
        places=(CAFE,),
        route_locations=(START, END),
        route_points=((40.6, -74.1), (40.9, -73.8)),
    )

    command = render_layer(snapshot, LayerStyle(fit_padding=(10, 10))).fit_bounds

    assert command.as_dict() == {"bounds": [[40.6, -74.1], [40.9, -73.8]], "padding": [10, 10]}


def test_fit_bounds_waits_until_ready():
    snapshot = LayerSnapshot(
        layer_id="layer",
        generation=1,
        phase=LayerPhase.RESOLVING_ROUTE,
        route_locations=(START, END),
    )

    rendered = render_layer(snapshot)

    assert len(rendered.markers) == 2
    assert rendered.fit_bounds is None


def test_idle_layer_renders_nothing():
    rendered = render_layer(LayerSnapshot(layer_id="layer", generation=1)).as_dict()

    assert rendered == {
        "layer_id": "layer",
        "generation": 1,
        "phase": "idle",
        "markers": [],
        "polyline": None,
        "fit_bounds": None,
    }
