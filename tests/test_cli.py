from __future__ import annotations

import json
from pathlib import Path

from outline_map.cli import main
from outline_map.pipelines import LayerPipeline
from outline_map.services import LocationResolver, RouteResolver

from conftest import directions_url


def write_tree(tmp_path: Path, payload: object) -> Path:
    path = tmp_path / "trip.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_cli_writes_rendered_layer(tmp_path: Path, mapbox, http_client):
    http_client.queue(
        directions_url("-74.0,40.7;-73.9,40.8"),
        {"code": "Ok", "routes": [{"geometry": {"coordinates": [[-74.0, 40.7], [-73.9, 40.8]]}}]},
    )
    tree_path = write_tree(
        tmp_path,
        {
            "children": [
                {
                    "text": "route",
                    "children": [
                        {"text": "Start", "children": [{"text": "40.7, -74.0"}]},
                        {"text": "End", "children": [{"text": "40.8, -73.9"}]},
                    ],
                }
            ]
        },
    )
    output = tmp_path / "out" / "layer.json"
    pipeline = LayerPipeline(
        location_resolver=LocationResolver(mapbox),
        route_resolver=RouteResolver(mapbox),
    )

    exit_code = main([str(tree_path), "--output", str(output), "--padding", "25"], pipeline=pipeline)

    assert exit_code == 0
    layer = json.loads(output.read_text(encoding="utf-8"))
    assert layer["layer_id"] == "trip"
    assert layer["phase"] == "ready"
    assert [marker["title"] for marker in layer["markers"]] == ["Start", "End"]
    assert layer["polyline"]["positions"] == [[40.7, -74.0], [40.8, -73.9]]
    assert layer["fit_bounds"]["padding"] == [25, 25]


def test_cli_rejects_malformed_tree(tmp_path: Path, mapbox):
    tree_path = write_tree(tmp_path, {"children": "nope"})
    pipeline = LayerPipeline(
        location_resolver=LocationResolver(mapbox),
        route_resolver=RouteResolver(mapbox),
    )

    assert main([str(tree_path)], pipeline=pipeline) == 1


def test_cli_reports_missing_file(tmp_path: Path):
    assert main([str(tmp_path / "missing.json")]) == 1
