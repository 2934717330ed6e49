from __future__ import annotations

import pytest
import requests

from outline_map.core import Location
from outline_map.services import RouteResolver

from conftest import directions_url

STOPS = [
    Location(name="A", coordinates=(40.7, -74.0)),
    Location(name="B", coordinates=(40.8, -73.9)),
]
PATH = "-74.0,40.7;-73.9,40.8"


@pytest.mark.parametrize("locations", [[], STOPS[:1]])
def test_fewer_than_two_locations_is_a_no_op(mapbox, http_client, locations):
    resolver = RouteResolver(mapbox)

    assert resolver.resolve(locations) == []
    assert resolver.fetch(locations) is None
    assert http_client.calls == []


def test_route_geometry_is_axis_swapped(mapbox, http_client):
    http_client.queue(
        directions_url(PATH),
        {
            "code": "Ok",
            "routes": [
                {
                    "geometry": {"type": "LineString", "coordinates": [[-74.0, 40.7], [-73.95, 40.75], [-73.9, 40.8]]},
                    "distance": 15234.2,
                    "duration": 1260.0,
                }
            ],
        },
    )
    resolver = RouteResolver(mapbox)

    route = resolver.fetch(STOPS)

    assert route is not None
    assert route.points == ((40.7, -74.0), (40.75, -73.95), (40.8, -73.9))
    assert route.distance == pytest.approx(15234.2)
    assert route.duration == pytest.approx(1260.0)

    url, params = http_client.calls[0]
    assert url == directions_url(PATH)
    assert params == {"geometries": "geojson", "access_token": "test-token"}


def test_waypoints_follow_location_order(mapbox, http_client):
    reversed_path = "-73.9,40.8;-74.0,40.7"
    http_client.queue(
        directions_url(reversed_path),
        {"code": "Ok", "routes": [{"geometry": {"coordinates": [[-73.9, 40.8], [-74.0, 40.7]]}}]},
    )

    points = RouteResolver(mapbox).resolve(list(reversed(STOPS)))

    assert points == [(40.8, -73.9), (40.7, -74.0)]


@pytest.mark.parametrize(
    "payload",
    [
        {"code": "NoRoute", "routes": []},
        {"code": "NoSegment", "routes": [{"geometry": {"coordinates": [[-74.0, 40.7]]}}]},
        {"code": "Ok", "routes": []},
        {"code": "Ok", "routes": [{"geometry": {"coordinates": []}}]},
        {"code": "Ok", "routes": [{}]},
        {"code": "Ok", "routes": [{"geometry": {"coordinates": [["x"]]}}]},
        {"code": "Ok", "routes": ["nonsense"]},
    ],
)
def test_unusable_responses_yield_empty_route(mapbox, http_client, payload):
    http_client.queue(directions_url(PATH), payload)

    assert RouteResolver(mapbox).resolve(STOPS) == []


def test_transport_failure_yields_empty_route(mapbox, http_client):
    http_client.queue(directions_url(PATH), requests.Timeout("slow"))

    assert RouteResolver(mapbox).resolve(STOPS) == []


@pytest.mark.parametrize("summary", [{"distance": "n/a"}, {"duration": {"value": 3}}, {"distance": None}])
def test_bad_route_summary_keeps_geometry(mapbox, http_client, summary):
    http_client.queue(
        directions_url(PATH),
        {"code": "Ok", "routes": [dict(summary, geometry={"coordinates": [[-74.0, 40.7], [-73.9, 40.8]]})]},
    )

    route = RouteResolver(mapbox).fetch(STOPS)

    assert route.points == ((40.7, -74.0), (40.8, -73.9))
    assert route.distance is None
    assert route.duration is None


def test_waypoints_near_zero_use_plain_decimals(mapbox, http_client):
    stops = [
        Location(name="Null Island", coordinates=(0.00001, 1e-6)),
        Location(name="Harbor", coordinates=(40.7, -74.0)),
    ]
    http_client.queue(
        directions_url("0.000001,0.00001;-74.0,40.7"),
        {"code": "Ok", "routes": [{"geometry": {"coordinates": [[1e-6, 0.00001], [-74.0, 40.7]]}}]},
    )

    assert RouteResolver(mapbox).resolve(stops) == [(0.00001, 1e-6), (40.7, -74.0)]
