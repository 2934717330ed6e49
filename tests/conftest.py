from __future__ import annotations

from typing import Dict, List, Tuple

import pytest

from outline_map.core import OutlineNode
from outline_map.services import MapboxClient


class DummyHttpClient:
    def __init__(self) -> None:
        self.responses: Dict[str, object] = {}
        self.calls: List[Tuple[str, Dict[str, object]]] = []

    def queue(self, url: str, payload: object) -> None:
        self.responses[url] = payload

    def get_json(self, url: str, params: Dict[str, object], timeout: int) -> Dict[str, object]:
        self.calls.append((url, params))
        if url not in self.responses:
            raise AssertionError(f"Unexpected request for {url}")
        response = self.responses[url]
        if isinstance(response, Exception):
            raise response
        return response  # type: ignore[return-value]


@pytest.fixture()
def http_client() -> DummyHttpClient:
    return DummyHttpClient()


@pytest.fixture()
def mapbox(http_client: DummyHttpClient) -> MapboxClient:
    return MapboxClient("test-token", base_url="https://mapbox.test", http_client=http_client)


def geocode_url(name: str) -> str:
    from urllib.parse import quote

    return f"https://mapbox.test/geocoding/v5/mapbox.places/{quote(name, safe='')}.json"


def directions_url(path: str) -> str:
    return f"https://mapbox.test/directions/v5/mapbox/driving/{path}"


def node(text: str, *children: str, uid: str | None = None) -> OutlineNode:
    return OutlineNode(text=text, children=[OutlineNode(text=child) for child in children], uid=uid)


def tree(**sections: list[OutlineNode]) -> OutlineNode:
    return OutlineNode(
        text="",
        children=[OutlineNode(text=label, children=nodes) for label, nodes in sections.items()],
    )
