"""Resolve outline nodes into map locations."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, Optional, Sequence

from ..core import LatLng, Location, MapboxError, OutlineNode
from ..utils import extract_tag, parse_coordinate_pair
from .mapbox import MapboxClient

logger = logging.getLogger(__name__)

ROUTE_SECTION = "ROUTE"
PLACES_SECTION = "PLACES"


def find_section(tree: OutlineNode, label: str) -> OutlineNode | None:
    """Return the first top-level node whose trimmed text matches ``label``."""

    wanted = label.strip().upper()
    for child in tree.children:
        if child.text.strip().upper() == wanted:
            return child
    return None


class LocationResolver:
    """Turn outline nodes into :class:`Location` objects.

    Nodes whose first child carries a literal ``lat, lon`` pair are used as
    is; every other node costs one geocoding request. Nodes that cannot be
    resolved are dropped and reported through ``on_unresolved``.
    """

    def __init__(
        self,
        client: MapboxClient,
        *,
        max_workers: int = 1,
        on_unresolved: Optional[Callable[[OutlineNode], None]] = None,
    ):
        self.client = client
        self.max_workers = max(1, max_workers)
        self.on_unresolved = on_unresolved

    def resolve(self, nodes: Iterable[OutlineNode]) -> list[Location]:
        nodes = list(nodes)
        if self.max_workers > 1 and len(nodes) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                resolved = list(executor.map(self._resolve_single, nodes))
        else:
            resolved = [self._resolve_single(node) for node in nodes]
        return [location for location in resolved if location is not None]

    def _resolve_single(self, node: OutlineNode) -> Location | None:
        name = extract_tag(node.text.strip())

        coordinates = parse_coordinate_pair(node.first_child_text())
        if coordinates is None:
            coordinates = self._geocode(name)

        if coordinates is None:
            if self.on_unresolved is not None:
                self.on_unresolved(node)
            return None
        return Location(name=name, coordinates=coordinates, source_id=node.uid)

    def _geocode(self, name: str) -> LatLng | None:
        try:
            coordinates = self.client.geocode(name)
        except MapboxError as exc:
            logger.warning("Error geocoding location %r: %s", name, exc)
            return None

        if coordinates is None:
            logger.warning("No coordinates found for location: %s", name)
        return coordinates


def resolve_section(
    resolver: LocationResolver, tree: OutlineNode, label: str
) -> Sequence[Location]:
    """Resolve the children of the ``label`` section, or nothing if it is absent."""

    section = find_section(tree, label)
    if section is None or not section.children:
        return []
    return resolver.resolve(section.children)
