"""Resolution pipeline for a single map layer."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from ..config import MAPBOX_CONFIG, MapboxConfig
from ..core import LayerPhase, LayerSnapshot, OutlineNode
from ..services import (
    InMemoryStateStore,
    LocationResolver,
    MapboxClient,
    RouteResolver,
    StateStore,
    resolve_section,
)
from ..services.locations import PLACES_SECTION, ROUTE_SECTION

logger = logging.getLogger(__name__)


class StaleGeneration(Exception):
    """Raised internally when a newer input superseded the running one."""


@dataclass(slots=True)
class LayerPipeline:
    """Drives a layer through idle, location, route and ready stages."""

    location_resolver: LocationResolver
    route_resolver: RouteResolver

    def run(
        self,
        tree: OutlineNode,
        *,
        layer_id: str,
        generation: int,
        store: StateStore,
    ) -> LayerSnapshot:
        snapshot = LayerSnapshot(
            layer_id=layer_id,
            generation=generation,
            phase=LayerPhase.RESOLVING_LOCATIONS,
        )
        try:
            self._publish(store, snapshot)

            places = resolve_section(self.location_resolver, tree, PLACES_SECTION)
            snapshot = replace(snapshot, places=tuple(places))
            self._publish(store, snapshot)

            route_locations = resolve_section(self.location_resolver, tree, ROUTE_SECTION)
            has_route = len(route_locations) >= 2
            snapshot = replace(
                snapshot,
                route_locations=tuple(route_locations),
                phase=LayerPhase.RESOLVING_ROUTE if has_route else LayerPhase.READY,
            )
            self._publish(store, snapshot)

            if has_route:
                route = self.route_resolver.fetch(route_locations)
                snapshot = replace(
                    snapshot,
                    phase=LayerPhase.READY,
                    route_points=route.points if route else (),
                    route_distance=route.distance if route else None,
                    route_duration=route.duration if route else None,
                )
                self._publish(store, snapshot)
        except StaleGeneration:
            logger.info(
                "Discarding stale results for layer %s (generation %s, current %s)",
                layer_id,
                generation,
                store.current_generation(layer_id),
            )
            return snapshot

        logger.info(
            "Layer %s generation %s ready: %d places, %d route stops, %d route points",
            layer_id,
            generation,
            len(snapshot.places),
            len(snapshot.route_locations),
            len(snapshot.route_points),
        )
        return snapshot

    def resolve(self, tree: OutlineNode, *, layer_id: str = "local") -> LayerSnapshot:
        """Resolve ``tree`` outside of any shared store."""

        store = InMemoryStateStore()
        started = store.begin(layer_id)
        return self.run(tree, layer_id=layer_id, generation=started.generation, store=store)

    @staticmethod
    def _publish(store: StateStore, snapshot: LayerSnapshot) -> None:
        if not store.publish(snapshot):
            raise StaleGeneration(snapshot.generation)
        logger.debug(
            "Layer %s generation %s -> %s",
            snapshot.layer_id,
            snapshot.generation,
            snapshot.phase.value,
        )

    @classmethod
    def default(
        cls, config: MapboxConfig = MAPBOX_CONFIG, *, access_token: str | None = None
    ) -> "LayerPipeline":
        client = MapboxClient(
            access_token if access_token is not None else config.access_token,
            base_url=config.base_url,
            geocoding_provider=config.geocoding_provider,
            directions_provider=config.directions_provider,
            timeout=config.timeout,
        )
        return cls(
            location_resolver=LocationResolver(client, max_workers=config.geocode_workers),
            route_resolver=RouteResolver(client),
        )
