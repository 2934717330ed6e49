"""Layer state stores with generation tagging.

Every new input for a layer starts a new generation. Resolution stages
publish snapshots tagged with the generation they were spawned for, and a
store only accepts a snapshot whose generation is still the current one, so
results from a superseded input never overwrite newer state.
"""

from __future__ import annotations

import json
import logging
import threading
from typing import Protocol

from redis import Redis
from redis.exceptions import WatchError

from ..core import LayerSnapshot

logger = logging.getLogger(__name__)


class StateStore(Protocol):
    def begin(self, layer_id: str) -> LayerSnapshot:
        ...

    def publish(self, snapshot: LayerSnapshot) -> bool:
        ...

    def get(self, layer_id: str) -> LayerSnapshot | None:
        ...

    def current_generation(self, layer_id: str) -> int:
        ...


class InMemoryStateStore:
    """Process-local store used by the CLI and tests."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._generations: dict[str, int] = {}
        self._snapshots: dict[str, LayerSnapshot] = {}

    def begin(self, layer_id: str) -> LayerSnapshot:
        with self._lock:
            generation = self._generations.get(layer_id, 0) + 1
            self._generations[layer_id] = generation
            snapshot = LayerSnapshot(layer_id=layer_id, generation=generation)
            self._snapshots[layer_id] = snapshot
        return snapshot

    def publish(self, snapshot: LayerSnapshot) -> bool:
        with self._lock:
            if self._generations.get(snapshot.layer_id, 0) != snapshot.generation:
                return False
            self._snapshots[snapshot.layer_id] = snapshot
        return True

    def get(self, layer_id: str) -> LayerSnapshot | None:
        with self._lock:
            return self._snapshots.get(layer_id)

    def current_generation(self, layer_id: str) -> int:
        with self._lock:
            return self._generations.get(layer_id, 0)


class RedisStateStore:
    """Store shared between the API process and RQ workers."""

    def __init__(self, connection: Redis, *, prefix: str = "outline-map", ttl: int | None = None):
        self.connection = connection
        self.prefix = prefix
        self.ttl = ttl

    @classmethod
    def from_url(cls, url: str, **kwargs) -> "RedisStateStore":
        return cls(Redis.from_url(url), **kwargs)

    def _generation_key(self, layer_id: str) -> str:
        return f"{self.prefix}:layer:{layer_id}:generation"

    def _snapshot_key(self, layer_id: str) -> str:
        return f"{self.prefix}:layer:{layer_id}:snapshot"

    def begin(self, layer_id: str) -> LayerSnapshot:
        # The counter never expires; restarting at 1 would reuse job ids.
        generation = int(self.connection.incr(self._generation_key(layer_id)))
        snapshot = LayerSnapshot(layer_id=layer_id, generation=generation)
        # A faster concurrent begin() may already own a newer generation.
        self.publish(snapshot)
        return snapshot

    def publish(self, snapshot: LayerSnapshot) -> bool:
        generation_key = self._generation_key(snapshot.layer_id)
        payload = json.dumps(snapshot.as_dict())

        with self.connection.pipeline() as pipe:
            while True:
                try:
                    pipe.watch(generation_key)
                    current = int(pipe.get(generation_key) or 0)
                    if current != snapshot.generation:
                        pipe.unwatch()
                        return False
                    pipe.multi()
                    pipe.set(self._snapshot_key(snapshot.layer_id), payload, ex=self.ttl)
                    pipe.execute()
                    return True
                except WatchError:
                    logger.debug("Generation of layer %s changed during publish; retrying", snapshot.layer_id)
                    continue

    def get(self, layer_id: str) -> LayerSnapshot | None:
        raw = self.connection.get(self._snapshot_key(layer_id))
        if raw is None:
            return None
        return LayerSnapshot.from_dict(json.loads(raw))

    def current_generation(self, layer_id: str) -> int:
        return int(self.connection.get(self._generation_key(layer_id)) or 0)
