"""Runtime configuration for the outline map service."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class MapboxConfig:
    """Connection settings for the Mapbox geocoding and directions APIs."""

    access_token: str = ""
    base_url: str = "https://api.mapbox.com"
    geocoding_provider: str = "mapbox.places"
    directions_provider: str = "mapbox"
    timeout: int = 10  # seconds
    geocode_workers: int = 1


@dataclass(frozen=True)
class LayerStyle:
    """Fixed presentation settings handed to the map widget."""

    route_color: str = "blue"
    route_weight: int = 3
    route_opacity: float = 0.7
    fit_padding: tuple[int, int] = (50, 50)


@dataclass(frozen=True)
class AppConfig:
    """High level runtime configuration values."""

    max_tree_kb: int = 512

    @property
    def max_upload_bytes(self) -> int:
        """Maximum request payload in bytes."""
        return self.max_tree_kb * 1024


@dataclass(frozen=True)
class QueueConfig:
    """Configuration for the Redis-backed task queue and layer state."""

    redis_url: str = "redis://localhost:6379/0"
    queue_name: str = "outline-map"
    default_timeout: int = 60 * 5  # seconds
    state_ttl: int = 60 * 60 * 24  # seconds


MAPBOX_CONFIG = MapboxConfig(
    access_token=os.environ.get("OUTLINE_MAP_MAPBOX_TOKEN", MapboxConfig.access_token),
    base_url=os.environ.get("OUTLINE_MAP_MAPBOX_URL", MapboxConfig.base_url),
    timeout=int(os.environ.get("OUTLINE_MAP_HTTP_TIMEOUT", MapboxConfig.timeout)),
    geocode_workers=int(
        os.environ.get("OUTLINE_MAP_GEOCODE_WORKERS", MapboxConfig.geocode_workers)
    ),
)
LAYER_STYLE = LayerStyle()
APP_CONFIG = AppConfig()
QUEUE_CONFIG = QueueConfig(
    redis_url=os.environ.get("OUTLINE_MAP_REDIS_URL", QueueConfig.redis_url),
    queue_name=os.environ.get("OUTLINE_MAP_QUEUE", QueueConfig.queue_name),
    default_timeout=int(
        os.environ.get("OUTLINE_MAP_QUEUE_TIMEOUT", QueueConfig.default_timeout)
    ),
    state_ttl=int(os.environ.get("OUTLINE_MAP_STATE_TTL", QueueConfig.state_ttl)),
)
