"""Service layer exports."""

from .mapbox import MapboxClient
from .locations import LocationResolver, find_section, resolve_section
from .routing import Route, RouteResolver
from .bounds import FitBoundsCommand, compute_bounds, fit_bounds_command
from .state import InMemoryStateStore, RedisStateStore, StateStore

__all__ = [
    "MapboxClient",
    "LocationResolver",
    "find_section",
    "resolve_section",
    "Route",
    "RouteResolver",
    "FitBoundsCommand",
    "compute_bounds",
    "fit_bounds_command",
    "InMemoryStateStore",
    "RedisStateStore",
    "StateStore",
]
