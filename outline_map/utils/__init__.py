"""Utility helpers for the outline map service."""

from .geo import format_waypoints, parse_coordinate_pair, swap_axes
from .formatting import format_distance, format_duration, route_label
from .io import detect_encoding, ensure_directory, load_json
from .tags import extract_tag

__all__ = [
    "format_waypoints",
    "parse_coordinate_pair",
    "swap_axes",
    "format_distance",
    "format_duration",
    "route_label",
    "detect_encoding",
    "ensure_directory",
    "load_json",
    "extract_tag",
]
