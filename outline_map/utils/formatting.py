"""Formatting helpers."""

from __future__ import annotations


def format_distance(meters: float | None) -> str:
    """Return a short human readable distance."""

    if meters is None:
        return "N/A"
    if meters < 1000:
        return f"{int(round(meters))} m"
    return f"{meters / 1000:,.1f} km"


def format_duration(seconds: float | None) -> str:
    """Return a short human readable travel time."""

    if seconds is None:
        return "N/A"
    minutes = int(round(seconds / 60))
    if minutes < 60:
        return f"{minutes} min"
    hours, minutes = divmod(minutes, 60)
    return f"{hours} h {minutes} min" if minutes else f"{hours} h"


def route_label(distance: float | None, duration: float | None) -> str | None:
    """Combine route distance and duration, or ``None`` when both are unknown."""

    if distance is None and duration is None:
        return None
    return f"{format_distance(distance)}, {format_duration(duration)}"
