"""Custom exception hierarchy for the outline map service."""

from __future__ import annotations


class OutlineMapError(RuntimeError):
    """Base error for the outline map service."""

    def __init__(self, message: str, *, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}

    def as_dict(self) -> dict:
        """Return a serializable representation."""
        payload = {"message": str(self)}
        if self.details:
            payload["details"] = self.details
        return payload


class MapboxError(OutlineMapError):
    """Raised when a Mapbox request fails or returns an unexpected payload."""


class TreeFormatError(OutlineMapError):
    """Raised when an outline tree payload has the wrong shape."""
