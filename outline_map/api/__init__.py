"""HTTP API for submitting outline trees and reading rendered layers."""

from .app_factory import create_app

__all__ = ["create_app"]
