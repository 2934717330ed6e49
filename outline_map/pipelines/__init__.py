"""Pipeline orchestration layer."""

from .layer_pipeline import LayerPipeline

__all__ = ["LayerPipeline"]
