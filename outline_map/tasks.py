"""RQ task definitions for asynchronous layer resolution."""

from __future__ import annotations

from rq import get_current_job

from .config import QUEUE_CONFIG
from .core import OutlineNode
from .core.exceptions import OutlineMapError
from .pipelines import LayerPipeline
from .render import render_layer
from .services import RedisStateStore


def resolve_layer(*, layer_id: str, generation: int, tree: dict) -> dict:
    """Resolve the places and route of ``tree`` for one layer generation."""

    job = get_current_job()
    if job:
        job.meta["progress"] = 0
        job.save_meta()

    store = RedisStateStore.from_url(QUEUE_CONFIG.redis_url, ttl=QUEUE_CONFIG.state_ttl)
    pipeline = LayerPipeline.default()

    try:
        snapshot = pipeline.run(
            OutlineNode.from_dict(tree),
            layer_id=layer_id,
            generation=generation,
            store=store,
        )
    except OutlineMapError as exc:
        if job:
            job.meta["error"] = exc.as_dict()
            job.save_meta()
        raise

    if job:
        job.meta["progress"] = 100
        job.save_meta()

    return render_layer(snapshot).as_dict()
