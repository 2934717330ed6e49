"""REST API blueprint."""

from __future__ import annotations

from datetime import datetime

from flask import Blueprint, current_app, jsonify, request

from ..core import OutlineNode, TreeFormatError
from ..render import render_layer

api_bp = Blueprint("api", __name__)


@api_bp.post("/layers/<layer_id>")
def submit_tree(layer_id: str):
    """Start resolving a new outline tree for ``layer_id``."""

    payload = request.get_json(silent=True)
    if not isinstance(payload, dict) or "children" not in payload:
        return jsonify({"error": "Request body must be a tree with a children field"}), 400

    try:
        OutlineNode.from_dict(payload)
    except TreeFormatError as exc:
        return jsonify({"error": exc.as_dict()}), 400

    snapshot = _store().begin(layer_id)
    created_at = datetime.utcnow().isoformat()

    job = _queue().enqueue(
        "outline_map.tasks.resolve_layer",
        kwargs={
            "layer_id": layer_id,
            "generation": snapshot.generation,
            "tree": payload,
        },
        job_id=f"{layer_id}-{snapshot.generation}",
        meta={"created_at": created_at},
    )

    response = {
        "layer_id": layer_id,
        "generation": snapshot.generation,
        "job_id": job.id,
        "status": job.get_status(refresh=False),
        "created_at": created_at,
    }
    return jsonify(response), 202


@api_bp.get("/layers/<layer_id>")
def layer_state(layer_id: str):
    snapshot = _store().get(layer_id)
    if snapshot is None:
        return jsonify({"error": "Layer not found"}), 404
    return jsonify(render_layer(snapshot).as_dict()), 200


def _queue():
    return current_app.extensions["outline_map"]["queue"]


def _store():
    return current_app.extensions["outline_map"]["store"]
