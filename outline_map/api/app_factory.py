"""Flask application factory."""

from __future__ import annotations

import logging

from flask import Flask
from flask_cors import CORS
from redis import Redis
from rq import Queue

from ..config import APP_CONFIG, QUEUE_CONFIG
from ..services import RedisStateStore, StateStore
from .routes import api_bp

logger = logging.getLogger(__name__)


def create_app(*, store: StateStore | None = None, queue: Queue | None = None) -> Flask:
    """Create and configure the Flask application."""

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = APP_CONFIG.max_upload_bytes

    CORS(app)
    app.register_blueprint(api_bp, url_prefix="/api")

    if store is None or queue is None:
        redis_connection = Redis.from_url(QUEUE_CONFIG.redis_url)
        if queue is None:
            queue = Queue(
                name=QUEUE_CONFIG.queue_name,
                connection=redis_connection,
                default_timeout=QUEUE_CONFIG.default_timeout,
            )
        if store is None:
            store = RedisStateStore(redis_connection, ttl=QUEUE_CONFIG.state_ttl)
    app.extensions["outline_map"] = {"queue": queue, "store": store}

    @app.get("/health")
    def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    logger.info("Flask application initialised")
    return app
