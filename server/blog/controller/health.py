"""Health check controller."""

import logging

from flask import Blueprint, jsonify, current_app
from sqlalchemy import text

from .. import db
from ..core.clients.elasticsearch_client import ElasticsearchClient

logger = logging.getLogger(__name__)


def _database_is_up():
    try:
        db.session.execute(text("SELECT 1"))
        return True
    except Exception as e:
        db.session.rollback()
        logger.warning(f"[HEALTH] Database check failed: {e}")
        return False


def init_app():
    """Initialize health check blueprint."""
    health_api = Blueprint('health', __name__)

    @health_api.route('/health', methods=['GET'])
    def health_check():
        """
        Liveness probe: always 200 while the process serves requests, with
        the reachability of the store and the search index.
        """
        elasticsearch = None
        if current_app.config.get("ELASTICSEARCH_ENABLED"):
            elasticsearch = ElasticsearchClient.is_healthy()
        return jsonify({
            "status": "ok",
            "message": "Server is running",
            "database": _database_is_up(),
            "elasticsearch": elasticsearch
        }), 200

    return health_api
