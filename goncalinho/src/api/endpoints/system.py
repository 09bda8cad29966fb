"""System endpoints module.

This module provides the health check and serves the built frontend for
every other GET path, so client-side routes resolve to ``index.html``.
"""

import logging
from pathlib import Path
from typing import Any, Optional

from flask import Blueprint, Response, jsonify, send_from_directory

from goncalinho.conf.prompts import FRONTEND_NOT_BUILT_TEXT
from goncalinho.src.api.middleware.exceptions import NotFoundError
from goncalinho.src.services import (
    AnswerCache,
    DocumentStore,
    QueryProcessingService,
)

logger = logging.getLogger(__name__)

API_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def init_system_routes(
    frontend_dir: Path,
    document_store: DocumentStore,
    answer_cache: AnswerCache,
    query_processing_service: Optional[QueryProcessingService] = None,
) -> Blueprint:
    """Initialize health and frontend routes.

    Args:
        frontend_dir: Directory holding the built frontend (index.html and assets).
        document_store: Store reported by the health check.
        answer_cache: Cache reported by the health check.
        query_processing_service: Reported as configured or not.

    Returns:
        Blueprint: Flask blueprint with configured system routes.
    """
    system_bp = Blueprint("system", __name__)

    @system_bp.route("/api/health", methods=["GET"])
    def health() -> Any:
        """Report the state of the backend.

        Returns:
            JSON with the number of files and cached answers
        """
        return jsonify(
            {
                "status": "ok",
                "files": len(document_store.load_all()),
                "cached_answers": len(answer_cache),
                "llm_configured": query_processing_service is not None,
            }
        )

    @system_bp.route("/api", defaults={"path": ""}, methods=API_METHODS)
    @system_bp.route("/api/<path:path>", methods=API_METHODS)
    def unknown_api_endpoint(path: str) -> Any:
        """Answer every unmatched /api path with a JSON 404, whatever the method."""
        raise NotFoundError()

    @system_bp.route("/", defaults={"path": ""}, methods=["GET"])
    @system_bp.route("/<path:path>", methods=["GET"])
    def serve_frontend(path: str) -> Any:
        """Serve a frontend asset, the frontend entry point or a notice.

        Args:
            path: Requested path without the leading slash

        Returns:
            The asset, index.html, or a plain-text notice if the frontend
            was not built
        """
        if path and (frontend_dir / path).is_file():
            return send_from_directory(frontend_dir, path)

        if (frontend_dir / "index.html").is_file():
            return send_from_directory(frontend_dir, "index.html")

        return Response(FRONTEND_NOT_BUILT_TEXT, mimetype="text/plain")

    return system_bp
