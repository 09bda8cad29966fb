"""Flask application answering questions about municipal data files."""

import argparse
import logging
from pathlib import Path
from typing import Optional

from flask import Flask
from flask_cors import CORS

from goncalinho.conf.config import Config
from goncalinho.src.api import setup_api
from goncalinho.src.services import (
    AnswerCache,
    BaseLLMService,
    DocumentStore,
    TextExtractor,
    create_answer_cache,
    create_document_store,
    create_llm_service,
    create_query_processing_service,
    create_relevance_selector,
    create_text_extractor,
)

# Logging is configured in goncalinho/__init__.py
logger = logging.getLogger(__name__)


def create_app(
    llm_service: Optional[BaseLLMService] = None,
    document_store: Optional[DocumentStore] = None,
    answer_cache: Optional[AnswerCache] = None,
    text_extractor: Optional[TextExtractor] = None,
    frontend_dir: Optional[Path] = None,
) -> Flask:
    """Create and configure the Flask application.

    The store and the cache are created once here and shared by every route.
    Without a model API key the application still starts: file management
    works and questions are answered with HTTP 500.

    Args:
        llm_service: LLM service to use instead of the configured Gemini service
        document_store: Store to use instead of the configured one
        answer_cache: Cache to use instead of a new one
        text_extractor: Extractor to use instead of a new one
        frontend_dir: Directory of the built frontend

    Returns:
        Flask: The configured application
    """
    logger.info("Starting application setup...")

    # The frontend is served by a catch-all route, not Flask's static route
    app = Flask(__name__, static_folder=None)
    CORS(app)

    if document_store is None:
        document_store = create_document_store()
    if answer_cache is None:
        answer_cache = create_answer_cache()
    if text_extractor is None:
        text_extractor = create_text_extractor()

    if llm_service is None:
        try:
            llm_service = create_llm_service()
        except ValueError as e:
            logger.warning(f"Questions are disabled: {str(e)}")

    query_processing_service = None
    if llm_service is not None:
        query_processing_service = create_query_processing_service(
            llm_service,
            document_store=document_store,
            answer_cache=answer_cache,
            relevance_selector=create_relevance_selector(),
        )

    logger.info("Setting up API routes")
    setup_api(
        app,
        document_store,
        answer_cache,
        text_extractor,
        frontend_dir or Config.FRONTEND_DIST_DIR,
        query_processing_service,
    )

    logger.info("Application setup complete")
    return app


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Run the Gonçalinho backend (--host, --port, --data-dir, --model)"
    )
    parser.add_argument(
        "--host",
        type=str,
        default=Config.FLASK_HOST,
        help=f"Host to bind (default: {Config.FLASK_HOST})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=Config.FLASK_PORT,
        help=f"Port to listen on (default: {Config.FLASK_PORT})",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        help="Directory for db.json and the uploads (default: resolved at startup)",
    )
    parser.add_argument(
        "--model",
        type=str,
        default=Config.GEMINI_MODEL_NAME,
        help=f"Gemini model to use (default: {Config.GEMINI_MODEL_NAME})",
    )

    args = parser.parse_args()

    # Set configuration from command line arguments
    Config.FLASK_HOST = args.host
    Config.FLASK_PORT = args.port
    Config.GEMINI_MODEL_NAME = args.model
    if args.data_dir:
        Config.DATA_DIR = Path(args.data_dir)
        Config.UPLOAD_DIR = Config.DATA_DIR / "uploads"
        Config.DB_FILE = Config.DATA_DIR / "db.json"

    app = create_app()
    logger.info(f"Gonçalinho server running on port {Config.FLASK_PORT}")
    app.run(host=Config.FLASK_HOST, port=Config.FLASK_PORT, threaded=True)
