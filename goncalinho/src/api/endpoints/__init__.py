"""API endpoints package.

This package contains endpoint definitions for the API.
"""

from pathlib import Path
from typing import Optional

from flask import Flask

from goncalinho.src.api.endpoints.chat import init_chat_routes
from goncalinho.src.api.endpoints.files import init_file_routes
from goncalinho.src.api.endpoints.system import init_system_routes
from goncalinho.src.services import (
    AnswerCache,
    DocumentStore,
    QueryProcessingService,
    TextExtractor,
)


def register_endpoints(
    app: Flask,
    document_store: DocumentStore,
    answer_cache: AnswerCache,
    text_extractor: TextExtractor,
    frontend_dir: Path,
    query_processing_service: Optional[QueryProcessingService] = None,
) -> None:
    """Register all API endpoints with the application.

    Args:
        app: Flask application
        document_store: Store holding the file records
        answer_cache: Cache of complete answers, flushed on file changes
        text_extractor: Extractor turning uploads into text
        frontend_dir: Directory of the built frontend
        query_processing_service: Optional service answering questions
    """
    app.register_blueprint(
        init_file_routes(document_store, answer_cache, text_extractor)
    )

    app.register_blueprint(init_chat_routes(query_processing_service))

    app.register_blueprint(
        init_system_routes(
            frontend_dir, document_store, answer_cache, query_processing_service
        )
    )
