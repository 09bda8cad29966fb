"""Core API setup and configuration.

This module configures API middleware, error handling, and other global API components.
"""

import logging
from pathlib import Path
from typing import Optional

from flask import Flask

from goncalinho.src.api.endpoints import register_endpoints
from goncalinho.src.api.middleware import register_middleware
from goncalinho.src.services import (
    AnswerCache,
    DocumentStore,
    QueryProcessingService,
    TextExtractor,
)

logger = logging.getLogger(__name__)


def setup_api(
    app: Flask,
    document_store: DocumentStore,
    answer_cache: AnswerCache,
    text_extractor: TextExtractor,
    frontend_dir: Path,
    query_processing_service: Optional[QueryProcessingService] = None,
) -> None:
    """Set up API with middleware and endpoints.

    Args:
        app: Flask application
        document_store: Store holding the file records
        answer_cache: Cache of complete answers
        text_extractor: Extractor turning uploads into text
        frontend_dir: Directory of the built frontend
        query_processing_service: Optional service answering questions
    """
    register_middleware(app)

    register_endpoints(
        app,
        document_store,
        answer_cache,
        text_extractor,
        frontend_dir,
        query_processing_service,
    )
