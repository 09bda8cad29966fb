"""Chat endpoints module.

This module provides the Flask route answering questions about the stored
files. The answer is streamed as plain text while the model generates it.
"""

import logging
from typing import List, Optional

from flask import Blueprint, Response
from flask_pydantic import validate  # type: ignore
from pydantic import BaseModel, Field

from goncalinho.src.api.middleware.exceptions import MissingCredentialsError
from goncalinho.src.api.utils import create_text_stream_response
from goncalinho.src.data_classes import ConversationMessage
from goncalinho.src.services import QueryProcessingService

logger = logging.getLogger(__name__)


# Schema definitions
class AskRequest(BaseModel):
    """Ask request model for validation."""

    message: str = Field(..., description="User's question")
    history: List[ConversationMessage] = Field(
        default_factory=list, description="Previous turns of the conversation"
    )


def init_chat_routes(
    query_processing_service: Optional[QueryProcessingService] = None,
) -> Blueprint:
    """Initialize chat routes with the provided services.

    Args:
        query_processing_service: Service answering questions. None when the
            model API key is not configured; questions then fail with HTTP 500.

    Returns:
        Blueprint: Flask blueprint with configured chat routes.
    """
    chat_bp = Blueprint("chat", __name__)

    @chat_bp.route("/api/ask", methods=["POST"])
    @validate()
    def ask(body: AskRequest) -> Response:  # type: ignore
        """Answer a question as a chunked plain-text stream.

        Args:
            body: Validated request body

        Returns:
            Streaming response with the answer text
        """
        if query_processing_service is None:
            raise MissingCredentialsError()

        logger.info(
            f"Processing question ({len(body.message)} characters, "
            f"{len(body.history)} history turns)"
        )

        return create_text_stream_response(
            lambda: query_processing_service.stream_answer(body.message, body.history)
        )

    return chat_bp
