"""Services package for backend functionality.

This package contains all service components for business logic.
"""

from .extraction import TextExtractor
from .factory import (
    create_answer_cache,
    create_document_store,
    create_llm_service,
    create_query_processing_service,
    create_relevance_selector,
    create_text_extractor,
)
from .llm import BaseLLMService, GeminiLLMService
from .query_processing import QueryProcessingService
from .retrieval import RelevanceSelector
from .store import AnswerCache, DocumentStore

__all__ = [
    # LLM Services
    "BaseLLMService",
    "GeminiLLMService",
    # Other Services
    "DocumentStore",
    "AnswerCache",
    "TextExtractor",
    "RelevanceSelector",
    "QueryProcessingService",
    # Factory Functions
    "create_document_store",
    "create_answer_cache",
    "create_text_extractor",
    "create_relevance_selector",
    "create_llm_service",
    "create_query_processing_service",
]
