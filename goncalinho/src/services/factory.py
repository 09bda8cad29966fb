"""Service factory module for centralized service instantiation.

This module provides factory methods for creating service instances,
keeping service initialization logic in one place.
"""

import logging
from typing import Optional

from goncalinho.conf.config import Config
from goncalinho.src.services.extraction import TextExtractor
from goncalinho.src.services.llm import BaseLLMService, GeminiLLMService
from goncalinho.src.services.query_processing.query_processing_service import (
    QueryProcessingService,
)
from goncalinho.src.services.retrieval import RelevanceSelector
from goncalinho.src.services.store import AnswerCache, DocumentStore

logger = logging.getLogger(__name__)


def create_document_store() -> DocumentStore:
    """Create a DocumentStore on the configured data directory.

    Returns:
        Configured DocumentStore instance
    """
    logger.info(f"Data storage: {Config.DATA_DIR}")
    return DocumentStore(file_path=Config.DB_FILE, upload_dir=Config.UPLOAD_DIR)


def create_answer_cache() -> AnswerCache:
    """Create an AnswerCache with the configured lifetime.

    Returns:
        Configured AnswerCache instance
    """
    return AnswerCache(ttl_seconds=Config.ANSWER_CACHE_TTL_SECONDS)


def create_text_extractor() -> TextExtractor:
    """Create a TextExtractor.

    Returns:
        TextExtractor instance
    """
    return TextExtractor()


def create_relevance_selector() -> RelevanceSelector:
    """Create a RelevanceSelector with the configured budget and scoring.

    Returns:
        Configured RelevanceSelector instance
    """
    return RelevanceSelector(
        char_budget=Config.MAX_CONTEXT_CHARS,
        per_document_char_limit=Config.PER_FILE_CHAR_LIMIT,
        min_keyword_length=Config.MIN_KEYWORD_LENGTH,
        keyword_score=Config.KEYWORD_SCORE,
    )


def create_llm_service() -> BaseLLMService:
    """Create the Gemini LLM service.

    Raises:
        ValueError: If no API key is configured
    """
    try:
        return GeminiLLMService()
    except Exception as e:
        logger.error(f"Failed to create Gemini LLM service: {e}")
        raise e


def create_query_processing_service(
    llm_service: BaseLLMService,
    document_store: Optional[DocumentStore] = None,
    answer_cache: Optional[AnswerCache] = None,
    relevance_selector: Optional[RelevanceSelector] = None,
) -> QueryProcessingService:
    """Create and configure a QueryProcessingService instance.

    The store and the cache must be the instances shared with the file
    routes, otherwise uploads and deletions would not flush the cache.

    Args:
        llm_service: LLM service streaming the answers
        document_store: Store holding the uploaded files
        answer_cache: Cache of complete answers
        relevance_selector: Component selecting the context

    Returns:
        Configured QueryProcessingService instance
    """
    if document_store is None:
        logger.info("No document store provided, creating new one")
        document_store = create_document_store()

    if answer_cache is None:
        logger.info("No answer cache provided, creating new one")
        answer_cache = create_answer_cache()

    if relevance_selector is None:
        relevance_selector = create_relevance_selector()

    return QueryProcessingService(
        llm_service=llm_service,
        document_store=document_store,
        answer_cache=answer_cache,
        relevance_selector=relevance_selector,
    )
