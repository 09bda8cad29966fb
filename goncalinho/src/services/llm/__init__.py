"""LLM service package."""

from .llm_service import BaseLLMService, GeminiLLMService

__all__ = [
    "BaseLLMService",
    "GeminiLLMService",
]
