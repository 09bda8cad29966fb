"""Service module for interacting with large language models.

This module provides a streaming interface to the model provider:
- Gemini: Google's Gemini API
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Optional

import google.generativeai as genai
from google.generativeai.generative_models import GenerativeModel
from google.generativeai.types import GenerationConfig

from goncalinho.conf.config import Config

logger = logging.getLogger(__name__)

# Gemini-formatted turn: {"role": "user" | "model", "parts": [{"text": ...}]}
Content = Dict[str, Any]


class BaseLLMService(ABC):
    """Base class for LLM services.

    This abstract class defines the interface that all LLM services must implement.
    """

    @abstractmethod
    def stream_response(
        self,
        contents: List[Content],
        system_prompt: str = "",
    ) -> Iterator[str]:
        """Stream a response from the model as text increments.

        Args:
            contents: Conversation turns, the last one being the user's question
            system_prompt: System instruction for the generation

        Yields:
            str: Non-empty text increments in generation order

        Raises:
            Exception: Provider errors (including rate limiting) propagate
                to the caller, possibly after some text was yielded
        """


class GeminiLLMService(BaseLLMService):
    """Service for interacting with Google's Gemini API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
    ) -> None:
        """Initialize the Gemini LLM service.

        Args:
            api_key: API key, defaults to Config.GEMINI_API_KEY
            model_name: Model to use, defaults to Config.GEMINI_MODEL_NAME

        Raises:
            ValueError: If no API key is available
        """
        api_key = api_key or Config.GEMINI_API_KEY
        if not api_key:
            raise ValueError(
                "Gemini API key not found. Please set the GEMINI_API_KEY environment variable."
            )
        genai.configure(api_key=api_key)  # type: ignore

        self.model_name = model_name or Config.GEMINI_MODEL_NAME
        self.generation_config = GenerationConfig(
            temperature=Config.GEMINI_TEMPERATURE,
            max_output_tokens=Config.GEMINI_MAX_TOKENS,
        )
        logger.info(f"Initialized Gemini LLM service with model: {self.model_name}")

    def stream_response(
        self,
        contents: List[Content],
        system_prompt: str = "",
    ) -> Iterator[str]:
        """Stream a response using Gemini's API.

        The system instruction embeds the selected context, which changes per
        request, so a model handle is created for every call.

        Args:
            contents: Conversation turns, the last one being the user's question
            system_prompt: System instruction for the generation

        Yields:
            str: Text increments as they arrive
        """
        model = GenerativeModel(
            model_name=self.model_name,
            generation_config=self.generation_config,
            system_instruction=system_prompt or None,
        )

        response = model.generate_content(contents, stream=True)  # type: ignore

        for chunk in response:
            # Final chunks may carry only finish metadata and no parts
            for candidate in chunk.candidates[:1]:
                for part in candidate.content.parts:
                    if part.text:
                        yield part.text
