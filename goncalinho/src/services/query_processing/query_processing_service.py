"""Query processing service answering questions about the stored files.

This service orchestrates the path of one question:
1. Replaying a cached answer when the same question was answered recently
2. Selecting the most relevant stored files for the model context
3. Building the system instruction and the conversation for the model
4. Streaming the model's answer to the caller while accumulating it
5. Caching the full answer, or appending an apology if the model call failed

The caller always receives a text stream that ends normally: upstream
failures are reported as text in the stream, never raised.
"""

import logging
from typing import Generator, List, Sequence

from google.api_core import exceptions as google_exceptions

from goncalinho.conf.config import Config
from goncalinho.conf.prompts import (
    ANSWER_SYSTEM_PROMPT,
    GENERIC_ERROR_MESSAGE,
    QUOTA_EXCEEDED_MESSAGE,
)
from goncalinho.src.data_classes import USER_ROLE, ConversationMessage
from goncalinho.src.services.llm.llm_service import BaseLLMService, Content
from goncalinho.src.services.retrieval.relevance_selector import RelevanceSelector
from goncalinho.src.services.store import AnswerCache, DocumentStore

logger = logging.getLogger(__name__)


def is_rate_limit_error(error: Exception) -> bool:
    """Check whether an upstream error means the quota was exceeded.

    Args:
        error: Exception raised by the model provider

    Returns:
        bool: True for rate limiting and quota errors
    """
    if isinstance(error, google_exceptions.ResourceExhausted):
        return True
    if getattr(error, "code", None) == 429 or getattr(error, "status", None) == 429:
        return True
    message = str(error).lower()
    return "429" in message or "quota" in message


class QueryProcessingService:
    """Answers questions with the stored files as context.

    Attributes:
        llm_service: Service streaming the model's answer
        document_store: Store holding the uploaded files and their text
        answer_cache: Cache of complete answers
        relevance_selector: Component ranking and packing the context
    """

    def __init__(
        self,
        llm_service: BaseLLMService,
        document_store: DocumentStore,
        answer_cache: AnswerCache,
        relevance_selector: RelevanceSelector,
    ) -> None:
        self.llm_service = llm_service
        self.document_store = document_store
        self.answer_cache = answer_cache
        self.relevance_selector = relevance_selector

    @staticmethod
    def build_system_prompt(context: str) -> str:
        """Fill the system instruction with the locality and the context.

        Args:
            context: Concatenated context blocks

        Returns:
            str: The complete system instruction
        """
        aliases = " e ".join(f'"{alias}"' for alias in Config.LOCALITY_ALIASES)
        return ANSWER_SYSTEM_PROMPT.format(
            locality=Config.DEFAULT_LOCALITY,
            aliases=aliases,
            context=context,
        )

    @staticmethod
    def build_contents(
        history: Sequence[ConversationMessage], message: str
    ) -> List[Content]:
        """Map the conversation to the model's message format.

        Turns with a role other than user or model are dropped.

        Args:
            history: Previous turns sent by the client
            message: The new question

        Returns:
            List of Gemini-formatted turns ending with the new question
        """
        contents: List[Content] = [
            {"role": turn.role, "parts": [{"text": turn.text}]}
            for turn in history
            if turn.is_forwardable()
        ]
        contents.append({"role": USER_ROLE, "parts": [{"text": message}]})
        return contents

    def stream_answer(
        self, message: str, history: Sequence[ConversationMessage]
    ) -> Generator[str, None, None]:
        """Answer a question as a stream of text increments.

        Args:
            message: The user's question
            history: Previous turns of the conversation

        Yields:
            str: Answer text as it is generated, the cached answer as a single
            increment, or an apology appended after a failure
        """
        cache_key = self.answer_cache.make_key(message, len(history))
        cached_answer = self.answer_cache.get(cache_key)
        if cached_answer:
            logger.info("Answer served from cache")
            yield cached_answer
            return

        full_text = ""
        try:
            records = self.document_store.load_all()
            context = self.relevance_selector.build_context(message, records)
            system_prompt = self.build_system_prompt(context)
            contents = self.build_contents(history, message)

            for chunk in self.llm_service.stream_response(
                contents, system_prompt=system_prompt
            ):
                full_text += chunk
                yield chunk
        except Exception as e:
            logger.error(f"Model error after {len(full_text)} characters: {str(e)}")
            if is_rate_limit_error(e):
                yield QUOTA_EXCEEDED_MESSAGE
            else:
                yield GENERIC_ERROR_MESSAGE
            return

        if full_text:
            self.answer_cache.set(cache_key, full_text)
        logger.info(f"Answer streamed ({len(full_text)} characters)")
