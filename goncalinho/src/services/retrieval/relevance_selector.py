"""Keyword relevance selection of the model context.

This module ranks the stored files by how many query keywords appear in their
metadata and packs their formatted blocks into a fixed character budget.
File content is never scored, only sent.
"""

import logging
from typing import List, Optional

from goncalinho.conf.config import Config
from goncalinho.conf.prompts import CONTEXT_BLOCK_TEMPLATE
from goncalinho.src.data_classes import FileRecord, ScoredDocument

logger = logging.getLogger(__name__)


class RelevanceSelector:
    """Selects and orders file records for the model context.

    Attributes:
        char_budget (int): Maximum total length of the selected blocks
        per_document_char_limit (int): Characters of content included per file
        min_keyword_length (int): Shorter query tokens are discarded
        keyword_score (int): Points per keyword found in a file's metadata
    """

    def __init__(
        self,
        char_budget: int = Config.MAX_CONTEXT_CHARS,
        per_document_char_limit: int = Config.PER_FILE_CHAR_LIMIT,
        min_keyword_length: int = Config.MIN_KEYWORD_LENGTH,
        keyword_score: int = Config.KEYWORD_SCORE,
    ) -> None:
        self.char_budget = char_budget
        self.per_document_char_limit = per_document_char_limit
        self.min_keyword_length = min_keyword_length
        self.keyword_score = keyword_score

    def extract_keywords(self, query: str) -> List[str]:
        """Split a query into lower-cased keywords.

        Args:
            query: The user's question

        Returns:
            List of whitespace-separated tokens with at least
            ``min_keyword_length`` characters, in query order
        """
        return [
            token
            for token in query.lower().split()
            if len(token) >= self.min_keyword_length
        ]

    @staticmethod
    def metadata_text(record: FileRecord) -> str:
        """Searchable metadata of a record: name, indicator, category, description."""
        return (
            f"{record.name} {record.caseName} {record.category} {record.description}"
        ).lower()

    def score(self, record: FileRecord, keywords: List[str]) -> int:
        """Score a record against the query keywords.

        Args:
            record: The file record to score
            keywords: Keywords from ``extract_keywords``

        Returns:
            int: ``keyword_score`` points per keyword contained in the metadata
        """
        metadata = self.metadata_text(record)
        return sum(self.keyword_score for keyword in keywords if keyword in metadata)

    def rank(self, query: str, records: List[FileRecord]) -> List[ScoredDocument]:
        """Order records by descending score.

        The sort is stable, so records with equal scores keep their stored order.

        Args:
            query: The user's question
            records: Every stored record

        Returns:
            List of ScoredDocument, highest score first
        """
        keywords = self.extract_keywords(query)
        scored = [ScoredDocument(record, self.score(record, keywords)) for record in records]
        return sorted(scored, key=lambda item: item.score, reverse=True)

    def format_block(self, record: FileRecord) -> str:
        """Format the context block of one record.

        Args:
            record: The file record

        Returns:
            str: Metadata header followed by at most ``per_document_char_limit``
            characters of content
        """
        return CONTEXT_BLOCK_TEMPLATE.format(
            name=record.name,
            category=record.category,
            case_name=record.caseName,
            period=record.period,
            source=record.source,
            description=record.description,
            content=(record.content or "")[: self.per_document_char_limit],
        )

    def select(
        self,
        query: str,
        records: List[FileRecord],
        char_budget: Optional[int] = None,
    ) -> List[str]:
        """Greedily pack the highest scoring blocks into the character budget.

        The walk stops at the first block that does not fit: lower scored
        records are dropped entirely, never truncated.

        Args:
            query: The user's question
            records: Every stored record
            char_budget: Override of the configured budget

        Returns:
            List of context blocks in descending score order
        """
        budget = self.char_budget if char_budget is None else char_budget
        blocks: List[str] = []
        current_chars = 0

        for item in self.rank(query, records):
            block = self.format_block(item.record)
            if current_chars + len(block) >= budget:
                break
            blocks.append(block)
            current_chars += len(block)

        logger.info(
            f"Selected {len(blocks)}/{len(records)} files for the context "
            f"({current_chars} characters)"
        )
        return blocks

    def build_context(self, query: str, records: List[FileRecord]) -> str:
        """Concatenate the selected blocks into the model context."""
        return "".join(self.select(query, records))
