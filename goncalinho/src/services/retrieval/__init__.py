"""Retrieval package for selecting the stored files sent to the model.

The main interface is the RelevanceSelector class, which ranks files by
keyword overlap with the question and packs them into a character budget.
"""

from .relevance_selector import RelevanceSelector

__all__ = [
    "RelevanceSelector",
]
