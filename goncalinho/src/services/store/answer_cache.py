"""In-memory, time-expiring cache of complete model answers."""

import logging
import threading
import time
from typing import Dict, Optional, Tuple

from goncalinho.conf.config import Config

logger = logging.getLogger(__name__)


class AnswerCache:
    """Process-lifetime cache mapping a question key to a full answer text.

    Entries expire ``ttl_seconds`` after they were stored. Invalidation is
    coarse: any change to the stored files flushes the whole cache, since the
    context selected for every key may have changed.

    Attributes:
        ttl_seconds (float): Lifetime of an entry
    """

    def __init__(self, ttl_seconds: Optional[float] = None) -> None:
        self.ttl_seconds = float(
            Config.ANSWER_CACHE_TTL_SECONDS if ttl_seconds is None else ttl_seconds
        )
        self._entries: Dict[str, Tuple[float, str]] = {}
        self._lock = threading.RLock()

    @staticmethod
    def make_key(message: str, history_length: int) -> str:
        """Build the cache key of a question.

        Args:
            message: The user's question
            history_length: Number of turns in the conversation history

        Returns:
            str: Deterministic key for the pair
        """
        return f"ask_{message}_{history_length}"

    def _purge_expired(self, now: float) -> None:
        with self._lock:
            expired_keys = [
                key for key, (deadline, _) in self._entries.items() if deadline <= now
            ]
            for key in expired_keys:
                self._entries.pop(key, None)

    def get(self, key: str) -> Optional[str]:
        """Return the cached answer for a key, or None if absent or expired."""
        now = time.monotonic()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            deadline, value = entry
            if deadline <= now:
                self._entries.pop(key, None)
                return None
            return value

    def set(self, key: str, text: str) -> None:
        """Store an answer under a key for ``ttl_seconds``."""
        now = time.monotonic()
        with self._lock:
            self._purge_expired(now)
            self._entries[key] = (now + self.ttl_seconds, text)

    def flush_all(self) -> None:
        """Drop every cached answer."""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.info(f"Answer cache flushed ({count} entries)")

    def __len__(self) -> int:
        with self._lock:
            self._purge_expired(time.monotonic())
            return len(self._entries)
