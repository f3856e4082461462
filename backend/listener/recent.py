"""
Recent translations.

Responsibilities:
- Keep the last N fully translated sentences, oldest first
- Evict the oldest translation once capacity is exceeded
- Hand out copies so readers cannot mutate the buffer

Non-responsibilities:
- No persistence
- No decisions about what gets recorded
"""

from __future__ import annotations

from collections import deque
from typing import Deque

from constants import RECENT_TRANSLATIONS_CAPACITY
from observability.logger import log_event


class RecentTranslations:
    """
    Fixed-capacity FIFO ring of translations.

    Invariants:
    - len(self) <= capacity
    - snapshot() is in arrival order
    """

    def __init__(
        self,
        capacity: int = RECENT_TRANSLATIONS_CAPACITY,
        *,
        session_id: str | None = None,
    ) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be > 0")
        self._capacity = capacity
        self._session_id = session_id
        self._items: Deque[str] = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, translation: str) -> None:
        """Record a translation, evicting the oldest if full."""
        self._items.append(translation)
        while len(self._items) > self._capacity:
            evicted = self._items.popleft()
            log_event({
                "event_type": "RECENT_TRANSLATION_EVICTED",
                "session_id": self._session_id,
                "translation": evicted,
            }, level="debug")

    def snapshot(self) -> list[str]:
        """Copy of the buffered translations, oldest first."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)
