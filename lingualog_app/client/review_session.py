"""Client-side flashcard review flow."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .api_client import LinguaLogClient

logger = logging.getLogger(__name__)


class FlashcardReview:
    """
    Walks through a batch of flashcards fetched from the server.

    Each answer is recorded as a session on the server before the index
    advances. Once the last card of the batch is answered the whole batch is
    fetched again, so updated statistics (and newly logged items) show up.
    """

    def __init__(
        self,
        client: LinguaLogClient,
        user_id: int,
        language_id: Optional[int] = None,
        date_filter: str = 'all',
    ):
        self.client = client
        self.user_id = user_id
        self.language_id = language_id
        self.date_filter = date_filter
        self.cards: List[Dict[str, Any]] = []
        self.index = 0
        self.reloads = 0

    def load(self) -> List[Dict[str, Any]]:
        self.cards = self.client.get_flashcards(self.user_id, self.language_id, self.date_filter)
        self.index = 0
        return self.cards

    @property
    def current(self) -> Optional[Dict[str, Any]]:
        if self.index < len(self.cards):
            return self.cards[self.index]
        return None

    @property
    def finished(self) -> bool:
        """True when there is nothing to review."""
        return self.current is None

    @property
    def position(self) -> int:
        return self.index + 1 if self.cards else 0

    @property
    def remaining(self) -> int:
        return max(len(self.cards) - self.index, 0)

    def answer(self, was_correct: bool) -> Dict[str, Any]:
        """Record an answer to the current card and move on."""
        card = self.current
        if card is None:
            raise IndexError('No flashcard to answer')

        session = self.client.record_flashcard_session(
            self.user_id,
            card['id'],
            was_correct,
            language_id=card['language_id'],
        )

        if self.index < len(self.cards) - 1:
            self.index += 1
        else:
            logger.info("All %d flashcards reviewed, loading more", len(self.cards))
            self.reloads += 1
            self.load()
        return session
