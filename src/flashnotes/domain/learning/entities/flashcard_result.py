"""
FlashcardResult value object: the user's answer to one card.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from flashnotes.domain.common.value_object import ValueObject
from flashnotes.domain.common.value_objects import FlashcardId
from flashnotes.domain.learning.entities.flashcard import Flashcard


@dataclass(frozen=True)
class FlashcardResult(ValueObject):
    """Snapshot of a card together with the submitted answer."""

    card_id: FlashcardId
    question: str
    expected_answer: str
    user_answer: str
    keywords: tuple[str, ...]
    timestamp: datetime

    @classmethod
    def for_card(
        cls, card: Flashcard, user_answer: str, timestamp: datetime | None = None
    ) -> "FlashcardResult":
        """Record ``user_answer`` against ``card``, timestamped now unless given."""
        return cls(
            card_id=card.id,
            question=card.question,
            expected_answer=card.expected_answer,
            user_answer=user_answer,
            keywords=card.keywords,
            timestamp=timestamp or datetime.now(UTC),
        )
