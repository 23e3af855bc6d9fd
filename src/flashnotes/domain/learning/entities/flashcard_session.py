"""
FlashcardSession aggregate root.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from flashnotes.domain.common.entity import Entity
from flashnotes.domain.common.exceptions import InvariantViolationError
from flashnotes.domain.common.value_objects import FlashcardSessionId
from flashnotes.domain.learning.entities.flashcard import Flashcard
from flashnotes.domain.learning.entities.flashcard_result import FlashcardResult


@dataclass(eq=False)
class FlashcardSession(Entity[FlashcardSessionId]):
    """
    Practice session aggregate root.

    Represents one practice run over a list of cards fixed at creation.
    Cards are presented sequentially; results are appended in the same order.

    Business Rules:
    - results never outnumber cards
    - results[i] answers cards[i]
    - completed_at is set exactly once, when the last card is answered
    """

    id: FlashcardSessionId
    pattern: str
    cards: tuple[Flashcard, ...]
    created_at: datetime
    results: list[FlashcardResult] = field(default_factory=list)
    completed_at: datetime | None = None

    @property
    def total_questions(self) -> int:
        return len(self.cards)

    @property
    def answered_count(self) -> int:
        return len(self.results)

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None

    @property
    def next_card(self) -> Flashcard | None:
        """Next unanswered card, or None once every card has a result."""
        if self.answered_count >= self.total_questions:
            return None
        return self.cards[self.answered_count]

    def record_result(
        self, result: FlashcardResult, now: datetime | None = None
    ) -> "FlashcardSession":
        """
        Append the result for the next card.

        Completes the session when the result count reaches the card count.

        Args:
            result: Answer to the card returned by ``next_card``
            now: Completion time override, defaults to the current UTC time

        Returns:
            The session itself

        Raises:
            InvariantViolationError: If the session is already completed or the
                result does not answer the next card
        """
        card = self.next_card
        if self.is_completed or card is None:
            raise InvariantViolationError("FlashcardSession", "session is already completed")
        if result.card_id != card.id:
            raise InvariantViolationError(
                "FlashcardSession", f"expected result for card {card.id}, got {result.card_id}"
            )

        self.results.append(result)
        if self.answered_count == self.total_questions:
            self.completed_at = now or datetime.now(UTC)
        return self

    def answer(self, user_answer: str, now: datetime | None = None) -> FlashcardResult:
        """Record ``user_answer`` for the next card and return the stored result."""
        card = self.next_card
        if card is None:
            raise InvariantViolationError("FlashcardSession", "session is already completed")
        result = FlashcardResult.for_card(card, user_answer, timestamp=now)
        self.record_result(result, now=now)
        return result

    @classmethod
    def create(
        cls, pattern: str, cards: list[Flashcard], now: datetime | None = None
    ) -> "FlashcardSession":
        """
        Factory method for starting a new practice session.

        Args:
            pattern: Filename pattern the cards were collected with
            cards: Cards in presentation order
            now: Creation time override, defaults to the current UTC time

        Returns:
            New in-progress FlashcardSession
        """
        return cls(
            id=FlashcardSessionId.generate(),
            pattern=pattern,
            cards=tuple(cards),
            created_at=now or datetime.now(UTC),
            results=[],
            completed_at=None,
        )
