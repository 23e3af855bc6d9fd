"""DTOs for learning use cases."""

from dataclasses import dataclass

from flashnotes.domain.learning.entities.flashcard import Flashcard
from flashnotes.domain.learning.entities.flashcard_result import FlashcardResult
from flashnotes.domain.learning.entities.flashcard_session import FlashcardSession


@dataclass(frozen=True)
class AnswerFeedback:
    """Outcome of submitting an answer during a practice session."""

    session: FlashcardSession
    result: FlashcardResult
    highlighted_answer: str
    matched_keywords: list[str]
    next_card: Flashcard | None
    report_filename: str | None = None

    @property
    def is_session_completed(self) -> bool:
        return self.next_card is None
