"""
Flashcard entity extracted from a Markdown note.
"""

from dataclasses import dataclass, field

from flashnotes.domain.common.entity import Entity
from flashnotes.domain.common.exceptions import DomainError
from flashnotes.domain.common.value_objects import FlashcardId


@dataclass(frozen=True, eq=False)
class Flashcard(Entity[FlashcardId]):
    """
    One question/answer unit taken from a level-2 section of a note.

    Business Rules:
    - Question and expected answer cannot be empty
    - Keywords are the bold spans of the expected answer, in order, duplicates kept
    - Created fresh on every parse and never mutated
    """

    id: FlashcardId
    question: str
    expected_answer: str
    source: str
    keywords: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.question or not self.question.strip():
            raise DomainError("Question cannot be empty")
        if not self.expected_answer or not self.expected_answer.strip():
            raise DomainError("Expected answer cannot be empty")

    @classmethod
    def create(
        cls,
        source: str,
        index: int,
        question: str,
        expected_answer: str,
        keywords: list[str] | None = None,
    ) -> "Flashcard":
        """Create the flashcard for the ``index``-th section of ``source``."""
        return cls(
            id=FlashcardId.for_section(source, index),
            question=question.strip(),
            expected_answer=expected_answer.strip(),
            source=source,
            keywords=tuple(keywords or ()),
        )
