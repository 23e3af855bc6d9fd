"""
Domain service for turning Markdown notes into flashcards.

Convention: every level-2 ATX header (``## Question``) opens a card. The
header text is the question; everything up to the next level-2 header or the
end of the document is the expected answer. Bold spans (``**term**``) in the
answer are the card's keywords.

This is a pure domain service with no infrastructure dependencies.
"""

import re
from dataclasses import dataclass, field

from flashnotes.domain.learning.entities.flashcard import Flashcard

_SECTION_DELIMITER = re.compile(r"^## ", re.MULTILINE)
_BOLD_SPAN = re.compile(r"\*\*([^*]+)\*\*")
_ITALIC_SPAN = re.compile(r"\*([^*]+)\*")
_UNDERSCORE_SPAN = re.compile(r"_([^_]+)_")
_CODE_SPAN = re.compile(r"`([^`]+)`")


@dataclass(frozen=True)
class ParsedFlashcards:
    """Result of parsing one note."""

    cards: list[Flashcard] = field(default_factory=list)

    @property
    def total_questions(self) -> int:
        return len(self.cards)


def extract_keywords(text: str) -> list[str]:
    """
    Extract bold text from Markdown, left to right.

    Unterminated ``**`` never matches. Repeated keywords are kept as
    separate entries.
    """
    return [match.group(1).strip() for match in _BOLD_SPAN.finditer(text)]


def clean_markdown(text: str) -> str:
    """Remove bold, italic, underscore italic and inline code markers for display."""
    text = _BOLD_SPAN.sub(r"\1", text)
    text = _ITALIC_SPAN.sub(r"\1", text)
    text = _UNDERSCORE_SPAN.sub(r"\1", text)
    return _CODE_SPAN.sub(r"\1", text)


class MarkdownFlashcardParser:
    """Splits a Markdown document into question/answer flashcards."""

    def parse(self, content: str, filename: str) -> ParsedFlashcards:
        """
        Parse a note into flashcards.

        Parts of the document are numbered by their position among the
        non-blank parts of the level-2 split. Text before the first header
        takes a number when it is not blank but never becomes a card. A
        section with an empty question or an empty body yields no card but
        still uses up its number, so ids keep the gaps.

        Args:
            content: Full Markdown text of the note
            filename: Note filename, used as the card source and id prefix

        Returns:
            ParsedFlashcards with the cards in document order
        """
        content = content.replace("\r\n", "\n")
        preamble, *sections = _SECTION_DELIMITER.split(content)
        first_index = 1 if preamble.strip() else 0
        sections = [section for section in sections if section.strip()]

        cards: list[Flashcard] = []
        for index, section in enumerate(sections, start=first_index):
            question, _, body = section.partition("\n")
            question = question.strip()
            expected_answer = body.strip()

            if not question or not expected_answer:
                continue

            cards.append(
                Flashcard.create(
                    source=filename,
                    index=index,
                    question=question,
                    expected_answer=expected_answer,
                    keywords=extract_keywords(expected_answer),
                )
            )

        return ParsedFlashcards(cards=cards)
