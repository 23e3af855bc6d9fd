"""Use case for collecting flashcards from the notes matching a pattern."""

from pathlib import Path

import structlog

from flashnotes.application.notes.protocols.notes_repository import NotesRepositoryProtocol
from flashnotes.domain.learning.entities.flashcard import Flashcard
from flashnotes.domain.learning.services.markdown_flashcard_parser import (
    MarkdownFlashcardParser,
)
from flashnotes.domain.learning.services.pattern_matcher import (
    MARKDOWN_EXTENSION,
    FilenamePatternMatcher,
)

logger = structlog.get_logger(__name__)


class FlashcardCollectionUseCase:
    """Scans a notes directory and parses every matching note into flashcards."""

    def __init__(
        self,
        notes_repository: NotesRepositoryProtocol,
        pattern_matcher: FilenamePatternMatcher,
        parser: MarkdownFlashcardParser,
    ) -> None:
        self.notes_repository = notes_repository
        self.pattern_matcher = pattern_matcher
        self.parser = parser

    async def collect(self, notes_dir: Path, pattern: str) -> list[Flashcard]:
        """
        Collect flashcards from the notes in ``notes_dir`` matching ``pattern``.

        Files are visited in directory listing order and each file's cards
        keep their document order. No matching card is a valid, empty result.

        Args:
            notes_dir: The notes directory
            pattern: Simplified glob pattern, e.g. ``biology.*``

        Returns:
            Flat list of flashcards

        Raises:
            DirectoryReadError: If the directory cannot be listed
            FileReadError: If a matching note cannot be read; the whole
                collection is aborted
        """
        filenames = await self.notes_repository.list_filenames(notes_dir)
        markdown_files = [name for name in filenames if name.endswith(MARKDOWN_EXTENSION)]
        matching_files = self.pattern_matcher.filter(markdown_files, pattern)

        cards: list[Flashcard] = []
        for filename in matching_files:
            content = await self.notes_repository.read_text(notes_dir, filename)
            parsed = self.parser.parse(content, filename)
            cards.extend(parsed.cards)

        logger.info(
            "flashcards_collected",
            notes_dir=str(notes_dir),
            pattern=pattern,
            file_count=len(matching_files),
            card_count=len(cards),
        )
        return cards
