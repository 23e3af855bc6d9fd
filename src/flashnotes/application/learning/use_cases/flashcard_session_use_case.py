"""Use case for practice sessions and their Markdown reports."""

from pathlib import Path

import structlog

from flashnotes.application.notes.protocols.notes_repository import NotesRepositoryProtocol
from flashnotes.domain.learning.entities.flashcard import Flashcard
from flashnotes.domain.learning.entities.flashcard_result import FlashcardResult
from flashnotes.domain.learning.entities.flashcard_session import FlashcardSession
from flashnotes.domain.learning.services.session_report_renderer import SessionReportRenderer
from flashnotes.exceptions import DirectoryReadError

logger = structlog.get_logger(__name__)


class FlashcardSessionUseCase:
    """Creates sessions, records answers and writes session reports."""

    def __init__(
        self,
        notes_repository: NotesRepositoryProtocol,
        report_renderer: SessionReportRenderer,
    ) -> None:
        self.notes_repository = notes_repository
        self.report_renderer = report_renderer

    def create_session(self, pattern: str, cards: list[Flashcard]) -> FlashcardSession:
        """Start an in-progress session over ``cards``."""
        session = FlashcardSession.create(pattern, cards)
        logger.info(
            "flashcard_session_created",
            session_id=str(session.id),
            pattern=pattern,
            card_count=len(cards),
        )
        return session

    def record_result(
        self, session: FlashcardSession, result: FlashcardResult
    ) -> FlashcardSession:
        """Append a result; the last one completes the session."""
        session.record_result(result)
        if session.is_completed:
            logger.info(
                "flashcard_session_completed",
                session_id=str(session.id),
                answered=session.answered_count,
            )
        return session

    def render_report(self, session: FlashcardSession) -> str:
        return self.report_renderer.render(session)

    async def save_report(self, notes_dir: Path, session: FlashcardSession) -> str:
        """
        Write the session report into the notes directory.

        Saving the same session again overwrites its report.

        Returns:
            The report filename

        Raises:
            FileWriteError: If the report cannot be written
        """
        filename = self.report_renderer.report_filename(session)
        content = self.report_renderer.render(session)
        await self.notes_repository.write_text(notes_dir, filename, content)
        logger.info("session_report_saved", session_id=str(session.id), filename=filename)
        return filename

    async def list_reports(self, notes_dir: Path) -> list[str]:
        """
        List session report filenames in the notes directory.

        Returns an empty list when the directory cannot be read.
        """
        try:
            filenames = await self.notes_repository.list_filenames(notes_dir)
        except DirectoryReadError as e:
            logger.warning("session_reports_unavailable", notes_dir=str(notes_dir), error=str(e))
            return []
        return [name for name in filenames if self.report_renderer.is_report_filename(name)]
