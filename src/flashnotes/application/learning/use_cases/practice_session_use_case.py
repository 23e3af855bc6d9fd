"""Use case driving interactive practice sessions."""

from pathlib import Path

import structlog

from flashnotes.application.learning.use_cases.dtos import AnswerFeedback
from flashnotes.application.learning.use_cases.flashcard_collection_use_case import (
    FlashcardCollectionUseCase,
)
from flashnotes.application.learning.use_cases.flashcard_session_use_case import (
    FlashcardSessionUseCase,
)
from flashnotes.domain.learning.entities.flashcard_result import FlashcardResult
from flashnotes.domain.learning.entities.flashcard_session import FlashcardSession
from flashnotes.domain.learning.services.keyword_highlighter import KeywordHighlighter
from flashnotes.exceptions import SessionNotFoundError

logger = structlog.get_logger(__name__)


class PracticeSessionUseCase:
    """
    Owns the in-progress practice sessions of the running application.

    Sessions live in memory only. A completed session is written to its
    report and forgotten; an abandoned one is forgotten without any write.
    """

    def __init__(
        self,
        collection_use_case: FlashcardCollectionUseCase,
        session_use_case: FlashcardSessionUseCase,
        highlighter: KeywordHighlighter,
    ) -> None:
        self.collection_use_case = collection_use_case
        self.session_use_case = session_use_case
        self.highlighter = highlighter
        self._sessions: dict[str, tuple[Path, FlashcardSession]] = {}

    async def start(self, notes_dir: Path, pattern: str) -> FlashcardSession | None:
        """
        Collect the cards matching ``pattern`` and start a session over them.

        Returns:
            The new session, or None when no flashcard matches the pattern

        Raises:
            DirectoryReadError: If the notes directory cannot be listed
            FileReadError: If a matching note cannot be read
        """
        cards = await self.collection_use_case.collect(notes_dir, pattern)
        if not cards:
            logger.info("practice_session_not_started", pattern=pattern, reason="no_flashcards")
            return None

        session = self.session_use_case.create_session(pattern, cards)
        self._sessions[str(session.id)] = (notes_dir, session)
        return session

    def get(self, session_id: str) -> FlashcardSession:
        """
        Get an in-progress session.

        Raises:
            SessionNotFoundError: If no such session is in progress
        """
        return self._entry(session_id)[1]

    def active_sessions(self) -> list[FlashcardSession]:
        return [session for _, session in self._sessions.values()]

    async def submit_answer(self, session_id: str, answer: str) -> AnswerFeedback:
        """
        Answer the next card of a session.

        When this answer completes the session, the report is saved to the
        notes directory the session was started in and the session is
        released.

        Raises:
            SessionNotFoundError: If no such session is in progress
            FileWriteError: If the completed session's report cannot be written
        """
        notes_dir, session = self._entry(session_id)
        card = session.next_card
        if card is None:
            # Completed but still held: its report write failed, see save_pending_report
            raise SessionNotFoundError(session_id)

        result = FlashcardResult.for_card(card, answer)
        self.session_use_case.record_result(session, result)

        report_filename = None
        if session.is_completed:
            report_filename = await self.session_use_case.save_report(notes_dir, session)
            del self._sessions[session_id]

        return AnswerFeedback(
            session=session,
            result=result,
            highlighted_answer=self.highlighter.highlight(answer, card.keywords),
            matched_keywords=self.highlighter.matched_keywords(answer, card.keywords),
            next_card=session.next_card,
            report_filename=report_filename,
        )

    async def save_pending_report(self, session_id: str) -> str:
        """
        Retry writing the report of a completed session whose save failed.

        Raises:
            SessionNotFoundError: If no such completed session is held
            FileWriteError: If the report still cannot be written
        """
        notes_dir, session = self._entry(session_id)
        if not session.is_completed:
            raise SessionNotFoundError(session_id)
        filename = await self.session_use_case.save_report(notes_dir, session)
        del self._sessions[session_id]
        return filename

    def abandon(self, session_id: str) -> FlashcardSession:
        """
        Drop an in-progress session without writing anything.

        Raises:
            SessionNotFoundError: If no such session is in progress
        """
        _, session = self._entry(session_id)
        del self._sessions[session_id]
        logger.info(
            "practice_session_abandoned",
            session_id=session_id,
            answered=session.answered_count,
            total=session.total_questions,
        )
        return session

    def _entry(self, session_id: str) -> tuple[Path, FlashcardSession]:
        entry = self._sessions.get(session_id)
        if entry is None:
            raise SessionNotFoundError(session_id)
        return entry
