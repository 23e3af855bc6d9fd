"""Tests for session reports written to the notes directory."""

from datetime import UTC, datetime
from pathlib import Path

import pytest

from flashnotes.application.learning.use_cases.flashcard_collection_use_case import (
    FlashcardCollectionUseCase,
)
from flashnotes.application.learning.use_cases.flashcard_session_use_case import (
    FlashcardSessionUseCase,
)
from flashnotes.domain.learning.entities.flashcard import Flashcard
from flashnotes.domain.learning.entities.flashcard_result import FlashcardResult
from flashnotes.domain.learning.entities.flashcard_session import FlashcardSession


def _report_files(directory: Path) -> list[str]:
    return sorted(p.name for p in directory.iterdir() if p.name.startswith("flashcard-session."))


class TestFlashcardSessionUseCase:
    """Test suite for FlashcardSessionUseCase."""

    def test_create_session(self, session_use_case: FlashcardSessionUseCase) -> None:
        cards = [Flashcard.create("a.md", 0, "Q", "A")]
        session = session_use_case.create_session("a", cards)

        assert session.pattern == "a"
        assert list(session.cards) == cards
        assert session.results == []
        assert session.completed_at is None

    def test_record_result_completes_session(
        self, session_use_case: FlashcardSessionUseCase
    ) -> None:
        cards = [Flashcard.create("a.md", 0, "Q1", "A1"), Flashcard.create("a.md", 1, "Q2", "A2")]
        session = session_use_case.create_session("a", cards)

        session_use_case.record_result(session, FlashcardResult.for_card(cards[0], "x"))
        assert session.completed_at is None

        session_use_case.record_result(session, FlashcardResult.for_card(cards[1], "y"))
        assert session.completed_at is not None

    @pytest.mark.asyncio
    async def test_save_and_list_report(
        self,
        collection_use_case: FlashcardCollectionUseCase,
        session_use_case: FlashcardSessionUseCase,
        sample_notes: Path,
    ) -> None:
        cards = await collection_use_case.collect(sample_notes, "bio.*")
        session = session_use_case.create_session("bio.*", cards)
        session.answer("mitochondria make ATP")
        session.answer("DNA")

        filename = await session_use_case.save_report(sample_notes, session)

        created_day = session.created_at.astimezone(UTC).strftime("%Y-%m-%d")
        assert filename == f"flashcard-session.{created_day}.{session.id}.md"
        assert await session_use_case.list_reports(sample_notes) == [filename]
        content = (sample_notes / filename).read_text(encoding="utf-8")
        assert content == session_use_case.render_report(session)
        assert "**Keywords:** mitochondria, ATP" in content

    @pytest.mark.asyncio
    async def test_save_uses_creation_date(
        self, session_use_case: FlashcardSessionUseCase, notes_dir: Path
    ) -> None:
        cards = [Flashcard.create("a.md", 0, "Q", "A")]
        created_at = datetime(2023, 12, 31, 23, 59, tzinfo=UTC)
        session = FlashcardSession.create("a", cards, now=created_at)

        filename = await session_use_case.save_report(notes_dir, session)

        assert filename.startswith("flashcard-session.2023-12-31.")

    @pytest.mark.asyncio
    async def test_save_twice_overwrites(
        self, session_use_case: FlashcardSessionUseCase, notes_dir: Path
    ) -> None:
        cards = [Flashcard.create("a.md", 0, "Q1", "A1"), Flashcard.create("a.md", 1, "Q2", "A2")]
        session = session_use_case.create_session("a", cards)
        session.answer("first")
        first = await session_use_case.save_report(notes_dir, session)
        session.answer("second")
        second = await session_use_case.save_report(notes_dir, session)

        assert first == second
        assert _report_files(notes_dir) == [first]
        assert "**Completed:** 2" in (notes_dir / first).read_text(encoding="utf-8")

    @pytest.mark.asyncio
    async def test_list_reports_ignores_other_files(
        self, session_use_case: FlashcardSessionUseCase, sample_notes: Path
    ) -> None:
        (sample_notes / "flashcard-session.notes.txt").write_text("x", encoding="utf-8")
        (sample_notes / "flashcard-session.2024-01-01.session-1.md").write_text(
            "x", encoding="utf-8"
        )

        reports = await session_use_case.list_reports(sample_notes)

        assert reports == ["flashcard-session.2024-01-01.session-1.md"]

    @pytest.mark.asyncio
    async def test_list_reports_missing_directory_is_empty(
        self, session_use_case: FlashcardSessionUseCase, tmp_path: Path
    ) -> None:
        assert await session_use_case.list_reports(tmp_path / "missing") == []
