"""Tests for FlashcardSession aggregate and Flashcard entity."""

from datetime import UTC, datetime

import pytest

from flashnotes.domain.common.exceptions import DomainError, InvariantViolationError
from flashnotes.domain.common.value_objects import FlashcardId, FlashcardSessionId
from flashnotes.domain.learning.entities.flashcard import Flashcard
from flashnotes.domain.learning.entities.flashcard_result import FlashcardResult
from flashnotes.domain.learning.entities.flashcard_session import FlashcardSession


def _cards(count: int) -> list[Flashcard]:
    return [
        Flashcard.create("deck.md", i, f"Question {i}?", f"Answer **{i}**", [str(i)])
        for i in range(count)
    ]


class TestFlashcard:
    def test_create_builds_ordinal_id(self) -> None:
        card = Flashcard.create("bio.101.md", 3, "  Q?  ", "  A  ")
        assert card.id == FlashcardId("bio.101.md-3")
        assert card.question == "Q?"
        assert card.expected_answer == "A"
        assert card.keywords == ()

    def test_empty_question_rejected(self) -> None:
        with pytest.raises(DomainError, match="Question cannot be empty"):
            Flashcard.create("x.md", 0, "   ", "answer")

    def test_empty_answer_rejected(self) -> None:
        with pytest.raises(DomainError, match="Expected answer cannot be empty"):
            Flashcard.create("x.md", 0, "question", "")

    def test_is_immutable(self) -> None:
        card = Flashcard.create("x.md", 0, "Q", "A")
        with pytest.raises(AttributeError):
            card.question = "changed"  # type: ignore[misc]

    def test_equality_by_id(self) -> None:
        assert Flashcard.create("x.md", 0, "Q", "A") == Flashcard.create("x.md", 0, "Q2", "A2")
        assert Flashcard.create("x.md", 0, "Q", "A") != Flashcard.create("x.md", 1, "Q", "A")


class TestFlashcardSession:
    """Test suite for the practice session state machine."""

    def test_create(self) -> None:
        now = datetime(2024, 5, 1, tzinfo=UTC)
        session = FlashcardSession.create("deck", _cards(2), now=now)

        assert session.pattern == "deck"
        assert session.created_at == now
        assert session.results == []
        assert session.completed_at is None
        assert session.total_questions == 2
        assert session.next_card == session.cards[0]

    def test_session_ids_are_unique(self) -> None:
        ids = {FlashcardSession.create("p", _cards(1)).id for _ in range(50)}
        assert len(ids) == 50

    def test_completed_only_after_last_result(self) -> None:
        session = FlashcardSession.create("deck", _cards(3))

        session.answer("one")
        session.answer("two")
        assert session.completed_at is None
        assert not session.is_completed

        completed_at = datetime(2024, 5, 2, tzinfo=UTC)
        session.answer("three", now=completed_at)
        assert session.completed_at == completed_at
        assert session.is_completed
        assert session.next_card is None

    def test_results_follow_card_order(self) -> None:
        session = FlashcardSession.create("deck", _cards(2))
        session.answer("a")
        session.answer("b")

        assert [r.card_id for r in session.results] == [c.id for c in session.cards]
        assert [r.user_answer for r in session.results] == ["a", "b"]
        assert session.results[0].keywords == ("0",)

    def test_record_result_returns_session(self) -> None:
        session = FlashcardSession.create("deck", _cards(1))
        result = FlashcardResult.for_card(session.cards[0], "answer")
        assert session.record_result(result) is session
        assert session.is_completed

    def test_result_for_wrong_card_rejected(self) -> None:
        cards = _cards(2)
        session = FlashcardSession.create("deck", cards)
        with pytest.raises(InvariantViolationError):
            session.record_result(FlashcardResult.for_card(cards[1], "skip ahead"))
        assert session.results == []

    def test_no_results_after_completion(self) -> None:
        session = FlashcardSession.create("deck", _cards(1))
        session.answer("done")
        with pytest.raises(InvariantViolationError):
            session.record_result(FlashcardResult.for_card(session.cards[0], "again"))
        with pytest.raises(InvariantViolationError):
            session.answer("again")
        assert len(session.results) == 1


class TestFlashcardSessionId:
    def test_generated_ids_have_session_prefix(self) -> None:
        assert FlashcardSessionId.generate().value.startswith("session-")

    def test_path_separators_rejected(self) -> None:
        with pytest.raises(ValueError):
            FlashcardSessionId("../escape")
