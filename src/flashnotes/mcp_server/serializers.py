"""Plain-dict views of domain objects for tool responses."""

from typing import Any

from flashnotes.application.learning.use_cases.dtos import AnswerFeedback
from flashnotes.application.notes.use_cases.note_use_case import NoteSummary
from flashnotes.domain.learning.entities.flashcard import Flashcard
from flashnotes.domain.learning.entities.flashcard_session import FlashcardSession
from flashnotes.domain.learning.services.markdown_flashcard_parser import clean_markdown
from flashnotes.domain.learning.services.session_report_renderer import to_iso8601


def card_to_dict(card: Flashcard) -> dict[str, Any]:
    return {
        "id": card.id.to_primitive(),
        "question": card.question,
        "expected_answer": card.expected_answer,
        "display_answer": clean_markdown(card.expected_answer),
        "source": card.source,
        "keywords": list(card.keywords),
    }


def question_to_dict(card: Flashcard | None) -> dict[str, Any] | None:
    """The next card without its answer, so it can be shown as a prompt."""
    if card is None:
        return None
    return {"id": str(card.id), "question": card.question, "source": card.source}


def session_to_dict(session: FlashcardSession) -> dict[str, Any]:
    return {
        "id": session.id.to_primitive(),
        "pattern": session.pattern,
        "created_at": to_iso8601(session.created_at),
        "completed_at": to_iso8601(session.completed_at) if session.completed_at else None,
        "total_questions": session.total_questions,
        "answered": session.answered_count,
        "next_question": question_to_dict(session.next_card),
    }


def feedback_to_dict(feedback: AnswerFeedback) -> dict[str, Any]:
    return {
        "session": session_to_dict(feedback.session),
        "question": feedback.result.question,
        "your_answer": feedback.highlighted_answer,
        "expected_answer": feedback.result.expected_answer,
        "keywords": list(feedback.result.keywords),
        "matched_keywords": feedback.matched_keywords,
        "completed": feedback.is_session_completed,
        "report_filename": feedback.report_filename,
    }


def note_to_dict(note: NoteSummary) -> dict[str, Any]:
    return {
        "filename": note.filename,
        "hierarchy": note.hierarchy,
        "path": note.path,
        "full_path": str(note.full_path),
    }
