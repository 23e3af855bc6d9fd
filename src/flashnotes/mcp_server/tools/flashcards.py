"""Flashcard-related MCP tools."""

import asyncio
import json
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from flashnotes.core import Container
from flashnotes.mcp_server.serializers import card_to_dict, feedback_to_dict, session_to_dict


def _no_flashcards(pattern: str) -> str:
    return json.dumps(
        {"message": f"No flashcards found matching pattern '{pattern}'", "cards": []}, indent=2
    )


async def _require_notes_directory(container: Container) -> Path:
    # The settings store reads its JSON file on first use
    return await asyncio.to_thread(container.settings_store().require_notes_directory)


def register_flashcard_tools(server: FastMCP, container: Container) -> None:
    """Register flashcard-related tools with the MCP server."""

    @server.tool()
    async def get_flashcards(pattern: str) -> str:
        """Get the flashcards of every note whose name matches a pattern.

        Each level-2 header of a note is a question, the text below it the
        expected answer; bold words in the answer are its keywords.

        Args:
            pattern: Note name pattern, "*" matches anything (e.g. "biology.*")
        """
        notes_dir = await _require_notes_directory(container)
        cards = await container.flashcard_collection_use_case().collect(notes_dir, pattern)
        if not cards:
            return _no_flashcards(pattern)
        return json.dumps([card_to_dict(card) for card in cards], indent=2)

    @server.tool()
    async def start_flashcard_session(pattern: str) -> str:
        """Start a practice session over the flashcards matching a pattern.

        Returns the session id and the first question.

        Args:
            pattern: Note name pattern, "*" matches anything (e.g. "biology.*")
        """
        notes_dir = await _require_notes_directory(container)
        session = await container.practice_session_use_case().start(notes_dir, pattern)
        if session is None:
            return _no_flashcards(pattern)
        return json.dumps(session_to_dict(session), indent=2)

    @server.tool()
    async def submit_flashcard_answer(session_id: str, answer: str) -> str:
        """Answer the current question of a practice session.

        Returns the answer with matched keywords marked, the expected answer
        and the next question. After the last question the session report is
        saved to the notes directory.

        Args:
            session_id: The ID of the practice session
            answer: The answer text
        """
        feedback = await container.practice_session_use_case().submit_answer(session_id, answer)
        return json.dumps(feedback_to_dict(feedback), indent=2)

    @server.tool()
    async def abandon_flashcard_session(session_id: str) -> str:
        """Stop a practice session without saving a report.

        Args:
            session_id: The ID of the practice session
        """
        session = container.practice_session_use_case().abandon(session_id)
        return json.dumps({"abandoned": session_to_dict(session)}, indent=2)

    @server.tool()
    async def list_flashcard_sessions() -> str:
        """List the saved practice session reports and the sessions in progress."""
        notes_dir = await _require_notes_directory(container)
        reports = await container.flashcard_session_use_case().list_reports(notes_dir)
        active = container.practice_session_use_case().active_sessions()
        return json.dumps(
            {"reports": reports, "in_progress": [session_to_dict(s) for s in active]},
            indent=2,
        )

    @server.tool()
    async def highlight_keywords(text: str, keywords: list[str]) -> str:
        """Mark whole-word, case-insensitive keyword occurrences in a text.

        Args:
            text: Free text, e.g. an answer
            keywords: Keywords to mark, applied in order
        """
        return container.keyword_highlighter().highlight(text, keywords)
