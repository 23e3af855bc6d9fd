"""Domain service for rendering a practice session as a Markdown report."""

from datetime import UTC, datetime

from flashnotes.domain.learning.entities.flashcard_session import FlashcardSession

REPORT_PREFIX = "flashcard-session."
REPORT_EXTENSION = ".md"
REPORT_TITLE = "Flashcard Session Results"


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are taken to be UTC already
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def to_iso8601(value: datetime) -> str:
    """UTC ISO-8601 timestamp with millisecond precision, e.g. ``2024-05-01T09:30:00.000Z``."""
    return _as_utc(value).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class SessionReportRenderer:
    """Renders session reports and names the files they are saved to."""

    def render(self, session: FlashcardSession) -> str:
        """
        Render the session as Markdown.

        Layout: title, metadata block (pattern, creation date, total and
        completed counts), a rule, then one block per recorded result. Each
        block ends with a rule.
        """
        lines = [
            f"# {REPORT_TITLE}",
            "",
            f"**Pattern:** {session.pattern}",
            f"**Date:** {to_iso8601(session.created_at)}",
            f"**Total Questions:** {session.total_questions}",
            f"**Completed:** {session.answered_count}",
            "",
            "---",
            "",
        ]

        for number, result in enumerate(session.results, start=1):
            lines += [
                f"## Question {number}",
                "",
                f"**Q:** {result.question}",
                "",
                "**Your Answer:**",
                result.user_answer,
                "",
                "**Expected Answer:**",
                result.expected_answer,
                "",
            ]
            if result.keywords:
                lines += [f"**Keywords:** {', '.join(result.keywords)}", ""]
            lines += ["---", ""]

        return "\n".join(lines) + "\n"

    def report_filename(self, session: FlashcardSession) -> str:
        """``flashcard-session.<YYYY-MM-DD>.<session id>.md``, dated by the UTC creation day."""
        day = _as_utc(session.created_at).date().isoformat()
        return f"{REPORT_PREFIX}{day}.{session.id}{REPORT_EXTENSION}"

    def is_report_filename(self, filename: str) -> bool:
        return filename.startswith(REPORT_PREFIX) and filename.endswith(REPORT_EXTENSION)
