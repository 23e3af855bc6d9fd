"""Learning domain services (pure logic, no I/O)."""

from .keyword_highlighter import KeywordHighlighter
from .markdown_flashcard_parser import (
    MarkdownFlashcardParser,
    ParsedFlashcards,
    clean_markdown,
    extract_keywords,
)
from .pattern_matcher import FilenamePatternMatcher
from .session_report_renderer import SessionReportRenderer

__all__ = [
    "FilenamePatternMatcher",
    "KeywordHighlighter",
    "MarkdownFlashcardParser",
    "ParsedFlashcards",
    "SessionReportRenderer",
    "clean_markdown",
    "extract_keywords",
]
