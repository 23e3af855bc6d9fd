"""flashnotes: flashcards and practice sessions over a directory of Markdown notes."""

__version__ = "0.1.0"
