"""Common value objects shared across all domain modules."""

from .ids import FlashcardId, FlashcardSessionId
from .note_name import NoteName

__all__ = [
    # IDs
    "FlashcardId",
    "FlashcardSessionId",
    # Notes
    "NoteName",
]
