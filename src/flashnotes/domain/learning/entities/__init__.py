from .flashcard import Flashcard
from .flashcard_result import FlashcardResult
from .flashcard_session import FlashcardSession

__all__ = [
    "Flashcard",
    "FlashcardResult",
    "FlashcardSession",
]
