import secrets
import time
from dataclasses import dataclass
from typing import Self

from ..entity import EntityId


@dataclass(frozen=True)
class FlashcardId(EntityId):
    """Flashcard identifier, ``<filename>-<section index>``.

    Ordinal based: stable while the file is unchanged, shifted when sections
    are inserted, removed or reordered.
    """

    value: str

    @classmethod
    def for_section(cls, filename: str, index: int) -> Self:
        """Build the identifier of the ``index``-th section of ``filename``."""
        if index < 0:
            raise ValueError("Section index must be non-negative")
        return cls(f"{filename}-{index}")


@dataclass(frozen=True)
class FlashcardSessionId(EntityId):
    """Strongly-typed practice session identifier."""

    value: str

    def __post_init__(self) -> None:
        super().__post_init__()
        if "/" in self.value or "\\" in self.value:
            raise ValueError("FlashcardSessionId cannot contain path separators")

    @classmethod
    def generate(cls) -> Self:
        """Time-based id with a random suffix, unique per session."""
        return cls(f"session-{time.time_ns() // 1_000_000}-{secrets.token_hex(4)}")
