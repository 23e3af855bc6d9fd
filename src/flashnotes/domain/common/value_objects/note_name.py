"""
NoteName value object.

Notes are flat Markdown files whose names encode a hierarchy with dots,
e.g. ``mathematics.calculus.md`` -> ``["mathematics", "calculus"]``.
"""

from dataclasses import dataclass
from typing import Self

from ..exceptions import ValidationError
from ..value_object import ValueObject

MARKDOWN_EXTENSION = ".md"
HIERARCHY_SEPARATOR = "."
DISPLAY_SEPARATOR = " > "


@dataclass(frozen=True)
class NoteName(ValueObject):
    """Filename of a note inside the notes directory."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValidationError("Note name cannot be empty", field="filename")
        if "/" in self.value or "\\" in self.value:
            raise ValidationError(
                "Note name cannot contain path separators", field="filename", value=self.value
            )
        if self.value in (".", ".."):
            raise ValidationError("Invalid note name", field="filename", value=self.value)
        if not self.value.endswith(MARKDOWN_EXTENSION):
            raise ValidationError(
                f"Note name must end with {MARKDOWN_EXTENSION}", field="filename", value=self.value
            )

    @property
    def stem(self) -> str:
        return self.value.removesuffix(MARKDOWN_EXTENSION)

    @property
    def hierarchy(self) -> list[str]:
        return self.stem.split(HIERARCHY_SEPARATOR)

    @property
    def display_path(self) -> str:
        return DISPLAY_SEPARATOR.join(self.hierarchy)

    @property
    def title(self) -> str:
        """Last hierarchy token."""
        return self.hierarchy[-1]

    @classmethod
    def from_hierarchy(cls, hierarchy: list[str]) -> Self:
        """
        Build a note name from hierarchy tokens.

        Args:
            hierarchy: Tokens from the broadest topic to the most specific

        Raises:
            ValidationError: If no tokens are given or a token is blank
        """
        tokens = [token.strip() for token in hierarchy]
        if not tokens or any(not token for token in tokens):
            raise ValidationError("Note hierarchy tokens cannot be empty", field="hierarchy")
        return cls(HIERARCHY_SEPARATOR.join(tokens) + MARKDOWN_EXTENSION)

    def __str__(self) -> str:
        return self.value
