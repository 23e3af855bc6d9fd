"""Domain service for matching note filenames against simplified glob patterns."""

import re
from functools import lru_cache

MARKDOWN_EXTENSION = ".md"
WILDCARD = "*"


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    # Every character except the wildcard is literal, including "."
    parts = [".*" if char == WILDCARD else re.escape(char) for char in pattern]
    return re.compile("".join(parts), re.DOTALL)


class FilenamePatternMatcher:
    """
    Matches note filenames such as ``biology.exam1.md`` against patterns
    such as ``biology.*``.

    Rules:
    - A trailing ``.md`` is ignored on both the filename and the pattern
    - ``*`` matches any run of characters, including none
    - Every other character, ``.`` included, matches itself
    - The whole filename must match (anchored), case-sensitively
    """

    def matches(self, filename: str, pattern: str) -> bool:
        """Return True if ``filename`` is selected by ``pattern``."""
        name = filename.removesuffix(MARKDOWN_EXTENSION)
        compiled = _compile(pattern.removesuffix(MARKDOWN_EXTENSION))
        return compiled.fullmatch(name) is not None

    def filter(self, filenames: list[str], pattern: str) -> list[str]:
        """Keep the filenames matching ``pattern``, preserving their order."""
        return [name for name in filenames if self.matches(name, pattern)]
