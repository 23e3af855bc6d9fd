"""Domain service for marking expected keywords inside a free-text answer."""

import re

DEFAULT_OPEN_TAG = "<mark>"
DEFAULT_CLOSE_TAG = "</mark>"


class KeywordHighlighter:
    """
    Wraps whole-word, case-insensitive keyword occurrences in markup.

    Keywords are applied one pass at a time in the given order, each pass
    working on the output of the previous one. A pass only rewrites text
    outside the spans already wrapped, so overlapping keywords are order
    dependent: a keyword inside an earlier match is not marked again.
    """

    def __init__(
        self, open_tag: str = DEFAULT_OPEN_TAG, close_tag: str = DEFAULT_CLOSE_TAG
    ) -> None:
        self.open_tag = open_tag
        self.close_tag = close_tag
        self._markup = re.compile(
            f"({re.escape(open_tag)}.*?{re.escape(close_tag)})", re.DOTALL
        )

    def highlight(self, text: str, keywords: list[str] | tuple[str, ...]) -> str:
        """
        Return a copy of ``text`` with every keyword occurrence wrapped.

        Matched text keeps its original casing; blank keywords are ignored.
        """
        highlighted = text
        for keyword in keywords:
            if not keyword.strip():
                continue
            pattern = re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE)
            highlighted = self._substitute_outside_markup(pattern, highlighted)
        return highlighted

    def matched_keywords(self, text: str, keywords: list[str] | tuple[str, ...]) -> list[str]:
        """Keywords that occur in ``text`` as whole words, in the given order."""
        return [
            keyword
            for keyword in keywords
            if keyword.strip()
            and re.search(rf"\b{re.escape(keyword)}\b", text, re.IGNORECASE) is not None
        ]

    def _substitute_outside_markup(self, pattern: re.Pattern[str], text: str) -> str:
        # Odd positions of the split hold spans wrapped by an earlier pass
        parts = self._markup.split(text)
        return "".join(
            part if i % 2 else pattern.sub(self._wrap, part) for i, part in enumerate(parts)
        )

    def _wrap(self, match: re.Match[str]) -> str:
        return f"{self.open_tag}{match.group(0)}{self.close_tag}"
