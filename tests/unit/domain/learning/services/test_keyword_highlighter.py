"""Tests for KeywordHighlighter domain service."""

from flashnotes.domain.learning.services.keyword_highlighter import KeywordHighlighter


class TestKeywordHighlighter:
    """Test suite for keyword highlighting."""

    def test_wraps_keyword(self) -> None:
        highlighter = KeywordHighlighter()
        result = highlighter.highlight("The mitochondria is the powerhouse", ["mitochondria"])
        assert result == "The <mark>mitochondria</mark> is the powerhouse"

    def test_case_insensitive_and_keeps_original_casing(self) -> None:
        result = KeywordHighlighter().highlight("MITOCHONDRIA rules", ["mitochondria"])
        assert result == "<mark>MITOCHONDRIA</mark> rules"

    def test_wraps_every_occurrence(self) -> None:
        result = KeywordHighlighter().highlight("ATP and more atp", ["atp"])
        assert result == "<mark>ATP</mark> and more <mark>atp</mark>"

    def test_whole_words_only(self) -> None:
        text = "cells and cellular"
        assert KeywordHighlighter().highlight(text, ["cell"]) == text

    def test_keyword_is_matched_literally(self) -> None:
        result = KeywordHighlighter().highlight("axb a.b", ["a.b"])
        assert result == "axb <mark>a.b</mark>"

    def test_blank_keywords_are_ignored(self) -> None:
        assert KeywordHighlighter().highlight("abc", ["", "  "]) == "abc"

    def test_no_keywords(self) -> None:
        assert KeywordHighlighter().highlight("unchanged text", []) == "unchanged text"

    def test_custom_markers(self) -> None:
        highlighter = KeywordHighlighter(open_tag="**", close_tag="**")
        assert highlighter.highlight("Paris is big", ["paris"]) == "**Paris** is big"

    def test_later_keywords_skip_wrapped_spans(self) -> None:
        highlighter = KeywordHighlighter()
        assert (
            highlighter.highlight("cell membrane", ["cell membrane", "cell"])
            == "<mark>cell membrane</mark>"
        )
        assert (
            highlighter.highlight("cell membrane", ["cell", "cell membrane"])
            == "<mark>cell</mark> membrane"
        )

    def test_keyword_equal_to_tag_text_keeps_markup_intact(self) -> None:
        result = KeywordHighlighter().highlight("mitochondria mark", ["mitochondria", "mark"])
        assert result == "<mark>mitochondria</mark> <mark>mark</mark>"

    def test_later_keyword_still_marks_text_between_spans(self) -> None:
        result = KeywordHighlighter().highlight("ATP feeds the cell", ["atp", "cell"])
        assert result == "<mark>ATP</mark> feeds the <mark>cell</mark>"

    def test_custom_markers_are_not_rematched(self) -> None:
        highlighter = KeywordHighlighter(open_tag="[", close_tag="]")
        assert highlighter.highlight("red fox", ["red fox", "fox"]) == "[red fox]"

    def test_matched_keywords(self) -> None:
        matched = KeywordHighlighter().matched_keywords(
            "The Mitochondria makes energy", ["mitochondria", "ribosome", "energy"]
        )
        assert matched == ["mitochondria", "energy"]
