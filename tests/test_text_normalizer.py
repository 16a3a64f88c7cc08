"""Tests for text normalization and word counting."""

import pytest

from docsummarizer.services.text_normalizer import clean_text, count_words


class TestCountWords:
    """Tests for count_words."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("one", 1),
            ("one two three", 3),
            ("  leading and trailing  ", 3),
            ("tabs\tand\nnewlines\r\nmixed", 4),
            ("multiple     spaces   between", 3),
        ],
    )
    def test_counts_whitespace_separated_words(self, text, expected):
        assert count_words(text) == expected

    def test_matches_split_filter(self):
        text = "Lorem ipsum,  dolor\n\nsit amet; consectetur\t adipiscing."
        assert count_words(text) == len([w for w in text.split() if w])

    def test_empty_and_blank(self):
        assert count_words("") == 0
        assert count_words("   \n\t ") == 0


class TestCleanText:
    """Tests for clean_text."""

    def test_collapses_whitespace(self):
        assert clean_text("a   b\t\tc") == "a b c"

    def test_drops_empty_lines_and_trims(self):
        assert clean_text("\n\nfirst line\n\n\n  second line  \n\n") == "first line second line"

    def test_preserves_word_count(self):
        text = "  Page 1\n\n\nIntroduction   to the\treport\n"
        assert count_words(clean_text(text)) == count_words(text)
