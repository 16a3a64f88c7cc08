"""Whitespace normalization and word counting."""

import re

_WHITESPACE_RE = re.compile(r"\s+")
_EMPTY_LINES_RE = re.compile(r"\n\s*\n")


def clean_text(text: str) -> str:
    """Collapse whitespace runs to single spaces, drop empty lines and trim."""
    text = _WHITESPACE_RE.sub(" ", text)
    text = _EMPTY_LINES_RE.sub("\n", text)
    return text.strip()


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    return len([word for word in _WHITESPACE_RE.split(text) if word])
