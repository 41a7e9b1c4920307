"""Headline (TL;DR) extraction: first sentence or first line, whichever ends first."""

from __future__ import annotations

from skimq.summary.patterns import SENTENCE_RE


def _strip_span(text: str, start: int, end: int) -> tuple[int, int]:
    """Shrink [start, end) so it excludes leading/trailing whitespace."""
    while start < end and text[start].isspace():
        start += 1
    while end > start and text[end - 1].isspace():
        end -= 1
    return start, end


def locate_tldr(text: str) -> tuple[int, int]:
    """
    Locate the headline inside text.

    Returns:
        (start, end) offsets of the stripped headline; (0, 0) for empty text
    """
    if not text:
        return 0, 0

    match = SENTENCE_RE.search(text)
    if match is None:
        # Nothing but terminals/newlines: the whole text is the headline
        return _strip_span(text, 0, len(text))
    return _strip_span(text, match.start(), match.end())


def extract_tldr(text: str) -> str:
    """
    Extract the headline: everything up to and including the first ".", "!" or
    "?", or up to (not including) the first newline, trimmed.

    A period between two digits is not a terminal, so "$250.00" survives.
    """
    start, end = locate_tldr(text)
    return text[start:end]
