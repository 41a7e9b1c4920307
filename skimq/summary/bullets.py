"""
Supporting-fact (bullet) extraction.

Stage 4 of the readable-summary pipeline.

Primary strategy: lines that start with "-" or "•".
Fallback strategy: ";"/"•" separated fragments, skipping the first one
because it normally repeats the headline.
"""

from __future__ import annotations

from skimq.summary.patterns import (
    BULLET_LINE_RE,
    BULLET_MARKER_RE,
    FALLBACK_SPLIT_RE,
    LINE_BREAK_RE,
)

MAX_BULLETS = 2


def marked_bullets(text: str) -> list[str]:
    """All marker lines of text, markers removed, in original order."""
    lines = [line.strip() for line in LINE_BREAK_RE.split(text)]
    return [BULLET_MARKER_RE.sub("", line, count=1) for line in lines if BULLET_LINE_RE.match(line)]


def fallback_bullets(text: str) -> list[str]:
    """Fragments 2 and 3 of a ";"/"•" split (fewer if the text is short)."""
    fragments = [fragment.strip() for fragment in FALLBACK_SPLIT_RE.split(text)]
    fragments = [fragment for fragment in fragments if fragment]
    return fragments[1 : 1 + MAX_BULLETS]


def extract_bullets(text: str) -> list[str]:
    """
    Extract at most two supporting facts from the deduplicated summary.

    Args:
        text: Summary after boilerplate filtering and emoji deduplication

    Returns:
        Up to MAX_BULLETS strings; [] when neither strategy finds anything
    """
    if not text:
        return []

    bullets = marked_bullets(text)
    if bullets:
        return bullets[:MAX_BULLETS]
    return fallback_bullets(text)
