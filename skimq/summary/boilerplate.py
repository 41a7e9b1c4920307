"""
Boilerplate filtering for AI summaries.

Stage 1 of the readable-summary pipeline. Newsletter and transactional
summaries often carry footer lines ("Unsubscribe here", "Privacy Policy")
that the generator copied verbatim; they are dropped line by line before
anything else looks at the text.
"""

from __future__ import annotations

from skimq.summary.patterns import (
    BOILERPLATE_PHRASES,
    LEADING_LABEL_RE,
    LINE_BREAK_RE,
    SOURCE_PREFIX_RE,
)


def is_boilerplate_line(line: str) -> bool:
    """True if the line contains any boilerplate phrase (case-insensitive)."""
    line_lower = line.lower()
    return any(phrase in line_lower for phrase in BOILERPLATE_PHRASES)


def strip_boilerplate(text: str | None) -> str:
    """
    Drop boilerplate lines and the leading "Email from:" label.

    Args:
        text: Raw summary (None is treated as "")

    Returns:
        Surviving lines joined with single newlines, outer whitespace stripped.
        "" when every line was boilerplate.
    """
    if not text:
        return ""

    lines = [line for line in LINE_BREAK_RE.split(text) if not is_boilerplate_line(line)]
    joined = "\n".join(lines)
    joined = LEADING_LABEL_RE.sub("", joined, count=1)
    return joined.strip()


def strip_source_prefix(text: str) -> str:
    """
    Remove a leading sender attribution such as "Email from Acme:" or "From: Acme -".

    Only the first occurrence at the very start is removed.
    """
    if not text:
        return ""
    return SOURCE_PREFIX_RE.sub("", text, count=1)
