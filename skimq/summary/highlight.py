"""
Headline highlighting.

Stage 6 of the readable-summary pipeline: split the headline into
alternating plain/amount segments. Concatenating the segments always gives
back the headline exactly.

Segments strictly alternate. A plain segment precedes every amount and one
follows the last amount, so an amount at either edge is flanked by an empty
plain segment. With no amounts the result is one plain segment.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from skimq.summary.patterns import AMOUNT_RE, DATE_RE
from skimq.summary.types import Segment, SegmentKind


def _split(text: str, spans: Iterable[tuple[int, int]], kind: SegmentKind) -> list[Segment]:
    segments: list[Segment] = []
    last_end = 0
    for start, end in spans:
        segments.append(Segment.plain(text[last_end:start]))
        segments.append(Segment(kind, text[start:end]))
        last_end = end
    segments.append(Segment.plain(text[last_end:]))
    return segments


def _pattern_spans(pattern: re.Pattern[str], text: str) -> list[tuple[int, int]]:
    return [match.span() for match in pattern.finditer(text)]


def highlight_amounts(
    headline: str,
    spans: Iterable[tuple[int, int]] | None = None,
    offset: int = 0,
) -> list[Segment]:
    """
    Split the headline into plain and amount segments.

    Args:
        headline: The TL;DR string
        spans: Amount spans measured on the text the headline was cut from.
            Only spans lying entirely inside the headline are used; a match
            that crosses the headline boundary is never split.
            If None, the headline itself is scanned.
        offset: Position of the headline inside that text

    Returns:
        Alternating segments whose texts join to the headline
    """
    if spans is None:
        local = _pattern_spans(AMOUNT_RE, headline)
    else:
        end = offset + len(headline)
        local = [
            (start - offset, stop - offset)
            for start, stop in sorted(spans)
            if start >= offset and stop <= end and stop > start
        ]
    return _split(headline, local, SegmentKind.AMOUNT)


def highlight_dates(text: str) -> list[Segment]:
    """Split text into plain and date segments (same alternation rule)."""
    return _split(text, _pattern_spans(DATE_RE, text), SegmentKind.DATE)
