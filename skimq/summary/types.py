"""
Module: types
Purpose: Result types for the readable-summary pipeline.
Dependencies: none (leaf module)

Everything here is immutable and free of rendering concerns. Presentation
layers read ``segments``, ``bullets`` and ``tokens`` and decide on their own
how to clamp lines or style highlighted amounts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SegmentKind(str, Enum):
    """Tag of a headline span."""

    PLAIN = "plain"
    AMOUNT = "amount"
    DATE = "date"  # only produced by ReadableSummary.date_segments()


@dataclass(frozen=True)
class Segment:
    """A contiguous span of the headline."""

    kind: SegmentKind
    text: str

    @classmethod
    def plain(cls, text: str) -> Segment:
        return cls(SegmentKind.PLAIN, text)

    @classmethod
    def amount(cls, text: str) -> Segment:
        return cls(SegmentKind.AMOUNT, text)

    @classmethod
    def date(cls, text: str) -> Segment:
        return cls(SegmentKind.DATE, text)

    @property
    def is_amount(self) -> bool:
        return self.kind is SegmentKind.AMOUNT

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "text": self.text}


@dataclass(frozen=True)
class TokenSet:
    """Facts extracted from a summary for downstream filtering/search.

    Attributes:
        amounts: Currency amounts in order of appearance, duplicates kept
        dates: Date/time phrases in order of appearance, duplicates kept
        domain: Lower-cased sender domain ("" if undetermined)
    """

    amounts: tuple[str, ...] = ()
    dates: tuple[str, ...] = ()
    domain: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "amounts": list(self.amounts),
            "dates": list(self.dates),
            "domain": self.domain,
        }


@dataclass(frozen=True)
class ReadableSummary:
    """
    Structured digest of one AI email summary.

    Created fresh by every pipeline call and never mutated afterwards.

    Attributes:
        segments: Headline split into plain/amount spans; joined, they equal tldr
        bullets: At most two supporting facts
        raw_text: Summary after boilerplate filtering, before any other transform
        tokens: Extracted amounts, dates and sender domain
        tldr: The headline (first sentence or first line)
        emoji: The single emoji kept by deduplication ("" if none)
    """

    segments: tuple[Segment, ...]
    bullets: tuple[str, ...]
    raw_text: str
    tokens: TokenSet = field(default_factory=TokenSet)
    tldr: str = ""
    emoji: str = ""

    @property
    def is_empty(self) -> bool:
        """True when there was nothing left to summarize after filtering."""
        return not self.raw_text

    @property
    def highlighted_amounts(self) -> list[str]:
        """Amount segments of the headline, in order."""
        return [segment.text for segment in self.segments if segment.is_amount]

    def date_segments(self) -> list[Segment]:
        """
        Refine plain segments into plain/date spans.

        Amount segments pass through unchanged, so the joined text still
        equals the headline.
        """
        from skimq.summary.highlight import highlight_dates

        refined: list[Segment] = []
        for segment in self.segments:
            if segment.kind is SegmentKind.PLAIN:
                refined.extend(highlight_dates(segment.text))
            else:
                refined.append(segment)
        return refined

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation."""
        return {
            "segments": [segment.to_dict() for segment in self.segments],
            "bullets": list(self.bullets),
            "raw_text": self.raw_text,
            "tokens": self.tokens.to_dict(),
            "tldr": self.tldr,
            "emoji": self.emoji,
        }
