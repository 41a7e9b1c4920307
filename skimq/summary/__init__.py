"""
SkimQ summary module - readable digests from raw AI email summaries.
"""

from skimq.summary.boilerplate import strip_boilerplate, strip_source_prefix
from skimq.summary.bullets import MAX_BULLETS, extract_bullets
from skimq.summary.emoji import EmojiResult, dedupe_emoji
from skimq.summary.highlight import highlight_amounts, highlight_dates
from skimq.summary.pipeline import SummaryOptions, build_readable_summary, summarize_batch
from skimq.summary.tldr import extract_tldr, locate_tldr
from skimq.summary.tokens import (
    extract_amounts,
    extract_dates,
    extract_domain,
    extract_tokens,
    find_amount_spans,
)
from skimq.summary.types import ReadableSummary, Segment, SegmentKind, TokenSet

__all__ = [
    # Types
    "ReadableSummary",
    "Segment",
    "SegmentKind",
    "TokenSet",
    "EmojiResult",
    # Stages
    "strip_boilerplate",
    "strip_source_prefix",
    "dedupe_emoji",
    "extract_tldr",
    "locate_tldr",
    "extract_bullets",
    "MAX_BULLETS",
    "extract_amounts",
    "extract_dates",
    "extract_domain",
    "extract_tokens",
    "find_amount_spans",
    "highlight_amounts",
    "highlight_dates",
    # Orchestration
    "SummaryOptions",
    "build_readable_summary",
    "summarize_batch",
]
