"""SkimQ - readable digests from AI email summaries"""

from __future__ import annotations

__version__ = "0.1.0"


def __getattr__(name: str):
    """
    Lazy imports to avoid loading the API stack when only the pipeline is needed.
    """
    if name in ("build_readable_summary", "summarize_batch", "SummaryOptions"):
        from skimq.summary import pipeline

        return getattr(pipeline, name)

    if name in ("ReadableSummary", "Segment", "SegmentKind", "TokenSet"):
        from skimq.summary import types

        return getattr(types, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)


__all__ = [
    "build_readable_summary",
    "summarize_batch",
    "SummaryOptions",
    "ReadableSummary",
    "Segment",
    "SegmentKind",
    "TokenSet",
]
