"""
Readable-summary pipeline.

Composes the six stages into one call per email:

    strip_boilerplate -> (strip_source_prefix) -> dedupe_emoji
        -> extract_tldr / extract_bullets -> extract_tokens -> highlight_amounts

Side Effects:
    - Writes to logger (debug level, summaries redacted)
    - Increments in-memory telemetry counters and latency samples

The pipeline is total over string input: no match means empty collections
or a single plain segment, never an exception.
"""

from __future__ import annotations

import concurrent.futures
from collections.abc import Iterable
from dataclasses import dataclass, field

from skimq import config
from skimq.observability.logging import get_logger
from skimq.observability.telemetry import counter, log_event, time_block
from skimq.summary.boilerplate import strip_boilerplate, strip_source_prefix
from skimq.summary.bullets import extract_bullets
from skimq.summary.emoji import dedupe_emoji
from skimq.summary.highlight import highlight_amounts
from skimq.summary.tldr import locate_tldr
from skimq.summary.tokens import extract_dates, extract_domain, find_amount_spans
from skimq.summary.types import ReadableSummary, TokenSet
from skimq.utils.redaction import redact, redact_preview

logger = get_logger(__name__)

SummaryItem = tuple[str | None, str | None]


@dataclass(frozen=True)
class SummaryOptions:
    """Per-call knobs; defaults come from skimq.config."""

    strip_source_prefix: bool = field(default_factory=lambda: config.SUMMARY_STRIP_SOURCE_PREFIX)
    max_input_chars: int | None = field(default_factory=lambda: config.SUMMARY_MAX_INPUT_CHARS)


def _check_text(name: str, value: object) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str or None, got {type(value).__name__}")
    return value


def build_readable_summary(
    summary_text: str | None,
    sender_email: str | None,
    options: SummaryOptions | None = None,
) -> ReadableSummary:
    """
    Turn one raw AI summary plus its sender into a ReadableSummary.

    Args:
        summary_text: Summary from the upstream generator (None/"" allowed)
        sender_email: Sender address; only the domain is used
        options: Optional SummaryOptions (defaults from config)

    Returns:
        A fresh ReadableSummary

    Raises:
        TypeError: If either argument is neither str nor None
    """
    text = _check_text("summary_text", summary_text)
    sender = _check_text("sender_email", sender_email)
    opts = options or SummaryOptions()

    with time_block("summary.build.latency"):
        if opts.max_input_chars is not None and len(text) > opts.max_input_chars:
            counter("summary.input_truncated")
            text = text[: opts.max_input_chars]

        raw_text = strip_boilerplate(text)
        working = strip_source_prefix(raw_text) if opts.strip_source_prefix else raw_text
        deduped = dedupe_emoji(working)
        body = deduped.text

        start, end = locate_tldr(body)
        tldr = body[start:end]
        bullets = extract_bullets(body)

        amount_spans = find_amount_spans(body)
        tokens = TokenSet(
            amounts=tuple(body[s:e] for s, e in amount_spans),
            dates=tuple(extract_dates(body)),
            domain=extract_domain(sender),
        )

        segments = highlight_amounts(tldr, amount_spans, offset=start)

    counter("summary.build")
    if not raw_text:
        counter("summary.empty")

    logger.debug(
        "Readable summary built for %s: tldr=%s bullets=%d amounts=%d dates=%d",
        redact(sender),
        redact_preview(tldr),
        len(bullets),
        len(tokens.amounts),
        len(tokens.dates),
    )

    return ReadableSummary(
        segments=tuple(segments),
        bullets=tuple(bullets),
        raw_text=raw_text,
        tokens=tokens,
        tldr=tldr,
        emoji=deduped.emoji,
    )


def summarize_batch(
    items: Iterable[SummaryItem],
    parallel: bool = False,
    max_workers: int | None = None,
    options: SummaryOptions | None = None,
) -> list[ReadableSummary]:
    """
    Build readable summaries for many (summary_text, sender_email) pairs.

    Invocations share no state, so items may be processed concurrently.
    Results are always returned in input order.

    Args:
        items: (summary_text, sender_email) pairs
        parallel: Use a thread pool across items (default False)
        max_workers: Pool size (default config.BATCH_MAX_WORKERS)
        options: SummaryOptions applied to every item
    """
    items_list = list(items)
    opts = options or SummaryOptions()

    with time_block("summary.batch.latency"):
        if not parallel or len(items_list) < 2:
            results = [build_readable_summary(text, sender, opts) for text, sender in items_list]
        else:
            workers = max_workers or config.BATCH_MAX_WORKERS
            indexed: list[tuple[int, ReadableSummary]] = []
            with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
                future_to_idx = {
                    executor.submit(build_readable_summary, text, sender, opts): idx
                    for idx, (text, sender) in enumerate(items_list)
                }
                for future in concurrent.futures.as_completed(future_to_idx):
                    indexed.append((future_to_idx[future], future.result()))

            # Restore input order
            indexed.sort(key=lambda pair: pair[0])
            results = [summary for _, summary in indexed]

    counter("summary.batch.items", len(results))
    log_event("summary.batch.completed", items=len(results), parallel=parallel)
    return results
