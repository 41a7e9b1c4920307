"""Stateless readable-summary endpoints.

Runs summaries through the pipeline and returns structured JSON. No database
writes, no user data stored.
"""

from __future__ import annotations

from dataclasses import replace

from fastapi import APIRouter

from skimq.api.models import (
    ErrorResponse,
    ReadableSummaryResponse,
    SummaryBatchRequest,
    SummaryBatchResponse,
    SummaryRequest,
)
from skimq.observability.logging import get_logger
from skimq.observability.telemetry import counter
from skimq.summary.pipeline import SummaryOptions, build_readable_summary, summarize_batch

router = APIRouter(
    prefix="/api/summary",
    tags=["summary"],
    responses={422: {"model": ErrorResponse, "description": "Invalid request body"}},
)
logger = get_logger(__name__)


def _options_for(request: SummaryRequest) -> SummaryOptions:
    options = SummaryOptions()
    if request.strip_source_prefix is not None:
        options = replace(options, strip_source_prefix=request.strip_source_prefix)
    return options


@router.post("/readable", response_model=ReadableSummaryResponse)
async def readable_summary(request: SummaryRequest) -> ReadableSummaryResponse:
    """Build the readable digest for a single summary."""
    counter("api.summary.requests")
    summary = build_readable_summary(
        request.summary_text, request.sender_email, _options_for(request)
    )
    return ReadableSummaryResponse.from_summary(summary)


@router.post("/readable/batch", response_model=SummaryBatchResponse)
async def readable_summary_batch(request: SummaryBatchRequest) -> SummaryBatchResponse:
    """
    Build readable digests for a batch.

    Per-item strip_source_prefix overrides are honored, so items are grouped
    by option set only when all items agree; otherwise each item runs alone.
    """
    counter("api.summary.batch_requests")

    overrides = {item.strip_source_prefix for item in request.items}
    if len(overrides) == 1:
        summaries = summarize_batch(
            [(item.summary_text, item.sender_email) for item in request.items],
            parallel=request.parallel,
            options=_options_for(request.items[0]),
        )
    else:
        summaries = [
            build_readable_summary(item.summary_text, item.sender_email, _options_for(item))
            for item in request.items
        ]

    logger.info("Batch of %d summaries built (parallel=%s)", len(summaries), request.parallel)
    results = [ReadableSummaryResponse.from_summary(summary) for summary in summaries]
    return SummaryBatchResponse(results=results, count=len(results))
