"""Pydantic request/response models for the SkimQ API.

Responses mirror ReadableSummary.to_dict() so library and HTTP callers see
the same shape.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from skimq.config import API_BATCH_SIZE_MAX, API_SENDER_MAX_LENGTH, API_TEXT_MAX_LENGTH
from skimq.summary.types import ReadableSummary

# =============================================================================
# REQUESTS
# =============================================================================


class SummaryRequest(BaseModel):
    """One raw AI summary and the address it was sent from."""

    summary_text: str | None = Field(default="", max_length=API_TEXT_MAX_LENGTH)
    sender_email: str = Field(default="", max_length=API_SENDER_MAX_LENGTH)
    strip_source_prefix: bool | None = None


class SummaryBatchRequest(BaseModel):
    """Several summaries processed independently."""

    items: list[SummaryRequest] = Field(..., min_length=1, max_length=API_BATCH_SIZE_MAX)
    parallel: bool = False


# =============================================================================
# RESPONSES
# =============================================================================


class SegmentModel(BaseModel):
    kind: str
    text: str


class TokenSetModel(BaseModel):
    amounts: list[str] = []
    dates: list[str] = []
    domain: str = ""


class ReadableSummaryResponse(BaseModel):
    """Serialized ReadableSummary."""

    segments: list[SegmentModel]
    bullets: list[str]
    raw_text: str
    tokens: TokenSetModel
    tldr: str
    emoji: str = ""

    @classmethod
    def from_summary(cls, summary: ReadableSummary) -> ReadableSummaryResponse:
        return cls.model_validate(summary.to_dict())


class SummaryBatchResponse(BaseModel):
    results: list[ReadableSummaryResponse]
    count: int


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str
    error_count: int = 1
    invalid_fields: list[str] = []
