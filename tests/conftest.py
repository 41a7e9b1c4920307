"""
Pytest configuration for SkimQ tests

Provides fixtures shared across all test files
"""

import pytest

from skimq.observability import telemetry

INVOICE_SUMMARY = (
    "📧 Invoice due $250.00 tomorrow.\n"
    "- Pay via portal\n"
    "- Contact billing if issues\n"
    "Unsubscribe here"
)


@pytest.fixture(autouse=True)
def reset_telemetry():
    """Start every test with empty counters and latency samples."""
    telemetry.reset()
    yield
    telemetry.reset()


@pytest.fixture
def invoice_summary():
    """Raw summary used by the end-to-end scenarios."""
    return INVOICE_SUMMARY
