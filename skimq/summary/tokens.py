"""
Token extraction: currency amounts, date/time phrases, sender domain.

Stage 5 of the readable-summary pipeline. The three extractions share no
state and can run in any order.
"""

from __future__ import annotations

from skimq.summary.patterns import AMOUNT_RE, DATE_RE
from skimq.summary.types import TokenSet
from skimq.utils.email import extract_domain

__all__ = [
    "extract_amounts",
    "extract_dates",
    "extract_domain",
    "extract_tokens",
    "find_amount_spans",
]


def find_amount_spans(text: str) -> list[tuple[int, int]]:
    """(start, end) offsets of every amount match, leftmost-first, non-overlapping."""
    if not text:
        return []
    return [match.span() for match in AMOUNT_RE.finditer(text)]


def extract_amounts(text: str) -> list[str]:
    """
    Collect currency amounts in order of appearance (duplicates kept).

    Examples:
        >>> extract_amounts("Total due: $1,234.56 by Friday")
        ['$1,234.56']

        >>> extract_amounts("Refund of 20 EUR, then another 20 EUR")
        ['20 EUR', '20 EUR']
    """
    if not text:
        return []
    return [match.group(0) for match in AMOUNT_RE.finditer(text)]


def extract_dates(text: str) -> list[str]:
    """
    Collect date/time phrases in order of appearance (duplicates kept).

    Examples:
        >>> extract_dates("Webinar Oct 12 at 3:30pm, reminder tomorrow")
        ['Oct 12', '3:30pm', 'tomorrow']
    """
    if not text:
        return []
    return [match.group(0) for match in DATE_RE.finditer(text)]


def extract_tokens(text: str, sender_email: str | None) -> TokenSet:
    """Build the TokenSet for a deduplicated summary and its sender."""
    return TokenSet(
        amounts=tuple(extract_amounts(text)),
        dates=tuple(extract_dates(text)),
        domain=extract_domain(sender_email),
    )
