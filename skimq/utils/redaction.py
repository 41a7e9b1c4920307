"""
Redaction helpers for anything that reaches the logs.

Provides:
- redact(): Hash sensitive strings for correlation without exposure
- redact_preview(): Short visible prefix plus hash for summary text
"""

from __future__ import annotations

from hashlib import sha256


def redact(value: str | None) -> str:
    """
    Return a stable hash representation of a sensitive string.
    """
    if not value:
        return "hash:missing"
    digest = sha256(value.encode("utf-8")).hexdigest()[:12]
    return f"hash:{digest}"


def redact_preview(text: str | None, max_length: int = 30) -> str:
    """
    Partially redact summary text for logging while preserving debuggability.

    Args:
        text: Summary text
        max_length: Maximum visible characters (default 30)

    Returns:
        Redacted preview like "Invoice due $250.00 tomor..." (h:abc123)
    """
    if not text:
        return "(empty)"

    visible = text[:max_length] + "..." if len(text) > max_length else text
    visible = visible.replace("\n", " ")

    digest = sha256(text.encode("utf-8")).hexdigest()[:6]
    return f"{visible} (h:{digest})"
