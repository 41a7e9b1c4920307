"""
Pattern contracts for the readable-summary pipeline.

Every stage matches through the compiled expressions below, so the match
sets are defined in exactly one place. Conventions:

- Digits are spelled ``[0-9]``; non-ASCII digits never count.
- ``DATE_RE`` uses ASCII word boundaries (``re.ASCII``).
- All scans are left-to-right, leftmost-first, non-overlapping
  (``re.finditer`` semantics).
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Stage 1: boilerplate
# ---------------------------------------------------------------------------

# Case-insensitive substrings; a line containing any of them is dropped
BOILERPLATE_PHRASES: tuple[str, ...] = (
    "unsubscribe",
    "manage preferences",
    "view in browser",
    "privacy policy",
    "terms of service",
)

# One or more consecutive line breaks form a single split point
LINE_BREAK_RE = re.compile(r"(?:\r?\n)+")

# "Email from:" label some generators put in front of the summary
LEADING_LABEL_RE = re.compile(r"^\s*email\s+from\s*:", re.IGNORECASE)

# "Email from Acme: ..." / "From: Acme - ..." attribution (opt-in stripping)
SOURCE_PREFIX_RE = re.compile(
    r"^\s*(?:email\s+from\s+[^:]+:\s*|from:\s*[^-–—\n]+[-–—]?\s*)",
    re.IGNORECASE,
)

# ---------------------------------------------------------------------------
# Stage 2: emoji
# ---------------------------------------------------------------------------

# Misc symbols + dingbats, private use area, and everything above the BMP
# (pictographs, emoticons, transport, supplemental symbols)
EMOJI_RE = re.compile(r"[\u2600-\u27BF\uE000-\uF8FF\U0001F000-\U0010FFFF]")

# ---------------------------------------------------------------------------
# Stage 3: headline
# ---------------------------------------------------------------------------

# A run of non-terminal characters plus the terminal, if any. A period with a
# digit on both sides ("$250.00", "3.30pm") is part of the sentence.
SENTENCE_RE = re.compile(r"(?:[^.!?\n]|(?<=[0-9])\.(?=[0-9]))+[.!?]?")

# ---------------------------------------------------------------------------
# Stage 4: bullets
# ---------------------------------------------------------------------------

BULLET_LINE_RE = re.compile(r"^[-•]")
BULLET_MARKER_RE = re.compile(r"^[-•]\s?")
FALLBACK_SPLIT_RE = re.compile(r"[;•]")

# ---------------------------------------------------------------------------
# Stage 5: tokens
# ---------------------------------------------------------------------------

CURRENCY_CODES: tuple[str, ...] = ("USD", "EUR", "GBP")
_CURRENCY = "|".join(CURRENCY_CODES)

# "$1,234.56", "$ 40", "$1234" or "20 EUR", "19.99usd"
AMOUNT_RE = re.compile(
    r"\$\s?(?:[0-9]{1,3}(?:,[0-9]{3})+|[0-9]+)(?:\.[0-9]{2})?"
    rf"|[0-9]+(?:\.[0-9]{{2}})?\s?(?:{_CURRENCY})",
    re.IGNORECASE,
)

_MONTHS = (
    r"Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?"
    r"|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?"
)

# "Oct 12", "March 3", "10/12", "10/12/2025", "today", "tomorrow", "tonight",
# "3:30pm", "9.15 am". Clock times only need a word boundary in front, so
# "$25.00" and "12.50 USD" also yield "25.00" and "12.50".
DATE_RE = re.compile(
    rf"\b(?:(?:{_MONTHS})\s+[0-9]{{1,2}}"
    r"|[0-9]{1,2}/[0-9]{1,2}(?:/[0-9]{2,4})?"
    r"|(?:today|tomorrow|tonight)\b"
    r"|[0-9]{1,2}[:.][0-9]{2}(?:\s?(?:am|pm))?)",
    re.IGNORECASE | re.ASCII,
)
