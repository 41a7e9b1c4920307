"""Emoji deduplication: the first emoji stays, every later one is deleted."""

from __future__ import annotations

from dataclasses import dataclass

from skimq.summary.patterns import EMOJI_RE


@dataclass(frozen=True)
class EmojiResult:
    """Deduplicated text plus the emoji that was kept ("" if none)."""

    text: str
    emoji: str


def dedupe_emoji(text: str) -> EmojiResult:
    """
    Keep the first emoji match and delete all later ones.

    Deleted emoji are not replaced, not even by whitespace. Running the
    function on its own output changes nothing.
    """
    if not text:
        return EmojiResult(text="", emoji="")

    kept = ""
    parts: list[str] = []
    last_end = 0
    for match in EMOJI_RE.finditer(text):
        if not kept:
            kept = match.group(0)
            continue
        parts.append(text[last_end : match.start()])
        last_end = match.end()

    parts.append(text[last_end:])
    return EmojiResult(text="".join(parts), emoji=kept)
