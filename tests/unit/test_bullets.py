"""Unit tests for bullet extraction (stage 4)."""

from __future__ import annotations

import pytest

from skimq.summary.bullets import MAX_BULLETS, extract_bullets


class TestMarkedBullets:
    """Primary strategy: "-" / "•" lines."""

    def test_dash_lines_first_two_only(self):
        text = "Headline.\n- Pay via portal\n- Contact billing\n- Third item"
        assert extract_bullets(text) == ["Pay via portal", "Contact billing"]

    def test_bullet_character(self):
        assert extract_bullets("Headline\n• One\n•Two") == ["One", "Two"]

    def test_indented_lines_are_trimmed_first(self):
        assert extract_bullets("Headline\n   - Indented fact") == ["Indented fact"]

    def test_only_one_space_after_marker_removed(self):
        assert extract_bullets("Headline\n-  Two spaces") == [" Two spaces"]

    def test_marker_glued_to_amount(self):
        assert extract_bullets("Refunds\n-$5 credit applied") == ["$5 credit applied"]

    def test_primary_wins_over_semicolons(self):
        """Fallback never runs when marker lines exist."""
        text = "Head; first; second\n- Marked fact"
        assert extract_bullets(text) == ["Marked fact"]


class TestFallbackBullets:
    """Fallback strategy: ";" / "•" fragments after the first."""

    def test_semicolons_skip_first_fragment(self):
        text = "Summary; first fact; second fact; third fact"
        assert extract_bullets(text) == ["first fact", "second fact"]

    def test_inline_bullet_character(self):
        text = "Deal ends Sunday • 20% off • free shipping"
        assert extract_bullets(text) == ["20% off", "free shipping"]

    def test_single_fragment_after_skip(self):
        assert extract_bullets("Head; only one") == ["only one"]

    def test_empty_fragments_discarded(self):
        assert extract_bullets("Head;; ;next") == ["next"]

    def test_no_separators(self):
        assert extract_bullets("Just a sentence.") == []

    def test_only_separators(self):
        assert extract_bullets(";; ;") == []


def test_empty_input():
    assert extract_bullets("") == []


@pytest.mark.parametrize(
    "text",
    [
        "- a\n- b\n- c\n- d",
        "a; b; c; d; e",
        "• a • b • c • d",
        "x",
    ],
)
def test_never_more_than_two(text):
    assert len(extract_bullets(text)) <= MAX_BULLETS
