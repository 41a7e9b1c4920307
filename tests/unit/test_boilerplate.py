"""Unit tests for boilerplate filtering (stage 1)."""

from __future__ import annotations

import pytest

from skimq.summary.boilerplate import is_boilerplate_line, strip_boilerplate, strip_source_prefix
from skimq.summary.patterns import BOILERPLATE_PHRASES


def test_drops_unsubscribe_line():
    """Footer lines are removed, content lines survive in order."""
    text = "Invoice due Friday.\nUnsubscribe here\nPay via portal"
    assert strip_boilerplate(text) == "Invoice due Friday.\nPay via portal"


@pytest.mark.parametrize(
    "line",
    [
        "UNSUBSCRIBE",
        "Manage Preferences | Help",
        "View in browser",
        "Read our Privacy Policy",
        "terms of service apply",
    ],
)
def test_every_phrase_matches_case_insensitively(line):
    assert is_boilerplate_line(line)
    assert strip_boilerplate(f"Keep me\n{line}") == "Keep me"


def test_consecutive_newlines_collapse():
    """Blank lines between content disappear; survivors joined with single newlines."""
    assert strip_boilerplate("Hello\n\n\nWorld") == "Hello\nWorld"


def test_crlf_line_breaks():
    assert strip_boilerplate("Hello\r\nView in browser\r\nWorld") == "Hello\nWorld"


def test_all_lines_boilerplate_gives_empty_string():
    text = "Unsubscribe\nPrivacy Policy\nTerms of Service"
    assert strip_boilerplate(text) == ""


def test_none_and_empty_input():
    assert strip_boilerplate(None) == ""
    assert strip_boilerplate("") == ""


def test_outer_whitespace_stripped():
    assert strip_boilerplate("  \nHello world  \n") == "Hello world"


def test_leading_email_from_label_removed():
    assert strip_boilerplate("Email from: Acme weekly update") == "Acme weekly update"


def test_no_boilerplate_line_survives():
    """No surviving line contains a boilerplate phrase."""
    text = "\n".join(
        [
            "Your order shipped.",
            "Click to unsubscribe",
            "- Arrives Oct 14",
            "Manage preferences",
            "view IN browser",
        ]
    )
    result = strip_boilerplate(text)
    for line in result.split("\n"):
        assert not any(phrase in line.lower() for phrase in BOILERPLATE_PHRASES)
    assert result == "Your order shipped.\n- Arrives Oct 14"


class TestStripSourcePrefix:
    """Tests for the opt-in attribution stripping."""

    def test_email_from_attribution(self):
        assert strip_source_prefix("Email from Acme Corp: Your order shipped") == (
            "Your order shipped"
        )

    def test_from_dash_attribution(self):
        assert strip_source_prefix("From: Acme - Sale ends today") == "Sale ends today"

    def test_text_without_prefix_unchanged(self):
        assert strip_source_prefix("Sale ends today") == "Sale ends today"

    def test_empty(self):
        assert strip_source_prefix("") == ""
