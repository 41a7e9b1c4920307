"""Unit tests for headline extraction (stage 3)."""

from __future__ import annotations

from skimq.summary.tldr import extract_tldr, locate_tldr


def test_first_sentence_with_terminal():
    assert extract_tldr("Invoice due Friday. Pay now.") == "Invoice due Friday."


def test_question_and_exclamation_terminals():
    assert extract_tldr("Is it due? Yes.") == "Is it due?"
    assert extract_tldr("Sale ends tonight! Shop now.") == "Sale ends tonight!"


def test_stops_before_newline():
    assert extract_tldr("First line\nSecond line.") == "First line"


def test_no_terminal_returns_whole_text():
    assert extract_tldr("No terminal at all") == "No terminal at all"


def test_empty_input():
    assert extract_tldr("") == ""


def test_surrounding_whitespace_trimmed():
    assert extract_tldr("  Hello world!  More") == "Hello world!"


def test_decimal_amount_does_not_end_sentence():
    """The period inside "$250.00" is not a sentence terminal."""
    assert extract_tldr("📧 Invoice due $250.00 tomorrow. Pay now.") == (
        "📧 Invoice due $250.00 tomorrow."
    )


def test_clock_time_does_not_end_sentence():
    assert extract_tldr("Meet at 3.30pm today. Bring docs") == "Meet at 3.30pm today."


def test_only_terminals_returns_whole_input():
    assert extract_tldr("...") == "..."
    assert extract_tldr("?!") == "?!"


def test_locate_returns_stripped_span():
    text = "  Hi. there"
    start, end = locate_tldr(text)
    assert (start, end) == (2, 5)
    assert text[start:end] == "Hi."


def test_locate_empty():
    assert locate_tldr("") == (0, 0)
