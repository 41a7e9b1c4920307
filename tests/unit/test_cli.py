"""Tests for the skimq-summarize command."""

import io
import json
import logging

import pytest

from skimq.cli import main
from skimq.observability.logging import PACKAGE_LOGGER


def test_text_argument(capsys):
    exit_code = main(["--text", "Invoice due $250.00 tomorrow.", "--sender", "billing@acme.com"])
    assert exit_code == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["tldr"] == "Invoice due $250.00 tomorrow."
    assert payload["segments"][1] == {"kind": "amount", "text": "$250.00"}
    assert payload["tokens"]["domain"] == "acme.com"
    assert "date_segments" not in payload


def test_reads_stdin(monkeypatch, capsys, invoice_summary):
    monkeypatch.setattr("sys.stdin", io.StringIO(invoice_summary))
    assert main(["--sender", "billing@acme.com"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["bullets"] == ["Pay via portal", "Contact billing if issues"]


def test_non_ascii_output_not_escaped(capsys):
    main(["--text", "📧 Hello."])
    out = capsys.readouterr().out
    assert "📧" in out


def test_dates_flag(capsys):
    main(["--text", "Webinar Oct 12 at 3:30pm", "--dates"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["date_segments"] == [
        {"kind": "plain", "text": "Webinar "},
        {"kind": "date", "text": "Oct 12"},
        {"kind": "plain", "text": " at "},
        {"kind": "date", "text": "3:30pm"},
        {"kind": "plain", "text": ""},
    ]


def test_strip_source_prefix_flag(capsys):
    main(["--text", "From: Acme - Sale ends tonight. Shop now", "--strip-source-prefix"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["tldr"] == "Sale ends tonight."


def test_max_chars(capsys):
    main(["--text", "Hello world, this is long", "--max-chars", "5"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["tldr"] == "Hello"


def test_max_chars_none_processes_whole_input(capsys):
    main(["--text", "Hello world, pay $5 later", "--max-chars", "none"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["tokens"]["amounts"] == ["$5"]


def test_max_chars_defaults_to_whole_input(capsys):
    text = "x " * 15_000 + "$7"
    main(["--text", text])
    payload = json.loads(capsys.readouterr().out)
    assert payload["tokens"]["amounts"] == ["$7"]


@pytest.mark.parametrize("value", ["lots", "-3"])
def test_max_chars_rejects_bad_values(value, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--text", "Hi", "--max-chars", value])
    assert exc_info.value.code == 2
    assert "--max-chars" in capsys.readouterr().err


def test_log_level_flag(capsys):
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    previous = package_logger.level
    try:
        main(["--text", "Hi.", "--log-level", "warning"])
        assert package_logger.level == logging.WARNING
    finally:
        package_logger.setLevel(previous)
    assert json.loads(capsys.readouterr().out)["tldr"] == "Hi."
