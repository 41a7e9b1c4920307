"""
Command-line entry point: print the readable summary of one AI summary as JSON.

Usage:
    skimq-summarize --sender billing@acme.com --text "Invoice due $250.00 tomorrow."
    cat summary.txt | skimq-summarize --sender billing@acme.com
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence

from skimq import config
from skimq.observability.logging import set_level
from skimq.summary.pipeline import SummaryOptions, build_readable_summary


def _max_chars(value: str) -> int | None:
    """argparse type for --max-chars: a non-negative int, or "none" for the whole input."""
    if value.strip().lower() in ("", "none"):
        return None
    try:
        limit = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected an integer or 'none', got {value!r}"
        ) from None
    if limit < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {limit}")
    return limit


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skimq-summarize",
        description="Turn a raw AI email summary into a readable digest (JSON)",
    )
    parser.add_argument("--text", help="Summary text (default: read stdin)")
    parser.add_argument("--sender", default="", help="Sender email address")
    parser.add_argument(
        "--strip-source-prefix",
        action="store_true",
        default=config.SUMMARY_STRIP_SOURCE_PREFIX,
        help='Drop a leading "Email from X:" / "From: X -" attribution',
    )
    parser.add_argument(
        "--max-chars",
        type=_max_chars,
        default=config.SUMMARY_MAX_INPUT_CHARS,
        help="Cut input beyond this many characters ('none' = whole input, the default)",
    )
    parser.add_argument("--dates", action="store_true", help="Also emit date-refined segments")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default 2)")
    parser.add_argument("--log-level", help="Override SKIMQ_LOG_LEVEL (logs go to stderr)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_level:
        set_level(args.log_level)

    text = args.text if args.text is not None else sys.stdin.read()
    options = SummaryOptions(
        strip_source_prefix=args.strip_source_prefix,
        max_input_chars=args.max_chars,
    )
    summary = build_readable_summary(text, args.sender, options)

    payload = summary.to_dict()
    if args.dates:
        payload["date_segments"] = [segment.to_dict() for segment in summary.date_segments()]

    print(json.dumps(payload, indent=args.indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
