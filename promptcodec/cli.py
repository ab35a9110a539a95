#!/usr/bin/env python3
"""promptcodec - convert image prompts between text and structured fields.

Usage:
    promptcodec [input.txt] [--json] [--strict]
    promptcodec [response.json] --from-json [--json]
    promptcodec --labels
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .converter import serialize_prompt
from .parser import parse_prompt_report
from .producer import adopt_prompt_json
from .schema import PROMPT_FIELD_KEYS, format_label
from .utils import logging as app_logging
from .utils.errors import PromptAdoptionError

__all__ = ["convert", "main"]

EXIT_ADOPTION_ERROR = 1
EXIT_UNPARSEABLE = 2


def _read_input(source: str | None) -> str:
    if source is None or source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def convert(
    text: str, *, from_json: bool = False, as_json: bool = False, strict: bool = False
) -> tuple[str, bool]:
    """Convert prompt text (or generator JSON) to canonical text or JSON.

    Args:
        text: Input content.
        from_json: Treat input as a generator's JSON object instead of prompt text.
        as_json: Render the structured record as JSON instead of canonical text.
        strict: Report dropped lines as warnings rather than debug messages.

    Returns:
        Tuple of (rendered output, unparseable flag).
    """
    if from_json:
        record = adopt_prompt_json(text)
        unparseable = False
    else:
        report = parse_prompt_report(text)
        log = app_logging.logger.warning if strict else app_logging.logger.debug
        for line in report.unmatched_lines:
            log(f"Ignored line: {line!r}")
        record, unparseable = report.record, report.unparseable

    if as_json:
        return json.dumps(record.to_dict(), indent=2, ensure_ascii=False), unparseable
    return serialize_prompt(record), unparseable


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    p = argparse.ArgumentParser(
        prog="promptcodec",
        description="Convert image prompts between 'Label: value' text and structured fields",
    )
    p.add_argument("input", nargs="?", help="Input file (default: stdin)")
    p.add_argument("--json", action="store_true", help="Print the structured record as JSON")
    p.add_argument("--from-json", action="store_true", help="Input is a generator's JSON object")
    p.add_argument("--strict", action="store_true", help=f"Exit {EXIT_UNPARSEABLE} when no line matches a field")
    p.add_argument("--labels", action="store_true", help="List schema fields and their labels")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = _build_parser().parse_args(argv)
    app_logging.init("DEBUG" if args.verbose else None)

    if args.labels:
        for key in PROMPT_FIELD_KEYS:
            print(f"{key}\t{format_label(key)}")
        return 0

    text = _read_input(args.input)
    try:
        output, unparseable = convert(
            text, from_json=args.from_json, as_json=args.json, strict=args.strict
        )
    except PromptAdoptionError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ADOPTION_ERROR

    if output:
        print(output)

    if args.strict and unparseable:
        print("error: no line matched a prompt field", file=sys.stderr)
        return EXIT_UNPARSEABLE
    return 0


if __name__ == "__main__":
    sys.exit(main())
