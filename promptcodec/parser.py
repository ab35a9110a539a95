"""Canonical text → StructuredPrompt parser.

Reads ``Label: value`` lines against the fixed prompt schema. This is a
*lenient* extraction: lines without a colon or with an unknown label are
dropped, and a label seen twice keeps its last value. Nothing here raises
for malformed text; "nothing matched" is reported as a value.
"""

from __future__ import annotations

from dataclasses import dataclass

from .schema import PROMPT_FIELD_KEYS, StructuredPrompt, field_for_label
from .utils.logging import logger

__all__ = ["ParseReport", "parse_prompt", "parse_prompt_report"]


@dataclass(frozen=True)
class ParseReport:
    """Outcome of parsing, with the lines that did not map to a field."""

    record: StructuredPrompt
    matched: tuple[str, ...] = ()
    unmatched_lines: tuple[str, ...] = ()
    blank_input: bool = True

    @property
    def unparseable(self) -> bool:
        """Non-blank text in which no line named a schema field."""
        return not self.blank_input and not self.matched


def _split_label(line: str) -> tuple[str, str] | None:
    label, sep, value = line.partition(":")
    if not sep:
        return None
    return label.strip(), value.strip()


def parse_prompt_report(text: str | None) -> ParseReport:
    """Parse prompt text and report which fields matched and which lines were dropped.

    Args:
        text: Free-form prompt text, ideally one ``Label: value`` per line.

    Returns:
        ParseReport whose ``record`` has every schema field set.
    """
    text = text or ""
    values: dict[str, str] = {}
    unmatched: list[str] = []

    for line in text.split("\n"):
        parts = _split_label(line)
        key = field_for_label(parts[0]) if parts else None
        if key is None:
            if line.strip():
                unmatched.append(line.rstrip("\r"))
            continue
        values[key] = parts[1]

    if unmatched:
        logger.debug(f"Dropped {len(unmatched)} prompt line(s) without a known label")

    return ParseReport(
        record=StructuredPrompt.model_validate(values),
        matched=tuple(key for key in PROMPT_FIELD_KEYS if key in values),
        unmatched_lines=tuple(unmatched),
        blank_input=not text.strip(),
    )


def parse_prompt(text: str | None) -> StructuredPrompt:
    """Parse prompt text into a StructuredPrompt; unmatched fields stay empty."""
    return parse_prompt_report(text).record
