"""StructuredPrompt → canonical text converter.

Canonical form, shown to users and copied to clipboards verbatim:
- one ``Label: value`` line per non-blank field, single space after the colon
- schema order, joined by ``\\n``, no trailing newline
- blank fields are omitted, so an empty prompt serializes to ``""``

Values are written as-is. There is no escaping: a value holding a newline
followed by another field's ``Label: `` will be read back as two fields.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .schema import PROMPT_FIELD_KEYS, StructuredPrompt, format_label

__all__ = ["serialize_prompt"]


def _value_of(record: StructuredPrompt | Mapping[str, Any], key: str) -> str:
    value = record.get(key)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def serialize_prompt(record: StructuredPrompt | Mapping[str, Any]) -> str:
    """Convert a structured prompt to canonical text.

    Args:
        record: A StructuredPrompt, or a mapping keyed by field identifier.
            Missing keys count as empty; unknown keys are ignored.

    Returns:
        Canonical prompt text.
    """
    lines = []
    for key in PROMPT_FIELD_KEYS:
        value = _value_of(record, key)
        if value.strip():
            lines.append(f"{format_label(key)}: {value}")
    return "\n".join(lines)
