"""promptcodec - image prompt text ⇄ structured fields.

Parses ``Label: value`` prompt text into a fixed-shape record and serializes
records back to canonical text.

Example:
    >>> from promptcodec import parse_prompt, serialize_prompt
    >>> record = parse_prompt("Subject: a red fox\\nMood: whimsical")
    >>> serialize_prompt(record)
    'Subject: a red fox\\nMood: whimsical'
"""

from .converter import serialize_prompt
from .parser import ParseReport, parse_prompt, parse_prompt_report
from .producer import PROMPT_JSON_SCHEMA, adopt_prompt, adopt_prompt_json, build_generation_instruction
from .schema import (
    PROMPT_FIELD_KEYS,
    SCHEMA_VERSION,
    StructuredPrompt,
    default_prompt,
    format_label,
    prompt_from_mapping,
)
from .session import PromptSession
from .utils.errors import PromptAdoptionError, PromptCodecError, UnknownFieldError

__all__ = [
    "adopt_prompt",
    "adopt_prompt_json",
    "build_generation_instruction",
    "default_prompt",
    "format_label",
    "parse_prompt",
    "parse_prompt_report",
    "prompt_from_mapping",
    "serialize_prompt",
    "ParseReport",
    "PromptAdoptionError",
    "PromptCodecError",
    "PromptSession",
    "StructuredPrompt",
    "UnknownFieldError",
    "PROMPT_FIELD_KEYS",
    "PROMPT_JSON_SCHEMA",
    "SCHEMA_VERSION",
]
