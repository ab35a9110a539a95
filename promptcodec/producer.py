"""Generation-producer boundary.

A text/JSON generator (typically a vision model asked to describe an image)
returns either prompt text, which goes through the parser, or a JSON object
keyed by field identifier, which is adopted here directly. No network calls
happen in this module; callers own the client.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

from .schema import PROMPT_FIELD_KEYS, StructuredPrompt, format_label, prompt_from_mapping
from .utils.errors import PromptAdoptionError
from .utils.logging import logger

__all__ = [
    "PROMPT_JSON_SCHEMA",
    "adopt_prompt",
    "adopt_prompt_json",
    "build_generation_instruction",
    "strip_code_fences",
]

PROMPT_JSON_SCHEMA: dict[str, Any] = StructuredPrompt.model_json_schema(by_alias=True)

_FENCE = re.compile(r"^```(?:json)?\s*\n?(.*?)\n?\s*```$", re.DOTALL | re.IGNORECASE)

_INSTRUCTION = """Analyze the image and describe it as a prompt for an image generator.
Answer with a single JSON object using exactly these keys:
{fields}

Every value is a short plain-text phrase. Use an empty string for aspects that do not apply.
Output valid JSON only, no markdown fences.

SCHEMA:
{schema}"""


def build_generation_instruction() -> str:
    """System instruction asking a generator for schema-shaped JSON."""
    fields = "\n".join(f"- {key} ({format_label(key)})" for key in PROMPT_FIELD_KEYS)
    return _INSTRUCTION.format(fields=fields, schema=json.dumps(PROMPT_JSON_SCHEMA, indent=2))


def strip_code_fences(text: str) -> str:
    """Remove a markdown code fence wrapped around a generator response."""
    text = text.strip()
    if match := _FENCE.match(text):
        return match.group(1).strip()
    return text


def adopt_prompt(payload: Mapping[str, Any]) -> StructuredPrompt:
    """Adopt a generator's JSON object as a StructuredPrompt.

    Missing keys default to empty strings; extra keys are ignored.
    """
    if not isinstance(payload, Mapping):
        raise PromptAdoptionError(
            f"Expected a JSON object for the prompt, got {type(payload).__name__}"
        )
    extra = sorted(set(payload) - set(PROMPT_FIELD_KEYS))
    if extra:
        logger.debug(f"Ignoring unknown prompt keys from generator: {extra}")
    return prompt_from_mapping(payload)


def adopt_prompt_json(raw: str) -> StructuredPrompt:
    """Parse a generator's raw JSON response and adopt it."""
    try:
        payload = json.loads(strip_code_fences(raw))
    except json.JSONDecodeError as e:
        raise PromptAdoptionError(
            "Failed to parse the prompt from the generator. The response was not valid JSON."
        ) from e
    return adopt_prompt(payload)
