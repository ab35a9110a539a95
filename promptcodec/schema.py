"""Pydantic schema for structured image prompts.

A structured prompt holds exactly one free-text value per field of a fixed,
ordered schema. The order is significant: it drives both the canonical text
serialization and the display order of any field editor.

Field identifiers are camelCase (the keys a generator produces and the keys
of ``to_dict()``); Python attributes are their snake_case equivalents.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from .utils.errors import UnknownFieldError

__all__ = [
    "SCHEMA_VERSION",
    "PROMPT_FIELD_KEYS",
    "StructuredPrompt",
    "default_prompt",
    "format_label",
    "label_key",
    "field_for_label",
    "prompt_from_mapping",
]

SCHEMA_VERSION = 1

_UPPER = re.compile(r"(?<!^)([A-Z])")
_WHITESPACE = re.compile(r"\s+")


class StructuredPrompt(BaseModel):
    """Structured representation of an image-generation prompt.

    Instances are frozen; use ``with_field`` to derive an edited copy.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    subject: str = ""
    background: str = ""
    style: str = ""
    lighting: str = ""
    color_palette: str = ""
    composition: str = ""
    mood: str = ""
    camera_angle: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        if isinstance(value, (list, tuple)):
            return ", ".join(str(item) for item in value if item is not None)
        return str(value)

    def __getitem__(self, key: str) -> str:
        return getattr(self, _attribute_for(key))

    def get(self, key: str, default: str = "") -> str:
        attr = _ATTRIBUTE_BY_KEY.get(key)
        return default if attr is None else getattr(self, attr)

    def with_field(self, key: str, value: str) -> StructuredPrompt:
        """Return a copy with one field replaced."""
        _attribute_for(key)
        data = self.to_dict()
        data[key] = value
        return StructuredPrompt.model_validate(data)

    def to_dict(self) -> dict[str, str]:
        """Values keyed by field identifier, in schema order."""
        return {key: getattr(self, attr) for key, attr in _ATTRIBUTE_BY_KEY.items()}

    def is_empty(self) -> bool:
        return not any(value.strip() for value in self.to_dict().values())


_ATTRIBUTE_BY_KEY: dict[str, str] = {
    info.alias or name: name for name, info in StructuredPrompt.model_fields.items()
}

PROMPT_FIELD_KEYS: tuple[str, ...] = tuple(_ATTRIBUTE_BY_KEY)


def _attribute_for(key: str) -> str:
    try:
        return _ATTRIBUTE_BY_KEY[key]
    except KeyError:
        raise UnknownFieldError(key) from None


def format_label(key: str) -> str:
    """Derive the human label for a field identifier.

    ``colorPalette`` -> ``Color palette``
    """
    spaced = _UPPER.sub(lambda m: " " + m.group(1).lower(), key)
    return spaced[:1].upper() + spaced[1:]


def label_key(label: str) -> str:
    """Normalize label text for case- and whitespace-insensitive comparison."""
    return _WHITESPACE.sub("", label).casefold()


_FIELD_BY_LABEL_KEY: dict[str, str] = {
    label_key(format_label(key)): key for key in PROMPT_FIELD_KEYS
}


def field_for_label(label: str) -> str | None:
    """Map label text back to its field identifier, or None if it names no field."""
    return _FIELD_BY_LABEL_KEY.get(label_key(label))


def default_prompt() -> StructuredPrompt:
    """A prompt with every field empty."""
    return StructuredPrompt()


def prompt_from_mapping(data: Mapping[str, Any]) -> StructuredPrompt:
    """Build a prompt from a mapping keyed by field identifier.

    Missing keys become empty strings and unknown keys are dropped.
    """
    return StructuredPrompt.model_validate({k: v for k, v in data.items() if k in _ATTRIBUTE_BY_KEY})
