"""
Exception hierarchy for promptcodec.

Parsing and serializing never raise for text content; these cover
programming errors (unknown field identifiers) and the producer boundary.
"""


class PromptCodecError(Exception):
    """Base class for all promptcodec errors."""


class UnknownFieldError(PromptCodecError, KeyError):
    """Raised when a field identifier is not part of the prompt schema."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unknown prompt field: {key!r}")

    def __str__(self) -> str:
        return self.args[0]


class PromptAdoptionError(PromptCodecError, ValueError):
    """Raised when generator output cannot be adopted as a structured prompt."""
