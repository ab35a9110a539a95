"""
Editor session state: the current flat prompt text and its structured view.

Owned by the UI layer. Editing either representation re-derives the other;
the codec functions it calls stay stateless.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from .converter import serialize_prompt
from .parser import parse_prompt_report
from .producer import adopt_prompt, adopt_prompt_json
from .schema import StructuredPrompt, default_prompt
from .utils.logging import logger


@dataclass
class PromptSession:
    """Synchronised text/structured prompt pair for a single editor."""
    text: str = ""
    structured: Optional[StructuredPrompt] = None

    def edit_text(self, text: str) -> Optional[StructuredPrompt]:
        """Replace the flat text and re-derive the structured view."""
        self.text = text
        if not text.strip():
            self.structured = None
            return None

        report = parse_prompt_report(text)
        if report.unparseable:
            # Flat text stays as typed; the editor shows empty fields.
            logger.warning("Could not parse prompt text into structured fields")
            self.structured = default_prompt()
        else:
            self.structured = report.record
        return self.structured

    def edit_field(self, key: str, value: str) -> str:
        """Replace one structured field and re-derive the flat text."""
        base = self.structured if self.structured is not None else default_prompt()
        self.structured = base.with_field(key, value)
        self.text = serialize_prompt(self.structured)
        return self.text

    def load_generated(self, payload: Union[str, Mapping[str, Any]]) -> Optional[StructuredPrompt]:
        """Take a generator's JSON response (raw or decoded) as the new prompt."""
        record = adopt_prompt_json(payload) if isinstance(payload, str) else adopt_prompt(payload)
        return self.edit_text(serialize_prompt(record))

    def clear(self) -> None:
        self.text = ""
        self.structured = None
