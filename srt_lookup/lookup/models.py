"""Pydantic result models for SRT lookups.

Results serialize with camelCase keys (``lineNumber``, ``firstLineNumber``)
so they can be handed to a tool-calling layer as JSON unchanged.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from srt_lookup.util.srt_util import RawLine


class LookupModel(BaseModel):
    """Base for result models: frozen, strict keys, camelCase aliases."""

    model_config = ConfigDict(frozen=True, extra="forbid", alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict with camelCase keys."""
        return self.model_dump(by_alias=True)


class LineContent(LookupModel):
    """A 1-based line number and the line's text."""

    line_number: int
    content: str

    @classmethod
    def from_raw_line(cls, raw_line: RawLine) -> "LineContent":
        """Build a line record from an indexed raw line."""
        return cls(line_number=raw_line.line_number, content=raw_line.content)


class FailureResult(LookupModel):
    """Tagged failure carrying a human-readable message."""

    success: Literal[False] = False
    message: str


class TimestampLookupResult(LookupModel):
    """Caption block matched for a timestamp, with optional surrounding context.

    ``start_line``/``end_line`` are the 1-based inclusive bounds of
    ``context_lines``; all three are None when context was not requested.
    """

    success: Literal[True] = True
    line_number: int
    start_line: int | None
    end_line: int | None
    entry: list[LineContent]
    context_lines: str | None


class LineWindowResult(LookupModel):
    """Lines read before or after a reference line."""

    success: Literal[True] = True
    lines: list[LineContent]
    note: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if data["note"] is None:
            del data["note"]
        return data


class PreviousLinesResult(LineWindowResult):
    """Window ending just before the reference line."""

    first_line_number: int | None


class NextLinesResult(LineWindowResult):
    """Window starting just after the reference line."""

    last_line_number: int | None


TimestampLookupOutcome = TimestampLookupResult | FailureResult
PreviousLinesOutcome = PreviousLinesResult | FailureResult
NextLinesOutcome = NextLinesResult | FailureResult
