"""Tool wrappers that bind lookup operations to a single SRT file.

Each tool takes JSON-schema-described arguments and returns a JSON string,
the shape expected by function-calling LLM clients.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from srt_lookup.lookup.models import FailureResult, LookupModel
from srt_lookup.lookup.service import SRTLookupService
from srt_lookup.util.srt_util import TIMESTAMP_PATTERN

logger = logging.getLogger(__name__)


class TimestampArgs(BaseModel):
    """Arguments for get_lines_at_timestamp."""

    timestamp: str = Field(
        ...,
        pattern=rf"^{TIMESTAMP_PATTERN}$",
        description="Timestamp formatted as HH:MM:SS,mmm to look up within the subtitle.",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")


class LineNumberArgs(BaseModel):
    """Arguments for the previous/next line readers."""

    line_number: int = Field(
        ...,
        alias="lineNumber",
        ge=1,
        description="1-based line number used as the reference point.",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")


@dataclass(frozen=True)
class SRTTool:
    """A named operation with an argument model and a handler."""

    name: str
    description: str
    args_model: type[BaseModel]
    handler: Callable[[Any], LookupModel]

    def definition(self) -> dict[str, Any]:
        """Function-calling definition: name, description and JSON schema."""
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.args_model.model_json_schema(by_alias=True),
        }


class SRTTools:
    """The SRT lookup tools bound to one file path."""

    def __init__(self, file_path: str | Path, service: SRTLookupService | None = None) -> None:
        """Bind the tools to a file.

        Args:
            file_path: SRT file every tool call reads from.
            service: Lookup service to use. A new one with default windows is
                created when omitted.

        Raises:
            ValueError: If file_path is empty.
        """
        if not str(file_path):
            raise ValueError("SRT file path must be provided when creating the tool.")
        self._file_path = str(file_path)
        self._service = service if service is not None else SRTLookupService()
        self._tools = {
            tool.name: tool
            for tool in (
                SRTTool(
                    name="get_lines_at_timestamp",
                    description=(
                        "Given a timestamp (HH:MM:SS,mmm), return the matching subtitle entry with its line number, "
                        "start/end line numbers, and surrounding context lines (including content from x lines before "
                        "to x lines after the matched entry) as JSON."
                    ),
                    args_model=TimestampArgs,
                    handler=self._get_lines_at_timestamp,
                ),
                SRTTool(
                    name="read_previous_srt_lines",
                    description="Read the configured number of lines before a given SRT line number and return them as JSON.",
                    args_model=LineNumberArgs,
                    handler=self._read_previous_lines,
                ),
                SRTTool(
                    name="read_next_srt_lines",
                    description="Read the configured number of lines after a given SRT line number and return them as JSON.",
                    args_model=LineNumberArgs,
                    handler=self._read_next_lines,
                ),
            )
        }

    @property
    def file_path(self) -> str:
        return self._file_path

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def definitions(self) -> list[dict[str, Any]]:
        """Return function-calling definitions for all tools."""
        return [tool.definition() for tool in self._tools.values()]

    def invoke(self, name: str, arguments: dict[str, Any]) -> str:
        """Run a tool and return its result as a JSON string.

        Args:
            name: Tool name.
            arguments: Raw arguments, validated against the tool's schema.

        Returns:
            JSON-encoded result. Invalid arguments produce a failure result.

        Raises:
            KeyError: If no tool has the given name.
        """
        if name not in self._tools:
            raise KeyError(f"Unknown SRT tool: {name}")
        tool = self._tools[name]

        logger.info("[tool:%s] %s", name, json.dumps({"filePath": self._file_path, **arguments}, ensure_ascii=False))
        try:
            args = tool.args_model.model_validate(arguments)
        except ValidationError as e:
            error_messages = "; ".join(f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors())
            result: LookupModel = FailureResult(message=f"Invalid arguments for {name}: {error_messages}")
        else:
            result = tool.handler(args)

        return json.dumps(result.to_dict(), ensure_ascii=False)

    def _get_lines_at_timestamp(self, args: TimestampArgs) -> LookupModel:
        return self._service.get_lines_at_timestamp(self._file_path, args.timestamp)

    def _read_previous_lines(self, args: LineNumberArgs) -> LookupModel:
        return self._service.read_previous_lines(self._file_path, args.line_number)

    def _read_next_lines(self, args: LineNumberArgs) -> LookupModel:
        return self._service.read_next_lines(self._file_path, args.line_number)
