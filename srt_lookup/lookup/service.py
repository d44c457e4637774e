"""Public lookup operations over cached SRT files.

Every operation returns a success or failure model instead of raising for
expected conditions: malformed timestamps, timestamps outside every caption
and unreadable files all come back as a ``FailureResult``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from srt_lookup.config import SRTLookupConfig
from srt_lookup.lookup.cache import FileIndex, SRTIndexCache
from srt_lookup.lookup.models import (
    FailureResult,
    LineContent,
    NextLinesOutcome,
    NextLinesResult,
    PreviousLinesOutcome,
    PreviousLinesResult,
    TimestampLookupOutcome,
    TimestampLookupResult,
)
from srt_lookup.lookup.resolver import find_caption
from srt_lookup.lookup.window import window_after, window_around, window_before
from srt_lookup.util.srt_util import SRTUtil

logger = logging.getLogger(__name__)

INVALID_TIMESTAMP_MESSAGE = "Invalid timestamp format. Expected HH:MM:SS,mmm."
NO_MATCH_MESSAGE = "No subtitle entry matches the provided timestamp."
START_OF_FILE_NOTE = "Requested line is at the start of the file."
END_OF_FILE_NOTE = "Requested line is at or beyond the end of the file."


def _slice_lines(lines: tuple[str, ...], start: int, stop: int) -> list[LineContent]:
    return [LineContent(line_number=index + 1, content=lines[index]) for index in range(start, stop)]


class SRTLookupService:
    """Timestamp resolution and line-window reads backed by an SRTIndexCache."""

    def __init__(self, *, config: SRTLookupConfig | None = None, cache: SRTIndexCache | None = None) -> None:
        self._config = config if config is not None else SRTLookupConfig()
        self._cache = cache if cache is not None else SRTIndexCache()

    @property
    def config(self) -> SRTLookupConfig:
        return self._config

    @property
    def cache(self) -> SRTIndexCache:
        return self._cache

    def _load_index(self, file_path: str | Path) -> FileIndex | FailureResult:
        try:
            return self._cache.get_or_build(file_path)
        except (OSError, UnicodeDecodeError, ValueError) as e:
            logger.warning("Failed to load %s: %s", file_path, e)
            return FailureResult(message=str(e))

    def get_lines_at_timestamp(
        self,
        file_path: str | Path,
        timestamp: str,
        *,
        include_context: bool = True,
    ) -> TimestampLookupOutcome:
        """Find the caption block active at a timestamp.

        Args:
            file_path: Path to the SRT file.
            timestamp: Target time as ``HH:MM:SS,mmm``.
            include_context: Also return ``init_window`` raw lines on each side
                of the matched timing line.

        Returns:
            TimestampLookupResult on a match, otherwise FailureResult.
        """
        target_ms = SRTUtil.parse_timestamp(timestamp)
        if target_ms is None:
            return FailureResult(message=INVALID_TIMESTAMP_MESSAGE)

        index = self._load_index(file_path)
        if isinstance(index, FailureResult):
            return index

        caption = find_caption(index.captions, target_ms, ordered=index.ordered)
        if caption is None:
            logger.debug("No caption at %s in %s", timestamp, file_path)
            return FailureResult(message=NO_MATCH_MESSAGE)

        entry = [LineContent.from_raw_line(raw_line) for raw_line in caption.entry_lines]
        if not include_context:
            return TimestampLookupResult(
                line_number=caption.timing_line_number,
                start_line=None,
                end_line=None,
                entry=entry,
                context_lines=None,
            )

        start, stop = window_around(caption.timing_line_number, self._config.init_window, index.line_count)
        return TimestampLookupResult(
            line_number=caption.timing_line_number,
            start_line=start + 1,
            end_line=stop,
            entry=entry,
            context_lines="\n".join(index.lines[start:stop]),
        )

    def read_previous_lines(self, file_path: str | Path, line_number: int) -> PreviousLinesOutcome:
        """Read up to ``context_window`` lines ending just before line_number.

        Args:
            file_path: Path to the SRT file.
            line_number: 1-based reference line.

        Returns:
            PreviousLinesResult (possibly empty), or FailureResult on I/O errors.
        """
        if line_number <= 1:
            return PreviousLinesResult(lines=[], first_line_number=None, note=START_OF_FILE_NOTE)

        index = self._load_index(file_path)
        if isinstance(index, FailureResult):
            return index

        start, stop = window_before(line_number, self._config.context_window, index.line_count)
        lines = _slice_lines(index.lines, start, stop)
        return PreviousLinesResult(
            lines=lines,
            first_line_number=lines[0].line_number if lines else None,
        )

    def read_next_lines(self, file_path: str | Path, line_number: int) -> NextLinesOutcome:
        """Read up to ``context_window`` lines starting just after line_number.

        Args:
            file_path: Path to the SRT file.
            line_number: 1-based reference line.

        Returns:
            NextLinesResult (possibly empty), or FailureResult on I/O errors.
        """
        index = self._load_index(file_path)
        if isinstance(index, FailureResult):
            return index

        if line_number >= index.line_count:
            return NextLinesResult(lines=[], last_line_number=None, note=END_OF_FILE_NOTE)

        start, stop = window_after(line_number, self._config.context_window, index.line_count)
        lines = _slice_lines(index.lines, start, stop)
        return NextLinesResult(
            lines=lines,
            last_line_number=lines[-1].line_number if lines else None,
        )
