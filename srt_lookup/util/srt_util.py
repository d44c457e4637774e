"""SRT timestamp parsing and caption-block extraction over raw file lines."""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import timedelta

import srt

logger = logging.getLogger(__name__)

TIMESTAMP_PATTERN = r"[0-9]{2}:[0-9]{2}:[0-9]{2},[0-9]{3}"

_TIMESTAMP_REGEX = re.compile(TIMESTAMP_PATTERN)
_TIMING_LINE_REGEX = re.compile(rf"^({TIMESTAMP_PATTERN})\s+-->\s+({TIMESTAMP_PATTERN})", re.ASCII)

_ONE_MILLISECOND = timedelta(milliseconds=1)


@dataclass(frozen=True)
class RawLine:
    """A single line of the source file.

    Attributes:
        line_number: 1-based position in the file.
        content: Literal text of the line, without its separator.
    """

    line_number: int
    content: str


@dataclass(frozen=True)
class CaptionBlock:
    """One caption record located in a file.

    Attributes:
        start_ms: Start offset in milliseconds.
        end_ms: End offset in milliseconds (inclusive, >= start_ms).
        timing_line_number: 1-based line number of the ``start --> end`` line.
        entry_lines: The contiguous non-blank lines surrounding the timing line
            (identifier, timing line and text lines).
    """

    start_ms: int
    end_ms: int
    timing_line_number: int
    entry_lines: tuple[RawLine, ...]

    def contains(self, target_ms: int) -> bool:
        """Check whether a millisecond offset falls inside this block's range."""
        return self.start_ms <= target_ms <= self.end_ms


class SRTUtil:
    """Utility class for SRT timestamp handling and caption indexing."""

    @staticmethod
    def parse_timestamp(value: str) -> int | None:
        """Parse an ``HH:MM:SS,mmm`` timestamp into milliseconds.

        Only the exact two-digit hour/minute/second, comma, three-digit
        millisecond form is accepted. Hours are not limited to a day.

        Args:
            value: Timestamp text.

        Returns:
            Offset in milliseconds, or None if the text is not a valid timestamp.
        """
        if not isinstance(value, str) or not _TIMESTAMP_REGEX.fullmatch(value):
            return None
        return srt.srt_timestamp_to_timedelta(value) // _ONE_MILLISECOND

    @staticmethod
    def format_timestamp(milliseconds: int) -> str:
        """Render milliseconds as an ``HH:MM:SS,mmm`` timestamp.

        Raises:
            ValueError: If milliseconds is negative.
        """
        if milliseconds < 0:
            raise ValueError(f"Timestamp cannot be negative: {milliseconds}")
        return srt.timedelta_to_srt_timestamp(timedelta(milliseconds=milliseconds))

    @staticmethod
    def extract_captions(lines: Sequence[str]) -> list[CaptionBlock]:
        """Locate every caption block in a file's lines.

        Each line matching ``TIMESTAMP --> TIMESTAMP`` is expanded up and down
        to the nearest blank line (or file edge). Candidates whose timestamps
        fail to parse or whose end precedes the start are skipped.

        Args:
            lines: File lines, 0-based.

        Returns:
            Caption blocks in ascending file position.
        """
        captions: list[CaptionBlock] = []

        for index, line in enumerate(lines):
            match = _TIMING_LINE_REGEX.match(line)
            if not match:
                continue

            start_ms = SRTUtil.parse_timestamp(match.group(1))
            end_ms = SRTUtil.parse_timestamp(match.group(2))
            if start_ms is None or end_ms is None:
                continue
            if end_ms < start_ms:
                logger.debug("Skipping reversed timing line %d: %s", index + 1, line)
                continue

            entry_start = index
            while entry_start > 0 and lines[entry_start - 1].strip():
                entry_start -= 1

            entry_end = index
            while entry_end + 1 < len(lines) and lines[entry_end + 1].strip():
                entry_end += 1

            captions.append(
                CaptionBlock(
                    start_ms=start_ms,
                    end_ms=end_ms,
                    timing_line_number=index + 1,
                    entry_lines=tuple(RawLine(line_number=i + 1, content=lines[i]) for i in range(entry_start, entry_end + 1)),
                )
            )

        return captions

    @staticmethod
    def is_ordered(captions: Sequence[CaptionBlock]) -> bool:
        """Check that caption ranges are ascending and non-overlapping.

        Blocks may touch (one ends exactly where the next starts), which is
        how most generated subtitle files are laid out. Binary search over
        the ranges is only well defined when this holds.

        Args:
            captions: Caption blocks in file order.

        Returns:
            True if no block starts before the previous one ends.
        """
        return all(prev.end_ms <= curr.start_ms for prev, curr in zip(captions, captions[1:], strict=False))
