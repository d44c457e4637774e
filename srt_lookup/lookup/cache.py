"""In-memory cache of indexed SRT files, invalidated by modification time."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from srt_lookup.util.fs_util import FSUtil
from srt_lookup.util.srt_util import CaptionBlock, SRTUtil

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileIndex:
    """Lines and caption blocks of one file at one version.

    Attributes:
        version: Modification time the index was built from.
        lines: File lines, 0-based.
        captions: Caption blocks in ascending file position.
        ordered: True when caption ranges are ascending and non-overlapping.
    """

    version: int
    lines: tuple[str, ...]
    captions: tuple[CaptionBlock, ...]
    ordered: bool

    @property
    def line_count(self) -> int:
        """Number of lines in the indexed file."""
        return len(self.lines)


def build_file_index(file_path: Path, version: int) -> FileIndex:
    """Load a file and index its caption blocks.

    Args:
        file_path: Path to the SRT file.
        version: Version token to stamp on the index.

    Returns:
        Freshly built FileIndex.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the path is not a file.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    lines = FSUtil.read_lines(file_path)
    captions = SRTUtil.extract_captions(lines)
    ordered = SRTUtil.is_ordered(captions)
    if not ordered:
        logger.warning(
            "Caption ranges in %s overlap or are out of order; timestamp lookups fall back to a linear scan",
            file_path,
        )
    return FileIndex(version=version, lines=tuple(lines), captions=tuple(captions), ordered=ordered)


class SRTIndexCache:
    """Mapping from file path to the most recently built FileIndex.

    Each lookup costs one ``stat`` call; the file is only re-read and
    re-indexed when its modification time differs from the cached entry.

    Not synchronized. Concurrent callers may rebuild the same stale entry
    more than once (the last write wins with an equivalent index). Hosts
    that need exactly one rebuild per change must serialize calls to
    ``get_or_build`` themselves, e.g. with a per-path lock.
    """

    def __init__(self) -> None:
        self._entries: dict[str, FileIndex] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, file_path: object) -> bool:
        if not isinstance(file_path, str | Path):
            return False
        return str(file_path) in self._entries

    def get_or_build(self, file_path: str | Path) -> FileIndex:
        """Return the index for a file, rebuilding it if the file changed.

        Args:
            file_path: Path to the SRT file.

        Returns:
            FileIndex reflecting the file's current modification time.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the path is not a file.
            UnicodeDecodeError: If the file is not valid UTF-8.
        """
        path = Path(file_path)
        key = str(file_path)
        version = FSUtil.get_version(path)

        cached = self._entries.get(key)
        if cached is not None and cached.version == version:
            logger.debug("Cache hit: %s (version=%d)", key, version)
            return cached

        if cached is None:
            logger.debug("Cache miss: %s", key)
        else:
            logger.debug("Cache stale: %s (cached=%d, current=%d)", key, cached.version, version)

        index = build_file_index(path, version)
        self._entries[key] = index
        logger.info("Indexed %s: %d lines, %d captions", key, index.line_count, len(index.captions))
        return index
