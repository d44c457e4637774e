"""Shared fixtures for SRT lookup tests."""

from collections.abc import Sequence
from pathlib import Path

import pytest

from srt_lookup.config import SRTLookupConfig
from srt_lookup.lookup.service import SRTLookupService

# Generated long sample: block k covers [k * STEP_MS, k * STEP_MS + DURATION_MS]
# and occupies lines 4k+1 (index), 4k+2 (timing), 4k+3 (text), 4k+4 (blank).
LONG_SAMPLE_BLOCKS = 2000
STEP_MS = 2320
DURATION_MS = 1500
LONG_SAMPLE_TEXTS = {
    25: "我们要学群论干什么用或者是研究什么东西的",
    1410: "同构是说的什么呢",
    1940: "这个乘法表",
}


def ts(milliseconds: int) -> str:
    """Format milliseconds as HH:MM:SS,mmm."""
    seconds, ms = divmod(milliseconds, 1000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{ms:03d}"


def make_srt_content(blocks: Sequence[tuple[int, int, str]], newline: str = "\n") -> str:
    """Build SRT text from (start_ms, end_ms, text) tuples, numbered from 1."""
    parts = [f"{i}{newline}{ts(start)} --> {ts(end)}{newline}{text}{newline}" for i, (start, end, text) in enumerate(blocks, 1)]
    return newline.join(parts)


def long_sample_blocks() -> list[tuple[int, int, str]]:
    return [
        (k * STEP_MS, k * STEP_MS + DURATION_MS, LONG_SAMPLE_TEXTS.get(k, f"caption {k}"))
        for k in range(LONG_SAMPLE_BLOCKS)
    ]


@pytest.fixture
def sample_srt(tmp_path: Path) -> Path:
    """Three-block SRT file (12 lines, last one empty)."""
    srt_file = tmp_path / "sample.srt"
    content = make_srt_content(
        [
            (0, 2000, "First caption"),
            (3000, 5000, "Second caption"),
            (6000, 9000, "Third caption"),
        ]
    )
    srt_file.write_text(content, encoding="utf-8")
    return srt_file


@pytest.fixture
def long_srt(tmp_path: Path) -> Path:
    """Two-thousand-block SRT file with known text at a few blocks."""
    srt_file = tmp_path / "long.srt"
    srt_file.write_text(make_srt_content(long_sample_blocks()), encoding="utf-8")
    return srt_file


@pytest.fixture
def window_3_service() -> SRTLookupService:
    """Lookup service with a context window of 3 lines."""
    return SRTLookupService(config=SRTLookupConfig(context_window=3, init_window=2))
