"""Locate the caption block active at a given millisecond offset."""

from bisect import bisect_left
from collections.abc import Sequence

from srt_lookup.util.srt_util import CaptionBlock


def binary_search_caption(captions: Sequence[CaptionBlock], target_ms: int) -> CaptionBlock | None:
    """Find the caption containing target_ms in ascending, non-overlapping ranges.

    Searches for the first block whose end is at or after the target, then
    checks that the target is not before that block's start. Where two
    blocks touch, the earlier one wins.

    Args:
        captions: Caption blocks ordered by range.
        target_ms: Offset to resolve.

    Returns:
        The matching block, or None if the target falls outside every range.
    """
    position = bisect_left(captions, target_ms, key=lambda caption: caption.end_ms)
    if position < len(captions) and captions[position].contains(target_ms):
        return captions[position]
    return None


def linear_scan_caption(captions: Sequence[CaptionBlock], target_ms: int) -> CaptionBlock | None:
    """Return the first caption in file order whose range contains target_ms."""
    return next((caption for caption in captions if caption.contains(target_ms)), None)


def find_caption(captions: Sequence[CaptionBlock], target_ms: int, *, ordered: bool) -> CaptionBlock | None:
    """Resolve a millisecond offset to a caption block.

    Args:
        captions: Caption blocks in file order.
        target_ms: Offset to resolve.
        ordered: Whether the ranges are ascending and non-overlapping. Unordered
            captions are scanned linearly so the first match by file position
            is returned.

    Returns:
        The matching block, or None.
    """
    if ordered:
        return binary_search_caption(captions, target_ms)
    return linear_scan_caption(captions, target_ms)
