"""Clamped line-window arithmetic.

All functions take 1-based line numbers and return 0-based, half-open
``(start, stop)`` slice bounds that are always within ``[0, total_lines]``.
"""


def window_before(line_number: int, window_size: int, total_lines: int) -> tuple[int, int]:
    """Bounds of up to window_size lines ending just before line_number."""
    stop = min(max(0, line_number - 1), total_lines)
    start = min(max(0, line_number - 1 - window_size), stop)
    return start, stop


def window_after(line_number: int, window_size: int, total_lines: int) -> tuple[int, int]:
    """Bounds of up to window_size lines starting just after line_number."""
    start = min(max(0, line_number), total_lines)
    stop = min(total_lines, start + window_size)
    return start, stop


def window_around(line_number: int, window_size: int, total_lines: int) -> tuple[int, int]:
    """Bounds of line_number plus window_size lines on each side."""
    start = min(max(0, line_number - 1 - window_size), total_lines)
    stop = max(start, min(total_lines, line_number + window_size))
    return start, stop
