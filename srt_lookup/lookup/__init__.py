"""Cached caption lookups and line-window reads."""

from srt_lookup.lookup.cache import FileIndex, SRTIndexCache
from srt_lookup.lookup.models import (
    FailureResult,
    LineContent,
    NextLinesResult,
    PreviousLinesResult,
    TimestampLookupResult,
)
from srt_lookup.lookup.service import SRTLookupService

__all__ = [
    "FailureResult",
    "FileIndex",
    "LineContent",
    "NextLinesResult",
    "PreviousLinesResult",
    "SRTIndexCache",
    "SRTLookupService",
    "TimestampLookupResult",
]
