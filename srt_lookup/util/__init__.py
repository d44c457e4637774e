"""Utility modules for the SRT lookup engine."""

from srt_lookup.util.fs_util import FSUtil
from srt_lookup.util.srt_util import CaptionBlock, RawLine, SRTUtil

__all__ = ["CaptionBlock", "FSUtil", "RawLine", "SRTUtil"]
