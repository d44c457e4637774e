"""Cached timestamp and line-window lookups over SRT subtitle files."""

__version__ = "0.1.0"
