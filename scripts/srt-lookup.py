#!/usr/bin/env python3
"""Look up SRT captions by timestamp and read line windows from the command line.

Usage:
    uv run python scripts/srt-lookup.py at voice/01/01.srt 00:00:59,000
    uv run python scripts/srt-lookup.py before voice/01/01.srt 5645
    uv run python scripts/srt-lookup.py after voice/01/01.srt 7760
    uv run python scripts/srt-lookup.py --config config/config.yaml tools voice/01/01.srt
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from srt_lookup.config import Config, SRTLookupConfig
from srt_lookup.lookup.models import FailureResult, LookupModel
from srt_lookup.lookup.service import SRTLookupService
from srt_lookup.tools import SRTTools

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(description="Cached timestamp and line-window lookups over SRT files")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yaml (defaults apply when omitted)")
    parser.add_argument("--log-level", default=None, help="Override the configured log level")

    subparsers = parser.add_subparsers(dest="command", required=True)

    at_parser = subparsers.add_parser("at", help="Find the caption active at a timestamp")
    at_parser.add_argument("file", type=Path, help="SRT file")
    at_parser.add_argument("timestamp", help="Timestamp as HH:MM:SS,mmm")
    at_parser.add_argument("--no-context", action="store_true", help="Only return the matched entry")

    before_parser = subparsers.add_parser("before", help="Read lines before a line number")
    before_parser.add_argument("file", type=Path, help="SRT file")
    before_parser.add_argument("line", type=int, help="1-based line number")

    after_parser = subparsers.add_parser("after", help="Read lines after a line number")
    after_parser.add_argument("file", type=Path, help="SRT file")
    after_parser.add_argument("line", type=int, help="1-based line number")

    tools_parser = subparsers.add_parser("tools", help="Print tool definitions bound to a file")
    tools_parser.add_argument("file", type=Path, help="SRT file")

    return parser


def main() -> int:
    """Run a single lookup and print the JSON result."""
    args = build_parser().parse_args()

    lookup_config = SRTLookupConfig()
    log_level = "INFO"
    if args.config is not None:
        try:
            config = Config(args.config)
        except (FileNotFoundError, KeyError, ValueError) as e:
            print(f"✗ Invalid configuration: {e}", file=sys.stderr)
            return 1
        lookup_config = config.get_srt_lookup_config()
        log_level = config.get_logging_config().level

    logging.basicConfig(level=(args.log_level or log_level).upper(), format="%(levelname)s: %(message)s")
    logger.debug("Windows: context=%d init=%d", lookup_config.context_window, lookup_config.init_window)

    service = SRTLookupService(config=lookup_config)

    if args.command == "tools":
        print(json.dumps(SRTTools(args.file, service).definitions(), indent=2, ensure_ascii=False))
        return 0

    result: LookupModel
    if args.command == "at":
        result = service.get_lines_at_timestamp(args.file, args.timestamp, include_context=not args.no_context)
    elif args.command == "before":
        result = service.read_previous_lines(args.file, args.line)
    else:
        result = service.read_next_lines(args.file, args.line)

    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    return 1 if isinstance(result, FailureResult) else 0


if __name__ == "__main__":
    sys.exit(main())
