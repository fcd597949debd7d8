"""Command-line interface for printing compaction timelines."""

from __future__ import annotations

import argparse
from dataclasses import replace
import logging
from pathlib import Path
import sys
from typing import Iterable, Optional

from rich.console import Console

from compaction_timeline.config import DisplayConfig, load_config
from compaction_timeline.display import format_files, format_files_split
from compaction_timeline.file_io import load_files
from compaction_timeline.logging_setup import init_logging
from compaction_timeline.styled import style_lines

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="compaction-timeline",
        description="Render file descriptors as an ASCII compaction timeline",
    )
    parser.add_argument("path", help="JSON file with the file descriptors")
    parser.add_argument("--title", default=None, help="Title line for the first set")
    parser.add_argument(
        "--split",
        default=None,
        help="Second JSON file rendered after the first one",
    )
    parser.add_argument(
        "--split-title", default=None, help="Title line for the second set"
    )
    parser.add_argument("--config", default=None, help="JSON display configuration")
    parser.add_argument("--heading-width", type=int, default=None)
    parser.add_argument("--timeline-width", type=int, default=None)
    parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Style output for a terminal (default: when stdout is a TTY)",
    )
    parser.add_argument("--log-level", default=None, help="Logging level name")
    parser.add_argument("--log-file", default=None, help="Also log to this file")
    return parser


def _resolve_config(args: argparse.Namespace) -> DisplayConfig:
    config = load_config(Path(args.config)) if args.config else DisplayConfig()
    overrides = {}
    if args.heading_width is not None:
        overrides["heading_width"] = args.heading_width
    if args.timeline_width is not None:
        overrides["timeline_width"] = args.timeline_width
    return replace(config, **overrides) if overrides else config


def _render(args: argparse.Namespace, config: DisplayConfig) -> list[str]:
    files = load_files(Path(args.path))
    if args.split is None:
        return format_files(args.title, files, config)
    split_files = load_files(Path(args.split))
    return format_files_split(
        args.title, files, args.split_title, split_files, config
    )


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    init_logging(args.log_level, Path(args.log_file) if args.log_file else None)

    try:
        config = _resolve_config(args)
        lines = _render(args, config)
    except (OSError, ValueError) as exc:
        logger.debug("Render failed", exc_info=True)
        print(str(exc), file=sys.stderr)
        return 1

    color = args.color if args.color is not None else sys.stdout.isatty()
    if color:
        Console(highlight=False, soft_wrap=True).print(style_lines(lines))
    else:
        for line in lines:
            print(line)
    logger.debug("Printed %d lines", len(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
