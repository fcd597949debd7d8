"""Format lists of file descriptors as ASCII timelines for test snapshots."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from compaction_timeline.config import DisplayConfig
from compaction_timeline.files import FileDescriptor, validate_files
from compaction_timeline.grouping import group_by_level
from compaction_timeline.layout import build_layout
from compaction_timeline.render import format_file, format_level

logger = logging.getLogger(__name__)


def format_files(
    title: Optional[str],
    files: Iterable[FileDescriptor],
    config: Optional[DisplayConfig] = None,
) -> list[str]:
    """Return the title line followed by one header per level and one row per file.

    Files are lined up horizontally by their time range relative to the whole
    set. Raises ValidationError for a file whose ``min_time`` exceeds its
    ``max_time`` or whose size is negative.
    """
    output: list[str] = []
    if title is not None:
        output.append(title)

    snapshot = validate_files(files)
    if not snapshot:
        return output

    layout = build_layout(snapshot, config)
    for level, level_files in group_by_level(snapshot):
        output.append(format_level(layout, level))
        output.extend(format_file(layout, file) for file in level_files)

    logger.debug("Formatted %d files into %d lines", len(snapshot), len(output))
    return output


def format_files_split(
    title1: Optional[str],
    files1: Iterable[FileDescriptor],
    title2: Optional[str],
    files2: Iterable[FileDescriptor],
    config: Optional[DisplayConfig] = None,
) -> list[str]:
    """Format two file lists independently and concatenate the results."""
    return format_files(title1, files1, config) + format_files(title2, files2, config)


def format_text(
    title: Optional[str],
    files: Iterable[FileDescriptor],
    config: Optional[DisplayConfig] = None,
) -> str:
    return "\n".join(format_files(title, files, config))
