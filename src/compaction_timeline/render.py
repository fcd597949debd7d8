"""Render level headings and file rows of a timeline.

Each file becomes one line: a fixed-width row heading followed by a bar whose
offset and width are proportional to the file's time range within the span
of the whole set. For example, with the default widths::

    L0
    L0.1[100,200] 1b    |----------L0.1----------|
    L0.2[300,400] 1b                                                         |----------L0.2----------|
    L0.11[150,350] 44b               |-----------------------L0.11-----------------------|
"""

from __future__ import annotations

from compaction_timeline.files import CompactionLevel, FileDescriptor
from compaction_timeline.layout import (
    LayoutContext,
    Uniform,
    saturating_sub,
    time_range_to_chars,
)

BAR_BORDER = "|"
BAR_FILL = "-"


def center(text: str, width: int, fill: str = " ") -> str:
    """Center text in ``width`` columns; odd padding goes to the right."""
    pad = saturating_sub(width, len(text))
    left = pad // 2
    return f"{fill * left}{text}{fill * (pad - left)}"


def display_file_id(file: FileDescriptor) -> str:
    """Compact label such as ``L0.1``."""
    return f"{CompactionLevel(file.level).label}.{file.id}"


def display_format(file: FileDescriptor, show_size: bool) -> str:
    """Row heading such as ``L0.1[100,200]`` or ``L0.1[100,200] 1b``."""
    heading = f"{display_file_id(file)}[{file.min_time},{file.max_time}]"
    if show_size:
        return f"{heading} {file.size_bytes}b"
    return heading


def format_level(layout: LayoutContext, level: CompactionLevel) -> str:
    heading = CompactionLevel(level).label
    if isinstance(layout.size_observation, Uniform):
        heading = f"{heading}, all files {layout.size_observation.value}b"
    return heading.ljust(layout.heading_width + layout.timeline_width)


def format_bar(layout: LayoutContext, file: FileDescriptor) -> str:
    """Return the ``|---label---|`` bar sized to the file's time range."""
    if layout.is_single_instant:
        field_width = layout.timeline_width
    else:
        field_width = time_range_to_chars(layout, file.max_time - file.min_time)
    field_width = saturating_sub(field_width, 2)
    label = center(display_file_id(file), field_width, BAR_FILL)
    return f"{BAR_BORDER}{label}{BAR_BORDER}"


def format_file(layout: LayoutContext, file: FileDescriptor) -> str:
    bar = format_bar(layout, file)
    row_heading = display_format(file, layout.shows_file_sizes).ljust(
        layout.heading_width
    )

    if layout.is_single_instant:
        return f"{row_heading}{center(bar, layout.timeline_width)}"

    prefix_range = saturating_sub(file.min_time, layout.min_time)
    prefix = " " * time_range_to_chars(layout, prefix_range)
    postfix_len = saturating_sub(
        saturating_sub(layout.timeline_width, len(bar)), len(prefix)
    )
    return f"{row_heading}{prefix}{bar}{' ' * postfix_len}"
