"""Global layout parameters shared by every line of a timeline."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable, Optional, Union

from typing_extensions import TypeAlias

from compaction_timeline.config import DisplayConfig
from compaction_timeline.files import FileSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Unseen:
    """No file size observed yet."""


@dataclass(frozen=True)
class Uniform:
    """Every observed file has ``value`` bytes."""

    value: int


@dataclass(frozen=True)
class Mixed:
    """At least two distinct file sizes were observed."""


SizeObservation: TypeAlias = Union[Unseen, Uniform, Mixed]


def observe(state: SizeObservation, size: int) -> SizeObservation:
    """Fold one file size into the observation."""
    if isinstance(state, Unseen):
        return Uniform(size)
    if isinstance(state, Uniform) and state.value == size:
        return state
    return Mixed()


def observe_sizes(sizes: Iterable[int]) -> SizeObservation:
    state: SizeObservation = Unseen()
    for size in sizes:
        state = observe(state, size)
    return state


@dataclass(frozen=True)
class LayoutContext:
    """Time span and column widths computed once per rendered file set."""

    min_time: int
    max_time: int
    ns_per_char: float
    timeline_width: int
    heading_width: int
    size_observation: SizeObservation

    @property
    def is_single_instant(self) -> bool:
        """True when every file in the set covers the same instant."""
        return self.min_time == self.max_time

    @property
    def shows_file_sizes(self) -> bool:
        return isinstance(self.size_observation, Mixed)


def build_layout(
    files: FileSet, config: Optional[DisplayConfig] = None
) -> LayoutContext:
    """Calculate display parameters for a non-empty set of files."""
    if not files:
        raise ValueError("build_layout requires at least one file")
    config = config or DisplayConfig()
    min_time = min(file.min_time for file in files)
    max_time = max(file.max_time for file in files)
    ns_per_char = float(max_time - min_time) / float(config.timeline_width)
    layout = LayoutContext(
        min_time=min_time,
        max_time=max_time,
        ns_per_char=ns_per_char,
        timeline_width=config.timeline_width,
        heading_width=config.heading_width,
        size_observation=observe_sizes(file.size_bytes for file in files),
    )
    logger.debug(
        "Layout for %d files: span [%d,%d] ns_per_char=%s sizes=%s",
        len(files),
        min_time,
        max_time,
        ns_per_char,
        layout.size_observation,
    )
    return layout


def saturating_sub(value: int, amount: int) -> int:
    """Subtract, clamping the result at zero."""
    return max(0, value - amount)


def time_range_to_chars(layout: LayoutContext, time_range: int) -> int:
    """Return how many timeline columns ``time_range`` time units consume."""
    if layout.ns_per_char > 0:
        return max(0, int(time_range / layout.ns_per_char))
    if time_range > 0:
        return layout.timeline_width
    return 0
