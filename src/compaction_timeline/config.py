"""Display configuration for the compaction timeline."""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path
from typing import Any, Mapping

logger = logging.getLogger(__name__)

DEFAULT_HEADING_WIDTH = 20
DEFAULT_TIMELINE_WIDTH = 80


@dataclass(frozen=True)
class DisplayConfig:
    """Column widths used when rendering a timeline."""

    heading_width: int = DEFAULT_HEADING_WIDTH
    timeline_width: int = DEFAULT_TIMELINE_WIDTH

    def __post_init__(self) -> None:
        if self.heading_width < 1:
            raise ValueError(f"heading_width must be >= 1, got {self.heading_width}")
        if self.timeline_width < 1:
            raise ValueError(
                f"timeline_width must be >= 1, got {self.timeline_width}"
            )


def load_config(path: Path) -> DisplayConfig:
    """Load configuration from disk, falling back to defaults on error."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        logger.exception("Failed to load config from %s", path)
        return DisplayConfig()
    if not isinstance(raw, dict):
        return DisplayConfig()
    return config_from_mapping(raw)


def config_from_mapping(raw: Mapping[str, Any]) -> DisplayConfig:
    """Normalize raw JSON data into a DisplayConfig."""
    return DisplayConfig(
        heading_width=_get_int(
            raw, "heading_width", DEFAULT_HEADING_WIDTH, min_value=1
        ),
        timeline_width=_get_int(
            raw, "timeline_width", DEFAULT_TIMELINE_WIDTH, min_value=1
        ),
    )


def _get_int(
    raw: Mapping[str, Any],
    key: str,
    default: int,
    *,
    min_value: int | None = None,
) -> int:
    """Fetch an integer value with optional clamping."""
    value = raw.get(key, default)
    if not isinstance(value, int) or isinstance(value, bool):
        value = default
    if min_value is not None:
        value = max(min_value, value)
    return value
