"""Load file descriptors from JSON documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from compaction_timeline.files import CompactionLevel, FileDescriptor, ValidationError


def load_files(path: Path) -> list[FileDescriptor]:
    """Load descriptors from a JSON list, or an object with a ``files`` list."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValidationError(f"{path}: invalid JSON: {exc}") from exc
    return files_from_json(raw, source=str(path))


def files_from_json(raw: Any, source: str = "<data>") -> list[FileDescriptor]:
    if isinstance(raw, dict):
        raw = raw.get("files")
    if not isinstance(raw, list):
        raise ValidationError(f"{source}: expected a list of files")
    return [_file_from_mapping(entry, source, index) for index, entry in enumerate(raw)]


def _file_from_mapping(entry: Any, source: str, index: int) -> FileDescriptor:
    where = f"{source}[{index}]"
    if not isinstance(entry, dict):
        raise ValidationError(f"{where}: expected an object")
    try:
        level = CompactionLevel.parse(entry.get("level", CompactionLevel.INITIAL))
    except ValueError as exc:
        raise ValidationError(f"{where}: {exc}") from exc
    return FileDescriptor(
        id=_require_int(entry, "id", where),
        level=level,
        min_time=_require_int(entry, "min_time", where),
        max_time=_require_int(entry, "max_time", where),
        size_bytes=_require_int(entry, "size_bytes", where, default=1),
    )


def _require_int(
    entry: dict[str, Any], key: str, where: str, default: int | None = None
) -> int:
    value = entry.get(key, default)
    if value is None:
        raise ValidationError(f"{where}: missing {key!r}")
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"{where}: {key!r} must be an integer, got {value!r}")
    return value
