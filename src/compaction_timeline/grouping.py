"""Group file descriptors by compaction level."""

from __future__ import annotations

from typing import Iterable

from compaction_timeline.files import CompactionLevel, FileDescriptor


def group_by_level(
    files: Iterable[FileDescriptor],
) -> list[tuple[CompactionLevel, list[FileDescriptor]]]:
    """Return non-empty level groups in rank order, keeping input order inside."""
    levels = sorted(CompactionLevel)
    buckets: list[list[FileDescriptor]] = [[] for _ in levels]
    for file in files:
        buckets[int(file.level)].append(file)
    return [(level, bucket) for level, bucket in zip(levels, buckets) if bucket]
