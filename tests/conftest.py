"""Pytest configuration for compaction-timeline."""

from __future__ import annotations

import pytest

from compaction_timeline.builder import FileDescriptorBuilder
from compaction_timeline.files import CompactionLevel, FileDescriptor


@pytest.fixture
def two_initial_files() -> list[FileDescriptor]:
    return [
        FileDescriptorBuilder(1)
        .with_compaction_level(CompactionLevel.INITIAL)
        .build(),
        FileDescriptorBuilder(2)
        .with_compaction_level(CompactionLevel.INITIAL)
        .build(),
    ]


@pytest.fixture
def overlapping_initial_files() -> list[FileDescriptor]:
    return [
        FileDescriptorBuilder(1)
        .with_compaction_level(CompactionLevel.INITIAL)
        .with_time_range(100, 200)
        .build(),
        FileDescriptorBuilder(2)
        .with_compaction_level(CompactionLevel.INITIAL)
        .with_time_range(300, 400)
        .build(),
        # overlaps both files above
        FileDescriptorBuilder(11)
        .with_compaction_level(CompactionLevel.INITIAL)
        .with_time_range(150, 350)
        .with_file_size_bytes(44)
        .build(),
    ]
