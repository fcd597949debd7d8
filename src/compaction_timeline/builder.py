"""Fluent builder for file descriptor fixtures."""

from __future__ import annotations

from typing import Union

from compaction_timeline.files import CompactionLevel, FileDescriptor


class FileDescriptorBuilder:
    """Build a FileDescriptor with test-friendly defaults.

    A fresh builder describes an ``Initial`` file covering the single instant
    ``0`` with a size of one byte. Each ``with_*`` method returns the builder
    so calls can be chained::

        FileDescriptorBuilder(2).with_time_range(300, 400).build()
    """

    def __init__(self, file_id: int) -> None:
        self._id = file_id
        self._level = CompactionLevel.INITIAL
        self._min_time = 0
        self._max_time = 0
        self._size_bytes = 1

    def with_compaction_level(
        self, level: Union[CompactionLevel, int, str]
    ) -> FileDescriptorBuilder:
        self._level = CompactionLevel.parse(level)
        return self

    def with_time_range(self, min_time: int, max_time: int) -> FileDescriptorBuilder:
        self._min_time = min_time
        self._max_time = max_time
        return self

    def with_file_size_bytes(self, size_bytes: int) -> FileDescriptorBuilder:
        self._size_bytes = size_bytes
        return self

    def build(self) -> FileDescriptor:
        return FileDescriptor(
            id=self._id,
            level=self._level,
            min_time=self._min_time,
            max_time=self._max_time,
            size_bytes=self._size_bytes,
        )
