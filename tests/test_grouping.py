from __future__ import annotations

from compaction_timeline.builder import FileDescriptorBuilder
from compaction_timeline.files import CompactionLevel
from compaction_timeline.grouping import group_by_level


def _file(file_id: int, level: CompactionLevel):
    return FileDescriptorBuilder(file_id).with_compaction_level(level).build()


def test_group_by_level_orders_by_rank() -> None:
    files = [
        _file(1, CompactionLevel.FINAL),
        _file(2, CompactionLevel.NON_OVERLAPPED),
        _file(3, CompactionLevel.INITIAL),
    ]
    groups = group_by_level(files)
    assert [level for level, _ in groups] == [
        CompactionLevel.INITIAL,
        CompactionLevel.NON_OVERLAPPED,
        CompactionLevel.FINAL,
    ]


def test_group_by_level_is_stable() -> None:
    files = [
        _file(9, CompactionLevel.INITIAL),
        _file(4, CompactionLevel.FINAL),
        _file(2, CompactionLevel.INITIAL),
        _file(5, CompactionLevel.INITIAL),
    ]
    groups = dict(group_by_level(files))
    assert [f.id for f in groups[CompactionLevel.INITIAL]] == [9, 2, 5]
    assert [f.id for f in groups[CompactionLevel.FINAL]] == [4]


def test_group_by_level_omits_empty_levels() -> None:
    groups = group_by_level([_file(1, CompactionLevel.NON_OVERLAPPED)])
    assert [level for level, _ in groups] == [CompactionLevel.NON_OVERLAPPED]


def test_group_by_level_empty() -> None:
    assert group_by_level([]) == []
