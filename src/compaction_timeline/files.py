"""File descriptor modeling for the compaction timeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Sequence, Union

from typing_extensions import TypeAlias


class ValidationError(ValueError):
    """Raised when a file descriptor breaks its invariants."""

    def __init__(self, message: str, file: FileDescriptor | None = None) -> None:
        super().__init__(message)
        self.file = file


class CompactionLevel(IntEnum):
    """Storage tier of a file; the value is the display rank."""

    INITIAL = 0
    NON_OVERLAPPED = 1
    FINAL = 2

    @property
    def label(self) -> str:
        return f"L{int(self)}"

    @classmethod
    def parse(cls, value: Union[CompactionLevel, int, str]) -> CompactionLevel:
        """Resolve a level from its rank, name or short label."""
        if isinstance(value, CompactionLevel):
            return value
        if isinstance(value, bool):
            raise ValueError(f"invalid compaction level: {value!r}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(f"invalid compaction level: {value!r}") from None
        key = str(value).strip()
        level = _LEVEL_ALIASES.get(key.lower().replace("_", ""))
        if level is None:
            raise ValueError(f"invalid compaction level: {value!r}")
        return level


_LEVEL_ALIASES = {
    "initial": CompactionLevel.INITIAL,
    "l0": CompactionLevel.INITIAL,
    "nonoverlapped": CompactionLevel.NON_OVERLAPPED,
    "filenonoverlapped": CompactionLevel.NON_OVERLAPPED,
    "l1": CompactionLevel.NON_OVERLAPPED,
    "final": CompactionLevel.FINAL,
    "l2": CompactionLevel.FINAL,
}


@dataclass(frozen=True)
class FileDescriptor:
    """Metadata for a single stored file."""

    id: int
    level: CompactionLevel
    min_time: int
    max_time: int
    size_bytes: int


FileSet: TypeAlias = Sequence[FileDescriptor]


def validate_file(file: FileDescriptor) -> FileDescriptor:
    """Return the file unchanged, or raise ValidationError."""
    try:
        CompactionLevel.parse(file.level)
    except ValueError:
        raise ValidationError(
            f"file {file.id} has invalid compaction level {file.level!r}", file
        ) from None
    if file.min_time > file.max_time:
        raise ValidationError(
            f"file {file.id} has min_time {file.min_time} "
            f"after max_time {file.max_time}",
            file,
        )
    if file.size_bytes < 0:
        raise ValidationError(
            f"file {file.id} has negative size_bytes {file.size_bytes}", file
        )
    return file


def validate_files(files: Iterable[FileDescriptor]) -> list[FileDescriptor]:
    return [validate_file(file) for file in files]
