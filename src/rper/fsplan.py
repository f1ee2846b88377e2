"""File system plan. Used to describe and apply a single permission change."""

import dataclasses
import enum
import os
import stat

from rper import consts, utils
from rper.modespec import ModeSpec


class EntryKind(enum.Enum):
    """Kind of a file system node."""

    FILE = "F"
    DIRECTORY = "D"
    SYMLINK = "L"
    OTHER = "?"

    @classmethod
    def from_mode(cls, st_mode: int) -> "EntryKind":
        if stat.S_ISLNK(st_mode):
            return cls.SYMLINK
        if stat.S_ISDIR(st_mode):
            return cls.DIRECTORY
        if stat.S_ISREG(st_mode):
            return cls.FILE
        return cls.OTHER


@dataclasses.dataclass(frozen=True)
class FsEntry:
    """A path with its kind and current permission bits."""

    path: str
    kind: EntryKind
    mode: int

    @classmethod
    def from_stat(cls, path: str, st: os.stat_result) -> "FsEntry":
        return cls(path=path, kind=EntryKind.from_mode(st.st_mode), mode=st.st_mode & consts.PERMISSION_MASK)


@dataclasses.dataclass(frozen=True)
class ModePlan:
    """Planned permission change."""

    entry: FsEntry
    spec: ModeSpec

    @property
    def old_mode(self) -> int:
        return self.entry.mode

    @property
    def new_mode(self) -> int:
        return self.spec.apply(self.entry.mode)

    @property
    def is_noop(self) -> bool:
        return self.old_mode == self.new_mode

    def describe(self) -> str:
        """Before/after line, e.g. "(F 644 -> [7*5] 745) some/path"."""
        return (
            f"({self.entry.kind.value} {utils.format_mode(self.old_mode)} -> [{self.spec}] "
            f"{utils.format_mode(self.new_mode)}) {self.entry.path}"
        )

    def describe_noop(self) -> str:
        return f"({self.entry.kind.value} -> S) {self.entry.path}"

    def apply(self) -> None:
        """Apply the permission change. Symlinks are resolved to their target."""
        os.chmod(self.entry.path, self.new_mode)
