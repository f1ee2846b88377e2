"""Symlink handling during the walk."""

import enum
import os
import typing

from rper import utils

if typing.TYPE_CHECKING:
    from rper.cli import Console
    from rper.summary import RunSummary


class SymlinkPolicy(enum.Enum):
    """How a symlink found during the walk is treated."""

    SKIP = "skip"
    FOLLOW = "follow"
    ERROR = "error"

    @classmethod
    def from_flags(cls, *, follow: bool, error: bool) -> "SymlinkPolicy":
        """Resolve the -L / -k flags. -k wins over -L."""
        if error:
            return cls.ERROR
        if follow:
            return cls.FOLLOW
        return cls.SKIP

    def decide(self, path: str, summary: "RunSummary", console: "Console") -> os.stat_result | None:
        """Decide what happens to the symlink at `path`.

        Returns the link target's stat result when processing should continue
        with the target, or None when the entry is done.
        """
        if self is SymlinkPolicy.SKIP:
            summary.symlinks_skipped += 1
            console.change(f"(L -> SKIP) {path}")
            return None

        if self is SymlinkPolicy.FOLLOW:
            try:
                target_stat = os.stat(path)
            except OSError as exc:
                console.error(f"Skipping: Cannot follow symlink {path}: {utils.os_error_reason(exc)}")
                return None
            summary.symlinks_followed += 1
            console.detail(f"(L -> FOLLOW) {path}")
            return target_stat

        summary.symlink_errors += 1
        console.error(f"Error: Symlink found: {path}")
        return None
