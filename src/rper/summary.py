"""Run-wide counters."""

import dataclasses

from rper.symlinks import SymlinkPolicy


@dataclasses.dataclass
class RunSummary:
    """Counts accumulated during a single walk. Counters only ever increase."""

    files_changed: int = 0
    dirs_changed: int = 0
    symlinks_skipped: int = 0
    symlinks_followed: int = 0
    symlink_errors: int = 0

    def report_lines(self, policy: SymlinkPolicy) -> list[str]:
        """Final summary, reporting only the symlink counter of the active policy."""
        lines = [
            "Operation completed.",
            f"Files changed: {self.files_changed}",
            f"Directories changed: {self.dirs_changed}",
        ]
        if policy is SymlinkPolicy.SKIP and self.symlinks_skipped > 0:
            lines.append(f"Symlinks skipped: {self.symlinks_skipped}")
        elif policy is SymlinkPolicy.FOLLOW and self.symlinks_followed > 0:
            lines.append(f"Symlinks followed: {self.symlinks_followed}")
        elif policy is SymlinkPolicy.ERROR and self.symlink_errors > 0:
            lines.append(f"Symlink errors found: {self.symlink_errors}")
        return lines
