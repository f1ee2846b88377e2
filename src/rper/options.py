"""Traversal options, built once from the command line."""

import dataclasses
import enum

from rper.symlinks import SymlinkPolicy


class Verbosity(enum.Enum):
    """Output level."""

    NORMAL = "normal"  # changes and errors
    QUIET = "quiet"  # errors only (-s)
    SILENT = "silent"  # nothing (-S)
    VERBOSE = "verbose"  # everything, including unchanged entries (-v)

    @classmethod
    def from_flags(cls, *, quiet: bool, silent: bool, verbose: bool) -> "Verbosity":
        """Resolve -s / -S / -v. -v beats both, -s beats -S."""
        if verbose:
            return cls.VERBOSE
        if quiet:
            return cls.QUIET
        if silent:
            return cls.SILENT
        return cls.NORMAL


@dataclasses.dataclass(frozen=True)
class TraversalOptions:
    """What to change and how to walk."""

    change_files: bool = True
    change_dirs: bool = False
    recursive: bool = True
    include_root: bool = False
    symlink_policy: SymlinkPolicy = SymlinkPolicy.SKIP
    verbosity: Verbosity = Verbosity.NORMAL

    def __post_init__(self) -> None:
        if not (self.change_files or self.change_dirs):
            msg = "At least one of change_files / change_dirs must be set."
            raise ValueError(msg)

    @classmethod
    def from_flags(  # noqa: PLR0913
        cls,
        *,
        files: bool,
        dirs: bool,
        no_recurse: bool,
        include_root: bool,
        symlink_policy: SymlinkPolicy,
        verbosity: Verbosity,
    ) -> "TraversalOptions":
        """Build options from CLI flags. Files are changed when neither -f nor -d was given."""
        return cls(
            change_files=files or not dirs,
            change_dirs=dirs,
            recursive=not no_recurse,
            include_root=include_root,
            symlink_policy=symlink_policy,
            verbosity=verbosity,
        )

    @property
    def changes_root(self) -> bool:
        """The root directory itself is only changed with -d and -i."""
        return self.change_dirs and self.include_root
