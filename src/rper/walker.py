"""Directory walk that applies a mode spec to files and/or directories."""

import dataclasses
import os

from rper import utils
from rper.cli import Console
from rper.fsplan import EntryKind, FsEntry, ModePlan
from rper.modespec import ModeSpec
from rper.options import TraversalOptions
from rper.summary import RunSummary
from rper.symlinks import SymlinkPolicy


def change_entry(  # noqa: PLR0913
    path: str,
    spec: ModeSpec,
    *,
    change_files: bool,
    change_dirs: bool,
    policy: SymlinkPolicy,
    summary: RunSummary,
    console: Console,
) -> None:
    """Change the permissions of a single path if its kind was requested.

    Every I/O failure is reported and ends processing of this path only.
    """
    try:
        st = os.lstat(path)
    except OSError as exc:
        console.error(f"Error: Cannot access(stat) file {path}: {utils.os_error_reason(exc)}")
        return

    if EntryKind.from_mode(st.st_mode) is EntryKind.SYMLINK:
        target_st = policy.decide(path, summary, console)
        if target_st is None:
            return
        st = target_st

    plan = ModePlan(entry=FsEntry.from_stat(path, st), spec=spec)
    kind = plan.entry.kind

    if plan.is_noop:
        if (kind is EntryKind.DIRECTORY and (change_dirs or console.shows_details)) or (
            kind is EntryKind.FILE and (change_files or console.shows_details)
        ):
            console.change(plan.describe_noop())
        return

    if kind is EntryKind.DIRECTORY and change_dirs:
        label = "directory"
    elif kind is EntryKind.FILE and change_files:
        label = "file"
    else:
        return

    try:
        plan.apply()
    except OSError as exc:
        console.error(f"Error: Cannot change {label} permissions {path}: {utils.os_error_reason(exc)}")
        return

    if kind is EntryKind.DIRECTORY:
        summary.dirs_changed += 1
    else:
        summary.files_changed += 1
    console.change(plan.describe())


def process_directory(
    root: str,
    spec: ModeSpec,
    options: TraversalOptions,
    summary: RunSummary,
    console: Console,
) -> None:
    """Change the children of `root`, descending into subdirectories when recursive."""
    if options.changes_root:
        change_entry(
            root,
            spec,
            change_files=False,
            change_dirs=True,
            policy=options.symlink_policy,
            summary=summary,
            console=console,
        )

    try:
        entries = os.scandir(root)
    except OSError as exc:
        console.error(f"Error: Cannot open directory {root}: {utils.os_error_reason(exc)}")
        return

    # Subdirectories were already changed as children of their parent
    child_options = dataclasses.replace(options, include_root=False)

    with entries:
        for entry in entries:
            path = os.path.join(root, entry.name)
            change_entry(
                path,
                spec,
                change_files=options.change_files,
                change_dirs=options.change_dirs,
                policy=options.symlink_policy,
                summary=summary,
                console=console,
            )

            if options.recursive and _is_real_dir(entry):
                process_directory(path, spec, child_options, summary, console)


def _is_real_dir(entry: os.DirEntry) -> bool:
    """Directory according to the directory entry itself, never through a symlink."""
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def walk(
    root: str | os.PathLike,
    spec: ModeSpec,
    options: TraversalOptions,
    console: Console | None = None,
) -> RunSummary:
    """Walk `root` with a fresh set of counters and return them."""
    console = console if console is not None else Console(options.verbosity)
    summary = RunSummary()
    process_directory(os.fspath(root), spec, options, summary, console)
    return summary
