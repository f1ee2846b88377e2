"""Main entry point for rper."""

import click

from rper import cli, consts, walker
from rper.modespec import ModeSpec
from rper.options import TraversalOptions, Verbosity
from rper.symlinks import SymlinkPolicy


def _print_about(ctx: click.Context, _param: click.Parameter, value: bool) -> None:  # noqa: FBT001
    """Print the about text followed by the usage, then exit."""
    if not value or ctx.resilient_parsing:
        return
    click.echo(consts.ABOUT_TEXT)
    click.echo()
    click.echo(ctx.get_help())
    ctx.exit()


@click.command(context_settings={"help_option_names": ["-h", "-H", "--help"]})
@click.option("-f", "arg_files", is_flag=True, help="Change files (default if -d is not given).")
@click.option("-d", "arg_dirs", is_flag=True, help="Change directories (can be combined with -f).")
@click.option("-i", "arg_include", is_flag=True, help="Include the given directory itself (with -d only).")
@click.option("-n", "arg_no_recurse", is_flag=True, help="Do not descend into subdirectories.")
@click.option("-s", "arg_quiet", is_flag=True, help="Suppress normal output, only show errors.")
@click.option("-S", "arg_silent", is_flag=True, help="Suppress all output, including errors.")
@click.option("-v", "arg_verbose", is_flag=True, help="Show all output, including unchanged entries.")
@click.option("-L", "arg_follow", is_flag=True, help="Follow symlinks and change their targets.")
@click.option("-k", "arg_symlink_error", is_flag=True, help="Report symlinks as errors and leave them untouched.")
@click.option(
    "-p",
    "arg_mode",
    type=cli.MODE_SPEC,
    required=True,
    help="Permissions in octal format, '*' keeps a group (e.g. 755, 0644, 6*4).",
)
@click.option(
    "-a",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_print_about,
    help="Learn about rper.",
)
@click.argument("directory", type=click.Path())
def main(  # noqa: PLR0913
    arg_files: bool,  # noqa: FBT001
    arg_dirs: bool,  # noqa: FBT001
    arg_include: bool,  # noqa: FBT001
    arg_no_recurse: bool,  # noqa: FBT001
    arg_quiet: bool,  # noqa: FBT001
    arg_silent: bool,  # noqa: FBT001
    arg_verbose: bool,  # noqa: FBT001
    arg_follow: bool,  # noqa: FBT001
    arg_symlink_error: bool,  # noqa: FBT001
    arg_mode: ModeSpec,
    directory: str,
) -> None:
    """Recursively change permissions of files and/or directories under DIRECTORY."""
    options = TraversalOptions.from_flags(
        files=arg_files,
        dirs=arg_dirs,
        no_recurse=arg_no_recurse,
        include_root=arg_include,
        symlink_policy=SymlinkPolicy.from_flags(follow=arg_follow, error=arg_symlink_error),
        verbosity=Verbosity.from_flags(quiet=arg_quiet, silent=arg_silent, verbose=arg_verbose),
    )
    console = cli.Console(options.verbosity)

    if options.include_root and not options.change_dirs:
        console.warn("Warning: -i has no effect without -d")

    summary = walker.walk(directory, arg_mode, options, console)

    console.summary(summary.report_lines(options.symlink_policy))


if __name__ == "__main__":
    main()
