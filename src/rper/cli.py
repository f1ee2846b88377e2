"""Cli utilities."""

import click

from rper.modespec import InvalidModeSpec, ModeSpec
from rper.options import Verbosity


class Console:
    """Prints progress to stdout and diagnostics to stderr, gated by verbosity."""

    def __init__(self, verbosity: Verbosity = Verbosity.NORMAL) -> None:
        self.verbosity = verbosity

    @property
    def shows_changes(self) -> bool:
        return self.verbosity in (Verbosity.NORMAL, Verbosity.VERBOSE)

    @property
    def shows_details(self) -> bool:
        return self.verbosity is Verbosity.VERBOSE

    @property
    def shows_errors(self) -> bool:
        return self.verbosity is not Verbosity.SILENT

    def change(self, message: str) -> None:
        """Normal progress line (suppressed by -s and -S)."""
        if self.shows_changes:
            click.echo(message)

    def detail(self, message: str) -> None:
        """Verbose-only line."""
        if self.shows_details:
            click.echo(message)

    def error(self, message: str) -> None:
        """Diagnostic line (suppressed by -S only)."""
        if self.shows_errors:
            click.secho(message, fg="red", err=True)

    def warn(self, message: str) -> None:
        if self.shows_errors:
            click.secho(message, fg="yellow", err=True)

    def summary(self, lines: list[str]) -> None:
        if self.shows_errors:
            for line in lines:
                click.echo(line)


class ModeSpecType(click.ParamType):
    """Click parameter type for octal-with-wildcard mode specs."""

    name = "mode"

    def convert(self, value: object, param: click.Parameter | None, ctx: click.Context | None) -> ModeSpec:
        if isinstance(value, ModeSpec):
            return value
        try:
            return ModeSpec.parse(str(value))
        except InvalidModeSpec as exc:
            self.fail(str(exc), param, ctx)


MODE_SPEC = ModeSpecType()
