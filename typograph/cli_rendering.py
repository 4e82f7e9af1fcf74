"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and run summaries. Diagnostics go to stderr so stdout carries only the
rendered text.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import PipelineStageError
from .models.datatypes import TypographReport


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PipelineStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_report_summary(report: TypographReport) -> None:
    """Print locale, mode, and the rules that changed the text."""

    typer.echo(f"Locale: {report.locale.value}", err=True)
    typer.echo(f"Mode: {report.mode.value}", err=True)
    applied = ", ".join(report.changed_rules) if report.changed_rules else "(none)"
    typer.echo(f"Rules applied: {applied}", err=True)


def echo_rendered_text(text: str) -> None:
    """Print rendered text verbatim, adding a trailing newline only when missing."""

    typer.echo(text, nl=not text.endswith("\n"))
