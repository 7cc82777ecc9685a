"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and conversion summaries.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import ConversionError
from .session import ConversionSession


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, ConversionError):
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


def echo_session_summary(session: ConversionSession, err: bool = False) -> None:
    """Print the session status line and its detail line."""

    typer.secho(session.message, fg=typer.colors.GREEN, err=err)
    if session.detail:
        typer.echo(session.detail, err=err)
