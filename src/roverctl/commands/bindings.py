"""Command: list the configured command bindings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from roverctl.commands._base import RoverCommand

if TYPE_CHECKING:
    from roverctl.commands._context import AppContext


@click.command(
    cls=RoverCommand,
    examples="""\
  roverctl bindings
  roverctl -q bindings                    # token=operation lines
  roverctl -c other.toml bindings""",
)
@click.pass_obj
def bindings(app: AppContext) -> None:
    """Show which operation each command token runs."""
    app.emit(app.mission().list_bindings())
