"""Subcommand modules for roverctl.

Provides register_commands(), importing each command module only when
the root group is assembled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from roverctl.commands.bindings import bindings
    from roverctl.commands.run import run

    cli.add_command(run)
    cli.add_command(bindings)
