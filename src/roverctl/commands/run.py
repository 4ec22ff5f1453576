"""Command: land the rover and execute command batches."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from roverctl.commands._base import RoverCommand

if TYPE_CHECKING:
    from roverctl.commands._context import AppContext


@click.command(
    cls=RoverCommand,
    examples="""\
  roverctl run ffrff                      # land per rover.toml, run one batch
  roverctl run ff rf --at 3,4             # two batches, landing at (3, 4)
  roverctl run lff --facing west
  roverctl -q run ffrff                   # print only "(2, 2) EAST"
  roverctl --json run ffxff""",
)
@click.argument("batches", nargs=-1, required=True)
@click.option("--at", "at", default=None, metavar="X,Y", help="Landing position override.")
@click.option("--facing", default=None, help="Landing heading override (north/east/south/west).")
@click.pass_obj
def run(app: AppContext, batches: tuple[str, ...], at: str | None, facing: str | None) -> None:
    """Land the rover and execute each BATCHES argument in order."""
    app.emit(app.mission().run(list(batches), at=at, facing=facing))
