"""Rich Console factory and theme for roverctl output.

Consoles render into a StringIO buffer so renderers can keep returning
plain strings.  In non-TTY environments (tests, pipes) Rich drops color
codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ROVER_THEME = Theme(
    {
        "rover.ok": "bold green",
        "rover.error": "bold red",
        "rover.warning": "bold yellow",
        "rover.op": "bold cyan",
        "rover.key": "dim",
        "rover.position": "bold blue",
        "rover.heading": "bold",
        "rover.stopped": "bold red",
        "rover.moving": "green",
        "rover.token": "bold magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=ROVER_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def status_style(stopped: bool) -> str:
    return "rover.stopped" if stopped else "rover.moving"
