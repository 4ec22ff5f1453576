"""Locate and parse rover.toml.

Lookup order: the ROVERCTL_CONFIG env var, then a walk up the directory
tree from the starting point (the way git looks for .git/).  An explicit
``--config`` path bypasses discovery entirely (see settings.py).
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "rover.toml"
CONFIG_ENV_VAR = "ROVERCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest rover.toml at or above *start* (default: cwd).

    When ROVERCTL_CONFIG is set it wins outright, and a dangling value
    yields None rather than falling back to the walk.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML, reporting syntax errors as a ClickException."""
    with path.open("rb") as fh:
        try:
            return tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {path}: {exc}"
            raise click.ClickException(msg) from exc
