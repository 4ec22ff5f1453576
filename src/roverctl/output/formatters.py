"""Pick an output mode for a ServiceResult.

JSON (``--json``) serializes the full result model; quiet (``-q``) prints
only the final rendering or the error line; everything else goes through
the Rich renderers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from roverctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from roverctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags lifted from RoverSettings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format *result* for display under *settings* (default: human output)."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
