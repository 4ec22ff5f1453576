"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Owns logging setup, lazy plugin loading, and result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from roverctl.config.logging import configure_logging
from roverctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from roverctl.config.settings import RoverSettings
    from roverctl.plugins.manager import PluginManager
    from roverctl.services.mission import MissionService
    from roverctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Plugins load on first use so ``--help`` and ``--version`` never touch
    entry points.
    """

    def __init__(self, settings: RoverSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugins(self) -> PluginManager:
        if self._plugins is None:
            from roverctl.plugins.manager import PluginManager

            self._plugins = PluginManager()
            self._plugins.discover_and_load()
        return self._plugins

    def mission(self) -> MissionService:
        """A MissionService bound to these settings and the loaded plugins."""
        from roverctl.services.mission import MissionService

        return MissionService(self.settings, plugins=self.plugins)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout.  Warnings go to stderr so piped output stays clean.
        * Failure: stderr, then exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # JSON and the Rich renderers already carry the warnings.
            if settings.quiet:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
