"""MissionService — build a rover from configuration and run command batches.

Bridges config sections (landing, command bindings, sensors) and plugin
contributions to the domain :class:`RoverBuilder`, then reports every
outcome as a :class:`ServiceResult`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import structlog

from roverctl.domain.operations import describe_operation, operation_from_spec
from roverctl.domain.rover import Rover, RoverBuilder, RoverNotLanded
from roverctl.domain.sensors import BoundsSensor, ObstacleSensor, RangeSensor, Sensor
from roverctl.domain.types import heading_name, parse_heading, parse_position
from roverctl.services.result import ServiceResult

if TYPE_CHECKING:
    from roverctl.config.models import LandingConfig, RoverConfig, SensorsConfig
    from roverctl.config.settings import RoverSettings
    from roverctl.domain.state import RoverState
    from roverctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


def build_sensors(config: SensorsConfig) -> list[Sensor]:
    """Instantiate the bundled sensors enabled in a [sensors] section.

    Order is fixed: bounds, obstacles, range.
    """
    sensors: list[Sensor] = []
    if config.bounds is not None:
        sensors.append(BoundsSensor(**config.bounds.model_dump()))
    if config.obstacles:
        sensors.append(ObstacleSensor.of(config.obstacles))
    if config.max_distance is not None:
        sensors.append(RangeSensor(config.max_distance, origin=config.origin))
    return sensors


def state_payload(state: RoverState) -> dict[str, Any]:
    """Flatten a state into the JSON-friendly shape used in result data."""
    return {
        "x": state.x,
        "y": state.y,
        "direction": heading_name(state.direction),
        "stopped": state.stopped,
        "display": state.render(),
    }


class MissionService:
    """Configure, land, and drive a single rover.

    Usage::

        svc = MissionService(settings, plugins=plugin_manager)
        result = svc.run(["ffrff"])
        result.data["display"]  # "(2, 2) EAST"
    """

    def __init__(
        self,
        config: RoverSettings | RoverConfig,
        plugins: PluginManager | None = None,
    ) -> None:
        self._config = config
        self._plugins = plugins

    def build_rover(self, warnings: list[str] | None = None) -> Rover:
        """Build an unlanded rover from the configured bindings and sensors.

        Raises:
            ValueError: If a command binding has an invalid spec.
        """
        warnings = [] if warnings is None else warnings
        builder = RoverBuilder()
        for token, spec in self._config.commands.items():
            builder.program_command(token, operation_from_spec(spec))
        for sensor in build_sensors(self._config.sensors):
            builder.add_sensor(sensor)
        if self._plugins is not None:
            for sensor in self._plugins.collect_sensors(warnings):
                builder.add_sensor(sensor)
        return builder.build()

    def list_bindings(self) -> ServiceResult:
        """Describe the token -> operation bindings a rover would get."""
        op = "list_bindings"
        try:
            rover = self.build_rover()
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_COMMAND_SPEC", str(exc))

        items = [
            {"token": token, "operation": describe_operation(operation)}
            for token, operation in sorted(rover.operations.items())
        ]
        return ServiceResult(
            ok=True,
            op=op,
            data={"items": items, "count": len(items), "sensors": len(rover.sensors)},
        )

    def execute(self, rover: Rover, commands: str) -> ServiceResult:
        """Run one batch on an existing rover.

        ``NOT_LANDED`` is the only failure.  A batch cut short by an
        unknown token still succeeds, with a warning naming the token.
        """
        op = "execute"
        warnings: list[str] = []
        try:
            state = rover.execute(commands)
        except RoverNotLanded:
            return ServiceResult.failure(
                op,
                "NOT_LANDED",
                "Rover must land before executing commands",
                commands=commands,
            )

        unknown = next((token for token in commands if token not in rover.operations), None)
        if unknown is not None:
            warnings.append(f"Unknown command {unknown!r} halted batch {commands!r}")

        if self._plugins is not None:
            self._plugins.notify_post_execute(
                warnings,
                commands=commands,
                x=state.x,
                y=state.y,
                direction=heading_name(state.direction),
                stopped=state.stopped,
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={"commands": commands, **state_payload(state)},
            warnings=warnings,
        )

    def run(
        self,
        batches: Sequence[str],
        *,
        at: tuple[int, int] | str | None = None,
        facing: str | None = None,
    ) -> ServiceResult:
        """Land the rover and execute each batch in turn.

        Args:
            batches: Command strings; each is a separate ``execute`` call,
                so the stopped flag resets between them.
            at: Landing position override, as a pair or ``"x,y"`` text
                (default: [landing] x, y).
            facing: Landing heading override (default: [landing] facing).
        """
        op = "run"
        landing: LandingConfig = self._config.landing
        try:
            heading = parse_heading(facing or landing.facing)
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_DIRECTION", str(exc), facing=facing)

        warnings: list[str] = []
        try:
            rover = self.build_rover(warnings)
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_COMMAND_SPEC", str(exc))

        if at is None:
            position = (landing.x, landing.y)
        elif isinstance(at, str):
            try:
                position = parse_position(at)
            except ValueError as exc:
                return ServiceResult.failure(op, "INVALID_POSITION", str(exc), at=at)
        else:
            position = at

        rover.land(position, heading)
        logger.debug("Mission start at %s with %d batch(es)", rover, len(batches))

        results: list[dict[str, Any]] = []
        for index, commands in enumerate(batches, start=1):
            # Log records emitted while a batch runs carry its 1-based index.
            with structlog.contextvars.bound_contextvars(batch=index):
                outcome = self.execute(rover, commands)
            if not outcome.ok:
                return outcome
            warnings.extend(outcome.warnings)
            results.append(outcome.data)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "landing": {"x": position[0], "y": position[1], "direction": heading.name},
                "batches": results,
                **state_payload(rover.state),
            },
            warnings=warnings,
        )
