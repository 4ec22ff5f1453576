"""Plugin discovery, loading, and hook dispatch.

Discovery: pluggy setuptools entry points in the ``roverctl.plugins`` group,
plus direct registration for in-process plugins (tests, embedding apps).
Each hook is called per plugin so one broken plugin cannot take down the
others or the run itself.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import pluggy

from roverctl.plugins.hookspecs import PROJECT_NAME, RoverctlHookSpec

if TYPE_CHECKING:
    from roverctl.domain.sensors import Sensor

ENTRY_POINT_GROUP = "roverctl.plugins"

hookimpl = pluggy.HookimplMarker(PROJECT_NAME)

# Takes the full keyword payload of a hook call.
HookCall = Callable[[dict[str, Any]], Any]

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(RoverctlHookSpec)
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins and return the names now registered."""
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    # ------------------------------------------------------------------
    # Hook dispatch
    # ------------------------------------------------------------------

    def collect_sensors(self, warnings: list[str]) -> list[Sensor]:
        """Gather sensors from every plugin implementing ``register_sensors``.

        A plugin that raises or returns something other than a list is
        skipped with a warning, as is any returned object without an
        ``is_safe`` method.
        """
        sensors: list[Sensor] = []
        for name, hook in self._implementations("register_sensors"):
            try:
                provided = hook({})
            except Exception:
                logger.warning("Failed to collect sensors from plugin %s", name, exc_info=True)
                warnings.append(f"Plugin {name} failed to register sensors")
                continue
            if provided is None:
                continue
            if not isinstance(provided, (list, tuple)):
                warnings.append(f"Plugin {name} returned a non-list: {provided!r}")
                continue
            for sensor in provided:
                if not callable(getattr(sensor, "is_safe", None)):
                    warnings.append(f"Plugin {name} returned a non-sensor: {sensor!r}")
                    continue
                sensors.append(sensor)
        return sensors

    def notify_post_execute(self, warnings: list[str], **payload: Any) -> None:
        """Call ``post_execute`` on every plugin, recording failures as warnings."""
        for name, hook in self._implementations("post_execute"):
            try:
                hook(payload)
            except Exception:
                logger.warning("post_execute failed in plugin %s", name, exc_info=True)
                warnings.append(f"Plugin {name} failed in post_execute")

    def _implementations(self, hook_name: str) -> list[tuple[str, HookCall]]:
        """Return ``(plugin_name, caller)`` pairs for every impl of *hook_name*.

        Each caller takes the full keyword payload and passes an impl only
        the arguments it declares, the way pluggy itself does.
        """
        found = []
        for impl in getattr(self._pm.hook, hook_name).get_hookimpls():

            def call(payload: dict[str, Any], impl: pluggy.HookImpl = impl) -> Any:
                return impl.function(*(payload[name] for name in impl.argnames))

            found.append((impl.plugin_name, call))
        return found

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry points may point at a class; hooks on an unbound class fail
        at call time.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue
            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)
