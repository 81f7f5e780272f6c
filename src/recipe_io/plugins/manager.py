"""Plugin discovery, module collection, and hook dispatch.

Discovery: entry_points (pip-installed) in the ``recipe_io.plugins`` group
via pluggy, plus the built-in :class:`IOPlugin`.
INVARIANT: Plugin failures are warnings, never errors.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

import pluggy

from recipe_io.errors import UnknownMethodError
from recipe_io.plugins.hookspecs import PROJECT_NAME, RecipeIOHookSpec

if TYPE_CHECKING:
    from recipe_io.modules.base import ModuleBase
    from recipe_io.ports.io import IOInterface

ENTRY_POINT_GROUP = "recipe_io.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, the module registry, and hook dispatch."""

    def __init__(self, *, disabled: Iterable[str] = ()) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(RecipeIOHookSpec)
        self._disabled = set(disabled)
        for name in self._disabled:
            self._pm.set_blocked(name)
        self._modules: dict[str, ModuleBase] | None = None
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Register the built-in plugin and load entry-point plugins.

        Returns a list of loaded plugin names.
        """
        from recipe_io.plugins.builtins.io_plugin import IOPlugin

        if "io" not in self._disabled:
            self.register_plugin(IOPlugin(), name="io")
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        self._modules = None
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)
        self._modules = None

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [
            self._pm.get_name(p) or p.__class__.__name__
            for p in self._pm.get_plugins()
        ]

    # ------------------------------------------------------------------
    # Module registry
    # ------------------------------------------------------------------

    def collect_modules(self) -> dict[str, ModuleBase]:
        """Collect modules from every ``register_modules`` implementation.

        Implementations are consulted in pluggy call order (most recently
        registered first), so an installed plugin can replace a built-in
        module. The first claim on a name wins; later ones are warned about.
        """
        if self._modules is not None:
            return dict(self._modules)

        modules: dict[str, ModuleBase] = {}
        for impl in reversed(self._pm.hook.register_modules.get_hookimpls()):
            try:
                contributed = impl.function()
            except Exception:
                logger.warning(
                    "Failed to collect modules from plugin %s",
                    impl.plugin_name,
                    exc_info=True,
                )
                continue

            if contributed is None:
                continue
            if not isinstance(contributed, dict):
                logger.warning("Plugin %s returned non-dict module registrations", impl.plugin_name)
                continue

            for module_name, module in contributed.items():
                if module_name in modules:
                    logger.warning(
                        "Skipping duplicate module %r from plugin %s",
                        module_name,
                        impl.plugin_name,
                    )
                    continue
                modules[module_name] = module

        self._modules = modules
        return dict(modules)

    def inject_io(self, io: IOInterface) -> None:
        """Hand the I/O port to every collected module."""
        for module in self.collect_modules().values():
            module.set_io(io)

    def find_module(self, qualified_name: str) -> tuple[str, ModuleBase, str]:
        """Resolve ``"module.method"`` or a bare ``"method"``.

        Returns ``(module_name, module, method_name)``. A bare name resolves
        to the first module (in registry order) that supports it.

        Raises:
            UnknownMethodError: No module supports the method.
        """
        modules = self.collect_modules()
        module_name, sep, method_name = qualified_name.rpartition(".")
        if sep:
            module = modules.get(module_name)
            if module is None or not module.supports(method_name):
                raise UnknownMethodError(method_name, module_name)
            return module_name, module, method_name

        for name, module in modules.items():
            if module.supports(method_name):
                return name, module, method_name
        raise UnknownMethodError(method_name)

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def notify_method(self, module: str, method: str, json_result: str) -> None:
        """Dispatch ``post_method``. Failures are logged, never raised."""
        try:
            self._pm.hook.post_method(module=module, method=method, json_result=json_result)
        except Exception:
            logger.warning("post_method hook failed for %s.%s", module, method, exc_info=True)

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
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
        self._modules = None
