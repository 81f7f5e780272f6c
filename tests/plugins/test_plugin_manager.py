"""Tests for PluginManager — discovery, module collection, and post_method notifications."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from recipe_io.domain.method import Method
from recipe_io.errors import UnknownMethodError
from recipe_io.modules.base import ModuleBase
from recipe_io.modules.io_module import IOModule
from recipe_io.modules.result import ExecutionResult
from recipe_io.plugins.hookspecs import hookimpl
from recipe_io.plugins.manager import PluginManager


class _ShoutModule(ModuleBase):
    module_name = "shout"

    def __init__(self) -> None:
        super().__init__()
        self.add_method_handler("shout", self._shout)
        self.add_method_handler("write", self._shout)

    def run_method(self, method, recipe_variables=None):
        return self.run_internal_method(method, recipe_variables)

    def _shout(self, method: Method) -> ExecutionResult:
        return ExecutionResult.from_data({"response": str(method.resolve("text", 0)).upper()})


class _ShoutPlugin:
    @hookimpl
    def register_modules(self) -> dict[str, ModuleBase]:
        return {"shout": _ShoutModule()}


class _IOOverridePlugin:
    def __init__(self) -> None:
        self.module = IOModule()

    @hookimpl
    def register_modules(self) -> dict[str, ModuleBase]:
        return {"io": self.module}


class _BrokenPlugin:
    @hookimpl
    def register_modules(self) -> dict[str, ModuleBase]:
        raise RuntimeError("boom")


class _NotADictPlugin:
    @hookimpl
    def register_modules(self) -> list[str]:
        return ["io"]


class _RecordingPlugin:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str, str]] = []

    @hookimpl
    def post_method(self, module: str, method: str, json_result: str) -> None:
        self.calls.append((module, method, json_result))


class _FailingHookPlugin:
    @hookimpl
    def post_method(self, module: str, method: str, json_result: str) -> None:
        raise RuntimeError("hook failure")


@pytest.fixture
def pm() -> PluginManager:
    manager = PluginManager()
    manager.discover_and_load()
    return manager


class TestDiscovery:
    def test_is_loaded_false_before_discover(self) -> None:
        assert PluginManager().is_loaded is False

    def test_builtin_io_plugin(self, pm: PluginManager) -> None:
        assert pm.is_loaded is True
        assert "io" in pm.list_plugin_names()
        modules = pm.collect_modules()
        assert isinstance(modules["io"], IOModule)

    def test_disabled_builtin(self) -> None:
        manager = PluginManager(disabled=["io"])
        manager.discover_and_load()
        assert "io" not in manager.collect_modules()

    def test_register_plugin_default_name(self) -> None:
        manager = PluginManager()
        manager.register_plugin(_ShoutPlugin())
        assert "_ShoutPlugin" in manager.list_plugin_names()

    def test_unregister(self, pm: PluginManager) -> None:
        plugin = _ShoutPlugin()
        pm.register_plugin(plugin, name="shout")
        assert "shout" in pm.collect_modules()
        pm.unregister(plugin)
        assert "shout" not in pm.collect_modules()


class TestCollectModules:
    def test_plugins_add_modules(self, pm: PluginManager) -> None:
        pm.register_plugin(_ShoutPlugin(), name="shout")
        assert set(pm.collect_modules()) == {"io", "shout"}

    def test_later_plugin_overrides_builtin(self, pm: PluginManager) -> None:
        override = _IOOverridePlugin()
        pm.register_plugin(override, name="io-override")
        assert pm.collect_modules()["io"] is override.module

    def test_broken_plugin_is_a_warning(
        self, pm: PluginManager, caplog: pytest.LogCaptureFixture
    ) -> None:
        pm.register_plugin(_BrokenPlugin(), name="broken")
        with caplog.at_level(logging.WARNING, logger="recipe_io"):
            modules = pm.collect_modules()
        assert "io" in modules
        assert "broken" in caplog.text

    def test_non_dict_registration_ignored(self, pm: PluginManager) -> None:
        pm.register_plugin(_NotADictPlugin(), name="bad")
        assert list(pm.collect_modules()) == ["io"]

    def test_inject_io(self, pm: PluginManager) -> None:
        port = MagicMock()
        pm.inject_io(port)
        assert pm.collect_modules()["io"].io is port


class TestFindModule:
    def test_bare_name(self, pm: PluginManager) -> None:
        name, module, method = pm.find_module("ask")
        assert (name, method) == ("io", "ask")
        assert isinstance(module, IOModule)

    def test_qualified_name(self, pm: PluginManager) -> None:
        pm.register_plugin(_ShoutPlugin(), name="shout")
        name, _module, method = pm.find_module("shout.write")
        assert (name, method) == ("shout", "write")

    def test_bare_name_uses_registry_order(self, pm: PluginManager) -> None:
        pm.register_plugin(_ShoutPlugin(), name="shout")
        # Most recently registered plugin is consulted first.
        name, _module, _method = pm.find_module("write")
        assert name == "shout"

    def test_unknown_bare_name(self, pm: PluginManager) -> None:
        with pytest.raises(UnknownMethodError, match="not supported by any registered module"):
            pm.find_module("dance")

    def test_unknown_qualified_name(self, pm: PluginManager) -> None:
        with pytest.raises(UnknownMethodError, match='not supported by module "io"'):
            pm.find_module("io.dance")

    def test_unknown_module(self, pm: PluginManager) -> None:
        with pytest.raises(UnknownMethodError):
            pm.find_module("nope.ask")


class TestNotifyMethod:
    def test_post_method_dispatched(self, pm: PluginManager) -> None:
        recorder = _RecordingPlugin()
        pm.register_plugin(recorder, name="recorder")
        pm.notify_method("io", "ask", '{"response":"Jack"}')
        assert recorder.calls == [("io", "ask", '{"response":"Jack"}')]

    def test_hook_failure_is_a_warning(
        self, pm: PluginManager, caplog: pytest.LogCaptureFixture
    ) -> None:
        pm.register_plugin(_FailingHookPlugin(), name="failing")
        with caplog.at_level(logging.WARNING, logger="recipe_io"):
            pm.notify_method("io", "write", "{}")
        assert "post_method hook failed" in caplog.text
