"""Shared pytest fixtures for recipe-io tests."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner

from recipe_io.modules.io_module import IOModule
from recipe_io.ports.io import IOInterface


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def io_mock() -> MagicMock:
    """A test double for the I/O port."""
    return MagicMock(spec=IOInterface)


@pytest.fixture
def io_module(io_mock: MagicMock) -> IOModule:
    """IOModule wired to :func:`io_mock`."""
    module = IOModule()
    module.set_io(io_mock)
    return module


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty directory with no config file discoverable from env."""
    monkeypatch.delenv("RECIPE_IO_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
