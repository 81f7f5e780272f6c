"""Tests for the run CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from recipe_io.cli import cli

_RECIPE = """\
steps:
  - write: "Hello"
  - ask:
      question: "What's your name?"
      default: "Jack"
  - ask_yes_no:
      question: "Continue?"
      default: false
"""


@pytest.mark.usefixtures("_isolated_project")
class TestRunCommand:
    def test_non_interactive_uses_defaults(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "recipe.yaml").write_text(_RECIPE)
        result = cli_runner.invoke(cli, ["--no-interact", "run", "recipe.yaml"])
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0] == "Hello"
        assert "OK: io.ask" in lines
        assert "  response: Jack" in lines
        assert "  response: false" in lines
        # Steps without data print nothing beyond their own messages.
        assert "OK: io.write" not in lines

    def test_interactive_answers(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "recipe.yaml").write_text(_RECIPE)
        result = cli_runner.invoke(cli, ["run", "recipe.yaml"], input="Elliot\ny\n")
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert "  response: Elliot" in lines
        assert "  response: true" in lines

    def test_json_keeps_stdout_parseable(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "recipe.yaml").write_text(_RECIPE)
        result = cli_runner.invoke(cli, ["--json", "--no-interact", "run", "recipe.yaml"])
        assert result.exit_code == 0
        decoder = json.JSONDecoder()
        text = result.stdout.strip()
        docs = []
        while text:
            doc, end = decoder.raw_decode(text)
            docs.append(doc)
            text = text[end:].strip()
        assert [d["data"] for d in docs] == [{"response": "Jack"}, {"response": False}]
        assert "Hello" in result.stderr

    def test_stops_at_first_failure(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "recipe.yaml").write_text(
            "- ask: [a, b, c]\n- write: never printed\n"
        )
        result = cli_runner.invoke(cli, ["--no-interact", "run", "recipe.yaml"])
        assert result.exit_code == 1
        assert 'Method "ask" only support 1 or 2 parameters.' in result.stderr
        assert "never printed" not in result.stdout

    def test_malformed_recipe(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "recipe.yaml").write_text("steps: write\n")
        result = cli_runner.invoke(cli, ["run", "recipe.yaml"])
        assert result.exit_code == 1
        assert "must be a list" in result.stderr

    def test_missing_recipe(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["run", "missing.yaml"])
        assert result.exit_code == 2

    def test_numeric_default_is_answered_as_text(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        (tmp_path / "recipe.yaml").write_text("- ask: {question: 'Port?', default: 8080}\n")
        result = cli_runner.invoke(cli, ["--json", "--no-interact", "run", "recipe.yaml"])
        assert result.exit_code == 0
        response = json.loads(result.stdout)["data"]["response"]
        assert response == "8080"
        assert isinstance(response, str)

    def test_numeric_default_accepts_free_text(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        (tmp_path / "recipe.yaml").write_text("- ask: {question: 'Port?', default: 8080}\n")
        result = cli_runner.invoke(cli, ["run", "recipe.yaml"], input="auto\n")
        assert result.exit_code == 0
        assert "  response: auto" in result.stdout.splitlines()
        assert "not a valid integer" not in result.output
