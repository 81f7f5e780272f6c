"""Recipe loading — turn a YAML file into an ordered list of methods.

A recipe is either a list of steps or a mapping with a ``steps`` list::

    steps:
      - write: "Hi user"
      - ask:
          question: "What's your name?"
          default: "Jack"
      - io.ask_yes_no: "Continue?"

Each step is a single-key mapping ``{<method>: <parameters>}``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from recipe_io.domain.method import Method
from recipe_io.errors import RecipeError


def parse_steps(document: Any) -> list[Method]:
    """Validate a loaded YAML document and build its methods."""
    if isinstance(document, dict):
        if "steps" not in document:
            raise RecipeError("Recipe mapping must contain a 'steps' list")
        document = document["steps"]
    if document is None:
        return []
    if not isinstance(document, list):
        raise RecipeError("Recipe steps must be a list")

    methods: list[Method] = []
    for index, step in enumerate(document):
        if not isinstance(step, dict) or len(step) != 1:
            msg = f"Step {index + 1} must be a mapping with exactly one method name"
            raise RecipeError(msg)
        ((name, value),) = step.items()
        methods.append(Method.from_value(str(name), value))
    return methods


def load_recipe(path: Path) -> list[Method]:
    """Read *path* and return its steps as methods.

    Raises:
        RecipeError: The file is unreadable, not valid YAML, or malformed.
    """
    try:
        document = YAML(typ="safe").load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeError, YAMLError) as exc:
        msg = f"Cannot read recipe {path}: {exc}"
        raise RecipeError(msg) from exc
    return parse_steps(document)
