"""Domain layer — method invocations and parameter normalization."""

from recipe_io.domain.booleans import parse_boolean_token
from recipe_io.domain.method import MISSING, Method

__all__ = ["MISSING", "Method", "parse_boolean_token"]
