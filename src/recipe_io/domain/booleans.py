"""Boolean-token normalization for yes/no defaults.

Accepted values:
  true:  True, 1, "true", "yes", "1"
  false: False, 0, "false", "no", "0"

Matching is type-aware and exact: ``1.0``, ``"True"`` and ``None`` are
rejected rather than coerced.
"""

from __future__ import annotations

from typing import Any

from recipe_io.errors import ValidationError

TRUE_TOKENS: frozenset[str] = frozenset({"true", "yes", "1"})
FALSE_TOKENS: frozenset[str] = frozenset({"false", "no", "0"})


def parse_boolean_token(value: Any, method_name: str) -> bool:
    """Normalize *value* to a bool or raise :class:`ValidationError`.

    *method_name* only feeds the error message.
    """
    # bool must be checked before int: bool is an int subclass.
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value == 1:
            return True
        if value == 0:
            return False
    elif isinstance(value, str):
        if value in TRUE_TOKENS:
            return True
        if value in FALSE_TOKENS:
            return False

    msg = f'Method "{method_name}" only support boolean values as default parameter.'
    raise ValidationError(msg)
