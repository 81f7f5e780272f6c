"""ExecutionResult — the value every module method returns.

INVARIANT: Results are created once per dispatched method and never mutated.
INVARIANT: A non-blank payload is always a JSON object.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, field_validator

EMPTY_JSON = "{}"


class ExecutionResult(BaseModel):
    """JSON payload produced by a module method.

    Attributes:
        json_result: JSON object document; ``"{}"`` when the method produces
            no data. A blank string is accepted as "no payload".
    """

    model_config = {"frozen": True}

    json_result: str = EMPTY_JSON

    @field_validator("json_result")
    @classmethod
    def _must_be_object(cls, value: str) -> str:
        if not value.strip():
            return value
        try:
            decoded = json.loads(value)
        except json.JSONDecodeError as exc:
            raise ValueError(f"payload is not valid JSON: {exc}") from exc
        if not isinstance(decoded, dict):
            raise ValueError(f"payload must be a JSON object, got {type(decoded).__name__}")
        return value

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> ExecutionResult:
        """Encode *data* as a compact JSON document."""
        return cls(json_result=json.dumps(data, separators=(",", ":")))

    @property
    def data(self) -> dict[str, Any]:
        """The decoded payload (empty dict when there is none)."""
        if not self.json_result.strip():
            return {}
        return json.loads(self.json_result)
