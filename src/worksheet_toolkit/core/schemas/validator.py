"""
Schema Validation Utilities

Validates question JSON against the wire-format schema before it is turned
back into a Question.

Two levels:
- Basic checks (always): required fields, known type, per-type field shapes
- Strict mode: full JSON Schema validation with jsonschema
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


QUESTION_TYPES = (
    "choice", "blank", "match", "comprehension",
    "truefalse", "numeric", "ordering", "sorting",
)

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_question(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate serialized question data.

    Args:
        data: Question dictionary (wire format, camelCase keys)
        strict: If True, also validate against question.schema.json

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Question must be an object, got {type(data).__name__}")

    required = ["id", "type", "questionText"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )

    kind = data.get("type")
    if kind not in QUESTION_TYPES:
        raise ValidationError(f"Invalid question type: {kind!r}", path="type")

    if not isinstance(data.get("questionText"), str):
        raise ValidationError("questionText must be a string", path="questionText")

    if kind == "choice":
        options = data.get("options", [])
        if not isinstance(options, list) or len(options) > 4:
            raise ValidationError("options must be a list of at most 4 strings", path="options")
        correct = data.get("correct")
        if correct is not None and (isinstance(correct, bool) or not isinstance(correct, int)):
            raise ValidationError(f"Invalid choice answer index: {correct!r}", path="correct")

    if kind == "match":
        for i, pair in enumerate(data.get("pairs", [])):
            if not isinstance(pair, dict) or "left" not in pair or "right" not in pair:
                raise ValidationError(
                    f"Pair {i} must have left and right",
                    path=f"pairs[{i}]"
                )

    if kind == "blank":
        count = data.get("blankCount", 0)
        if not isinstance(count, int) or count < 0:
            raise ValidationError(
                f"Invalid blankCount: {count} (must be non-negative integer)",
                path="blankCount"
            )

    if strict:
        schema = _load_schema("question")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message]
            ) from e
