"""Schema validation for serialized questions."""

from .validator import ValidationError, validate_question

__all__ = ["ValidationError", "validate_question"]
