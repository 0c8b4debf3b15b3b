"""Serialization helpers for question records."""

from .serialization import (
    deserialize_question,
    load_questions_jsonl,
    save_questions_jsonl,
    serialize_question,
)

__all__ = [
    "serialize_question",
    "deserialize_question",
    "load_questions_jsonl",
    "save_questions_jsonl",
]
