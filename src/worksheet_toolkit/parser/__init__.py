"""
Worksheet Parser Package

Turns raw worksheet text into typed Question records.

Stages:
- normalizer: canonical line-oriented text
- detection: line roles and question types
- accumulator: stateful pass building drafts, answer key included
- postprocess: per-type finishing
- validation: readiness checks

Usage:
    >>> from worksheet_toolkit.parser import parse_worksheet, ready_questions
    >>> questions = parse_worksheet(text)
    >>> usable = ready_questions(questions)
"""

from .accumulator import ParserState, QuestionAccumulator
from .answer_key import apply_answer, resolve_answer
from .config import ParserConfig
from .detection import LineKind, Phase, classify_line, detect_question_type, type_rule_names
from .draft import QuestionDraft
from .normalizer import normalize_text, split_lines
from .pipeline import parse_worksheet
from .postprocess import apply_postprocessing
from .validation import is_question_valid, ready_questions, validation_issues

__all__ = [
    "parse_worksheet",
    "ParserConfig",
    "ParserState",
    "QuestionAccumulator",
    "QuestionDraft",
    "LineKind",
    "Phase",
    "classify_line",
    "detect_question_type",
    "type_rule_names",
    "normalize_text",
    "split_lines",
    "apply_answer",
    "resolve_answer",
    "apply_postprocessing",
    "is_question_valid",
    "ready_questions",
    "validation_issues",
]
