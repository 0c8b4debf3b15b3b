"""
Module: parser.validation

Purpose:
    Per-type completeness checks deciding whether a Question is ready to
    be handed to a quiz. Invalid questions are kept by the parser so the
    editor can fix them; consumers only receive the ready subset.

Key Functions:
    - validation_issues(): Human-readable reasons a question is not ready
    - is_question_valid(): True when there are no issues
    - ready_questions(): Filter a list down to valid questions

Dependencies:
    - worksheet_toolkit.core.models

Used By:
    - extraction.importer
    - editor.question_editor
    - cli
"""

from __future__ import annotations

import math
from typing import Iterable, List

from worksheet_toolkit.core.models import Question, QuestionType


def _non_empty(values: Iterable[str]) -> List[str]:
    return [v for v in values if v and v.strip()]


def validation_issues(question: Question) -> List[str]:
    """
    List the reasons a question is not ready.

    Returns:
        Empty list when the question is valid
    """
    if not question.question_text.strip():
        return ["question text is empty"]

    issues: List[str] = []
    kind = question.type

    if kind is QuestionType.CHOICE:
        options = question.options
        if len(_non_empty(options)) < 2:
            issues.append("needs at least 2 options")
        correct = question.correct
        if not isinstance(correct, int) or isinstance(correct, bool) or not 0 <= correct < len(options):
            issues.append("correct answer does not point at an option")
        elif not options[correct].strip():
            issues.append("correct answer points at an empty option")

    elif kind is QuestionType.BLANK:
        if question.blank_count <= 0:
            issues.append("no blanks in question text")

    elif kind is QuestionType.MATCH:
        complete = [p for p in question.pairs if p.left.strip() and p.right.strip()]
        if len(complete) < 2:
            issues.append("needs at least 2 complete pairs")

    elif kind is QuestionType.TRUE_FALSE:
        if question.correct not in ("true", "false"):
            issues.append("answer must be true or false")

    elif kind is QuestionType.NUMERIC:
        correct = question.correct
        if not isinstance(correct, (int, float)) or isinstance(correct, bool) or math.isnan(correct):
            issues.append("answer is not a number")

    elif kind is QuestionType.ORDERING:
        if len(_non_empty(question.sentence_parts)) < 2:
            issues.append("needs at least 2 sentence parts")

    elif kind is QuestionType.SORTING:
        if len(_non_empty(question.items)) < 2:
            issues.append("needs at least 2 items")

    return issues


def is_question_valid(question: Question) -> bool:
    """Whether a question is complete enough to be used."""
    return not validation_issues(question)


def ready_questions(questions: Iterable[Question]) -> List[Question]:
    """Keep only valid questions, preserving order."""
    return [q for q in questions if is_question_valid(q)]
