"""
Module: parser.answer_key

Purpose:
    Apply answer-key tokens ("1. B", "2 true", "3 = 42") to drafts by
    question number. The per-type conversion lives in apply_answer() so
    the editor can reuse it for manual answers.

Key Functions:
    - apply_answer(): Token -> typed answer value for one question type
    - resolve_answer(): Look up a draft by number and apply a token

Dependencies:
    - worksheet_toolkit.core.models: QuestionType

Used By:
    - parser.accumulator: ANSWER_KEY_ENTRY lines
    - editor.question_editor: set_answer()
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Sequence

from worksheet_toolkit.core.models import QuestionType

from .draft import QuestionDraft

logger = logging.getLogger(__name__)

CHOICE_TOKEN = re.compile(r"^\(?([A-Da-d])\)?\.?$")
TRUE_TOKENS = ("true", "t")


def apply_answer(question_type: QuestionType, current: Any, token: str) -> Any:
    """
    Convert an answer token to the answer value for a question type.

    - choice: letter A-D (optionally "(B)", "B)" or "B.") -> option index;
      anything else keeps the current value
    - truefalse: "true"/"t" -> "true", anything else -> "false"
    - numeric: float(token), NaN when it does not parse
    - other types: token stored verbatim

    Example:
        >>> apply_answer(QuestionType.CHOICE, 0, "C)")
        2
        >>> apply_answer(QuestionType.TRUE_FALSE, None, "F")
        'false'
    """
    token = token.strip()
    if question_type is QuestionType.CHOICE:
        words = token.split()
        m = CHOICE_TOKEN.match(words[0]) if words else None
        if not m:
            return current
        return "ABCD".index(m.group(1).upper())

    if question_type is QuestionType.TRUE_FALSE:
        word = token.strip(".)").strip().lower()
        return "true" if word in TRUE_TOKENS else "false"

    if question_type is QuestionType.NUMERIC:
        try:
            return float(token)
        except ValueError:
            return math.nan

    return token


def resolve_answer(drafts: Sequence[QuestionDraft], number: int, token: str) -> bool:
    """
    Apply an answer-key entry to the draft at position number - 1.

    Returns:
        True if a draft was found and updated
    """
    index = number - 1
    if not 0 <= index < len(drafts):
        logger.debug(f"Answer key entry {number} has no matching question")
        return False

    draft = drafts[index]
    kind = draft.question_type or draft.detect_type()
    draft.correct = apply_answer(kind, draft.correct, token)
    logger.debug(f"Answer key: question {number} ({kind}) <- {draft.correct!r}")
    return True
