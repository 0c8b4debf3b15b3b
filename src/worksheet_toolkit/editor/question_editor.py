"""
Module: editor.question_editor

Purpose:
    Create and revise questions after import. Every revision goes back
    through the parser's own detection and post-processing, so an edited
    question is typed exactly as if it had been parsed with that text.

Key Functions:
    - new_question(): Empty template for a question type
    - revise_question(): Apply text/option/paragraph edits and re-type
    - set_answer(): Apply an answer token with the answer-key rules

Dependencies:
    - worksheet_toolkit.parser: QuestionDraft, apply_answer, apply_postprocessing

Used By:
    - Front ends editing imported worksheets
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from worksheet_toolkit.core.models import (
    MAX_OPTIONS,
    BlankAnswer,
    ChoiceAnswer,
    ComprehensionAnswer,
    MatchAnswer,
    MatchPair,
    NumericAnswer,
    OrderingAnswer,
    Payload,
    Question,
    QuestionType,
    SortingAnswer,
    TrueFalseAnswer,
)
from worksheet_toolkit.parser import ParserConfig, QuestionDraft, apply_answer, apply_postprocessing

logger = logging.getLogger(__name__)

TEMPLATE_SLOTS = 3


def _template(question_type: QuestionType) -> Payload:
    empty = ("",) * TEMPLATE_SLOTS
    if question_type is QuestionType.CHOICE:
        return ChoiceAnswer(options=empty, correct=0)
    if question_type is QuestionType.TRUE_FALSE:
        return TrueFalseAnswer()
    if question_type is QuestionType.NUMERIC:
        return NumericAnswer()
    if question_type is QuestionType.BLANK:
        return BlankAnswer()
    if question_type is QuestionType.COMPREHENSION:
        return ComprehensionAnswer()
    if question_type is QuestionType.MATCH:
        return MatchAnswer(pairs=(MatchPair("", ""), MatchPair("", "")))
    if question_type is QuestionType.ORDERING:
        return OrderingAnswer(sentence_parts=empty)
    return SortingAnswer(items=empty)


def new_question(question_type: QuestionType | str, question_id: str) -> Question:
    """
    Create an empty question of the given type.

    Choice starts with 3 empty options, match with 2 empty pairs, ordering
    and sorting with 3 empty slots. True/false has no answer yet.

    Raises:
        ValueError: Unknown question type
    """
    question_type = QuestionType(question_type)
    return Question(id=question_id, question_text="", payload=_template(question_type))


def revise_question(
    question: Question,
    *,
    text: Optional[str] = None,
    options: Optional[Sequence[str]] = None,
    paragraph: Optional[str] = None,
    config: Optional[ParserConfig] = None,
) -> Question:
    """
    Apply edits and re-classify.

    The type is detected again from the edited text and options. When it
    changes, the payload is rebuilt for the new type and the old answer
    is dropped.

    Raises:
        ValueError: More options than slots

    Example:
        >>> q = new_question("choice", "q1")
        >>> q = revise_question(q, text="Capital of France?", options=["London", "Paris"])
        >>> q.type, q.options
        (<QuestionType.CHOICE: 'choice'>, ('London', 'Paris'))
    """
    config = config or ParserConfig()
    draft = QuestionDraft.from_question(question, option_slots=MAX_OPTIONS)

    if text is not None:
        draft.text = text.strip()
        draft.true_false_hint = False
    if options is not None:
        if len(options) > MAX_OPTIONS:
            raise ValueError(f"At most {MAX_OPTIONS} options allowed: {len(options)}")
        draft.options = [o.strip() for o in options] + [""] * (MAX_OPTIONS - len(options))
    if paragraph is not None:
        draft.paragraph = paragraph.strip() or None

    kind = draft.refresh_type()
    if kind is not question.type:
        logger.debug(f"{question.id}: type changed {question.type} -> {kind}")
        draft.correct = None
    apply_postprocessing(draft, config)
    return draft.to_question(question.id)


def set_answer(question: Question, token: str) -> Question:
    """
    Set the answer from a token, using the answer-key rules.

    Example:
        >>> q = set_answer(new_question("truefalse", "q1"), "T")
        >>> q.correct
        'true'
    """
    draft = QuestionDraft.from_question(question, option_slots=MAX_OPTIONS)
    draft.correct = apply_answer(question.type, question.correct, token)
    return draft.to_question(question.id)
