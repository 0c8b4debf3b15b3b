"""
Module: parser.draft

Purpose:
    Mutable question draft used while the accumulator is building a
    record, and its conversion into an immutable Question once closed.

Key Classes:
    - QuestionDraft: Flat, mutable record under construction

Key Functions:
    - QuestionDraft.refresh_type(): Provisional re-classification
    - QuestionDraft.to_question(): Build the tagged-variant Question
    - QuestionDraft.from_question(): Reopen a Question for editing

Dependencies:
    - worksheet_toolkit.core.models
    - parser.detection.types: detect_question_type

Used By:
    - parser.accumulator
    - parser.answer_key
    - parser.postprocess
    - editor.question_editor
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from worksheet_toolkit.core.models import (
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

from .detection.types import detect_question_type

DEFAULT_OPTION_SLOTS = 4
TRUE_FALSE_HINT = "(T/F)"


def _empty_slots() -> List[str]:
    return [""] * DEFAULT_OPTION_SLOTS


@dataclass
class QuestionDraft:
    """
    Question under construction.

    Holds every field flat so lines can fill it in any order; the type
    decides which fields survive into the final Question.

    Attributes:
        number: Question number as written in the worksheet (if any)
        text: Stem accumulated so far
        options: Lettered option slots (A..D), empty string when unset
        pairs: Matching pairs
        correct: Raw answer value (index, "true"/"false", float, str)
        question_type: Provisional type while open, final once closed
        seeded_pairs: Pairs came with the draft; keeps the type at match
        true_false_hint: An inline (True/False) hint was stripped from the
            stem; detection still sees it
        paragraph: Attached passage (comprehension only)
        sentence_parts: Ordering fragments
        items: Sorting items
        blank_count: Number of blanks in the stem
    """
    number: Optional[int] = None
    text: str = ""
    options: List[str] = field(default_factory=_empty_slots)
    pairs: List[MatchPair] = field(default_factory=list)
    correct: Any = None
    question_type: Optional[QuestionType] = None
    seeded_pairs: bool = False
    true_false_hint: bool = False
    paragraph: Optional[str] = None
    sentence_parts: List[str] = field(default_factory=list)
    items: List[str] = field(default_factory=list)
    blank_count: int = 0

    def has_content(self) -> bool:
        """True when the draft has a stem or at least one option."""
        return bool(self.text.strip()) or any(o.strip() for o in self.options)

    def filled_options(self) -> List[str]:
        """Options with trailing empty slots removed (interior gaps kept)."""
        options = list(self.options)
        while options and not options[-1].strip():
            options.pop()
        return options

    def append_text(self, line: str) -> None:
        """Append a continuation line with a single separating space."""
        self.text = f"{self.text} {line}" if self.text else line

    def detect_type(self) -> QuestionType:
        """Classify from the current stem and options."""
        if self.seeded_pairs:
            return QuestionType.MATCH
        text = f"{self.text} {TRUE_FALSE_HINT}" if self.true_false_hint else self.text
        return detect_question_type(text, self.filled_options())

    def refresh_type(self) -> QuestionType:
        """Re-run detection and store it as the provisional type."""
        self.question_type = self.detect_type()
        return self.question_type

    # ─────────────────────────────────────────────────────────────────────────
    # Conversion
    # ─────────────────────────────────────────────────────────────────────────

    def to_question(self, question_id: str) -> Question:
        """
        Build an immutable Question from this draft.

        Fields that do not belong to the draft's type are dropped. Answer
        values of the wrong shape for the type are discarded.
        """
        kind = self.question_type or self.detect_type()
        return Question(
            id=question_id,
            question_text=self.text.strip(),
            payload=self._payload(kind),
        )

    def _payload(self, kind: QuestionType) -> Payload:
        correct = self.correct
        if kind is QuestionType.CHOICE:
            index = correct if isinstance(correct, int) and not isinstance(correct, bool) else 0
            return ChoiceAnswer(options=tuple(self.filled_options()), correct=index)
        if kind is QuestionType.TRUE_FALSE:
            return TrueFalseAnswer(correct=correct if correct in ("true", "false") else None)
        if kind is QuestionType.NUMERIC:
            value = float(correct) if isinstance(correct, (int, float)) and not isinstance(correct, bool) else None
            return NumericAnswer(correct=value)
        text_answer = correct if isinstance(correct, str) else None
        if kind is QuestionType.BLANK:
            return BlankAnswer(blank_count=self.blank_count, correct=text_answer)
        if kind is QuestionType.COMPREHENSION:
            return ComprehensionAnswer(paragraph=self.paragraph or None, correct=text_answer)
        if kind is QuestionType.MATCH:
            return MatchAnswer(pairs=tuple(self.pairs))
        if kind is QuestionType.ORDERING:
            return OrderingAnswer(sentence_parts=tuple(self.sentence_parts))
        return SortingAnswer(items=tuple(self.items))

    @classmethod
    def from_question(cls, question: Question, *, option_slots: int = DEFAULT_OPTION_SLOTS) -> QuestionDraft:
        """Reopen a Question as a draft (used by the editor)."""
        options = list(question.options)[:option_slots]
        options += [""] * (option_slots - len(options))
        return cls(
            text=question.question_text,
            options=options,
            pairs=list(question.pairs),
            correct=question.correct,
            question_type=question.type,
            seeded_pairs=question.type is QuestionType.MATCH and bool(question.pairs),
            true_false_hint=question.type is QuestionType.TRUE_FALSE,
            paragraph=question.paragraph,
            sentence_parts=list(question.sentence_parts),
            items=list(question.items),
            blank_count=question.blank_count,
        )
