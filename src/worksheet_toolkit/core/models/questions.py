"""
Module: questions

Purpose:
    Provides the Question dataclass - the record handed from the parser to
    quiz players and the question editor. A Question is a stem plus exactly
    one type-specific payload (tagged variant), so the active fields are
    always governed by the question type.

Key Classes:
    - QuestionType: The eight supported question kinds
    - MatchPair: One left/right pair of a matching question
    - ChoiceAnswer, TrueFalseAnswer, NumericAnswer, BlankAnswer,
      ComprehensionAnswer, MatchAnswer, OrderingAnswer, SortingAnswer:
      Per-type payloads
    - Question: Immutable question record

Key Functions:
    - Question.type: Derived from the payload, never stored
    - Question.to_dict() / Question.from_dict(): Wire format (camelCase keys)

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - parser.pipeline: Builds Questions from finalized drafts
    - parser.validation: Per-type completeness checks
    - editor.question_editor: Revisions
    - core.utils.serialization
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Tuple, Union

MAX_OPTIONS = 4
TRUE_FALSE_OPTIONS = ("True", "False")


class QuestionType(str, Enum):
    """Kind of quiz question."""
    CHOICE = "choice"
    BLANK = "blank"
    MATCH = "match"
    COMPREHENSION = "comprehension"
    TRUE_FALSE = "truefalse"
    NUMERIC = "numeric"
    ORDERING = "ordering"
    SORTING = "sorting"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class MatchPair:
    """One row of a matching question."""
    left: str
    right: str

    def to_dict(self) -> Dict[str, str]:
        return {"left": self.left, "right": self.right}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> MatchPair:
        return cls(left=str(data.get("left", "")), right=str(data.get("right", "")))


# ─────────────────────────────────────────────────────────────────────────────
# Payloads
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class ChoiceAnswer:
    """
    Multiple-choice payload.

    Attributes:
        options: Up to 4 option strings in letter order (A, B, C, D).
            Interior slots may be empty so that indices keep their letters.
        correct: Index into options. Defaults to 0 (option A) so a freshly
            imported question has a usable answer until a key overrides it.
    """
    KIND: ClassVar[QuestionType] = QuestionType.CHOICE

    options: Tuple[str, ...] = ()
    correct: Optional[int] = 0

    def __post_init__(self) -> None:
        if len(self.options) > MAX_OPTIONS:
            raise ValueError(f"choice supports at most {MAX_OPTIONS} options: {len(self.options)}")


@dataclass(frozen=True, slots=True)
class TrueFalseAnswer:
    """True/false payload. correct is "true", "false" or unset."""
    KIND: ClassVar[QuestionType] = QuestionType.TRUE_FALSE

    correct: Optional[str] = None

    @property
    def options(self) -> Tuple[str, ...]:
        return TRUE_FALSE_OPTIONS


@dataclass(frozen=True, slots=True)
class NumericAnswer:
    """Numeric payload. correct may be NaN when a key token did not parse."""
    KIND: ClassVar[QuestionType] = QuestionType.NUMERIC

    correct: Optional[float] = None


@dataclass(frozen=True, slots=True)
class BlankAnswer:
    """Fill-in-the-blank payload."""
    KIND: ClassVar[QuestionType] = QuestionType.BLANK

    blank_count: int = 0
    correct: Optional[str] = None

    def __post_init__(self) -> None:
        if self.blank_count < 0:
            raise ValueError(f"blank_count cannot be negative: {self.blank_count}")


@dataclass(frozen=True, slots=True)
class ComprehensionAnswer:
    """Comprehension payload with the optional attached passage."""
    KIND: ClassVar[QuestionType] = QuestionType.COMPREHENSION

    paragraph: Optional[str] = None
    correct: Optional[str] = None


@dataclass(frozen=True, slots=True)
class MatchAnswer:
    """Matching payload."""
    KIND: ClassVar[QuestionType] = QuestionType.MATCH

    pairs: Tuple[MatchPair, ...] = ()


@dataclass(frozen=True, slots=True)
class OrderingAnswer:
    """Ordering payload: fragments to be arranged."""
    KIND: ClassVar[QuestionType] = QuestionType.ORDERING

    sentence_parts: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class SortingAnswer:
    """Sorting payload: items to be grouped."""
    KIND: ClassVar[QuestionType] = QuestionType.SORTING

    items: Tuple[str, ...] = ()


Payload = Union[
    ChoiceAnswer,
    TrueFalseAnswer,
    NumericAnswer,
    BlankAnswer,
    ComprehensionAnswer,
    MatchAnswer,
    OrderingAnswer,
    SortingAnswer,
]

PAYLOAD_TYPES: Dict[QuestionType, type] = {
    cls.KIND: cls
    for cls in (
        ChoiceAnswer,
        TrueFalseAnswer,
        NumericAnswer,
        BlankAnswer,
        ComprehensionAnswer,
        MatchAnswer,
        OrderingAnswer,
        SortingAnswer,
    )
}


# ─────────────────────────────────────────────────────────────────────────────
# Question
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Question:
    """
    Complete question record (immutable).

    Attributes:
        id: Identifier unique within one parse result, e.g. "q3"
        question_text: The stem/prompt shown to students
        payload: Type-specific data; its class decides the question type

    Invariants:
        - type is always derived from payload
        - exactly one of options/pairs/sentence_parts/items is meaningful

    Example:
        >>> q = Question("q1", "What is 2+2?", ChoiceAnswer(("3", "4"), correct=1))
        >>> q.type
        <QuestionType.CHOICE: 'choice'>
        >>> q.to_dict()["options"]
        ['3', '4']
    """

    id: str
    question_text: str
    payload: Payload

    def __post_init__(self) -> None:
        if not isinstance(self.payload, tuple(PAYLOAD_TYPES.values())):
            raise ValueError(f"Unknown payload: {type(self.payload).__name__}")

    @property
    def type(self) -> QuestionType:
        return self.payload.KIND

    # Convenience accessors; empty when the field is inactive for this type.

    @property
    def options(self) -> Tuple[str, ...]:
        return getattr(self.payload, "options", ())

    @property
    def correct(self) -> Any:
        return getattr(self.payload, "correct", None)

    @property
    def pairs(self) -> Tuple[MatchPair, ...]:
        return getattr(self.payload, "pairs", ())

    @property
    def sentence_parts(self) -> Tuple[str, ...]:
        return getattr(self.payload, "sentence_parts", ())

    @property
    def items(self) -> Tuple[str, ...]:
        return getattr(self.payload, "items", ())

    @property
    def paragraph(self) -> Optional[str]:
        return getattr(self.payload, "paragraph", None)

    @property
    def blank_count(self) -> int:
        return getattr(self.payload, "blank_count", 0)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the consumer wire format.

        Only the keys belonging to this question's type are emitted.
        A NaN numeric answer is written as None (JSON null).
        """
        data: Dict[str, Any] = {
            "id": self.id,
            "type": self.type.value,
            "questionText": self.question_text,
        }
        payload = self.payload
        if isinstance(payload, (ChoiceAnswer, TrueFalseAnswer)):
            data["options"] = list(payload.options)
            data["correct"] = payload.correct
        elif isinstance(payload, NumericAnswer):
            value = payload.correct
            data["correct"] = None if value is None or math.isnan(value) else value
        elif isinstance(payload, BlankAnswer):
            data["blankCount"] = payload.blank_count
            data["correct"] = payload.correct
        elif isinstance(payload, ComprehensionAnswer):
            data["paragraph"] = payload.paragraph
            data["correct"] = payload.correct
        elif isinstance(payload, MatchAnswer):
            data["pairs"] = [pair.to_dict() for pair in payload.pairs]
        elif isinstance(payload, OrderingAnswer):
            data["sentenceParts"] = list(payload.sentence_parts)
        elif isinstance(payload, SortingAnswer):
            data["items"] = list(payload.items)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Question:
        """
        Deserialize from the wire format.

        Raises:
            ValueError: If the type is unknown or the payload is malformed
        """
        try:
            kind = QuestionType(data["type"])
        except (KeyError, ValueError) as e:
            raise ValueError(f"Invalid question type: {data.get('type')!r}") from e

        correct = data.get("correct")
        payload: Payload
        if kind is QuestionType.CHOICE:
            payload = ChoiceAnswer(
                options=tuple(str(o) for o in data.get("options", [])),
                correct=correct,
            )
        elif kind is QuestionType.TRUE_FALSE:
            payload = TrueFalseAnswer(correct=correct)
        elif kind is QuestionType.NUMERIC:
            payload = NumericAnswer(correct=float(correct) if correct is not None else None)
        elif kind is QuestionType.BLANK:
            payload = BlankAnswer(blank_count=int(data.get("blankCount", 0)), correct=correct)
        elif kind is QuestionType.COMPREHENSION:
            payload = ComprehensionAnswer(paragraph=data.get("paragraph"), correct=correct)
        elif kind is QuestionType.MATCH:
            payload = MatchAnswer(
                pairs=tuple(MatchPair.from_dict(p) for p in data.get("pairs", []))
            )
        elif kind is QuestionType.ORDERING:
            payload = OrderingAnswer(sentence_parts=tuple(data.get("sentenceParts", [])))
        else:
            payload = SortingAnswer(items=tuple(data.get("items", [])))

        return cls(
            id=str(data.get("id", "")),
            question_text=str(data.get("questionText", "")),
            payload=payload,
        )
