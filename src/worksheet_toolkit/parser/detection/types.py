"""
Module: parser.detection.types

Purpose:
    Heuristic question-type classification. The priority chain is an
    explicit table of (type, predicate) rules evaluated top to bottom;
    the first rule whose predicate matches decides the type.

Key Functions:
    - detect_question_type(): Pure classifier used by the parser and editor
    - type_rule_names(): Rule order, for inspection

Key Classes:
    - TypeRule: One row of the priority table

Dependencies:
    - re (std)
    - worksheet_toolkit.core.models: QuestionType

Used By:
    - parser.draft: Provisional typing while a draft is open
    - parser.accumulator: Final typing when a draft closes
    - editor.question_editor: Re-classification on every revision
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from worksheet_toolkit.core.models import QuestionType

# Length above which an unmarked stem is treated as a reading passage
COMPREHENSION_MIN_LENGTH = 200

BLANK_PATTERN = re.compile(r"\[blank\]|\d?_{3,}", re.IGNORECASE)
MATCH_PATTERN = re.compile(r"\b(?:match|pair)", re.IGNORECASE)
PASSAGE_PATTERN = re.compile(r"\b(?:story|passage|read|text|article)\s*:", re.IGNORECASE)
TRUE_FALSE_PATTERN = re.compile(
    r"\btrue\s*(?:/|\\|\||-|,|or)\s*false\b", re.IGNORECASE
)
TRUE_FALSE_HINT_PATTERN = re.compile(
    r"[(\[]\s*t\s*(?:/|\\|\||-|,|or)\s*f\s*[)\]]", re.IGNORECASE
)
CALCULATION_PATTERN = re.compile(
    r"\b(?:calculate|compute|sum|total|count|how many|how much)\b", re.IGNORECASE
)
EQUATION_PATTERN = re.compile(r"\d\s*=|=\s*\d")
ARITHMETIC_PATTERN = re.compile(r"\d\s*[+\-*/x\u00d7\u00f7]\s*\d")
ORDERING_PATTERN = re.compile(
    r"\b(?:order|sequence|arrange|put in order)\b|\bstep\s*\d", re.IGNORECASE
)
SORTING_PATTERN = re.compile(
    r"\b(?:sort|categori[sz]e|group|classify|categories)", re.IGNORECASE
)

Predicate = Callable[[str, Sequence[str]], bool]


@dataclass(frozen=True)
class TypeRule:
    """
    One entry of the type priority table.

    Attributes:
        question_type: Type assigned when the predicate matches
        predicate: (text, options) -> bool
        description: Short human-readable trigger summary
    """
    question_type: QuestionType
    predicate: Predicate
    description: str

    def matches(self, text: str, options: Sequence[str]) -> bool:
        return self.predicate(text, options)


def _filled(options: Sequence[str]) -> List[str]:
    return [o for o in options if o and o.strip()]


def _is_blank(text: str, options: Sequence[str]) -> bool:
    return BLANK_PATTERN.search(text) is not None


def _is_match(text: str, options: Sequence[str]) -> bool:
    if MATCH_PATTERN.search(text):
        return True
    return bool(options) and "=" in (options[0] or "")


def _is_comprehension(text: str, options: Sequence[str]) -> bool:
    return PASSAGE_PATTERN.search(text) is not None or len(text) > COMPREHENSION_MIN_LENGTH


def _is_true_false(text: str, options: Sequence[str]) -> bool:
    return TRUE_FALSE_PATTERN.search(text) is not None or TRUE_FALSE_HINT_PATTERN.search(text) is not None


def _is_numeric(text: str, options: Sequence[str]) -> bool:
    if CALCULATION_PATTERN.search(text) or EQUATION_PATTERN.search(text):
        return True
    # "What is 2+2?" with lettered options stays multiple choice
    return len(_filled(options)) < 2 and ARITHMETIC_PATTERN.search(text) is not None


def _is_ordering(text: str, options: Sequence[str]) -> bool:
    return ORDERING_PATTERN.search(text) is not None


def _is_sorting(text: str, options: Sequence[str]) -> bool:
    return SORTING_PATTERN.search(text) is not None


def _is_choice(text: str, options: Sequence[str]) -> bool:
    return len(_filled(options)) >= 2


TYPE_RULES: Tuple[TypeRule, ...] = (
    TypeRule(QuestionType.BLANK, _is_blank, "[blank] or ___ in text"),
    TypeRule(QuestionType.MATCH, _is_match, "match/pair wording, or '=' in first option"),
    TypeRule(QuestionType.COMPREHENSION, _is_comprehension,
             f"passage marker, or text longer than {COMPREHENSION_MIN_LENGTH} chars"),
    TypeRule(QuestionType.TRUE_FALSE, _is_true_false, "True/False phrase or (T/F) hint"),
    TypeRule(QuestionType.NUMERIC, _is_numeric,
             "calculation verb, '=' next to a digit, or arithmetic between digits without options"),
    TypeRule(QuestionType.ORDERING, _is_ordering, "order/sequence/arrange/step N"),
    TypeRule(QuestionType.SORTING, _is_sorting, "sort/categorize/group/classify"),
    TypeRule(QuestionType.CHOICE, _is_choice, "at least 2 non-empty options"),
)

DEFAULT_TYPE = QuestionType.COMPREHENSION


def detect_question_type(
    text: Optional[str],
    options: Optional[Sequence[str]] = None,
) -> QuestionType:
    """
    Classify a question from its stem and options.

    Pure function: the same inputs always give the same type. Rules are
    tried in TYPE_RULES order and the first match wins; with no match the
    question is treated as comprehension.

    Args:
        text: Question stem (None treated as empty)
        options: Option strings in letter order (None treated as empty)

    Returns:
        The detected QuestionType

    Example:
        >>> detect_question_type("Fill the blank: sky is ___. True or False?", [])
        <QuestionType.BLANK: 'blank'>
        >>> detect_question_type("Capital of France?", ["London", "Paris"])
        <QuestionType.CHOICE: 'choice'>
    """
    text = text or ""
    options = list(options or ())
    for rule in TYPE_RULES:
        if rule.matches(text, options):
            return rule.question_type
    return DEFAULT_TYPE


def type_rule_names() -> List[str]:
    """Return rule types in priority order."""
    return [rule.question_type.value for rule in TYPE_RULES]
