"""
Core Models Package

Immutable data models shared by the parser, the editor and serialization.

All models in this package are frozen dataclasses. A Question carries a
single per-type payload instead of an overloaded options field, so a
matching question can never hold plain-string options and a choice
question can never hold pairs.
"""

from .questions import (
    MAX_OPTIONS,
    TRUE_FALSE_OPTIONS,
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

__all__ = [
    "MAX_OPTIONS",
    "TRUE_FALSE_OPTIONS",
    "QuestionType",
    "MatchPair",
    "Payload",
    "ChoiceAnswer",
    "TrueFalseAnswer",
    "NumericAnswer",
    "BlankAnswer",
    "ComprehensionAnswer",
    "MatchAnswer",
    "OrderingAnswer",
    "SortingAnswer",
    "Question",
]
