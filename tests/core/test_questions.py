"""
Unit Tests for Question Model

Tests for the tagged-variant Question record and its payloads.
"""

import math

import pytest

from worksheet_toolkit.core.models.questions import (
    BlankAnswer,
    ChoiceAnswer,
    ComprehensionAnswer,
    MatchAnswer,
    MatchPair,
    NumericAnswer,
    OrderingAnswer,
    Question,
    QuestionType,
    SortingAnswer,
    TrueFalseAnswer,
)


class TestQuestionType:
    """Tests for QuestionType enum."""

    def test_str_when_true_false_then_wire_name(self):
        """str() gives the wire value."""
        assert str(QuestionType.TRUE_FALSE) == "truefalse"

    def test_lookup_when_wire_value_then_member(self):
        assert QuestionType("ordering") is QuestionType.ORDERING


class TestPayloads:
    """Tests for payload construction rules."""

    def test_choice_when_more_than_four_options_then_raises(self):
        """More than 4 options is structurally impossible."""
        with pytest.raises(ValueError, match="at most 4"):
            ChoiceAnswer(options=("a", "b", "c", "d", "e"))

    def test_choice_when_no_answer_given_then_defaults_to_first(self):
        assert ChoiceAnswer(options=("a", "b")).correct == 0

    def test_blank_when_negative_count_then_raises(self):
        with pytest.raises(ValueError, match="negative"):
            BlankAnswer(blank_count=-1)

    def test_true_false_when_created_then_fixed_options(self):
        assert TrueFalseAnswer().options == ("True", "False")


class TestPackageExports:
    """Tests for names re-exported by worksheet_toolkit.core.models."""

    def test_constants_when_imported_from_package_then_match_module(self):
        from worksheet_toolkit.core import models
        from worksheet_toolkit.core.models import questions

        assert models.MAX_OPTIONS == questions.MAX_OPTIONS == 4
        assert models.TRUE_FALSE_OPTIONS == ("True", "False")
        assert {"MAX_OPTIONS", "TRUE_FALSE_OPTIONS"} <= set(models.__all__)

    def test_parser_when_imported_then_loads(self):
        from worksheet_toolkit.parser import parse_worksheet

        assert parse_worksheet("1. Capital? A) Rome B) Paris")[0].type is QuestionType.CHOICE


class TestQuestion:
    """Tests for Question dataclass."""

    def test_type_when_payload_given_then_derived_from_payload(self):
        """The type always comes from the payload class."""
        q = Question("q1", "Order these", OrderingAnswer(("b", "a")))

        assert q.type is QuestionType.ORDERING
        assert q.sentence_parts == ("b", "a")

    def test_accessors_when_field_inactive_then_empty(self):
        """Fields that do not belong to the type read as empty."""
        q = Question("q1", "Match", MatchAnswer((MatchPair("a", "b"),)))

        assert q.options == ()
        assert q.correct is None
        assert q.items == ()
        assert q.paragraph is None
        assert q.blank_count == 0

    def test_init_when_payload_not_a_payload_then_raises(self):
        with pytest.raises(ValueError, match="Unknown payload"):
            Question("q1", "text", payload={"options": []})

    def test_init_when_frozen_then_cannot_modify(self):
        q = Question("q1", "text", ComprehensionAnswer())

        with pytest.raises(AttributeError):
            q.question_text = "changed"


class TestQuestionToDict:
    """Tests for the wire format."""

    def test_to_dict_when_choice_then_options_and_index(self):
        q = Question("q1", "2+2?", ChoiceAnswer(("3", "4"), correct=1))

        assert q.to_dict() == {
            "id": "q1",
            "type": "choice",
            "questionText": "2+2?",
            "options": ["3", "4"],
            "correct": 1,
        }

    def test_to_dict_when_match_then_only_pairs(self):
        """Only keys belonging to the type are emitted."""
        q = Question("q2", "Match", MatchAnswer((MatchPair("Paris", "France"),)))

        data = q.to_dict()

        assert data["pairs"] == [{"left": "Paris", "right": "France"}]
        assert "options" not in data
        assert "correct" not in data

    def test_to_dict_when_numeric_nan_then_null(self):
        """An unparsable numeric answer is written as null."""
        q = Question("q3", "Total?", NumericAnswer(correct=math.nan))

        assert q.to_dict()["correct"] is None

    def test_to_dict_when_true_false_then_fixed_options(self):
        data = Question("q4", "Sky is blue", TrueFalseAnswer("true")).to_dict()

        assert data["options"] == ["True", "False"]
        assert data["correct"] == "true"

    def test_to_dict_when_blank_then_camel_case_count(self):
        data = Question("q5", "The ___ sat", BlankAnswer(1, "cat")).to_dict()

        assert data["blankCount"] == 1


class TestQuestionFromDict:
    """Tests for Question.from_dict."""

    def test_from_dict_when_sorting_then_items_restored(self):
        q = Question.from_dict({
            "id": "q1",
            "type": "sorting",
            "questionText": "Sort",
            "items": ["apple", "carrot"],
        })

        assert q.type is QuestionType.SORTING
        assert q.items == ("apple", "carrot")

    def test_from_dict_when_numeric_null_then_none(self):
        q = Question.from_dict({"id": "q1", "type": "numeric", "questionText": "x", "correct": None})

        assert q.correct is None

    def test_from_dict_when_unknown_type_then_raises(self):
        with pytest.raises(ValueError, match="Invalid question type"):
            Question.from_dict({"id": "q1", "type": "essay", "questionText": "x"})

    def test_from_dict_when_comprehension_then_paragraph_restored(self):
        q = Question.from_dict({
            "id": "q1",
            "type": "comprehension",
            "questionText": "Who?",
            "paragraph": "Once upon a time",
            "correct": None,
        })

        assert q.paragraph == "Once upon a time"
