"""Tests for question editing helpers."""

import pytest

from worksheet_toolkit.core.models import MatchPair, QuestionType
from worksheet_toolkit.editor import new_question, revise_question, set_answer
from worksheet_toolkit.parser import is_question_valid, parse_worksheet


class TestNewQuestion:
    """Tests for empty templates."""

    def test_choice_template_has_three_empty_options(self):
        q = new_question(QuestionType.CHOICE, "q1")

        assert q.type is QuestionType.CHOICE
        assert q.options == ("", "", "")
        assert q.correct == 0

    def test_match_template_has_two_empty_pairs(self):
        q = new_question("match", "q2")

        assert q.pairs == (MatchPair("", ""), MatchPair("", ""))

    @pytest.mark.parametrize("kind", ["ordering", "sorting"])
    def test_ordering_and_sorting_templates_have_three_slots(self, kind):
        q = new_question(kind, "q3")

        assert len(q.sentence_parts or q.items) == 3

    def test_true_false_template_has_no_answer(self):
        q = new_question("truefalse", "q4")

        assert q.correct is None
        assert not is_question_valid(q)

    def test_unknown_type_raises(self):
        with pytest.raises(ValueError):
            new_question("essay", "q5")


class TestReviseQuestion:
    """Tests for revisions re-running detection."""

    def test_revision_keeps_id_and_types_choice(self):
        # Arrange
        q = new_question("choice", "q7")

        # Act
        q = revise_question(q, text="Capital of France?", options=["London", "Paris"])

        # Assert
        assert q.id == "q7"
        assert q.type is QuestionType.CHOICE
        assert q.options == ("London", "Paris")

    def test_revision_changes_type_and_rebuilds_payload(self):
        q = revise_question(new_question("choice", "q1"), text="Capital?", options=["Rome", "Paris"])

        q = revise_question(q, text="The capital of Italy is ___.")

        assert q.type is QuestionType.BLANK
        assert q.blank_count == 1
        assert q.correct is None

    def test_revision_extracts_ordering_parts(self):
        q = new_question("comprehension", "q1")

        q = revise_question(q, text='Put in order: "a", "b", "c"')

        assert q.type is QuestionType.ORDERING
        assert q.sentence_parts == ("c", "b", "a")

    def test_revision_sets_paragraph_for_comprehension(self):
        q = new_question("comprehension", "q1")

        q = revise_question(q, text="Who is the hero?", paragraph="Once upon a time...")

        assert q.paragraph == "Once upon a time..."

    def test_options_edit_keeps_true_false_from_hint(self):
        # Arrange
        q = parse_worksheet("1. Fish can fly. (T/F)")[0]

        # Act
        q = revise_question(q, options=["True", "False"])

        # Assert
        assert q.type is QuestionType.TRUE_FALSE
        assert q.correct == "true"

    def test_text_edit_drops_stripped_hint(self):
        q = parse_worksheet("1. Fish can fly. (T/F)")[0]

        q = revise_question(q, text="Which animal can fly?", options=["Fish", "Bird"])

        assert q.type is QuestionType.CHOICE
        assert q.correct == 0

    def test_too_many_options_raises(self):
        with pytest.raises(ValueError, match="At most 4"):
            revise_question(new_question("choice", "q1"), options=["a", "b", "c", "d", "e"])


class TestSetAnswer:
    """Tests for manual answers."""

    def test_choice_letter(self):
        q = revise_question(new_question("choice", "q1"), text="Capital?", options=["Rome", "Paris"])

        q = set_answer(q, "B")

        assert q.correct == 1
        assert is_question_valid(q)

    def test_numeric_answer(self):
        q = revise_question(new_question("numeric", "q1"), text="Calculate 6 x 7")

        q = set_answer(q, "42")

        assert q.correct == 42.0
        assert is_question_valid(q)

    def test_true_false_short_token(self):
        q = set_answer(new_question("truefalse", "q1"), "T")

        assert q.correct == "true"
