"""End-to-end tests for parse_worksheet()."""

import math

from worksheet_toolkit.core.models import MatchPair, QuestionType
from worksheet_toolkit.parser import (
    ParserConfig,
    is_question_valid,
    parse_worksheet,
    ready_questions,
)


class TestParseWorksheet:
    """Tests for the documented input formats."""

    def test_inline_choice_question(self):
        questions = parse_worksheet("1. What is 2+2? A) 3 B) 4 C) 5 D) 6")

        assert len(questions) == 1
        assert questions[0].type is QuestionType.CHOICE
        assert questions[0].question_text == "What is 2+2?"
        assert questions[0].options == ("3", "4", "5", "6")

    def test_answer_key_sets_choice_index(self):
        text = "1. Capital of France? A) London B) Paris\nAnswer Key: 1. B"

        questions = parse_worksheet(text)

        assert questions[0].correct == 1

    def test_options_below_and_packed_answer_key(self, choice_worksheet):
        # Act
        questions = parse_worksheet(choice_worksheet)

        # Assert
        assert [q.id for q in questions] == ["q1", "q2"]
        assert questions[0].options == ("London", "Paris", "Berlin", "Madrid")
        assert questions[1].options == ("Venus", "Mercury", "Mars")
        assert [q.correct for q in questions] == [1, 1]
        assert all(is_question_valid(q) for q in questions)

    def test_inline_matching_pairs(self):
        questions = parse_worksheet("1. Match: Paris = France, London = England")

        assert len(questions) == 1
        assert questions[0].type is QuestionType.MATCH
        assert questions[0].question_text == "Match the following"
        assert questions[0].pairs == (MatchPair("Paris", "France"), MatchPair("London", "England"))

    def test_inline_pairs_after_comma_label(self):
        questions = parse_worksheet("1. Match the capitals, Paris = France, London = England")

        assert questions[0].type is QuestionType.MATCH
        assert questions[0].pairs == (MatchPair("Paris", "France"), MatchPair("London", "England"))
        assert is_question_valid(questions[0])

    def test_lettered_true_false_options_keep_choice_answer(self):
        # Arrange
        text = "1. Is the sky blue?\nA) True\nB) False\nAnswer Key\n1. A"

        # Act
        questions = parse_worksheet(text)

        # Assert
        assert questions[0].type is QuestionType.CHOICE
        assert questions[0].options == ("True", "False")
        assert questions[0].correct == 0

    def test_true_false_hint_survives_stripping(self):
        questions = parse_worksheet("1. Fish can fly. (T/F)\nAnswer Key\n1. F")

        assert questions[0].type is QuestionType.TRUE_FALSE
        assert questions[0].question_text == "Fish can fly."
        assert questions[0].correct == "false"

    def test_arithmetic_stem_without_options_is_numeric(self):
        questions = parse_worksheet("1. What is 12 * 4?\nAnswer Key\n1. 48")

        assert questions[0].type is QuestionType.NUMERIC
        assert questions[0].correct == 48.0

    def test_comprehension_by_length(self):
        stem = "w" * 201

        questions = parse_worksheet(f"1. {stem}")

        assert questions[0].type is QuestionType.COMPREHENSION

    def test_numeric_with_unparsable_key_is_never_valid(self):
        questions = parse_worksheet("1. Calculate 6 x 7.\nAnswer Key\n1. forty-two")

        assert questions[0].type is QuestionType.NUMERIC
        assert math.isnan(questions[0].correct)
        assert not is_question_valid(questions[0])
        assert questions[0].to_dict()["correct"] is None


class TestMixedWorksheet:
    """All types in one document."""

    def test_types_in_document_order(self, mixed_worksheet):
        questions = parse_worksheet(mixed_worksheet)

        assert [q.type for q in questions] == [
            QuestionType.COMPREHENSION,
            QuestionType.TRUE_FALSE,
            QuestionType.NUMERIC,
            QuestionType.BLANK,
            QuestionType.MATCH,
            QuestionType.ORDERING,
            QuestionType.SORTING,
            QuestionType.CHOICE,
        ]

    def test_answers_and_extracted_parts(self, mixed_worksheet):
        q = parse_worksheet(mixed_worksheet)

        assert q[0].paragraph.startswith("Tom found a small dog")
        assert q[1].correct == "false"
        assert q[1].options == ("True", "False")
        assert q[2].correct == 42.0
        assert (q[3].blank_count, q[3].correct) == (1, "mat")
        assert q[4].pairs == (MatchPair("cow", "moo"), MatchPair("dog", "woof"))
        assert q[5].sentence_parts == ("third", "second", "first")
        assert q[6].items == ("apple", "carrot", "banana")
        assert q[7].options[q[7].correct] == "Whale"

    def test_all_questions_ready(self, mixed_worksheet):
        questions = parse_worksheet(mixed_worksheet)

        assert ready_questions(questions) == questions


class TestRobustness:
    """The parser never raises and is deterministic."""

    def test_idempotent(self, mixed_worksheet):
        assert parse_worksheet(mixed_worksheet) == parse_worksheet(mixed_worksheet)

    def test_empty_and_garbage_inputs(self):
        for text in ["", "   \n\n", None, "no questions here", "Answer Key: 1. B", "))((##"]:
            assert parse_worksheet(text) == []

    def test_unicode_kept_when_configured(self):
        text = "1. ¿Dónde está París? A) España B) Francia"

        kept = parse_worksheet(text, ParserConfig(ascii_only=False))
        dropped = parse_worksheet(text)

        assert kept[0].options == ("España", "Francia")
        assert dropped[0].options == ("Espaa", "Francia")

    def test_custom_id_prefix(self):
        questions = parse_worksheet("1. First? A) x B) y\n2. Second? A) x B) y", ParserConfig(id_prefix="w"))

        assert [q.id for q in questions] == ["w1", "w2"]
