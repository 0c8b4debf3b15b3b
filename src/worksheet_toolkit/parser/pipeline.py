"""
Module: parser.pipeline

Purpose:
    Orchestrates worksheet parsing: normalize, accumulate drafts (with
    type detection, answer key and post-processing), then freeze drafts
    into Question records with sequence ids.

Key Functions:
    - parse_worksheet(): Raw text -> List[Question]

Dependencies:
    - parser.normalizer
    - parser.accumulator

Used By:
    - extraction.importer
    - cli
"""

from __future__ import annotations

import logging
from typing import List, Optional

from worksheet_toolkit.core.models import Question

from .accumulator import QuestionAccumulator
from .config import ParserConfig
from .normalizer import normalize_text, split_lines

logger = logging.getLogger(__name__)


def parse_worksheet(text: Optional[str], config: Optional[ParserConfig] = None) -> List[Question]:
    """
    Parse worksheet text into typed questions.

    Pure and deterministic: ids come from output position ("q1", "q2",
    ...), so parsing the same text twice gives equal results. Never raises
    on string input; unrecognized text just yields fewer questions.

    The result includes questions that are not yet valid (for example a
    true/false question without an answer). Use ready_questions() for the
    subset consumers may use.

    Args:
        text: Raw extracted text
        config: Parser configuration (defaults to ParserConfig())

    Returns:
        Questions in document order

    Example:
        >>> qs = parse_worksheet("1. What is 2+2? A) 3 B) 4 C) 5 D) 6")
        >>> qs[0].type, qs[0].options
        (<QuestionType.CHOICE: 'choice'>, ('3', '4', '5', '6'))
    """
    config = config or ParserConfig()
    normalized = normalize_text(text or "", ascii_only=config.ascii_only)

    accumulator = QuestionAccumulator(config)
    drafts = accumulator.feed_all(split_lines(normalized))

    questions = [
        draft.to_question(f"{config.id_prefix}{position}")
        for position, draft in enumerate((d for d in drafts if d.text.strip()), 1)
    ]
    logger.info(f"Parsed {len(questions)} questions")
    return questions
