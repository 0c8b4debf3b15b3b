"""
Module: parser.accumulator

Purpose:
    Stateful single pass over normalized lines. Builds question drafts,
    captures story passages, and switches into answer-key mode when the
    trailing key section starts.

Key Classes:
    - ParserState: Explicit per-pass state
    - QuestionAccumulator: feed() one line at a time, finish() for drafts

Key Functions:
    - seed_draft(): New draft from a question-start remainder

Dependencies:
    - parser.detection.lines: classify_line
    - parser.answer_key: resolve_answer
    - parser.postprocess: apply_postprocessing

Used By:
    - parser.pipeline: parse_worksheet()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from worksheet_toolkit.core.models import TRUE_FALSE_OPTIONS, QuestionType

from .answer_key import resolve_answer
from .config import ParserConfig
from .detection.lines import (
    ClassifiedLine,
    LineKind,
    Phase,
    classify_line,
    extract_inline_pairs,
    split_inline_options,
    strip_true_false_hint,
)
from .draft import QuestionDraft
from .postprocess import apply_postprocessing

logger = logging.getLogger(__name__)


@dataclass
class ParserState:
    """
    Mutable state of one accumulation pass.

    Attributes:
        phase: BODY until an answer-key marker, then ANSWER_KEY
        active_draft: Draft currently receiving lines
        pending_paragraph: Latest story passage, attached to the next
            comprehension question that closes
        capturing_paragraph: Continuation lines extend the passage
            (a story marker was seen and no question has started since)
        closed: Finalized drafts in document order
    """
    phase: Phase = Phase.BODY
    active_draft: Optional[QuestionDraft] = None
    pending_paragraph: Optional[str] = None
    capturing_paragraph: bool = False
    closed: List[QuestionDraft] = field(default_factory=list)


def seed_draft(number: Optional[int], remainder: str, config: ParserConfig) -> QuestionDraft:
    """
    Create a draft from the text after a question number.

    Inline "left = right" pairs make a match draft with the generic match
    prompt. Otherwise inline options are split off the stem, and an inline
    (True/False) hint is replaced by True/False options with "true" as
    the provisional answer.

    Example:
        >>> d = seed_draft(1, "Capital? A) Rome B) Paris", ParserConfig())
        >>> d.text, d.options[:2], d.question_type
        ('Capital?', ['Rome', 'Paris'], <QuestionType.CHOICE: 'choice'>)
    """
    draft = QuestionDraft(number=number, options=[""] * config.max_options)

    pairs = extract_inline_pairs(remainder)
    if pairs:
        draft.text = config.match_prompt
        draft.pairs = pairs
        draft.seeded_pairs = True
        draft.refresh_type()
        return draft

    stem, options = split_inline_options(remainder, config.max_options)
    stem, has_hint = strip_true_false_hint(stem)
    draft.text = stem
    for index, value in options.items():
        draft.options[index] = value
    if has_hint:
        draft.options[:2] = list(TRUE_FALSE_OPTIONS)
        draft.correct = "true"
        draft.true_false_hint = True
    draft.refresh_type()
    return draft


class QuestionAccumulator:
    """
    Line-by-line question builder.

    Example:
        >>> acc = QuestionAccumulator()
        >>> acc.feed("1. Capital of France?")
        <LineKind.QUESTION_START: 'question_start'>
        >>> acc.feed("A) London")
        <LineKind.OPTION: 'option'>
        >>> [d.text for d in acc.finish()]
        ['Capital of France?']
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()
        self.state = ParserState()

    @property
    def drafts(self) -> List[QuestionDraft]:
        return self.state.closed

    def feed(self, line: str) -> LineKind:
        """Classify and apply one line. Returns the kind that was handled."""
        state = self.state
        classified = classify_line(
            line, state.phase, state.active_draft, max_options=self.config.max_options
        )
        kind = classified.kind

        if kind is LineKind.STORY:
            state.pending_paragraph = classified.text or None
            state.capturing_paragraph = True
        elif kind is LineKind.ANSWER_KEY_MARKER:
            self._close_active()
            state.phase = Phase.ANSWER_KEY
            state.capturing_paragraph = False
            if classified.text:
                # "Answer Key: 1. B" on one line
                self.feed(classified.text)
        elif kind is LineKind.ANSWER_KEY_ENTRY:
            resolve_answer(state.closed, classified.number, classified.token or "")
        elif kind is LineKind.QUESTION_START:
            self._close_active()
            state.capturing_paragraph = False
            state.active_draft = seed_draft(classified.number, classified.text, self.config)
        elif kind is LineKind.OPTION:
            self._apply_options(classified)
        elif kind is LineKind.MATCH_PAIR:
            state.active_draft.pairs.append(classified.pair)
        elif kind is LineKind.CONTINUATION:
            kind = self._apply_continuation(classified.text)
        else:
            logger.debug(f"Skipped line: {line!r}")

        return kind

    def feed_all(self, lines: List[str]) -> List[QuestionDraft]:
        for line in lines:
            self.feed(line)
        return self.finish()

    def finish(self) -> List[QuestionDraft]:
        """Close any open draft and return all drafts in order."""
        self._close_active()
        return self.state.closed

    # ─────────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────────

    def _apply_options(self, classified: ClassifiedLine) -> None:
        draft = self.state.active_draft
        for index, value in classified.options:
            draft.options[index] = value
        draft.refresh_type()

    def _apply_continuation(self, text: str) -> LineKind:
        state = self.state
        if state.capturing_paragraph:
            state.pending_paragraph = f"{state.pending_paragraph} {text}" if state.pending_paragraph else text
            return LineKind.CONTINUATION
        if state.active_draft is None:
            logger.debug(f"Skipped line outside a question: {text!r}")
            return LineKind.IGNORED
        state.active_draft.append_text(text)
        state.active_draft.refresh_type()
        return LineKind.CONTINUATION

    def _close_active(self) -> None:
        state = self.state
        draft = state.active_draft
        state.active_draft = None
        if draft is None:
            return
        if not draft.has_content():
            logger.debug(f"Dropped empty question {draft.number}")
            return

        kind = draft.refresh_type()
        if kind is QuestionType.COMPREHENSION and state.pending_paragraph:
            draft.paragraph = state.pending_paragraph
        apply_postprocessing(draft, self.config)
        state.closed.append(draft)
        logger.debug(f"Closed question {draft.number} as {kind}")
