"""
Module: parser.postprocess

Purpose:
    Type-specific finishing applied once a draft's type is final:
    quoted fragments for ordering/sorting, blank counting, and the fixed
    True/False options.

Key Functions:
    - apply_postprocessing(): Dispatch on the draft's type
    - extract_quoted(): Double-quoted substrings in order
    - count_blanks(): [blank] tokens plus each "___" in underscore runs

Dependencies:
    - re (std)

Used By:
    - parser.accumulator: On every finalized draft
    - editor.question_editor: After each revision
"""

from __future__ import annotations

import re
from typing import List

from worksheet_toolkit.core.models import TRUE_FALSE_OPTIONS, QuestionType

from .config import ParserConfig
from .draft import QuestionDraft

QUOTED = re.compile(r'"([^"]*)"')
BLANK_TOKEN = re.compile(r"\[blank\]|___", re.IGNORECASE)
WHITESPACE_RUN = re.compile(r"\s+")
SEPARATOR_RUN = re.compile(r"\s*(?:[,;/|]\s*){2,}")
STEM_EDGE_CHARS = " ,;/|-"
HAS_WORD = re.compile(r"[A-Za-z0-9]")


def extract_quoted(text: str) -> List[str]:
    """Return non-empty double-quoted substrings, trimmed, in order."""
    return [part.strip() for part in QUOTED.findall(text) if part.strip()]


def count_blanks(text: str) -> int:
    """
    Count blanks in a stem.

    Every three underscores count once, so "______" is two blanks.

    Example:
        >>> count_blanks("The ___ sat on the [BLANK].")
        2
    """
    return len(BLANK_TOKEN.findall(text))


def _strip_quoted(text: str) -> str:
    stem = QUOTED.sub(" ", text)
    stem = SEPARATOR_RUN.sub(" ", stem)
    stem = WHITESPACE_RUN.sub(" ", stem)
    return stem.strip(STEM_EDGE_CHARS)


def apply_postprocessing(draft: QuestionDraft, config: ParserConfig) -> QuestionDraft:
    """
    Finish a typed draft in place and return it.

    - ordering: quoted fragments become sentence_parts in reverse order and
      are removed from the stem
    - sorting: quoted fragments become items in original order
    - blank: blank_count from the stem
    - truefalse: options are always True/False

    Parts and items are only replaced when the stem contains quotes, so a
    revised question keeps the fragments it already has. An empty stem
    falls back to the configured generic prompt.
    """
    kind = draft.question_type or draft.detect_type()

    if kind is QuestionType.ORDERING:
        parts = extract_quoted(draft.text)
        if parts:
            draft.sentence_parts = list(reversed(parts))
            draft.text = _strip_quoted(draft.text)
        if not HAS_WORD.search(draft.text):
            draft.text = config.ordering_prompt

    elif kind is QuestionType.SORTING:
        items = extract_quoted(draft.text)
        if items:
            draft.items = items
        if not draft.text.strip():
            draft.text = config.sorting_prompt

    elif kind is QuestionType.BLANK:
        draft.blank_count = count_blanks(draft.text)

    elif kind is QuestionType.TRUE_FALSE:
        slots = max(len(draft.options), len(TRUE_FALSE_OPTIONS))
        draft.options = list(TRUE_FALSE_OPTIONS) + [""] * (slots - len(TRUE_FALSE_OPTIONS))

    return draft
