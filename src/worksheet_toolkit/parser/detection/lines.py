"""
Module: parser.detection.lines

Purpose:
    Structural classification of single normalized lines. Each line gets a
    LineKind plus the pieces the accumulator needs (question number,
    remainder, option slots, matching pair). Classification is pure; the
    accumulator owns all state.

Key Classes:
    - Phase: Body text or trailing answer-key section
    - LineKind: Structural role of a line
    - ClassifiedLine: Result of classify_line()

Key Functions:
    - classify_line(): First-match-wins line classification
    - split_inline_options(): "stem A) x B) y" -> stem + option slots
    - extract_inline_pairs(): "a = b, c = d" -> matching pairs
    - strip_true_false_hint(): Remove an inline (True/False) hint

Dependencies:
    - re (std)
    - worksheet_toolkit.core.models: MatchPair, QuestionType

Used By:
    - parser.accumulator
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from worksheet_toolkit.core.models import MatchPair, QuestionType

if TYPE_CHECKING:
    from ..draft import QuestionDraft

OPTION_LETTERS = "ABCD"

STORY_PATTERN = re.compile(r"^(?:story|passage|read|text)\s*:\s*(.*)$", re.IGNORECASE)
ANSWER_KEY_PATTERN = re.compile(r"^answer\s*key\b[\s:.\-]*(.*)$", re.IGNORECASE)
ANSWER_ENTRY_PATTERN = re.compile(r"^(\d+)(?:\s*[.):=\-]\s*|\s+)(\S.*)$")

QUESTION_START_PATTERNS = (
    re.compile(r"^(\d+)\s*[.):](?!\d)\s*(.*)$"),
    re.compile(r"^q\s*(\d+)\s*[:.)]\s*(.*)$", re.IGNORECASE),
    re.compile(r"^question\s*(\d+)\s*[:.)\-]?\s*(.*)$", re.IGNORECASE),
    re.compile(r"^(\d+)\s+-\s+(.*)$"),
)

OPTION_LINE_PATTERN = re.compile(r"^\(?([A-Da-d])\s*[).:\-](?=\s|$)\s*(.*)$")
INLINE_OPTION_MARKER = re.compile(r"(?:^|(?<=\s))([A-Da-d])\)\s*")

PAIR_PATTERNS = (
    re.compile(r"^(.+?)\s+-\s+(.+)$"),
    re.compile(r"^(.+?)\s*[:=]\s*(.+)$"),
)
PAIR_SEPARATOR = re.compile(r"[,;]")
HAS_LETTER = re.compile(r"[A-Za-z]")

SECTION_HEADER_PATTERN = re.compile(r"^(?:section|chapter|part|unit|page)\b", re.IGNORECASE)
NOT_CONTINUATION_PATTERN = re.compile(r"^(?:\d|answer)", re.IGNORECASE)

INLINE_TRUE_FALSE_HINT = re.compile(
    r"\s*[(\[]\s*(?:true\s*(?:/|\\|\||-|,|or)\s*false|t\s*(?:/|\\|\||-|,|or)\s*f)\s*[)\]]",
    re.IGNORECASE,
)


class Phase(str, Enum):
    """Where the accumulator is in the document."""
    BODY = "body"
    ANSWER_KEY = "answer_key"

    def __str__(self) -> str:
        return self.value


class LineKind(str, Enum):
    """Structural role of one line."""
    STORY = "story"
    ANSWER_KEY_MARKER = "answer_key_marker"
    ANSWER_KEY_ENTRY = "answer_key_entry"
    QUESTION_START = "question_start"
    OPTION = "option"
    MATCH_PAIR = "match_pair"
    CONTINUATION = "continuation"
    IGNORED = "ignored"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ClassifiedLine:
    """
    A classified line.

    Attributes:
        kind: Structural role
        text: Remainder after the marker (stem, story text, option text,
            or the whole line for continuations)
        number: Question number (QUESTION_START, ANSWER_KEY_ENTRY)
        token: Answer token (ANSWER_KEY_ENTRY)
        options: (slot index, text) pairs (OPTION)
        pair: Parsed pair (MATCH_PAIR)
    """
    kind: LineKind
    text: str = ""
    number: Optional[int] = None
    token: Optional[str] = None
    options: Tuple[Tuple[int, str], ...] = ()
    pair: Optional[MatchPair] = None


# ─────────────────────────────────────────────────────────────────────────────
# Inline helpers
# ─────────────────────────────────────────────────────────────────────────────

def split_inline_options(text: str, max_options: int = 4) -> Tuple[str, Dict[int, str]]:
    """
    Split "stem A) x B) y" into the stem and option slots.

    Only "X)" markers (the normalized form) are recognized, and only when
    they start the text or follow whitespace, so "f(x)" is left alone.
    A repeated letter overwrites its earlier slot.

    Returns:
        (stem, {slot_index: option_text}); stem is the whole text when no
        marker is present.

    Example:
        >>> split_inline_options("Capital? A) Rome B) Paris")
        ('Capital?', {0: 'Rome', 1: 'Paris'})
    """
    markers = list(INLINE_OPTION_MARKER.finditer(text))
    if not markers:
        return text.strip(), {}

    options: Dict[int, str] = {}
    for i, marker in enumerate(markers):
        end = markers[i + 1].start() if i + 1 < len(markers) else len(text)
        index = OPTION_LETTERS.index(marker.group(1).upper())
        if index < max_options:
            options[index] = text[marker.end():end].strip()
    return text[:markers[0].start()].strip(), options


def extract_inline_pairs(text: str) -> List[MatchPair]:
    """
    Extract "left = right" pairs separated by commas or semicolons.

    Segments that are not a pair (no single "=", or no letter on one
    side) are skipped, so a leading label ("Match the capitals, ...") or
    an equation never becomes a pair. A label joined by a colon
    ("Match: Paris = France") is dropped from the left side.

    Example:
        >>> extract_inline_pairs("Match the capitals, Paris = France, London = England")
        [MatchPair(left='Paris', right='France'), MatchPair(left='London', right='England')]
    """
    if "=" not in text:
        return []

    pairs: List[MatchPair] = []
    for segment in PAIR_SEPARATOR.split(text):
        segment = segment.strip()
        if segment.count("=") != 1:
            continue
        left, right = segment.split("=")
        left = left.rsplit(":", 1)[-1].strip()
        right = right.strip().rstrip(".").strip()
        if not (HAS_LETTER.search(left) and HAS_LETTER.search(right)):
            continue
        pairs.append(MatchPair(left=left, right=right))
    return pairs


def strip_true_false_hint(text: str) -> Tuple[str, bool]:
    """Remove an inline (True/False) or (T/F) hint. Returns (text, found)."""
    stripped, count = INLINE_TRUE_FALSE_HINT.subn("", text)
    return stripped.strip(), count > 0


def _parse_pair(line: str) -> Optional[MatchPair]:
    for pattern in PAIR_PATTERNS:
        m = pattern.match(line)
        if m:
            left, right = m.group(1).strip(), m.group(2).strip()
            if left and right:
                return MatchPair(left=left, right=right)
    return None


def _parse_options(line: str, max_options: int) -> Optional[Tuple[Tuple[int, str], ...]]:
    m = OPTION_LINE_PATTERN.match(line)
    if not m:
        return None
    index = OPTION_LETTERS.index(m.group(1).upper())
    if index >= max_options:
        return None
    first, rest = split_inline_options(m.group(2), max_options)
    slots = {index: first}
    slots.update(rest)
    return tuple(sorted(slots.items()))


# ─────────────────────────────────────────────────────────────────────────────
# Classification
# ─────────────────────────────────────────────────────────────────────────────

def classify_line(
    line: str,
    phase: Phase = Phase.BODY,
    draft: Optional[QuestionDraft] = None,
    *,
    max_options: int = 4,
) -> ClassifiedLine:
    """
    Classify one normalized line.

    Order (first match wins): story marker, answer-key marker, answer-key
    entry (key phase only), question start, option line, matching pair,
    continuation. Option lines need an open draft that is not match/blank;
    pair lines need an open match draft. In the key phase, lines that are
    not entries are ignored.

    Args:
        line: One trimmed line
        phase: Current accumulator phase
        draft: Open draft, if any (its provisional type gates options/pairs)
        max_options: Option slots available

    Returns:
        ClassifiedLine describing the line's role
    """
    line = line.strip()
    if not line:
        return ClassifiedLine(LineKind.IGNORED)

    m = STORY_PATTERN.match(line)
    if m:
        return ClassifiedLine(LineKind.STORY, text=m.group(1).strip())

    m = ANSWER_KEY_PATTERN.match(line)
    if m:
        return ClassifiedLine(LineKind.ANSWER_KEY_MARKER, text=m.group(1).strip())

    if phase is Phase.ANSWER_KEY:
        m = ANSWER_ENTRY_PATTERN.match(line)
        if m:
            return ClassifiedLine(
                LineKind.ANSWER_KEY_ENTRY,
                number=int(m.group(1)),
                token=m.group(2).strip(),
            )
        return ClassifiedLine(LineKind.IGNORED, text=line)

    for pattern in QUESTION_START_PATTERNS:
        m = pattern.match(line)
        if m:
            return ClassifiedLine(
                LineKind.QUESTION_START,
                text=m.group(2).strip(),
                number=int(m.group(1)),
            )

    active_type = draft.question_type if draft is not None else None

    if draft is not None and active_type not in (QuestionType.MATCH, QuestionType.BLANK):
        options = _parse_options(line, max_options)
        if options is not None:
            return ClassifiedLine(LineKind.OPTION, text=line, options=options)

    if active_type is QuestionType.MATCH:
        pair = _parse_pair(line)
        if pair is not None:
            return ClassifiedLine(LineKind.MATCH_PAIR, text=line, pair=pair)

    if SECTION_HEADER_PATTERN.match(line) or NOT_CONTINUATION_PATTERN.match(line):
        return ClassifiedLine(LineKind.IGNORED, text=line)
    return ClassifiedLine(LineKind.CONTINUATION, text=line)
