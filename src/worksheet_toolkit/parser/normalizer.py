"""
Module: parser.normalizer

Purpose:
    Canonicalize raw extracted worksheet text into clean, line-oriented
    form before line classification. Each step is a small regex pass and
    the steps run in a fixed order.

Key Functions:
    - normalize_text(): Full normalization pipeline
    - split_lines(): Non-empty trimmed lines of normalized text

Dependencies:
    - re (std)

Used By:
    - parser.pipeline: First stage of parse_worksheet()
"""

from __future__ import annotations

import logging
import re
from typing import List

logger = logging.getLogger(__name__)

# Step 1: spaces, tabs, form feeds, non-breaking spaces (not newlines)
HORIZONTAL_WHITESPACE = re.compile(r"[^\S\n]+")

# Step 2: "3. ", "3) ", "3: " packed mid-line. "Question 3: " and "Q3:" stay intact.
PACKED_QUESTION_NUMBER = re.compile(r"(?<!question) (\d+[.):] )", re.IGNORECASE)
PACKED_ANSWER_KEY = re.compile(r"(?<=\S) +(?=answer\s*key\b)", re.IGNORECASE)

# Step 3: option markers -> "A) "
PAREN_OPTION = re.compile(r"\(([A-Da-d])\) *")
PUNCT_OPTION = re.compile(r"(?<![\w'(.])([A-Da-d]) ?[.:-] +")
LOWER_OPTION = re.compile(r"(?<![\w'(])([a-d])\) *")

# Step 4: alternate glyphs
DASH_GLYPHS = re.compile("[‐‑‒–—―−]|â€“")
ARROW_GLYPHS = re.compile("[→⇒⟶➔➜]|->")
DOUBLE_QUOTE_GLYPHS = re.compile("[“”„«»]")
SINGLE_QUOTE_GLYPHS = re.compile("[‘’‚]")

# Step 5: True/False hints
TRUE_FALSE_HINT = re.compile(
    r"[(\[] *true *(?:/|\\|\||-|,|or) *false *[)\]]", re.IGNORECASE
)
SHORT_TRUE_FALSE_HINT = re.compile(
    r"[(\[] *t *(?:/|\\|\||-|,|or) *f *[)\]]", re.IGNORECASE
)

# Step 6: punctuation spacing
SPACE_BEFORE_PUNCT = re.compile(r" +([,.;:?!])")
SPACE_AFTER_OPEN_PAREN = re.compile(r"\( +")
SPACE_BEFORE_CLOSE_PAREN = re.compile(r"(?<=\S) +\)")
REPEATED_SPACES = re.compile(r" {2,}")

# Step 7: printable ASCII plus newline
NON_ASCII = re.compile(r"[^\x20-\x7E\n]")


def normalize_text(text: str, *, ascii_only: bool = True) -> str:
    """
    Normalize raw extracted text.

    Steps (in order):
    1. Unify line endings, collapse horizontal whitespace runs
    2. Break lines before packed question numbers and "Answer Key"
    3. Option markers (A. / A: / A- / (A)) -> "A) "
    4. Dash/arrow glyphs -> "-", curly quotes -> straight quotes
    5. True/False hints -> "(True/False)" / "(T/F)"
    6. Tighten spacing around punctuation
    7. Optionally keep printable ASCII only (drops accented letters,
       non-Latin scripts and emoji)

    Args:
        text: Raw text from a document extractor
        ascii_only: Apply step 7 (default True)

    Returns:
        Newline-delimited normalized text without blank lines

    Example:
        >>> normalize_text("1. Capital?  (a) Rome (b) Paris 2. Next")
        '1. Capital? A) Rome B) Paris\\n2. Next'
    """
    if not text:
        return ""

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = HORIZONTAL_WHITESPACE.sub(" ", text)

    text = PACKED_QUESTION_NUMBER.sub(r"\n\1", text)
    text = PACKED_ANSWER_KEY.sub("\n", text)

    text = PAREN_OPTION.sub(lambda m: f" {m.group(1).upper()}) ", text)
    text = PUNCT_OPTION.sub(lambda m: f"{m.group(1).upper()}) ", text)
    text = LOWER_OPTION.sub(lambda m: f"{m.group(1).upper()}) ", text)

    text = DASH_GLYPHS.sub("-", text)
    text = ARROW_GLYPHS.sub("-", text)
    text = DOUBLE_QUOTE_GLYPHS.sub('"', text)
    text = SINGLE_QUOTE_GLYPHS.sub("'", text)

    text = TRUE_FALSE_HINT.sub("(True/False)", text)
    text = SHORT_TRUE_FALSE_HINT.sub("(T/F)", text)

    text = SPACE_BEFORE_PUNCT.sub(r"\1", text)
    text = SPACE_AFTER_OPEN_PAREN.sub("(", text)
    text = SPACE_BEFORE_CLOSE_PAREN.sub(")", text)

    if ascii_only:
        text = NON_ASCII.sub("", text)

    lines = split_lines(text)
    logger.debug(f"Normalized text into {len(lines)} lines")
    return "\n".join(lines)


def split_lines(text: str) -> List[str]:
    """
    Split text into non-empty, trimmed, single-spaced lines.

    Example:
        >>> split_lines("  a  b \\n\\n c ")
        ['a b', 'c']
    """
    lines: List[str] = []
    for line in text.split("\n"):
        line = REPEATED_SPACES.sub(" ", line).strip()
        if line:
            lines.append(line)
    return lines
