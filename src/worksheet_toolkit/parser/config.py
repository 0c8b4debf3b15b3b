"""
Module: parser.config

Purpose:
    Configuration dataclass for the worksheet parser. Immutable settings
    for normalization and the generic prompts used when a stem is empty.

Key Classes:
    - ParserConfig: Main configuration for parsing

Dependencies:
    - dataclasses: For frozen dataclass support

Used By:
    - parser.pipeline: parse_worksheet()
    - parser.accumulator: Draft seeding and finalization
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """
    Configuration for the worksheet parser.

    Attributes:
        ascii_only: Drop every character outside printable ASCII during
            normalization (default True). Non-English text (accents, CJK,
            emoji) is lost when enabled.
        max_options: Number of lettered option slots (2-4, default 4)
        match_prompt: Stem given to drafts seeded from inline "a = b" pairs
        ordering_prompt: Fallback stem when an ordering stem was only quotes
        sorting_prompt: Fallback stem when a sorting stem was only quotes
        id_prefix: Prefix for sequence-based question ids ("q1", "q2", ...)
    """
    ascii_only: bool = True
    max_options: int = 4
    match_prompt: str = "Match the following"
    ordering_prompt: str = "Put the parts in the correct order"
    sorting_prompt: str = "Sort the items into groups"
    id_prefix: str = "q"

    def __post_init__(self) -> None:
        # True/False seeding needs two slots
        if not 2 <= self.max_options <= 4:
            raise ValueError(f"max_options must be 2-4: {self.max_options}")
