"""
Detection Package

Pure classifiers used by the accumulator and the editor:
- lines: structural role of a single line
- types: question type from stem and options
"""

from .lines import (
    ClassifiedLine,
    LineKind,
    Phase,
    classify_line,
    extract_inline_pairs,
    split_inline_options,
    strip_true_false_hint,
)
from .types import TYPE_RULES, TypeRule, detect_question_type, type_rule_names

__all__ = [
    "ClassifiedLine",
    "LineKind",
    "Phase",
    "classify_line",
    "extract_inline_pairs",
    "split_inline_options",
    "strip_true_false_hint",
    "TYPE_RULES",
    "TypeRule",
    "detect_question_type",
    "type_rule_names",
]
