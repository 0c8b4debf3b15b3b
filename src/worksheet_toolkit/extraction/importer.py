"""
Module: extraction.importer

Purpose:
    One-call worksheet import: extract the document text, parse it, and
    split the result into all questions and the ready subset.

Key Functions:
    - import_worksheet(): Path -> ImportResult

Key Classes:
    - ImportResult: Parsed questions plus warnings for the user

Dependencies:
    - extraction.extractor
    - worksheet_toolkit.parser

Used By:
    - cli
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from worksheet_toolkit.core.models import Question
from worksheet_toolkit.parser import (
    ParserConfig,
    parse_worksheet,
    ready_questions,
    validation_issues,
)

from .extractor import FORMAT_GUIDE, extract_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportResult:
    """
    Result of importing one worksheet.

    Attributes:
        source: Imported file
        questions: Every parsed question, valid or not (for editing)
        ready: Questions that pass validation (for quizzes)
        warnings: One line per question that is not ready
        format_guide: Supported-format guide, set when no question was found
    """
    source: Path
    questions: List[Question] = field(default_factory=list)
    ready: List[Question] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    format_guide: Optional[str] = None

    @property
    def found_questions(self) -> bool:
        return bool(self.questions)


def import_worksheet(path: Path | str, config: Optional[ParserConfig] = None) -> ImportResult:
    """
    Extract and parse a worksheet file.

    Raises:
        ExtractionError: If the file cannot be read (see extract_text)
    """
    path = Path(path)
    text = extract_text(path)
    questions = parse_worksheet(text, config)

    warnings = []
    for question in questions:
        issues = validation_issues(question)
        if issues:
            warnings.append(f"{question.id} ({question.type}): {'; '.join(issues)}")

    ready = ready_questions(questions)
    if not questions:
        logger.warning(f"No questions found in {path.name}")
    else:
        logger.info(f"Imported {len(ready)}/{len(questions)} ready questions from {path.name}")

    return ImportResult(
        source=path,
        questions=questions,
        ready=ready,
        warnings=warnings,
        format_guide=None if questions else FORMAT_GUIDE,
    )
