"""
Worksheet import command line.

Extracts and parses a worksheet document, prints one line per question
and optionally writes the questions as JSONL.

Examples:
  worksheet-import quiz.pdf
  worksheet-import quiz.docx --output quiz.jsonl
  worksheet-import quiz.txt --output all.jsonl --all --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from worksheet_toolkit.core.utils import save_questions_jsonl
from worksheet_toolkit.extraction import FORMAT_GUIDE, ExtractionError, import_worksheet
from worksheet_toolkit.parser import ParserConfig, is_question_valid

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_QUESTIONS = 1
EXIT_EXTRACTION_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="worksheet-import",
        description="Import quiz questions from a worksheet (.pdf, .docx, .txt)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit codes:
  0  questions found
  1  no questions found (the expected format is printed)
  2  file could not be read

Examples:
  %(prog)s quiz.pdf
  %(prog)s quiz.docx --output quiz.jsonl
        """,
    )
    parser.add_argument("file", type=Path, help="Worksheet document")
    parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Write questions to this JSONL file",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Also write questions that are not ready (default: ready only)",
    )
    parser.add_argument(
        "--keep-unicode",
        action="store_true",
        help="Keep non-ASCII characters (accents, other scripts) in question text",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every parsed line",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    config = ParserConfig(ascii_only=not args.keep_unicode)
    try:
        result = import_worksheet(args.file, config)
    except ExtractionError as e:
        print(f"Error ({e.kind}): {e}", file=sys.stderr)
        return EXIT_EXTRACTION_ERROR

    if not result.questions:
        print("No questions found.", file=sys.stderr)
        print(result.format_guide or FORMAT_GUIDE, file=sys.stderr)
        return EXIT_NO_QUESTIONS

    for position, question in enumerate(result.questions, 1):
        mark = "ok" if is_question_valid(question) else "!!"
        print(f"{position:>3}. [{question.type}] {mark} {question.question_text}")
    for warning in result.warnings:
        logger.warning(f"Not ready: {warning}")
    print(f"{len(result.ready)}/{len(result.questions)} questions ready")

    if args.output:
        to_write = result.questions if args.all else result.ready
        save_questions_jsonl(to_write, args.output)
        logger.info(f"Wrote {len(to_write)} questions to {args.output}")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
