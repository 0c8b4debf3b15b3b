"""
Editor Package

Create, revise and answer questions after import, using the same
detection and answer rules as the parser.
"""

from .question_editor import new_question, revise_question, set_answer

__all__ = ["new_question", "revise_question", "set_answer"]
