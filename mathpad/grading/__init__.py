"""Grading layer: answer equivalence."""

from .answer_judge import AnswerJudge, is_equivalent

__all__ = ["AnswerJudge", "is_equivalent"]
