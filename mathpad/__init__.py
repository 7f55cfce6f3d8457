"""
MathPad - LaTeX notepad evaluation and answer checking.

    from mathpad import evaluate, is_equivalent

    evaluate(r"\\sqrt{16}")               # '4'
    evaluate("solve(x^2-5x+6, x)")       # '3, 2'
    is_equivalent("π", "3.14159")        # True
"""

from .engine import MathEngine, evaluate
from .grading import AnswerJudge, is_equivalent
from .input import normalize

__version__ = "0.5.0"

__all__ = [
    "MathEngine",
    "AnswerJudge",
    "evaluate",
    "is_equivalent",
    "normalize",
]
