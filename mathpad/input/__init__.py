"""Input layer: LaTeX normalization."""

from .normalizer import LatexNormalizer, normalize

__all__ = ["LatexNormalizer", "normalize"]
