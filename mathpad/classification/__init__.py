"""Classification layer: canonical expression -> operation request."""

from .classifier import OperationClassifier, classify, split_arguments

__all__ = ["OperationClassifier", "classify", "split_arguments"]
