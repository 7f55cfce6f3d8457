"""Output layer: number and error formatting."""

from .formatting import format_number, format_fixed, format_scientific, format_error

__all__ = ["format_number", "format_fixed", "format_scientific", "format_error"]
