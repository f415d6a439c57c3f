"""Core line-scan sizing calculation."""

from .calculator import compute, review_results, MM_PER_INCH

__all__ = ["compute", "review_results", "MM_PER_INCH"]
