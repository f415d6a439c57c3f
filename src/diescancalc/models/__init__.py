"""Data models for die scan calculator package."""

from .data_models import Inputs, Results, Advisory

__all__ = ["Inputs", "Results", "Advisory"]
