"""Command-line interface: prompts, presentation and the click entry point."""

from .commands import main

__all__ = ["main"]
