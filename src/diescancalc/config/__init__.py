"""Configuration management for die scan calculator package."""

from .settings import Settings, DEFAULT_INPUTS

__all__ = ["Settings", "DEFAULT_INPUTS"]
