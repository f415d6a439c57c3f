"""Localized text for the calculator CLI."""

from .bundles import StringBundle, BUNDLES, LANGUAGE_CHOICES, get_bundle

__all__ = ["StringBundle", "BUNDLES", "LANGUAGE_CHOICES", "get_bundle"]
