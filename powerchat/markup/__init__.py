"""Inline markup for building messages from plain strings."""

from .builder import MarkupBuilder, parse_markup

__all__ = ["MarkupBuilder", "parse_markup"]
