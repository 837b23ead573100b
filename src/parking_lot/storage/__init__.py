"""Persistence module."""

from .text_store import TextStore, format_line, parse_line

__all__ = ["TextStore", "format_line", "parse_line"]
