"""Textual host for the report wizard."""

from .controller import TextualReportAdapter, TextualUIHooks

__all__ = ["TextualReportAdapter", "TextualUIHooks"]
