"""Textual host adapter; ``app`` holds the runnable demo."""

from .controller import TextualHistoryAdapter, TextualUIHooks

__all__ = ["TextualHistoryAdapter", "TextualUIHooks"]
