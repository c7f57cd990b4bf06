"""Aggregation and editing logic behind the calendar window."""

from __future__ import annotations

from .aggregation import CategorySlice, chart_slices, summarize, total_hours
from .editor import EditorSession, EditorState

__all__ = [
    "CategorySlice",
    "EditorSession",
    "EditorState",
    "chart_slices",
    "summarize",
    "total_hours",
]
