"""Public interface for the wikiwiki.jp table adapter."""

from __future__ import annotations

from .kansen_table import KansenRow, KansenTableError, clean_cell, parse_kansen_table

__all__ = [
    "KansenRow",
    "KansenTableError",
    "clean_cell",
    "parse_kansen_table",
]
