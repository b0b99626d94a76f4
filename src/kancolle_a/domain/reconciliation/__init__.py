"""Reconciliation engine: turn one snapshot of source records into ``Ships``.

Layered flow:
1) classify picture-book pages against the card page source table
2) split dual-row picture-book entries into one entry per stage
3) merge every source's records into one stage per display name
4) group stages under their base identity and validate each ship
"""

from __future__ import annotations

from .assembly import DuplicatePolicy, assemble_shipmods, assemble_ships
from .card_sources import (
    CardPageSource,
    CardPageSourceTable,
    EventPageSource,
    OriginalIllustrationDouble,
    OriginalIllustrationSingle,
    build_card_page_source_table,
)
from .costs import BlueprintCost, blueprint_cost, stage_cost
from .errors import (
    DuplicateSourceRecordError,
    InvariantViolationError,
    PictureBookShapeError,
    ReconciliationError,
    UnrecognizedStageSuffixError,
)
from .naming import base_identity, upgrade_stage_guess
from .splitter import split_picture_book_entry

__all__ = [
    "BlueprintCost",
    "CardPageSource",
    "CardPageSourceTable",
    "DuplicatePolicy",
    "DuplicateSourceRecordError",
    "EventPageSource",
    "InvariantViolationError",
    "OriginalIllustrationDouble",
    "OriginalIllustrationSingle",
    "PictureBookShapeError",
    "ReconciliationError",
    "UnrecognizedStageSuffixError",
    "assemble_shipmods",
    "assemble_ships",
    "base_identity",
    "blueprint_cost",
    "build_card_page_source_table",
    "split_picture_book_entry",
    "stage_cost",
    "upgrade_stage_guess",
]
