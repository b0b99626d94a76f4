"""Public domain model surface."""

from __future__ import annotations

from kancolle_a.domain.model.enums import CardPageSourceKind, SourceKind
from kancolle_a.domain.model.records import (
    BlueprintEntry,
    BlueprintExpiration,
    CardPage,
    EquipmentSlot,
    MarriageListEntry,
    PictureBookEntry,
    RosterEntry,
    SourceSnapshot,
    WikiEntry,
)
from kancolle_a.domain.model.ships import Ship, ShipMod, Ships, SkippedRecord

__all__ = [
    "BlueprintEntry",
    "BlueprintExpiration",
    "CardPage",
    "CardPageSourceKind",
    "EquipmentSlot",
    "MarriageListEntry",
    "PictureBookEntry",
    "RosterEntry",
    "Ship",
    "ShipMod",
    "Ships",
    "SkippedRecord",
    "SourceKind",
    "SourceSnapshot",
    "WikiEntry",
]
