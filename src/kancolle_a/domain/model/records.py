"""Source records handed to the reconciliation engine.

Each record mirrors one row of one export after decoding. Records are frozen and
hold tuples only, so two records never share a mutable sub-structure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date, datetime


@dataclass(frozen=True, slots=True, kw_only=True)
class CardPage:
    """One page of a picture-book entry.

    Page 0 holds the normal/holo/damaged cards of one (3 slots) or two (6 slots)
    upgrade stages. Later pages hold event or original-illustration cards.
    An empty string in ``card_images`` marks a card that is not owned.
    """

    priority: int
    card_images: tuple[str, ...]
    status_images: tuple[str, ...] | None
    variation_num: int
    acquire_num: int


@dataclass(frozen=True, slots=True, kw_only=True)
class PictureBookEntry:
    """A picture-book (TcBook) record, possibly covering two upgrade stages."""

    book_no: int
    ship_name: str
    ship_type: str
    ship_class: str | None = None
    ship_class_index: int | None = None
    ship_model_num: str = ""
    card_index_image: str = ""
    pages: tuple[CardPage, ...] = ()
    variation_num: int = 0
    acquire_num: int = 0
    level: int = 0
    is_married: tuple[bool, ...] | None = None
    married_images: tuple[str, ...] | None = None

    @property
    def is_dual_row(self) -> bool:
        return bool(self.pages) and self.pages[0].variation_num == 6


@dataclass(frozen=True, slots=True, kw_only=True)
class EquipmentSlot:
    name: str
    amount: int
    display: str
    image: str
    extension: bool


@dataclass(frozen=True, slots=True, kw_only=True)
class RosterEntry:
    """A character-list record: one owned ship at one upgrade stage."""

    book_no: int
    ship_name: str
    ship_type: str
    remodel_level: int
    level: int
    star_num: int
    married: bool = False
    ship_class: str | None = None
    ship_class_index: int | None = None
    ship_sort_no: int = 0
    status_image: str = ""
    card_image: str = ""
    exp_percent: int = 0
    max_hp: int = 0
    real_hp: int = 0
    damage_status: str = ""
    slots: tuple[EquipmentSlot, ...] = ()
    blueprint_total_num: int = 0
    disp_sort_no: int = 0
    ship_model_num: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class MarriageListEntry:
    """A public marriage-list ("kekkon kakko kari") registration."""

    id: int
    name: str
    start_date: date
    web_id: int = 0
    name_reading: str = ""
    kind: str = ""
    category: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class WikiEntry:
    """A community wiki ship-table row. Stats are level 1 values.

    Optional stats are ``None`` when nobody has recorded them yet.
    """

    book_no: int
    ship_name: str
    ship_type: str
    rarity: int = 0
    ship_class: str = ""
    ship_class_index: str = ""
    endurance: int = 0
    firepower: int | None = None
    armor: int | None = None
    torpedo: int | None = None
    evasion: int | None = None
    anti_aircraft: int | None = None
    aircraft_load: int = 0
    anti_submarine: int | None = None
    speed: str = ""
    search: int | None = None
    range: str = ""
    luck: int = 0
    notes: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class BlueprintExpiration:
    expiration_date: datetime
    blueprint_num: int
    expire_this_month: bool


@dataclass(frozen=True, slots=True, kw_only=True)
class BlueprintEntry:
    """Blueprints held for one base ship, with their monthly expiry schedule."""

    ship_name: str
    ship_type: str
    blueprint_total_num: int
    ship_class_id: int = 0
    ship_class_index: int = 0
    ship_sort_no: int = 0
    status_image: str = ""
    exists_warning_for_expiration: bool = False
    expirations: tuple[BlueprintExpiration, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class SourceSnapshot:
    """All decoded exports of one data snapshot. ``None`` means not supplied."""

    picture_book: Sequence[PictureBookEntry] | None = None
    roster: Sequence[RosterEntry] | None = None
    marriage_list: Sequence[MarriageListEntry] | None = None
    wiki_unmodified: Sequence[WikiEntry] | None = None
    wiki_modified: Sequence[WikiEntry] | None = None
    blueprints: Sequence[BlueprintEntry] | None = None
