"""Collection reports computed from an assembled ``Ships`` collection.

Reports return typed rows only; rendering them is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Final

from kancolle_a.domain.model.enums import CardPageSourceKind
from kancolle_a.domain.reconciliation.costs import stage_cost
from kancolle_a.domain.reconciliation.naming import base_identity

if TYPE_CHECKING:
    from collections.abc import Iterable

    from kancolle_a.domain.model.records import PictureBookEntry
    from kancolle_a.domain.model.ships import Ship, ShipMod, Ships
    from kancolle_a.domain.reconciliation.card_sources import CardPageSourceTable

MAX_STARS: Final[int] = 5
MARRIAGE_LEVEL: Final[int] = 99

# Cost assumed for a stage whose price is unknown, so it never looks affordable.
_UNKNOWN_COST: Final[int] = 99


def has_normal_card(shipmod: ShipMod) -> bool:
    """Whether the plain (non-holo, undamaged) card of this stage is owned."""

    book = shipmod.picture_book
    if book is None or not book.pages or not book.pages[0].card_images:
        return False
    return bool(book.pages[0].card_images[0])


# Blueprint status


class BlueprintStatus(StrEnum):
    READY_FOR = "ReadyFor"
    SAVING_FOR = "SavingFor"
    COMPLETE = "Complete"


class BlueprintStrategy(StrEnum):
    """Which missing stage the held blueprints are earmarked for.

    ``HIGHEST_MISSING`` saves towards the most advanced stage whose card is
    missing. ``AFFORDABLE_FIRST`` spends on the lowest missing stage already
    affordable and otherwise behaves like ``HIGHEST_MISSING``.
    """

    HIGHEST_MISSING = "highest-missing"
    AFFORDABLE_FIRST = "affordable-first"


_STATUS_ORDER: Final[dict[BlueprintStatus, int]] = {
    status: index for index, status in enumerate(BlueprintStatus)
}


@dataclass(frozen=True, slots=True, kw_only=True)
class BlueprintStatusRow:
    ship_name: str
    stage_name: str
    held: int
    needed: int
    status: BlueprintStatus


def _missing_upgrades(ship: Ship) -> list[ShipMod]:
    return [mod for mod in ship.mods if mod.upgrade_stage > 0 and not has_normal_card(mod)]


def _blueprint_target(ship: Ship, held: int, strategy: BlueprintStrategy) -> ShipMod | None:
    missing = _missing_upgrades(ship)
    if not missing:
        return None
    if strategy is BlueprintStrategy.AFFORDABLE_FIRST:
        for mod in missing:
            cost = stage_cost(ship, mod.upgrade_stage)
            if cost is not None and cost.blueprints <= held:
                return mod
    return missing[-1]


def blueprint_status(
    ships: Ships,
    strategy: BlueprintStrategy = BlueprintStrategy.HIGHEST_MISSING,
) -> list[BlueprintStatusRow]:
    """One row per ship holding blueprints, sorted by status then stage name."""

    rows: list[BlueprintStatusRow] = []
    for ship in ships.values():
        if ship.blueprint is None or not ship.mods:
            continue
        held = ship.blueprint.blueprint_total_num
        target = _blueprint_target(ship, held, strategy)
        cost = stage_cost(ship, target.upgrade_stage) if target is not None else None
        if target is None or cost is None:
            stage_name = (target or ship.mods[-1]).name
            status, needed = BlueprintStatus.COMPLETE, 0
        else:
            stage_name = target.name
            needed = cost.blueprints
            status = BlueprintStatus.SAVING_FOR if needed > held else BlueprintStatus.READY_FOR
        rows.append(
            BlueprintStatusRow(
                ship_name=ship.name,
                stage_name=stage_name,
                held=held,
                needed=needed,
                status=status,
            )
        )
    rows.sort(key=lambda row: (_STATUS_ORDER[row.status], row.stage_name))
    return rows


# Missing cards


@dataclass(frozen=True, slots=True, kw_only=True)
class MissingCardRow:
    book_no: int
    stage_name: str
    priority: int
    owned: tuple[bool, ...]

    @property
    def pattern(self) -> str:
        """``NHD``-style summary: normal, holo, damaged, with ``.`` for missing."""

        letters = "NHD".ljust(len(self.owned), "*")
        return "".join(letter if owned else "." for letter, owned in zip(letters, self.owned))


def missing_cards(
    ships: Ships,
    table: CardPageSourceTable,
    kind: CardPageSourceKind = CardPageSourceKind.NORMAL,
    *,
    include_upgrades: bool = False,
) -> list[MissingCardRow]:
    """Stages with cards missing on pages of ``kind``.

    For the normal page only the plain card counts; holo and damaged cards are
    too common a gap to be worth listing.
    """

    rows: list[MissingCardRow] = []
    for shipmod in ships.iter_shipmods():
        book = shipmod.picture_book
        if book is None or (shipmod.upgrade_stage > 0 and not include_upgrades):
            continue
        for page in book.pages:
            if page.variation_num == 0 or table.source_of(book, page.priority).kind is not kind:
                continue
            owned = tuple(bool(image) for image in page.card_images)
            checked = owned[:1] if kind is CardPageSourceKind.NORMAL else owned
            if all(checked):
                continue
            rows.append(
                MissingCardRow(
                    book_no=book.book_no,
                    stage_name=shipmod.name,
                    priority=page.priority,
                    owned=owned,
                )
            )
    rows.sort(key=lambda row: (row.book_no, row.stage_name, row.priority))
    return rows


# Renovation priority


class RenovationState(StrEnum):
    """Listed from least to most pressing."""

    STARS_NEEDED = "StarsNeeded"
    MARRIAGEABLE = "Marriageable"
    UPGRADE_READY = "UpgradeReady"
    UPGRADE_AVAILABLE = "UpgradeAvailable"
    CONSTRUCTABLE = "Constructable"
    MISSING_BASE = "MissingBase"
    MISSING_ALL = "MissingAll"


_STATE_ORDER: Final[dict[RenovationState, int]] = {
    state: index for index, state in enumerate(RenovationState)
}


@dataclass(frozen=True, slots=True, kw_only=True)
class RenovationRow:
    state: RenovationState
    ship_name: str
    current: ShipMod | None = None
    next: ShipMod | None = None

    @property
    def stars(self) -> int | None:
        if self.current is None or self.current.roster is None:
            return None
        return self.current.roster.star_num

    @property
    def next_unowned(self) -> bool:
        """The next stage has never been owned, so upgrading also adds a ship."""

        return self.next is not None and self.next.roster is None


def _is_missing(shipmod: ShipMod, *, character_only: bool) -> bool:
    if shipmod.roster is None:
        return True
    return not character_only and not has_normal_card(shipmod)


def _is_marriageable(shipmod: ShipMod) -> bool:
    roster = shipmod.roster
    return (
        shipmod.marriage is not None
        and roster is not None
        and not roster.married
        and roster.level >= MARRIAGE_LEVEL
    )


def _ship_renovations(ship: Ship, *, character_only: bool) -> Iterable[RenovationRow]:
    if not ship.mods or all(mod.roster is None for mod in ship.mods):
        yield RenovationRow(state=RenovationState.MISSING_ALL, ship_name=ship.name)
        return

    if _is_missing(ship.mods[0], character_only=character_only):
        yield RenovationRow(state=RenovationState.MISSING_BASE, ship_name=ship.name)

    for mod in ship.mods:
        if _is_marriageable(mod):
            yield RenovationRow(
                state=RenovationState.MARRIAGEABLE, ship_name=ship.name, current=mod
            )

    held = ship.blueprint.blueprint_total_num if ship.blueprint is not None else None
    for current, upcoming in zip(ship.mods, ship.mods[1:]):
        if current.roster is None or not _is_missing(upcoming, character_only=character_only):
            continue
        cost = stage_cost(ship, upcoming.upgrade_stage)
        needed = cost.blueprints if cost is not None else _UNKNOWN_COST
        if held is not None and held >= needed:
            state = RenovationState.CONSTRUCTABLE
        elif current.roster.star_num == MAX_STARS:
            state = RenovationState.UPGRADE_READY
        else:
            state = RenovationState.UPGRADE_AVAILABLE
        yield RenovationRow(state=state, ship_name=ship.name, current=current, next=upcoming)

    last = ship.mods[-1]
    if last.roster is not None and last.roster.star_num < MAX_STARS:
        yield RenovationRow(
            state=RenovationState.STARS_NEEDED, ship_name=ship.name, current=last
        )


def renovation_priorities(
    ships: Ships,
    names: Iterable[str] = (),
    *,
    character_only: bool = False,
) -> list[RenovationRow]:
    """What to do next for each ship, most pressing last.

    ``names`` may be any stage name; it restricts the report to those ships.
    With ``character_only`` a stage counts as owned once it is in the roster,
    even if its plain card is missing.
    """

    wanted = {base_identity(name) for name in names}
    rows = [
        row
        for ship in ships.values()
        if not wanted or ship.name in wanted
        for row in _ship_renovations(ship, character_only=character_only)
    ]

    def sort_key(row: RenovationRow) -> tuple[int, int]:
        by_stars = row.state in {RenovationState.STARS_NEEDED, RenovationState.UPGRADE_AVAILABLE}
        return _STATE_ORDER[row.state], (row.stars or 0) if by_stars else 0

    rows.sort(key=sort_key)
    return rows


# Card page gaps


@dataclass(frozen=True, slots=True, kw_only=True)
class CardPageGapRow:
    """Pages of one picture-book entry whose event is undocumented.

    ``knowable`` pages own at least one card, so their art can be looked at;
    ``unknown`` pages own none.
    """

    book_no: int
    ship_name: str
    knowable: tuple[int, ...]
    unknown: tuple[int, ...]

    @property
    def is_knowable(self) -> bool:
        return len(self.unknown) <= 1


def card_page_gaps(ships: Ships, table: CardPageSourceTable) -> list[CardPageGapRow]:
    """Unknown-source pages per picture-book entry, ordered by book number."""

    books: dict[int, list[PictureBookEntry]] = {}
    for shipmod in ships.iter_shipmods():
        if shipmod.picture_book is not None:
            books.setdefault(shipmod.picture_book.book_no, []).append(shipmod.picture_book)

    rows: list[CardPageGapRow] = []
    for book_no, stage_books in sorted(books.items()):
        first = stage_books[0]
        knowable: list[int] = []
        unknown: list[int] = []
        for index, page in enumerate(first.pages[1:], start=1):
            if table.source_of(first, page.priority).kind is not CardPageSourceKind.UNKNOWN:
                continue
            owned = any(
                book.pages[index].acquire_num > 0 for book in stage_books if index < len(book.pages)
            )
            (knowable if owned else unknown).append(page.priority)
        if knowable or unknown:
            rows.append(
                CardPageGapRow(
                    book_no=book_no,
                    ship_name=first.ship_name,
                    knowable=tuple(knowable),
                    unknown=tuple(unknown),
                )
            )
    return rows
