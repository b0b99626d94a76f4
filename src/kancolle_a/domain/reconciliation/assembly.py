"""Merge per-source records into stages, then stages into ships.

Records are keyed by full display name first (one stage per name), then the
stages are grouped under their base identity. Every source may contribute at
most one record per key; what happens on a second one is decided by
``DuplicatePolicy``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from kancolle_a.domain.model.enums import SourceKind
from kancolle_a.domain.model.ships import Ship, ShipMod, Ships, SkippedRecord

from .errors import DuplicateSourceRecordError, InvariantViolationError
from .naming import base_identity, upgrade_stage_guess
from .splitter import SINGLE_ROW_SLOTS, split_picture_book_entry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from kancolle_a.domain.model.records import (
        BlueprintEntry,
        MarriageListEntry,
        PictureBookEntry,
        RosterEntry,
        SourceSnapshot,
        WikiEntry,
    )

    from .card_sources import CardPageSourceTable

log = getLogger(__name__)


class DuplicatePolicy(StrEnum):
    """What to do when a source contributes a second record for one key."""

    ABORT = "abort"
    SKIP = "skip"


@dataclass(slots=True, kw_only=True)
class _StageDraft:
    name: str
    picture_book: PictureBookEntry | None = None
    roster: RosterEntry | None = None
    marriage: MarriageListEntry | None = None
    wiki: WikiEntry | None = None


@dataclass(slots=True, kw_only=True)
class _ShipDraft:
    name: str
    blueprint: BlueprintEntry | None = None
    mods: list[ShipMod] = field(default_factory=list)


class _DuplicateGuard:
    """Applies the duplicate policy and remembers what was skipped."""

    def __init__(self, policy: DuplicatePolicy) -> None:
        self.policy = policy
        self.skipped: list[SkippedRecord] = []

    def accept(self, name: str, source: SourceKind, existing: object, duplicate: object) -> bool:
        """Return ``True`` when ``duplicate`` may be stored under ``name``."""

        if existing is None:
            return True
        if self.policy is DuplicatePolicy.ABORT:
            raise DuplicateSourceRecordError(
                name, source, existing=existing, duplicate=duplicate
            )
        log.warning(f"Skipping duplicate {source} entry for {name}")
        self.skipped.append(SkippedRecord(name, source))
        return False


def assemble_ships(
    snapshot: SourceSnapshot,
    *,
    table: CardPageSourceTable,
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.ABORT,
) -> Ships:
    """Reconcile every source in ``snapshot`` into one ``Ships`` collection.

    Raises ``ReconciliationError`` subclasses on duplicates (under the abort
    policy), unrecognised stage suffixes, malformed dual-row picture-book
    entries, and inconsistent ships. Nothing is returned on failure.
    """

    guard = _DuplicateGuard(duplicate_policy)
    shipmods = _assemble_shipmods(snapshot, table, guard)

    drafts: dict[str, _ShipDraft] = {}
    for blueprint in snapshot.blueprints or ():
        draft = drafts.setdefault(blueprint.ship_name, _ShipDraft(name=blueprint.ship_name))
        if guard.accept(blueprint.ship_name, SourceKind.BLUEPRINT, draft.blueprint, blueprint):
            draft.blueprint = blueprint

    for shipmod in shipmods:
        ship_name = base_identity(shipmod.name)
        draft = drafts.setdefault(ship_name, _ShipDraft(name=ship_name))
        draft.mods.append(shipmod)

    ships: dict[str, Ship] = {}
    for draft in drafts.values():
        mods = sorted(draft.mods, key=lambda mod: mod.upgrade_stage)
        ship = Ship(name=draft.name, blueprint=draft.blueprint, mods=tuple(mods))
        validate_ship(ship)
        ships[ship.name] = ship

    log.info(f"Assembled {len(ships)} ships from {len(shipmods)} stages")
    return Ships(ships, skipped=guard.skipped)


def assemble_shipmods(
    snapshot: SourceSnapshot,
    *,
    table: CardPageSourceTable,
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.ABORT,
) -> list[ShipMod]:
    """Merge all per-name records into validated stages, in first-seen order."""

    return _assemble_shipmods(snapshot, table, _DuplicateGuard(duplicate_policy))


def _assemble_shipmods(
    snapshot: SourceSnapshot,
    table: CardPageSourceTable,
    guard: _DuplicateGuard,
) -> list[ShipMod]:
    drafts: dict[str, _StageDraft] = {}

    def draft_for(name: str) -> _StageDraft:
        return drafts.setdefault(name, _StageDraft(name=name))

    wiki_entries = [*(snapshot.wiki_unmodified or ()), *(snapshot.wiki_modified or ())]
    for wiki in wiki_entries:
        draft = draft_for(wiki.ship_name)
        if guard.accept(wiki.ship_name, SourceKind.WIKI, draft.wiki, wiki):
            draft.wiki = wiki

    for marriage in snapshot.marriage_list or ():
        draft = draft_for(marriage.name)
        if guard.accept(marriage.name, SourceKind.MARRIAGE_LIST, draft.marriage, marriage):
            draft.marriage = marriage

    for roster in snapshot.roster or ():
        draft = draft_for(roster.ship_name)
        if guard.accept(roster.ship_name, SourceKind.ROSTER, draft.roster, roster):
            draft.roster = roster

    for entry in _owned_picture_book(snapshot.picture_book or ()):
        for stage_entry in split_picture_book_entry(entry, table):
            if stage_entry is None:
                continue
            draft = draft_for(stage_entry.ship_name)
            if guard.accept(
                stage_entry.ship_name, SourceKind.PICTURE_BOOK, draft.picture_book, stage_entry
            ):
                draft.picture_book = stage_entry

    # Blueprint names guarantee each purchasable ship has a base stage.
    for blueprint in snapshot.blueprints or ():
        draft_for(blueprint.ship_name)

    log.debug(
        f"Collected {len(wiki_entries)} wiki, {len(snapshot.marriage_list or ())} marriage, "
        f"{len(snapshot.roster or ())} roster and {len(snapshot.picture_book or ())} "
        f"picture book records into {len(drafts)} stages"
    )

    shipmods: list[ShipMod] = []
    for draft in drafts.values():
        shipmod = ShipMod(
            name=draft.name,
            upgrade_stage=(
                draft.roster.remodel_level
                if draft.roster is not None
                else upgrade_stage_guess(draft.name)
            ),
            picture_book=draft.picture_book,
            roster=draft.roster,
            marriage=draft.marriage,
            wiki=draft.wiki,
        )
        validate_shipmod(shipmod)
        shipmods.append(shipmod)
    return shipmods


def _owned_picture_book(entries: Iterable[PictureBookEntry]) -> Iterable[PictureBookEntry]:
    # Unowned entries are placeholders named 未取得 and carry no identity.
    return (entry for entry in entries if entry.acquire_num > 0)


def validate_shipmod(shipmod: ShipMod) -> None:
    def fail(detail: str) -> InvariantViolationError:
        return InvariantViolationError(base_identity(shipmod.name), detail, stage_name=shipmod.name)

    book = shipmod.picture_book
    if book is not None:
        if book.variation_num == 0:
            raise fail(f"created from unknown picture book entry {book.book_no}")
        if not book.pages or book.pages[0].variation_num != SINGLE_ROW_SLOTS:
            count = book.pages[0].variation_num if book.pages else 0
            raise fail(f"unexpected variation count {count} on normal page of {book.book_no}")
        if book.ship_name != shipmod.name:
            raise fail(f"picture book entry is named {book.ship_name}")
    if shipmod.marriage is not None and shipmod.marriage.name != shipmod.name:
        raise fail(f"marriage list entry is named {shipmod.marriage.name}")
    if shipmod.roster is not None and shipmod.roster.ship_name != shipmod.name:
        raise fail(f"roster entry is named {shipmod.roster.ship_name}")


def validate_ship(ship: Ship) -> None:
    """Check the cross-record consistency of an assembled ship."""

    if ship.blueprint is not None and ship.blueprint.ship_name != ship.name:
        raise InvariantViolationError(
            ship.name, f"blueprint is named {ship.blueprint.ship_name}"
        )

    previous: ShipMod | None = None
    for shipmod in ship.mods:
        if base_identity(shipmod.name) != ship.name:
            raise InvariantViolationError(
                ship.name,
                f"stage resolves to {base_identity(shipmod.name)}",
                stage_name=shipmod.name,
            )
        if previous is not None and shipmod.upgrade_stage <= previous.upgrade_stage:
            raise InvariantViolationError(
                ship.name,
                f"upgrade stage {shipmod.upgrade_stage} does not follow "
                f"{previous.name} at stage {previous.upgrade_stage}",
                stage_name=shipmod.name,
            )
        if (shipmod.name == ship.name) != (shipmod.upgrade_stage == 0):
            raise InvariantViolationError(
                ship.name,
                f"stage named {shipmod.name} reports upgrade stage {shipmod.upgrade_stage}",
                stage_name=shipmod.name,
            )
        previous = shipmod
