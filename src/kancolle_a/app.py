"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, TypeVar

from kancolle_a.adapters.kancolle_arcade import (
    build_http_kancolle_arcade_client,
    read_blueprints,
    read_marriage_list,
    read_picture_book,
    read_roster,
)
from kancolle_a.adapters.wikiwiki import parse_kansen_table
from kancolle_a.domain.model.records import SourceSnapshot
from kancolle_a.domain.reconciliation import (
    DuplicatePolicy,
    assemble_ships,
    build_card_page_source_table,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from kancolle_a.adapters.kancolle_arcade import KancolleArcadeClient
    from kancolle_a.config import SourceFilesConfig
    from kancolle_a.domain.model.ships import Ships
    from kancolle_a.domain.reconciliation import CardPageSourceTable

log = getLogger(__name__)

T = TypeVar("T")


def _read_optional(path: Path | None, reader: Callable[[str], list[T]]) -> list[T] | None:
    if path is None:
        return None
    records = reader(path.read_text(encoding="utf-8"))
    log.info(f"Read {len(records)} records from {path}")
    return records


def load_snapshot(files: SourceFilesConfig) -> SourceSnapshot:
    """Decode every configured export file; unconfigured sources stay ``None``."""

    return SourceSnapshot(
        picture_book=_read_optional(files.tcbook, read_picture_book),
        roster=_read_optional(files.character_list, read_roster),
        marriage_list=_read_optional(files.kanmusu_list, read_marriage_list),
        wiki_unmodified=_read_optional(files.wiki_kansen, parse_kansen_table),
        wiki_modified=_read_optional(files.wiki_kaizou_kansen, parse_kansen_table),
        blueprints=_read_optional(files.blueprint_list, read_blueprints),
    )


def fetch_snapshot(
    *,
    client: KancolleArcadeClient | None = None,
    files: SourceFilesConfig | None = None,
) -> SourceSnapshot:
    """Fetch the player's data from the player site.

    Sources the site does not serve (the wiki tables) come from ``files``.
    """

    effective_client = client or build_http_kancolle_arcade_client()
    log.info("Fetching snapshot from Kancolle Arcade")
    fetched = effective_client.fetch_snapshot()
    if files is None:
        return fetched
    local = load_snapshot(files)
    return SourceSnapshot(
        picture_book=fetched.picture_book,
        roster=fetched.roster,
        marriage_list=fetched.marriage_list,
        wiki_unmodified=local.wiki_unmodified,
        wiki_modified=local.wiki_modified,
        blueprints=fetched.blueprints,
    )


def build_ships(
    snapshot: SourceSnapshot,
    *,
    table: CardPageSourceTable | None = None,
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.ABORT,
) -> Ships:
    """Reconcile a snapshot with the built-in card page source table by default."""

    ships = assemble_ships(
        snapshot,
        table=table if table is not None else build_card_page_source_table(),
        duplicate_policy=duplicate_policy,
    )
    if ships.skipped:
        log.warning(f"Skipped {len(ships.skipped)} duplicate records")
    return ships
