# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import find_dotenv, load_dotenv

from kancolle_a.adapters.kancolle_arcade import build_http_kancolle_arcade_client
from kancolle_a.app import build_ships, fetch_snapshot, load_snapshot
from kancolle_a.config import (
    ConfigurationError,
    configure_logging,
    get_kancolle_arcade_config,
    get_source_files_config,
)
from kancolle_a.domain.model.enums import CardPageSourceKind
from kancolle_a.domain.reconciliation import DuplicatePolicy, build_card_page_source_table
from kancolle_a.domain.reports import (
    MAX_STARS,
    BlueprintStrategy,
    RenovationState,
    blueprint_status,
    card_page_gaps,
    missing_cards,
    renovation_priorities,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from kancolle_a.adapters.kancolle_arcade import KancolleArcadeClient
    from kancolle_a.config import SourceFilesConfig
    from kancolle_a.domain.model.ships import Ships
    from kancolle_a.domain.reconciliation import CardPageSourceTable
    from kancolle_a.domain.reports import (
        BlueprintStatusRow,
        CardPageGapRow,
        MissingCardRow,
        RenovationRow,
    )

log = logging.getLogger(__name__)

_BOTH_STRATEGIES = "both"


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    sources = parser.add_argument_group("data sources (override KCA_* variables)")
    sources.add_argument("--tcbook", type=Path, help="TcBook/info JSON export")
    sources.add_argument("--character-list", type=Path, help="CharacterList/info JSON export")
    sources.add_argument("--blueprint-list", type=Path, help="BlueprintList/info JSON export")
    sources.add_argument("--kanmusu-list", type=Path, help="kanmusu_list.json marriage list")
    sources.add_argument("--wiki-kansen", type=Path, help="Wikiwiki ship table source")
    sources.add_argument(
        "--wiki-kaizou-kansen", type=Path, help="Wikiwiki remodelled ship table source"
    )
    sources.add_argument(
        "--fetch",
        action="store_true",
        help="Fetch player data from Kancolle Arcade instead of reading exports",
    )
    sources.add_argument(
        "--skip-duplicates",
        action="store_true",
        help="Keep the first of duplicate source records instead of failing",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile and report on Kancolle Arcade ships")
    subparsers = parser.add_subparsers(dest="command", required=True)

    summary = subparsers.add_parser("summary", help="Count ships and stages")
    _add_source_arguments(summary)

    blueprints = subparsers.add_parser("blueprints", help="Blueprint saving status per ship")
    _add_source_arguments(blueprints)
    blueprints.add_argument(
        "--strategy",
        choices=[*(strategy.value for strategy in BlueprintStrategy), _BOTH_STRATEGIES],
        default=BlueprintStrategy.HIGHEST_MISSING.value,
        help="Which missing stage blueprints are earmarked for (default: %(default)s)",
    )

    missing = subparsers.add_parser("missing-cards", help="Cards missing from the picture book")
    _add_source_arguments(missing)
    missing.add_argument(
        "--kind",
        choices=[kind.value for kind in CardPageSourceKind],
        default=CardPageSourceKind.NORMAL.value,
        help="Card page category to report on (default: %(default)s)",
    )
    missing.add_argument(
        "--include-upgrades",
        action="store_true",
        help="Also report upgraded stages",
    )

    renovation = subparsers.add_parser("renovation", help="What to do next for each ship")
    _add_source_arguments(renovation)
    renovation.add_argument("names", nargs="*", help="Restrict the report to these ships")
    renovation.add_argument(
        "--character-only",
        action="store_true",
        help="Treat a stage as owned once it is in the roster",
    )

    gaps = subparsers.add_parser("card-gaps", help="Picture-book pages of unknown origin")
    _add_source_arguments(gaps)

    return parser.parse_args(list(argv))


def _source_files(args: argparse.Namespace) -> SourceFilesConfig:
    files = get_source_files_config().overridden(
        tcbook=args.tcbook,
        character_list=args.character_list,
        blueprint_list=args.blueprint_list,
        kanmusu_list=args.kanmusu_list,
        wiki_kansen=args.wiki_kansen,
        wiki_kaizou_kansen=args.wiki_kaizou_kansen,
    )
    if files.is_empty and not args.fetch:
        raise ValueError("No data sources given; pass export files or --fetch")
    return files


def _kancolle_arcade_client(args: argparse.Namespace) -> KancolleArcadeClient | None:
    if not args.fetch:
        return None
    return build_http_kancolle_arcade_client(config=get_kancolle_arcade_config())


def _load_ships(
    args: argparse.Namespace,
    files: SourceFilesConfig,
    client: KancolleArcadeClient | None,
    table: CardPageSourceTable,
) -> Ships:
    snapshot = (
        fetch_snapshot(client=client, files=files) if client is not None else load_snapshot(files)
    )
    policy = DuplicatePolicy.SKIP if args.skip_duplicates else DuplicatePolicy.ABORT
    return build_ships(snapshot, table=table, duplicate_policy=policy)


def render_summary(ships: Ships) -> list[str]:
    stages = sum(len(ship.mods) for ship in ships.values())
    lines = [f"Ships:\t{len(ships)}", f"Stages:\t{stages}"]
    lines.extend(f"Skipped:\t{record.source}\t{record.name}" for record in ships.skipped)
    return lines


def render_blueprint_status(rows: Sequence[BlueprintStatusRow]) -> list[str]:
    return [f"{row.status}:\t{row.stage_name}\t{row.held}/{row.needed}" for row in rows]


def render_missing_cards(rows: Sequence[MissingCardRow], kind: CardPageSourceKind) -> list[str]:
    lines = [f"Missing ({kind})", "#\tNHD\tShip"]
    lines.extend(f"{row.book_no}\t{row.pattern}\t{row.stage_name}" for row in rows)
    return lines


def _stars(row: RenovationRow) -> str:
    return f"({row.stars}/{MAX_STARS})"


def _render_renovation_row(row: RenovationRow) -> str:
    marker = "※ " if row.next_unowned else ""
    current = row.current.name if row.current is not None else ""
    upcoming = row.next.name if row.next is not None else ""
    match row.state:
        case RenovationState.MISSING_ALL:
            return f"MISSING ALL\t{row.ship_name}"
        case RenovationState.MISSING_BASE:
            return f"MISSING BASE\t{row.ship_name}"
        case RenovationState.CONSTRUCTABLE:
            return f"{marker}CONSTRUCTABLE\t{row.ship_name}\t{current}{_stars(row)}\t=> {upcoming}"
        case RenovationState.UPGRADE_AVAILABLE:
            return f"{marker}AVAILABLE\t{row.ship_name}\t{current}{_stars(row)}\t=> {upcoming}"
        case RenovationState.UPGRADE_READY:
            return f"{marker}READY\t\t{row.ship_name}\t{current}\t=> {upcoming}"
        case RenovationState.MARRIAGEABLE:
            return f"MARRIAGEABLE\t{row.ship_name}\t{current}"
        case RenovationState.STARS_NEEDED:
            return f"STARS NEEDED\t{row.ship_name}\t{current}{_stars(row)}"


def render_renovation(rows: Sequence[RenovationRow]) -> list[str]:
    return [_render_renovation_row(row) for row in rows]


def render_card_page_gaps(rows: Sequence[CardPageGapRow]) -> list[str]:
    if not rows:
        return ["No unidentified pages!"]

    def section(title: str, selected: list[CardPageGapRow]) -> list[str]:
        lines = [title, "#\tSome\tNone\tShip"]
        lines.extend(
            f"{row.book_no}\t{list(row.knowable)}\t{list(row.unknown)}\t{row.ship_name}"
            for row in selected
        )
        return lines

    knowable = [row for row in rows if row.is_knowable]
    unknowable = [row for row in rows if not row.is_knowable]
    return [*section("Knowable", knowable), "", *section("Unknowable", unknowable)]


def _report(args: argparse.Namespace, ships: Ships, table: CardPageSourceTable) -> list[str]:
    if args.command == "summary":
        return render_summary(ships)
    if args.command == "blueprints":
        if args.strategy == _BOTH_STRATEGIES:
            lines: list[str] = []
            for strategy in BlueprintStrategy:
                lines.append(f"[{strategy}]")
                lines.extend(render_blueprint_status(blueprint_status(ships, strategy)))
            return lines
        return render_blueprint_status(blueprint_status(ships, BlueprintStrategy(args.strategy)))
    if args.command == "missing-cards":
        kind = CardPageSourceKind(args.kind)
        rows = missing_cards(ships, table, kind, include_upgrades=args.include_upgrades)
        return render_missing_cards(rows, kind)
    if args.command == "renovation":
        rows = renovation_priorities(ships, args.names, character_only=args.character_only)
        return render_renovation(rows)
    if args.command == "card-gaps":
        return render_card_page_gaps(card_page_gaps(ships, table))
    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    load_dotenv(find_dotenv(usecwd=True))
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        files = _source_files(parsed_args)
        client = _kancolle_arcade_client(parsed_args)
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    table = build_card_page_source_table()
    try:
        ships = _load_ships(parsed_args, files, client, table)
        lines = _report(parsed_args, ships, table)
    except Exception:
        log.exception("Fatal error while building reports")
        sys.exit(1)

    for line in lines:
        print(line)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
