"""Tests for collection reports."""

from __future__ import annotations

import pytest

from kancolle_a.domain.model import (
    CardPageSourceKind,
    MarriageListEntry,
    RosterEntry,
    Ship,
    ShipMod,
    Ships,
)
from kancolle_a.domain.reconciliation import CardPageSourceTable, build_card_page_source_table
from kancolle_a.domain.reports import (
    BlueprintStatus,
    BlueprintStrategy,
    RenovationState,
    blueprint_status,
    card_page_gaps,
    has_normal_card,
    missing_cards,
    renovation_priorities,
)
from tests.helpers.records import (
    make_blueprint,
    make_marriage,
    make_page,
    make_roster,
    make_single_book,
)

NORMAL_ONLY = (True, False, False)
HOLO_ONLY = (False, True, False)


@pytest.fixture(scope="module")
def table() -> CardPageSourceTable:
    return build_card_page_source_table()


def _collection(*ships: Ship) -> Ships:
    return Ships({ship.name: ship for ship in ships})


def _carded(
    name: str,
    stage: int,
    *,
    book_no: int = 1,
    roster: RosterEntry | None = None,
    marriage: MarriageListEntry | None = None,
) -> ShipMod:
    return ShipMod(
        name=name,
        upgrade_stage=stage,
        picture_book=make_single_book(book_no, name),
        roster=roster,
        marriage=marriage,
    )


def test_has_normal_card() -> None:
    assert has_normal_card(_carded("長門", 0))
    holo_book = make_single_book(1, "長門", owned=HOLO_ONLY)
    assert not has_normal_card(ShipMod(name="長門", upgrade_stage=0, picture_book=holo_book))
    assert not has_normal_card(ShipMod(name="長門", upgrade_stage=0))


# Blueprint status


@pytest.fixture
def blueprint_ships() -> Ships:
    return _collection(
        Ship(
            name="時雨",
            blueprint=make_blueprint("時雨", 4),
            mods=(
                _carded("時雨", 0),
                ShipMod(name="時雨改", upgrade_stage=1),
                ShipMod(name="時雨改二", upgrade_stage=2),
            ),
        ),
        Ship(
            name="長門",
            blueprint=make_blueprint("長門", 2, ship_type="戦艦"),
            mods=(_carded("長門", 0), _carded("長門改", 1)),
        ),
        Ship(name="金剛", blueprint=make_blueprint("金剛", 5), mods=(_carded("金剛", 0),)),
        Ship(name="陸奥", mods=(ShipMod(name="陸奥", upgrade_stage=0),)),
    )


def test_blueprint_status_targets_highest_missing_stage(blueprint_ships: Ships) -> None:
    rows = blueprint_status(blueprint_ships)

    assert [(row.status, row.stage_name, row.held, row.needed) for row in rows] == [
        (BlueprintStatus.SAVING_FOR, "時雨改二", 4, 6),
        (BlueprintStatus.COMPLETE, "金剛", 5, 0),
        (BlueprintStatus.COMPLETE, "長門改", 2, 0),
    ]


def test_blueprint_status_affordable_first(blueprint_ships: Ships) -> None:
    rows = blueprint_status(blueprint_ships, BlueprintStrategy.AFFORDABLE_FIRST)

    assert rows[0].status is BlueprintStatus.READY_FOR
    assert rows[0].ship_name == "時雨"
    assert rows[0].stage_name == "時雨改"
    assert rows[0].needed == 3


def test_blueprint_status_ready_when_enough_held() -> None:
    ships = _collection(
        Ship(
            name="時雨",
            blueprint=make_blueprint("時雨", 7),
            mods=(
                _carded("時雨", 0),
                _carded("時雨改", 1),
                ShipMod(name="時雨改二", upgrade_stage=2),
            ),
        )
    )

    (row,) = blueprint_status(ships)

    assert row.status is BlueprintStatus.READY_FOR
    assert (row.stage_name, row.needed) == ("時雨改二", 6)


# Missing cards


def test_missing_cards_lists_missing_normal_cards(table: CardPageSourceTable) -> None:
    ships = _collection(
        Ship(
            name="長門",
            mods=(
                ShipMod(
                    name="長門",
                    upgrade_stage=0,
                    picture_book=make_single_book(1, "長門", owned=HOLO_ONLY),
                ),
                ShipMod(
                    name="長門改",
                    upgrade_stage=1,
                    picture_book=make_single_book(1, "長門改", owned=(False, False, True)),
                ),
            ),
        ),
        Ship(name="陸奥", mods=(_carded("陸奥", 0, book_no=2),)),
    )

    rows = missing_cards(ships, table)
    with_upgrades = missing_cards(ships, table, include_upgrades=True)

    assert [(row.book_no, row.stage_name, row.pattern) for row in rows] == [(1, "長門", ".H.")]
    assert [row.pattern for row in with_upgrades] == [".H.", "..D"]


def test_missing_cards_for_event_pages_checks_every_card(table: CardPageSourceTable) -> None:
    sunday_best = make_page(1, NORMAL_ONLY)
    ships = _collection(
        Ship(
            name="長門",
            mods=(
                ShipMod(
                    name="長門",
                    upgrade_stage=0,
                    picture_book=make_single_book(6, "長門", extra_pages=(sunday_best,)),
                ),
            ),
        )
    )

    rows = missing_cards(ships, table, CardPageSourceKind.SUNDAY_BEST)

    assert [(row.priority, row.owned, row.pattern) for row in rows] == [
        (1, (True, False, False), "N..")
    ]
    assert missing_cards(ships, table) == []


# Renovation priority


@pytest.fixture
def renovation_ships() -> Ships:
    return _collection(
        Ship(name="睦月", mods=(ShipMod(name="睦月", upgrade_stage=0),)),
        Ship(
            name="長門",
            blueprint=make_blueprint("長門", 10, ship_type="戦艦"),
            mods=(
                _carded("長門", 0, roster=make_roster("長門", 0, star_num=5)),
                ShipMod(name="長門改", upgrade_stage=1),
            ),
        ),
        Ship(
            name="時雨",
            mods=(
                _carded("時雨", 0, roster=make_roster("時雨", 0, star_num=3)),
                ShipMod(name="時雨改", upgrade_stage=1),
            ),
        ),
        Ship(
            name="金剛",
            mods=(
                _carded("金剛", 0, roster=make_roster("金剛", 0, star_num=5)),
                ShipMod(name="金剛改", upgrade_stage=1),
            ),
        ),
        Ship(
            name="陸奥",
            mods=(
                _carded(
                    "陸奥",
                    0,
                    roster=make_roster("陸奥", 0, level=99, star_num=2),
                    marriage=make_marriage("陸奥"),
                ),
            ),
        ),
    )


def test_renovation_priorities_order(renovation_ships: Ships) -> None:
    rows = renovation_priorities(renovation_ships)

    assert [(row.state, row.ship_name) for row in rows] == [
        (RenovationState.STARS_NEEDED, "陸奥"),
        (RenovationState.MARRIAGEABLE, "陸奥"),
        (RenovationState.UPGRADE_READY, "金剛"),
        (RenovationState.UPGRADE_AVAILABLE, "時雨"),
        (RenovationState.CONSTRUCTABLE, "長門"),
        (RenovationState.MISSING_ALL, "睦月"),
    ]


def test_renovation_rows_describe_the_next_stage(renovation_ships: Ships) -> None:
    rows = {row.ship_name: row for row in renovation_priorities(renovation_ships, ["長門改"])}

    assert list(rows) == ["長門"]
    row = rows["長門"]
    assert row.current is not None
    assert row.current.name == "長門"
    assert row.next is not None
    assert row.next.name == "長門改"
    assert row.next_unowned
    assert row.stars == 5


def test_character_only_ignores_missing_cards() -> None:
    ships = _collection(
        Ship(
            name="吹雪",
            mods=(
                ShipMod(name="吹雪", upgrade_stage=0, roster=make_roster("吹雪", 0, star_num=5)),
            ),
        )
    )

    default = renovation_priorities(ships)
    character_only = renovation_priorities(ships, character_only=True)

    assert [row.state for row in default] == [RenovationState.MISSING_BASE]
    assert character_only == []


# Card page gaps


def test_card_page_gaps(table: CardPageSourceTable) -> None:
    ships = _collection(
        Ship(
            name="長門",
            mods=(
                ShipMod(
                    name="長門",
                    upgrade_stage=0,
                    picture_book=make_single_book(
                        1,
                        "長門",
                        extra_pages=(make_page(1, NORMAL_ONLY), make_page(2, (False,) * 3)),
                    ),
                ),
            ),
        ),
        Ship(
            name="陸奥",
            mods=(
                ShipMod(
                    name="陸奥",
                    upgrade_stage=0,
                    picture_book=make_single_book(
                        6, "陸奥", extra_pages=(make_page(1, (False,) * 3),)
                    ),
                ),
            ),
        ),
        Ship(
            name="扶桑",
            mods=(
                ShipMod(
                    name="扶桑",
                    upgrade_stage=0,
                    picture_book=make_single_book(
                        288,
                        "扶桑",
                        extra_pages=(make_page(1, (False,) * 3), make_page(2, (False,) * 3)),
                    ),
                ),
            ),
        ),
    )

    rows = card_page_gaps(ships, table)

    assert [(row.book_no, row.knowable, row.unknown, row.is_knowable) for row in rows] == [
        (1, (1,), (2,), True),
        (288, (), (1, 2), False),
    ]
