"""Tests for the wikiwiki ship table decoder."""

from __future__ import annotations

import pytest

from kancolle_a.adapters.wikiwiki import KansenTableError, clean_cell, parse_kansen_table
from kancolle_a.domain.model import WikiEntry

HEADER = (
    "|~No.|~レア|~艦名|~艦型|~艦番|~艦種|~耐久|~火力|~装甲|~雷装|~回避|~対空|~搭載|~対潜"
    "|~速力|~索敵|~射程|~運|~備考|h"
)
FORMAT = "|CENTER:|CENTER:|LEFT:|LEFT:|CENTER:|CENTER:|RIGHT:|RIGHT:|RIGHT:|RIGHT:|RIGHT:" + (
    "|RIGHT:|RIGHT:|RIGHT:|CENTER:|RIGHT:|CENTER:|RIGHT:|LEFT:|c"
)
NAGATO = (
    "|1|6|[[長門]]|[[長門型>長門型]]|1番艦|戦艦|80|82|75|0|24|31|12|0|低|12|長|20"
    "|[[長門改]],[[長門改二>長門改二]](No.341)|"
)
REPEATED_HEADER = (
    "|~No.|~レア|~艦名|~艦型|~艦番|~艦種|~耐久|~火力|~装甲|~雷装|~回避|~対空|~搭載|~対潜"
    "|~速力|~索敵|~射程|~運|~備考|"
)
SUZUTSUKI = (
    "|285|4|[[涼月]]|秋月型|3番艦|駆逐艦|38||||||0||高||短|12|初期値&br;未確認|"
)


def _table(*rows: str) -> str:
    return "\n".join(["*艦船テーブル", "", HEADER, FORMAT, *rows, ""])


def test_parse_first_row() -> None:
    (nagato,) = parse_kansen_table(_table(NAGATO))

    assert nagato == WikiEntry(
        book_no=1,
        rarity=6,
        ship_name="長門",
        ship_class="長門型",
        ship_class_index="1番艦",
        ship_type="戦艦",
        endurance=80,
        firepower=82,
        armor=75,
        torpedo=0,
        evasion=24,
        anti_aircraft=31,
        aircraft_load=12,
        anti_submarine=0,
        speed="低",
        search=12,
        range="長",
        luck=20,
        notes="長門改,長門改二(No.341)",
    )


def test_blank_stats_are_unknown() -> None:
    (suzutsuki,) = parse_kansen_table(_table(SUZUTSUKI))

    assert suzutsuki.firepower is None
    assert suzutsuki.anti_submarine is None
    assert suzutsuki.search is None
    assert suzutsuki.aircraft_load == 0
    assert suzutsuki.notes == "初期値 未確認"


def test_repeated_headers_are_skipped() -> None:
    entries = parse_kansen_table(_table(NAGATO, REPEATED_HEADER, SUZUTSUKI))

    assert [entry.book_no for entry in entries] == [1, 285]


@pytest.mark.parametrize("text", ["", "[]", "just some prose\n"])
def test_input_without_header_is_empty(text: str) -> None:
    assert parse_kansen_table(text) == []


def test_unknown_column_is_rejected() -> None:
    header = HEADER.replace("~艦型", "~艦　型")
    text = "\n".join([header, NAGATO])

    with pytest.raises(KansenTableError, match="艦　型"):
        parse_kansen_table(text)


def test_row_width_must_match_header() -> None:
    with pytest.raises(KansenTableError, match="expected 19 cells"):
        parse_kansen_table(_table("|1|6|長門|"))


def test_required_stat_must_be_present() -> None:
    row = NAGATO.replace("|戦艦|80|", "|戦艦||")

    with pytest.raises(KansenTableError):
        parse_kansen_table(_table(row))


@pytest.mark.parametrize(
    ("cell", "expected"),
    [
        ("  長門 ", "長門"),
        ("~No.", "No."),
        ("[[長門]]", "長門"),
        ("[[長門型>長門型 (艦型)]]", "長門型"),
        ("初期値&br;未確認", "初期値 未確認"),
        ("[[a]] and [[b>c]]", "a and b"),
    ],
)
def test_clean_cell(cell: str, expected: str) -> None:
    assert clean_cell(cell) == expected
