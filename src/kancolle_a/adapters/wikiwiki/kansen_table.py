"""Decoder for the wikiwiki.jp kancolle-a ship tables.

The ship table (``艦船/テーブル``) and the remodelled ship table
(``改造艦船/テーブル``) share one layout. Wikiwiki table markup is close to
pipe-separated values:

- every row starts and ends with ``|``; a non-empty final cell marks a special
  row (``h`` header, ``f`` footer, ``c`` format)
- cells starting with ``~`` are header cells; the tables repeat their header
  this way every few dozen rows
- ``&br;`` is a line break and ``[[text]]`` / ``[[text>page]]`` are links
"""

from __future__ import annotations

import re
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from kancolle_a.domain.model.records import WikiEntry

if TYPE_CHECKING:
    from collections.abc import Iterator

log = getLogger(__name__)

HEADER_ROW_MARKER = "h"

_LINK_WITH_TARGET = re.compile(r"\[\[([^\]>]*)>([^\]]*)\]\]")
_SIMPLE_LINK = re.compile(r"\[\[([^\]]*)\]\]")


class KansenTableError(ValueError):
    """Raised when a wikiwiki table does not have the expected layout."""


class KansenRow(BaseModel):
    """One data row, keyed by the table's Japanese column names."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    book_no: int = Field(alias="No.")
    rarity: int = Field(alias="レア")
    ship_name: str = Field(alias="艦名")
    ship_class: str = Field(alias="艦型")
    ship_class_index: str = Field(alias="艦番")
    ship_type: str = Field(alias="艦種")
    endurance: int = Field(alias="耐久")
    firepower: int | None = Field(alias="火力")
    armor: int | None = Field(alias="装甲")
    torpedo: int | None = Field(alias="雷装")
    evasion: int | None = Field(alias="回避")
    anti_aircraft: int | None = Field(alias="対空")
    aircraft_load: int = Field(alias="搭載")
    anti_submarine: int | None = Field(alias="対潜")
    speed: str = Field(alias="速力")
    search: int | None = Field(alias="索敵")
    range: str = Field(alias="射程")
    luck: int = Field(alias="運")
    notes: str = Field(alias="備考")

    # Stats nobody has read off a level 1 card yet are left blank.
    @field_validator(
        "firepower",
        "armor",
        "torpedo",
        "evasion",
        "anti_aircraft",
        "anti_submarine",
        "search",
        mode="before",
    )
    @classmethod
    def _blank_is_unknown(cls, value: object) -> object:
        if isinstance(value, str) and not value:
            return None
        return value

    def to_entry(self) -> WikiEntry:
        return WikiEntry(**self.model_dump())


def clean_cell(cell: str) -> str:
    """Strip wikiwiki markup from a single cell."""

    text = cell.replace("&br;", " ").strip().removeprefix("~")
    text = _LINK_WITH_TARGET.sub(r"\1", text)
    return _SIMPLE_LINK.sub(r"\1", text)


def _table_rows(text: str) -> Iterator[tuple[int, list[str]]]:
    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if line.startswith("|"):
            yield line_no, line.split("|")


def _clean_row(cells: list[str]) -> list[str]:
    return [clean_cell(cell) for cell in cells[1:-1]]


def parse_kansen_table(text: str) -> list[WikiEntry]:
    """Parse a ship table from wikiwiki source text.

    Rows before the header row are ignored. Input without a header row yields
    no entries.
    """

    rows = _table_rows(text)
    header: list[str] | None = None
    for _line_no, cells in rows:
        if cells[-1] == HEADER_ROW_MARKER:
            header = _clean_row(cells)
            break
    if header is None:
        log.debug("No header row in wikiwiki table")
        return []

    entries: list[WikiEntry] = []
    for line_no, cells in rows:
        if cells[-1] or cells[1].startswith("~"):
            continue
        values = _clean_row(cells)
        if len(values) != len(header):
            raise KansenTableError(
                f"Line {line_no}: expected {len(header)} cells, found {len(values)}"
            )
        try:
            row = KansenRow.model_validate(dict(zip(header, values, strict=True)))
        except ValidationError as exc:
            raise KansenTableError(f"Line {line_no}: {exc}") from exc
        entries.append(row.to_entry())

    log.debug(f"Parsed {len(entries)} wikiwiki table rows")
    return entries
