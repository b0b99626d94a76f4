"""Canonical ship collection produced by reconciliation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .enums import SourceKind
    from .records import (
        BlueprintEntry,
        MarriageListEntry,
        PictureBookEntry,
        RosterEntry,
        WikiEntry,
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class ShipMod:
    """One ship at one upgrade stage, with whatever each source knows about it."""

    name: str
    upgrade_stage: int
    picture_book: PictureBookEntry | None = None
    roster: RosterEntry | None = None
    marriage: MarriageListEntry | None = None
    wiki: WikiEntry | None = None

    @property
    def is_owned(self) -> bool:
        return self.roster is not None


@dataclass(frozen=True, slots=True, kw_only=True)
class Ship:
    """A base identity and its known upgrade stages, ordered by stage."""

    name: str
    blueprint: BlueprintEntry | None = None
    mods: tuple[ShipMod, ...] = ()

    def shipmod_by_name(self, name: str) -> ShipMod | None:
        for mod in self.mods:
            if mod.name == name:
                return mod
        return None

    def shipmod_at(self, upgrade_stage: int) -> ShipMod | None:
        for mod in self.mods:
            if mod.upgrade_stage == upgrade_stage:
                return mod
        return None

    @property
    def highest_stage(self) -> int | None:
        return self.mods[-1].upgrade_stage if self.mods else None


@dataclass(frozen=True, slots=True)
class SkippedRecord:
    """A duplicate source record dropped under the skip policy."""

    name: str
    source: SourceKind


class Ships(Mapping[str, Ship]):
    """Read-only base-name -> ``Ship`` mapping for one data snapshot."""

    __slots__ = ("_mods_by_name", "_ships", "_skipped")

    def __init__(self, ships: Mapping[str, Ship], *, skipped: Iterable[SkippedRecord] = ()) -> None:
        self._ships: Mapping[str, Ship] = MappingProxyType(dict(ships))
        self._mods_by_name: Mapping[str, ShipMod] = MappingProxyType(
            {mod.name: mod for ship in self._ships.values() for mod in ship.mods}
        )
        self._skipped = tuple(skipped)

    def __getitem__(self, name: str) -> Ship:
        return self._ships[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._ships)

    def __len__(self) -> int:
        return len(self._ships)

    def __repr__(self) -> str:
        return f"Ships({len(self._ships)} ships, {len(self._mods_by_name)} stages)"

    @property
    def skipped(self) -> tuple[SkippedRecord, ...]:
        return self._skipped

    def iter_shipmods(self) -> Iterator[ShipMod]:
        """Return a fresh iterator over every stage of every ship."""

        return (mod for ship in self._ships.values() for mod in ship.mods)

    def shipmod_by_name(self, name: str) -> ShipMod | None:
        return self._mods_by_name.get(name)
