"""Which historical event produced each picture-book page.

The game never says which event a page came from, so the table here is
maintained by hand: a book number is only listed once its full page history
has been confirmed. Anything unlisted, or listed but shaped differently from
the live data, classifies as ``Unknown`` rather than being guessed.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING, Final, TypeAlias

from kancolle_a.domain.model.enums import CardPageSourceKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from kancolle_a.domain.model.records import PictureBookEntry

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EventPageSource:
    """A page shared by both stages of a dual-row entry (normal or seasonal art)."""

    kind: CardPageSourceKind


@dataclass(frozen=True, slots=True)
class OriginalIllustrationSingle:
    """A one-card bonus artwork page owned by exactly one stage."""

    second_stage: bool

    @property
    def kind(self) -> CardPageSourceKind:
        return CardPageSourceKind.ORIGINAL_ILLUSTRATION_SINGLE


@dataclass(frozen=True, slots=True)
class OriginalIllustrationDouble:
    """A two-card bonus artwork page; each flag names the stage owning that card."""

    first_second_stage: bool
    second_second_stage: bool

    @property
    def kind(self) -> CardPageSourceKind:
        return CardPageSourceKind.ORIGINAL_ILLUSTRATION_DOUBLE

    @property
    def is_mixed(self) -> bool:
        return self.first_second_stage != self.second_second_stage


CardPageSource: TypeAlias = EventPageSource | OriginalIllustrationSingle | OriginalIllustrationDouble

UNKNOWN: Final = EventPageSource(CardPageSourceKind.UNKNOWN)
NORMAL: Final = EventPageSource(CardPageSourceKind.NORMAL)
DECISIVE_BATTLE: Final = EventPageSource(CardPageSourceKind.DECISIVE_BATTLE)
SWIMSUIT: Final = EventPageSource(CardPageSourceKind.SWIMSUIT)
CHRISTMAS: Final = EventPageSource(CardPageSourceKind.CHRISTMAS)
HALLOWEEN: Final = EventPageSource(CardPageSourceKind.HALLOWEEN)
VALENTINE: Final = EventPageSource(CardPageSourceKind.VALENTINE)
PACIFIC_SAURY: Final = EventPageSource(CardPageSourceKind.PACIFIC_SAURY)
FISHING: Final = EventPageSource(CardPageSourceKind.FISHING)
SUNDAY_BEST: Final = EventPageSource(CardPageSourceKind.SUNDAY_BEST)
RAINY_SEASON: Final = EventPageSource(CardPageSourceKind.RAINY_SEASON)
YUKATA: Final = EventPageSource(CardPageSourceKind.YUKATA)


class CardPageSourceTable:
    """Immutable book-number -> event-history lookup.

    Build one per process (or per test) and pass it to whatever needs to
    classify pages. Entries list the sources of pages 1..n; page 0 is always
    ``Normal`` and is not stored.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[int, tuple[CardPageSource, ...]]) -> None:
        self._entries: Mapping[int, tuple[CardPageSource, ...]] = MappingProxyType(
            {book_no: tuple(sources) for book_no, sources in entries.items()}
        )

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[tuple[int, Iterable[CardPageSource]]]
    ) -> CardPageSourceTable:
        """Build a table, refusing to register one book number twice."""

        entries: dict[int, tuple[CardPageSource, ...]] = {}
        for book_no, sources in pairs:
            if book_no in entries:
                raise ValueError(f"Card page sources for book {book_no} registered twice")
            entries[book_no] = tuple(sources)
        return cls(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, book_no: object) -> bool:
        return book_no in self._entries

    def entry(self, book_no: int) -> tuple[CardPageSource, ...] | None:
        return self._entries.get(book_no)

    def source(self, book_no: int, page_count: int, priority: int) -> CardPageSource:
        """Classify page ``priority`` of a record with ``page_count`` pages."""

        if priority == 0:
            return NORMAL
        sources = self._entries.get(book_no)
        if sources is None:
            return UNKNOWN
        if len(sources) + 1 != page_count:
            log.debug(
                f"Book {book_no} has {page_count} pages but {len(sources) + 1} are documented"
            )
            return UNKNOWN
        if priority - 1 >= len(sources):
            return UNKNOWN
        return sources[priority - 1]

    def source_of(self, entry: PictureBookEntry, priority: int) -> CardPageSource:
        return self.source(entry.book_no, len(entry.pages), priority)


def _single(second_stage: bool) -> OriginalIllustrationSingle:
    return OriginalIllustrationSingle(second_stage)


def _double(first: bool, second: bool) -> OriginalIllustrationDouble:
    return OriginalIllustrationDouble(first, second)


# Confirmed event history per book number, pages 1..n in order.
_KNOWN_BOOK_PAGES: Final[tuple[tuple[int, tuple[CardPageSource, ...]], ...]] = (
    (2, (YUKATA,)),
    (5, (SWIMSUIT,)),
    (6, (SUNDAY_BEST,)),
    (7, (SUNDAY_BEST, _single(True))),
    (10, (DECISIVE_BATTLE, _double(True, True))),
    (18, (_single(True),)),
    (19, (RAINY_SEASON,)),
    (25, (_single(True),)),
    (26, (RAINY_SEASON,)),
    (39, (CHRISTMAS,)),
    (40, (PACIFIC_SAURY,)),
    (45, (YUKATA,)),
    (46, (_single(True),)),
    (48, (_single(True),)),
    (51, (DECISIVE_BATTLE, RAINY_SEASON)),
    (53, (RAINY_SEASON,)),
    (67, (FISHING, _single(True))),
    (68, (PACIFIC_SAURY, FISHING, _double(True, True))),
    (69, (PACIFIC_SAURY, _single(True))),
    (70, (VALENTINE, PACIFIC_SAURY, _single(True))),
    (71, (_single(True),)),
    (73, (YUKATA,)),
    (74, (YUKATA,)),
    (79, (_single(True),)),
    (81, (_double(True, True),)),
    (82, (HALLOWEEN, _single(True))),
    (85, (HALLOWEEN,)),
    (86, (FISHING,)),
    (87, (PACIFIC_SAURY,)),
    (94, (RAINY_SEASON, PACIFIC_SAURY)),
    (97, (RAINY_SEASON,)),
    (101, (DECISIVE_BATTLE, RAINY_SEASON)),
    (102, (_single(False),)),
    (103, (_single(False),)),
    (106, (CHRISTMAS,)),
    (107, (CHRISTMAS,)),
    (108, (CHRISTMAS,)),
    (111, (RAINY_SEASON,)),
    (114, (RAINY_SEASON,)),
    (124, (CHRISTMAS,)),
    (125, (CHRISTMAS,)),
    (129, (CHRISTMAS,)),
    (130, (CHRISTMAS,)),
    (131, (SUNDAY_BEST, SWIMSUIT)),
    (133, (PACIFIC_SAURY, _single(True))),
    (134, (_single(True),)),
    (135, (_single(True),)),
    (136, (SUNDAY_BEST, SWIMSUIT)),
    (142, (VALENTINE,)),
    (144, (RAINY_SEASON, HALLOWEEN, _double(False, False))),
    (145, (DECISIVE_BATTLE, SWIMSUIT, PACIFIC_SAURY, _double(False, False))),
    (151, (SWIMSUIT,)),
    (165, (VALENTINE, _single(True))),
    (167, (PACIFIC_SAURY,)),
    (168, (YUKATA,)),
    (170, (YUKATA,)),
    (181, (_single(True),)),
    (183, (SWIMSUIT, _single(False))),
    (184, (PACIFIC_SAURY,)),
    (185, (PACIFIC_SAURY,)),
    (187, (_single(False),)),
    (205, (_double(False, True),)),
    (207, (VALENTINE, PACIFIC_SAURY)),
    (209, (RAINY_SEASON, _single(True))),
    (210, (RAINY_SEASON, _single(True))),
    (211, (RAINY_SEASON,)),
    (213, (DECISIVE_BATTLE,)),
    (214, (DECISIVE_BATTLE,)),
    (215, (HALLOWEEN,)),
    (221, (YUKATA,)),
    (223, (PACIFIC_SAURY,)),
    (224, (RAINY_SEASON,)),
    (231, (SWIMSUIT,)),
    (236, (SWIMSUIT,)),
    (239, (SUNDAY_BEST, _double(False, True))),
    (241, (SWIMSUIT,)),
    (242, (HALLOWEEN,)),
    (243, (SWIMSUIT,)),
    (245, (SWIMSUIT,)),
    (246, (SWIMSUIT,)),
    (248, (PACIFIC_SAURY,)),
    (250, (SWIMSUIT,)),
    (253, (SWIMSUIT,)),
    (257, (SWIMSUIT,)),
    (260, (CHRISTMAS,)),
    (261, (CHRISTMAS, _single(False))),
    (262, (CHRISTMAS,)),
    (263, (HALLOWEEN,)),
    (264, (SWIMSUIT,)),
    (265, (CHRISTMAS,)),
    (266, (CHRISTMAS,)),
    (267, (DECISIVE_BATTLE, CHRISTMAS)),
    (268, (HALLOWEEN,)),
    (270, (SWIMSUIT,)),
    (271, (VALENTINE,)),
    (276, (VALENTINE,)),
    # Two event pages whose events nobody has identified yet.
    (288, (UNKNOWN, UNKNOWN)),
    (289, (DECISIVE_BATTLE, PACIFIC_SAURY)),
    (292, (SUNDAY_BEST,)),
    (303, (CHRISTMAS,)),
    (304, (CHRISTMAS,)),
    (362, (SWIMSUIT,)),
    (374, (SWIMSUIT,)),
    (391, (_single(False),)),
    (396, (SWIMSUIT,)),
    (414, (HALLOWEEN,)),
    (561, (SWIMSUIT,)),
)


def build_card_page_source_table() -> CardPageSourceTable:
    """Return the hand-maintained table of confirmed page histories."""

    table = CardPageSourceTable.from_pairs(_KNOWN_BOOK_PAGES)
    log.debug(f"Loaded card page sources for {len(table)} book entries")
    return table
