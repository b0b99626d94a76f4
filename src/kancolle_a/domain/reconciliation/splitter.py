"""Split dual-row picture-book entries into one entry per upgrade stage.

A dual-row entry's page 0 has six card slots: normal/holo/damaged for the base
ship followed by the same three for its first upgrade. Every other page is
either shared the same way (and halved) or is original artwork belonging to
only one of the two stages.
"""

from __future__ import annotations

from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING, Final

from kancolle_a.domain.model.enums import CardPageSourceKind
from kancolle_a.domain.model.records import CardPage

from .card_sources import EventPageSource, OriginalIllustrationDouble, OriginalIllustrationSingle
from .errors import PictureBookShapeError
from .naming import STAGE_MARKER

if TYPE_CHECKING:
    from kancolle_a.domain.model.records import PictureBookEntry

    from .card_sources import CardPageSourceTable

log = getLogger(__name__)

SINGLE_ROW_SLOTS: Final[int] = 3
DUAL_ROW_SLOTS: Final[int] = 6

# Base ships sharing a dual-row entry whose base stage never had swimsuit art.
_SWIMSUIT_SECOND_STAGE_ONLY: Final[frozenset[str]] = frozenset({"雪風"})


def split_picture_book_entry(
    entry: PictureBookEntry,
    table: CardPageSourceTable,
) -> tuple[PictureBookEntry, PictureBookEntry | None]:
    """Return ``(base stage, first upgrade or None)`` for ``entry``.

    Single-row entries (and entries without pages) come back unchanged. The
    ``variation_num`` of the two halves always sums to the input's.
    """

    if not entry.pages or entry.pages[0].variation_num == SINGLE_ROW_SLOTS:
        return entry, None
    if entry.pages[0].variation_num != DUAL_ROW_SLOTS:
        raise PictureBookShapeError(
            entry.book_no,
            f"page 0 has {entry.pages[0].variation_num} variations, expected 3 or 6",
            priority=0,
        )

    base = _build_stage(entry, table, second_stage=False)
    upgraded = _build_stage(entry, table, second_stage=True)
    log.debug(
        f"Split book {entry.book_no} into {base.ship_name} ({base.acquire_num} owned) "
        f"and {upgraded.ship_name} ({upgraded.acquire_num} owned)"
    )
    return base, upgraded


def _build_stage(
    entry: PictureBookEntry,
    table: CardPageSourceTable,
    *,
    second_stage: bool,
) -> PictureBookEntry:
    pages: list[CardPage] = []
    populated_pages = 0
    normal_status: tuple[str, ...] | None = None

    for page in entry.pages:
        source = table.source_of(entry, page.priority)
        match source:
            case EventPageSource(kind=CardPageSourceKind.SWIMSUIT) if (
                entry.ship_name in _SWIMSUIT_SECOND_STAGE_ONLY
            ):
                if second_stage:
                    pages.append(page)
                    populated_pages += 1
                else:
                    pages.append(_emptied(page, status_images=None))
            case OriginalIllustrationSingle(second_stage=owner) | OriginalIllustrationDouble(
                first_second_stage=owner, is_mixed=False
            ):
                status = _require_normal_status(entry, page, normal_status)
                if owner == second_stage:
                    pages.append(replace(page, status_images=status))
                else:
                    pages.append(_emptied(page, status_images=status))
            case OriginalIllustrationDouble():
                status = _require_normal_status(entry, page, normal_status)
                pages.append(_pick_illustration_slot(entry, page, source, second_stage, status))
            case _:
                halved = _halve(entry, page, second_stage=second_stage)
                if source.kind is CardPageSourceKind.NORMAL:
                    if halved.status_images is None:
                        raise PictureBookShapeError(
                            entry.book_no,
                            "normal page has no status images",
                            priority=page.priority,
                        )
                    normal_status = halved.status_images
                elif halved.status_images == ():
                    halved = replace(halved, status_images=None)
                pages.append(halved)
                populated_pages += 1

    variation_num = sum(page.variation_num for page in pages)
    acquire_num = sum(page.acquire_num for page in pages)
    is_married, married_images = _split_marriage(
        entry, acquire_num=acquire_num, populated_pages=populated_pages, second_stage=second_stage
    )

    return replace(
        entry,
        ship_name=entry.ship_name + STAGE_MARKER if second_stage else entry.ship_name,
        pages=tuple(pages),
        variation_num=variation_num,
        acquire_num=acquire_num,
        is_married=is_married,
        married_images=married_images,
    )


def _owned_count(card_images: tuple[str, ...]) -> int:
    return sum(1 for image in card_images if image)


def _emptied(page: CardPage, *, status_images: tuple[str, ...] | None) -> CardPage:
    # The page stays so page indices keep matching the classifier table.
    return CardPage(
        priority=page.priority,
        card_images=(),
        status_images=status_images,
        variation_num=0,
        acquire_num=0,
    )


def _require_normal_status(
    entry: PictureBookEntry,
    page: CardPage,
    normal_status: tuple[str, ...] | None,
) -> tuple[str, ...]:
    if normal_status is None:
        raise PictureBookShapeError(
            entry.book_no,
            "original illustration page precedes the normal page status images",
            priority=page.priority,
        )
    return normal_status


def _pick_illustration_slot(
    entry: PictureBookEntry,
    page: CardPage,
    source: OriginalIllustrationDouble,
    second_stage: bool,
    status: tuple[str, ...],
) -> CardPage:
    if len(page.card_images) != 2 or page.variation_num != 2:
        raise PictureBookShapeError(
            entry.book_no,
            f"double illustration page has {len(page.card_images)} slots, expected 2",
            priority=page.priority,
        )
    index = 0 if source.first_second_stage == second_stage else 1
    card_images = (page.card_images[index],)
    return CardPage(
        priority=page.priority,
        card_images=card_images,
        status_images=status,
        variation_num=1,
        acquire_num=_owned_count(card_images),
    )


def _halve(entry: PictureBookEntry, page: CardPage, *, second_stage: bool) -> CardPage:
    if len(page.card_images) != DUAL_ROW_SLOTS or page.variation_num != DUAL_ROW_SLOTS:
        raise PictureBookShapeError(
            entry.book_no,
            f"shared page has {len(page.card_images)} slots, expected {DUAL_ROW_SLOTS}",
            priority=page.priority,
        )
    card_images = (
        page.card_images[SINGLE_ROW_SLOTS:] if second_stage else page.card_images[:SINGLE_ROW_SLOTS]
    )
    acquire_num = _owned_count(card_images)

    status = page.status_images
    if status is not None:
        if acquire_num == 0:
            status = ()
        elif not second_stage:
            status = status[:1]
        elif len(status) == 2:
            status = status[1:]

    return CardPage(
        priority=page.priority,
        card_images=card_images,
        status_images=status,
        variation_num=SINGLE_ROW_SLOTS,
        acquire_num=acquire_num,
    )


def _split_marriage(
    entry: PictureBookEntry,
    *,
    acquire_num: int,
    populated_pages: int,
    second_stage: bool,
) -> tuple[tuple[bool, ...] | None, tuple[str, ...] | None]:
    if entry.is_married is None:
        return None, entry.married_images
    if entry.married_images is None:
        raise PictureBookShapeError(entry.book_no, "married flags without married images")

    flags = entry.is_married
    flag = bool(flags) and (flags[-1] if second_stage else flags[0])
    married = acquire_num > 0 and flag

    images = entry.married_images
    if not married:
        images = ()
    elif len(images) == 2:
        # The base stage's marriage art is listed second.
        images = images[:1] if second_stage else images[1:]
    return (married,) * populated_pages, images
