"""Translate Kancolle Arcade payloads into domain source records."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, TypeVar

from kancolle_a.domain.model.records import (
    BlueprintEntry,
    BlueprintExpiration,
    CardPage,
    EquipmentSlot,
    MarriageListEntry,
    PictureBookEntry,
    RosterEntry,
)

from .schema import (
    BlueprintListAdapter,
    BlueprintShipPayload,
    BookShipPayload,
    CharacterListAdapter,
    CharacterPayload,
    KanmusuListAdapter,
    KanmusuPayload,
    TcBookAdapter,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

log = getLogger(__name__)

T = TypeVar("T")


def _optional_tuple(values: Iterable[T] | None) -> tuple[T, ...] | None:
    return None if values is None else tuple(values)


def parse_picture_book_entry(payload: BookShipPayload) -> PictureBookEntry:
    return PictureBookEntry(
        book_no=payload.book_no,
        ship_name=payload.ship_name,
        ship_type=payload.ship_type,
        ship_class=payload.ship_class,
        ship_class_index=payload.ship_class_index,
        ship_model_num=payload.ship_model_num,
        card_index_image=payload.card_index_img,
        pages=tuple(
            CardPage(
                priority=page.priority,
                card_images=tuple(page.card_img_list),
                status_images=_optional_tuple(page.status_img),
                variation_num=page.variation_num_in_page,
                acquire_num=page.acquire_num_in_page,
            )
            for page in payload.card_list
        ),
        variation_num=payload.variation_num,
        acquire_num=payload.acquire_num,
        level=payload.lv,
        is_married=_optional_tuple(payload.is_married),
        married_images=_optional_tuple(payload.married_img),
    )


def _parse_slots(payload: CharacterPayload) -> tuple[EquipmentSlot, ...]:
    columns = (
        payload.slot_equip_name,
        payload.slot_amount,
        payload.slot_disp,
        payload.slot_img,
        payload.slot_extension,
    )
    if any(len(column) != payload.slot_num for column in columns):
        log.debug(f"Slot columns of {payload.ship_name} disagree with slotNum={payload.slot_num}")
    return tuple(
        EquipmentSlot(name=name, amount=amount, display=display, image=image, extension=extension)
        for name, amount, display, image, extension in zip(*columns, strict=False)
    )


def parse_roster_entry(payload: CharacterPayload) -> RosterEntry:
    return RosterEntry(
        book_no=payload.book_no,
        ship_name=payload.ship_name,
        ship_type=payload.ship_type,
        remodel_level=payload.remodel_lv,
        level=payload.lv,
        star_num=payload.star_num,
        married=payload.married,
        ship_class=payload.ship_class,
        ship_class_index=payload.ship_class_index,
        ship_sort_no=payload.ship_sort_no,
        status_image=payload.status_img,
        card_image=payload.tc_img,
        exp_percent=payload.exp_percent,
        max_hp=payload.max_hp,
        real_hp=payload.real_hp,
        damage_status=payload.damage_status,
        slots=_parse_slots(payload),
        blueprint_total_num=payload.blueprint_total_num,
        disp_sort_no=payload.disp_sort_no,
        ship_model_num=payload.ship_model_num,
    )


def parse_blueprint_entry(payload: BlueprintShipPayload) -> BlueprintEntry:
    return BlueprintEntry(
        ship_name=payload.ship_name,
        ship_type=payload.ship_type,
        blueprint_total_num=payload.blueprint_total_num,
        ship_class_id=payload.ship_class_id,
        ship_class_index=payload.ship_class_index,
        ship_sort_no=payload.ship_sort_no,
        status_image=payload.status_img,
        exists_warning_for_expiration=payload.exists_warning_for_expiration,
        expirations=tuple(
            BlueprintExpiration(
                expiration_date=expiration.expiration_date,
                blueprint_num=expiration.blueprint_num,
                expire_this_month=expiration.expire_this_month,
            )
            for expiration in payload.expiration_date_list
        ),
    )


def parse_marriage_list_entry(payload: KanmusuPayload) -> MarriageListEntry:
    return MarriageListEntry(
        id=payload.id,
        name=payload.name,
        start_date=payload.start_time,
        web_id=payload.web_id,
        name_reading=payload.name_reading,
        kind=payload.kind,
        category=payload.category,
    )


def read_picture_book(raw: str | bytes) -> list[PictureBookEntry]:
    """Decode a ``TcBook/info`` JSON document."""

    return [parse_picture_book_entry(payload) for payload in TcBookAdapter.validate_json(raw)]


def read_roster(raw: str | bytes) -> list[RosterEntry]:
    """Decode a ``CharacterList/info`` JSON document."""

    return [parse_roster_entry(payload) for payload in CharacterListAdapter.validate_json(raw)]


def read_blueprints(raw: str | bytes) -> list[BlueprintEntry]:
    """Decode a ``BlueprintList/info`` JSON document."""

    return [parse_blueprint_entry(payload) for payload in BlueprintListAdapter.validate_json(raw)]


def read_marriage_list(raw: str | bytes) -> list[MarriageListEntry]:
    """Decode the public ``kanmusu_list.json`` document."""

    return [
        parse_marriage_list_entry(payload) for payload in KanmusuListAdapter.validate_json(raw)
    ]
