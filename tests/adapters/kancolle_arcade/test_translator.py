"""Tests for Kancolle Arcade payload validation and translation."""

from __future__ import annotations

import json
from datetime import UTC, date, datetime

import pytest
from pydantic import ValidationError

from kancolle_a.adapters.kancolle_arcade import (
    read_blueprints,
    read_marriage_list,
    read_picture_book,
    read_roster,
)
from kancolle_a.adapters.kancolle_arcade.schema import (
    BlueprintExpirationPayload,
    BookShipPayload,
    LoginResponse,
)
from kancolle_a.domain.model import CardPage, EquipmentSlot


def test_read_picture_book(book_ship_payload: dict[str, object]) -> None:
    (entry,) = read_picture_book(json.dumps([book_ship_payload]))

    assert entry.book_no == 1
    assert entry.ship_name == "長門"
    assert entry.ship_class == "長門型"
    assert entry.pages[0] == CardPage(
        priority=0,
        card_images=("", "s/tc_1_2.jpg", ""),
        status_images=("i/i_d7ju63kolamj_n.png",),
        variation_num=3,
        acquire_num=1,
    )
    assert entry.pages[1].status_images is None
    assert (entry.variation_num, entry.acquire_num, entry.level) == (6, 1, 42)
    assert entry.is_married == (False,)
    assert entry.married_images == ()


def test_unacquired_book_entry_has_no_class(book_ship_payload: dict[str, object]) -> None:
    payload = {
        **book_ship_payload,
        "shipName": "未取得",
        "shipClass": None,
        "shipClassIndex": None,
        "acquireNum": 0,
    }
    del payload["isMarried"]
    del payload["marriedImg"]

    model = BookShipPayload.model_validate(payload)
    (entry,) = read_picture_book(json.dumps([payload]))

    assert not model.is_acquired
    assert entry.ship_class is None
    assert entry.is_married is None
    assert entry.married_images is None


def test_read_roster(character_payload: dict[str, object]) -> None:
    (entry,) = read_roster(json.dumps([character_payload]).encode())

    assert entry.ship_name == "長門"
    assert entry.remodel_level == 0
    assert entry.star_num == 3
    assert entry.card_image == "s/tc_1_d7ju63kolamj.jpg"
    assert entry.slots == (
        EquipmentSlot(
            name="41cm連装砲", amount=0, display="NONE", image="equip_1_3.png", extension=False
        ),
        EquipmentSlot(name="", amount=0, display="NONE", image="", extension=False),
    )


def test_read_roster_rejects_missing_fields(character_payload: dict[str, object]) -> None:
    del character_payload["remodelLv"]

    with pytest.raises(ValidationError):
        read_roster(json.dumps([character_payload]))


def test_read_blueprints(blueprint_payload: dict[str, object]) -> None:
    (entry,) = read_blueprints(json.dumps([blueprint_payload]))

    assert entry.ship_name == "長門"
    assert entry.blueprint_total_num == 2
    assert entry.exists_warning_for_expiration
    (expiration,) = entry.expirations
    assert expiration.expiration_date == datetime(2024, 9, 30, 15, tzinfo=UTC)
    assert expiration.blueprint_num == 2


def test_blueprint_expiration_accepts_iso_dates() -> None:
    expiration = BlueprintExpirationPayload.model_validate(
        {
            "expirationDate": "2024-09-30T15:00:00Z",
            "blueprintNum": 1,
            "expireThisMonth": False,
        }
    )

    assert expiration.expiration_date == datetime(2024, 9, 30, 15, tzinfo=UTC)


def test_read_marriage_list(kanmusu_payload: dict[str, object]) -> None:
    (entry,) = read_marriage_list(json.dumps([kanmusu_payload]))

    assert entry.name == "長門"
    assert entry.start_date == date(2017, 6, 29)
    assert entry.name_reading == "ながと"


def test_read_empty_documents() -> None:
    assert read_picture_book("[]") == []
    assert read_roster("[]") == []
    assert read_blueprints("[]") == []
    assert read_marriage_list("[]") == []


def test_login_response_code_defaults_to_empty() -> None:
    assert LoginResponse.model_validate({"login": True}).login_code == ""
    assert LoginResponse.model_validate({"login": False, "loginCode": "E001"}).login_code == "E001"
