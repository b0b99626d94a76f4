"""Pydantic models describing the Kancolle Arcade player-site payloads."""

from __future__ import annotations

from datetime import UTC, date, datetime

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

KANMUSU_LIST_DATE_FORMAT = "%Y/%m/%d"

# Placeholder name of picture-book entries that have never been acquired.
UNACQUIRED_SHIP_NAME = "未取得"


class KancolleArcadeBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# TcBook/info


class CardPagePayload(KancolleArcadeBaseModel):
    priority: int
    card_img_list: list[str] = Field(alias="cardImgList")
    status_img: list[str] | None = Field(default=None, alias="statusImg")
    variation_num_in_page: int = Field(alias="variationNumInPage")
    acquire_num_in_page: int = Field(alias="acquireNumInPage")


class BookShipPayload(KancolleArcadeBaseModel):
    book_no: int = Field(alias="bookNo")
    ship_class: str | None = Field(default=None, alias="shipClass")
    ship_class_index: int | None = Field(default=None, alias="shipClassIndex")
    ship_type: str = Field(alias="shipType")
    ship_model_num: str = Field(alias="shipModelNum")
    ship_name: str = Field(alias="shipName")
    card_index_img: str = Field(alias="cardIndexImg")
    card_list: list[CardPagePayload] = Field(alias="cardList")
    variation_num: int = Field(alias="variationNum")
    acquire_num: int = Field(alias="acquireNum")
    lv: int
    is_married: list[bool] | None = Field(default=None, alias="isMarried")
    married_img: list[str] | None = Field(default=None, alias="marriedImg")

    @property
    def is_acquired(self) -> bool:
        return self.acquire_num > 0


# CharacterList/info


class DevelopEquipmentPayload(KancolleArcadeBaseModel):
    plan_kind: int = Field(alias="planKind")
    sort_index: int = Field(alias="sortIndex")
    require_lv: int = Field(alias="requireLv")
    require_strategy_point: int = Field(alias="requireStrategyPoint")
    require_material_medal: int = Field(alias="requireMaterialMedal")
    develop_count: int = Field(alias="developCount")
    max_develop_count: int = Field(alias="maxDevelopCount")
    develop_equip_img: str = Field(alias="developEquipImg")


class CharacterPayload(KancolleArcadeBaseModel):
    book_no: int = Field(alias="bookNo")
    lv: int
    ship_type: str = Field(alias="shipType")
    ship_sort_no: int = Field(alias="shipSortNo")
    remodel_lv: int = Field(alias="remodelLv")
    ship_name: str = Field(alias="shipName")
    status_img: str = Field(alias="statusImg")
    star_num: int = Field(alias="starNum")
    ship_class: str | None = Field(default=None, alias="shipClass")
    ship_class_index: int | None = Field(default=None, alias="shipClassIndex")
    tc_img: str = Field(alias="tcImg")
    exp_percent: int = Field(alias="expPercent")
    max_hp: int = Field(alias="maxHp")
    real_hp: int = Field(alias="realHp")
    damage_status: str = Field(alias="damageStatus")
    slot_num: int = Field(alias="slotNum")
    slot_equip_name: list[str] = Field(alias="slotEquipName")
    slot_amount: list[int] = Field(alias="slotAmount")
    slot_disp: list[str] = Field(alias="slotDisp")
    slot_img: list[str] = Field(alias="slotImg")
    slot_extension: list[bool] = Field(alias="slotExtension")
    blueprint_total_num: int = Field(alias="blueprintTotalNum")
    married: bool
    disp_sort_no: int = Field(alias="dispSortNo")
    develop_equipment_list: list[DevelopEquipmentPayload] = Field(
        default_factory=list[DevelopEquipmentPayload], alias="developEquipmentList"
    )
    ship_model_num: str = Field(alias="shipModelNum")


# BlueprintList/info


class BlueprintExpirationPayload(KancolleArcadeBaseModel):
    expiration_date: datetime = Field(alias="expirationDate")
    blueprint_num: int = Field(alias="blueprintNum")
    expire_this_month: bool = Field(alias="expireThisMonth")

    @field_validator("expiration_date", mode="before")
    @classmethod
    def _parse_epoch_millis(cls, value: object) -> object:
        if isinstance(value, int | float) and not isinstance(value, bool):
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        return value


class BlueprintShipPayload(KancolleArcadeBaseModel):
    ship_class_id: int = Field(alias="shipClassId")
    ship_class_index: int = Field(alias="shipClassIndex")
    ship_sort_no: int = Field(alias="shipSortNo")
    ship_type: str = Field(alias="shipType")
    ship_name: str = Field(alias="shipName")
    status_img: str = Field(alias="statusImg")
    blueprint_total_num: int = Field(alias="blueprintTotalNum")
    exists_warning_for_expiration: bool = Field(alias="existsWarningForExpiration")
    expiration_date_list: list[BlueprintExpirationPayload] = Field(alias="expirationDateList")


# kanmusu_list.json (public marriage list; snake_case keys)


class KanmusuPayload(KancolleArcadeBaseModel):
    id: int
    web_id: int
    name: str
    name_reading: str
    kind: str
    category: str
    start_time: date

    @field_validator("start_time", mode="before")
    @classmethod
    def _parse_slashed_date(cls, value: object) -> object:
        if isinstance(value, str):
            return datetime.strptime(value, KANMUSU_LIST_DATE_FORMAT).date()  # noqa: DTZ007
        return value


# Auth/login


class LoginResponse(KancolleArcadeBaseModel):
    login: bool
    login_code: str = Field(default="", alias="loginCode")


TcBookAdapter = TypeAdapter(list[BookShipPayload])
CharacterListAdapter = TypeAdapter(list[CharacterPayload])
BlueprintListAdapter = TypeAdapter(list[BlueprintShipPayload])
KanmusuListAdapter = TypeAdapter(list[KanmusuPayload])
