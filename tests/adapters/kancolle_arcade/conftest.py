from __future__ import annotations

import pytest


@pytest.fixture
def book_ship_payload() -> dict[str, object]:
    return {
        "bookNo": 1,
        "shipClass": "長門型",
        "shipClassIndex": 1,
        "shipType": "戦艦",
        "shipModelNum": "",
        "shipName": "長門",
        "cardIndexImg": "s/tc_1_d7ju63kolamj.jpg",
        "cardList": [
            {
                "priority": 0,
                "cardImgList": ["", "s/tc_1_2.jpg", ""],
                "statusImg": ["i/i_d7ju63kolamj_n.png"],
                "variationNumInPage": 3,
                "acquireNumInPage": 1,
            },
            {
                "priority": 1,
                "cardImgList": ["", "", ""],
                "variationNumInPage": 3,
                "acquireNumInPage": 0,
            },
        ],
        "variationNum": 6,
        "acquireNum": 1,
        "lv": 42,
        "isMarried": [False],
        "marriedImg": [],
    }


@pytest.fixture
def character_payload() -> dict[str, object]:
    return {
        "bookNo": 1,
        "lv": 42,
        "shipType": "戦艦",
        "shipSortNo": 1800,
        "remodelLv": 0,
        "shipName": "長門",
        "statusImg": "i/i_d7ju63kolamj_n.png",
        "starNum": 3,
        "shipClass": "長門型",
        "shipClassIndex": 1,
        "tcImg": "s/tc_1_d7ju63kolamj.jpg",
        "expPercent": 17,
        "maxHp": 80,
        "realHp": 80,
        "damageStatus": "NORMAL",
        "slotNum": 2,
        "slotEquipName": ["41cm連装砲", ""],
        "slotAmount": [0, 0],
        "slotDisp": ["NONE", "NONE"],
        "slotImg": ["equip_1_3.png", ""],
        "slotExtension": [False, False],
        "blueprintTotalNum": 2,
        "married": False,
        "dispSortNo": 100,
        "shipModelNum": "",
        "developEquipmentList": [],
    }


@pytest.fixture
def blueprint_payload() -> dict[str, object]:
    return {
        "shipClassId": 1,
        "shipClassIndex": 1,
        "shipSortNo": 1800,
        "shipType": "戦艦",
        "shipName": "長門",
        "statusImg": "i/i_d7ju63kolamj_n.png",
        "blueprintTotalNum": 2,
        "existsWarningForExpiration": True,
        "expirationDateList": [
            {"expirationDate": 1727708400000, "blueprintNum": 2, "expireThisMonth": True}
        ],
    }


@pytest.fixture
def kanmusu_payload() -> dict[str, object]:
    return {
        "id": 1,
        "web_id": 1,
        "name": "長門",
        "name_reading": "ながと",
        "kind": "戦艦",
        "category": "戦艦",
        "start_time": "2017/06/29",
    }
