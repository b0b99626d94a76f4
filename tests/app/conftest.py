from __future__ import annotations

from pathlib import Path

import pytest

from kancolle_a.config.kancolle_arcade import (
    JSESSIONID_ENV_VAR,
    PASSWORD_ENV_VAR,
    USERNAME_ENV_VAR,
)
from kancolle_a.config.sources import (
    BLUEPRINT_LIST_ENV_VAR,
    CHARACTER_LIST_ENV_VAR,
    KANMUSU_LIST_ENV_VAR,
    TCBOOK_ENV_VAR,
    WIKI_KAIZOU_KANSEN_ENV_VAR,
    WIKI_KANSEN_ENV_VAR,
)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # The CLI loads .env from the working directory.
    monkeypatch.chdir(tmp_path)
    for name in (
        TCBOOK_ENV_VAR,
        CHARACTER_LIST_ENV_VAR,
        BLUEPRINT_LIST_ENV_VAR,
        KANMUSU_LIST_ENV_VAR,
        WIKI_KANSEN_ENV_VAR,
        WIKI_KAIZOU_KANSEN_ENV_VAR,
        JSESSIONID_ENV_VAR,
        USERNAME_ENV_VAR,
        PASSWORD_ENV_VAR,
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def character_list_json() -> str:
    return """[
  {"bookNo": 1, "lv": 99, "shipType": "戦艦", "shipSortNo": 1, "remodelLv": 0,
   "shipName": "長門", "statusImg": "", "starNum": 5, "shipClass": "長門型",
   "shipClassIndex": 1, "tcImg": "", "expPercent": 0, "maxHp": 80, "realHp": 80,
   "damageStatus": "NORMAL", "slotNum": 0, "slotEquipName": [], "slotAmount": [],
   "slotDisp": [], "slotImg": [], "slotExtension": [], "blueprintTotalNum": 4,
   "married": false, "dispSortNo": 1, "shipModelNum": ""},
  {"bookNo": 30, "lv": 12, "shipType": "駆逐艦", "shipSortNo": 2, "remodelLv": 1,
   "shipName": "時雨改", "statusImg": "", "starNum": 2, "shipClass": "白露型",
   "shipClassIndex": 2, "tcImg": "", "expPercent": 0, "maxHp": 30, "realHp": 30,
   "damageStatus": "NORMAL", "slotNum": 0, "slotEquipName": [], "slotAmount": [],
   "slotDisp": [], "slotImg": [], "slotExtension": [], "blueprintTotalNum": 0,
   "married": false, "dispSortNo": 2, "shipModelNum": ""}
]"""


@pytest.fixture
def blueprint_list_json() -> str:
    return """[
  {"shipClassId": 1, "shipClassIndex": 1, "shipSortNo": 1, "shipType": "戦艦",
   "shipName": "長門", "statusImg": "", "blueprintTotalNum": 4,
   "existsWarningForExpiration": false, "expirationDateList": []}
]"""


@pytest.fixture
def wiki_kansen_text() -> str:
    return "\n".join(
        [
            "|~No.|~レア|~艦名|~艦型|~艦番|~艦種|~耐久|~火力|~装甲|~雷装|~回避|~対空|~搭載|~対潜"
            "|~速力|~索敵|~射程|~運|~備考|h",
            "|1|6|[[長門]]|長門型|1番艦|戦艦|80|82|75|0|24|31|12|0|低|12|長|20|長門改|",
        ]
    )
