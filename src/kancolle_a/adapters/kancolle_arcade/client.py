"""HTTP client for the Kancolle Arcade player site."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from kancolle_a.adapters.http_resilience import ResilientClient
from kancolle_a.config.kancolle_arcade import KancolleArcadeConfig, get_kancolle_arcade_config
from kancolle_a.domain.model.records import SourceSnapshot

from .schema import LoginResponse
from .translator import read_blueprints, read_marriage_list, read_picture_book, read_roster

if TYPE_CHECKING:
    from collections.abc import Callable

    from kancolle_a.config.http_resilience import ResilienceConfig

log = getLogger(__name__)

KANMUSU_LIST_URL = "https://kancolle-a.sega.jp/players/kekkonkakkokari/kanmusu_list.json"
# The login endpoint rejects requests without a browser user agent.
BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/129.0.0.0 Safari/537.36"
)


class ApiEndpoint(StrEnum):
    """Player-site endpoints, relative to the API base URL."""

    TC_BOOK_INFO = "TcBook/info"
    CHARACTER_LIST_INFO = "CharacterList/info"
    BLUEPRINT_LIST_INFO = "BlueprintList/info"
    AUTH_LOGIN = "Auth/login"


class KancolleArcadeAuthError(RuntimeError):
    """Raised when the player site refuses our credentials."""

    def __init__(self, message: str, *, login_code: str | None = None) -> None:
        super().__init__(message)
        self.login_code = login_code


def _default_client_factory(config: KancolleArcadeConfig) -> ResilientClient:
    cookies = {"JSESSIONID": config.jsessionid} if config.jsessionid else None
    return ResilientClient(config.resilience, cookies=cookies)


@dataclass(slots=True)
class KancolleArcadeClient:
    """Fetch raw documents from the player site.

    Every public method runs its own event loop and session; a session cookie
    obtained by logging in lasts for that call only.
    """

    config: KancolleArcadeConfig = field(default_factory=get_kancolle_arcade_config)
    client_factory: Callable[[KancolleArcadeConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def fetch(self, endpoint: ApiEndpoint) -> str:
        return asyncio.run(self._fetch_many((endpoint,)))[endpoint]

    def fetch_kanmusu_list(self) -> str:
        return asyncio.run(self._fetch_kanmusu_list())

    def fetch_snapshot(self, *, include_marriage_list: bool = True) -> SourceSnapshot:
        """Fetch and decode the player's picture book, roster and blueprints."""

        documents = asyncio.run(
            self._fetch_many(
                (
                    ApiEndpoint.TC_BOOK_INFO,
                    ApiEndpoint.CHARACTER_LIST_INFO,
                    ApiEndpoint.BLUEPRINT_LIST_INFO,
                )
            )
        )
        marriage_list = (
            read_marriage_list(self.fetch_kanmusu_list()) if include_marriage_list else None
        )
        return SourceSnapshot(
            picture_book=read_picture_book(documents[ApiEndpoint.TC_BOOK_INFO]),
            roster=read_roster(documents[ApiEndpoint.CHARACTER_LIST_INFO]),
            blueprints=read_blueprints(documents[ApiEndpoint.BLUEPRINT_LIST_INFO]),
            marriage_list=marriage_list,
        )

    async def _fetch_many(self, endpoints: tuple[ApiEndpoint, ...]) -> dict[ApiEndpoint, str]:
        documents: dict[ApiEndpoint, str] = {}
        async with self.client_factory(self.config) as client:
            for endpoint in endpoints:
                documents[endpoint] = await self._get_authenticated(client, endpoint)
        return documents

    async def _fetch_kanmusu_list(self) -> str:
        async with self.client_factory(self.config) as client:
            response = await client.get(KANMUSU_LIST_URL)
            response.raise_for_status()
            return response.text

    async def _get_authenticated(self, client: ResilientClient, endpoint: ApiEndpoint) -> str:
        response = await client.get(str(endpoint))
        if response.status_code == httpx.codes.FORBIDDEN and self.config.can_login:
            log.info(f"Session rejected for {endpoint}; logging in")
            await self._login(client)
            response = await client.get(str(endpoint))
        response.raise_for_status()
        log.debug(f"Fetched {endpoint} ({len(response.content)} bytes)")
        return response.text

    async def _login(self, client: ResilientClient) -> None:
        response = await client.post(
            str(ApiEndpoint.AUTH_LOGIN),
            json={"id": self.config.username, "password": self.config.password},
            headers={"User-Agent": BROWSER_USER_AGENT},
        )
        response.raise_for_status()
        login = LoginResponse.model_validate_json(response.content)
        if not login.login:
            log.error(f"Kancolle Arcade login failed: {login.login_code}")
            raise KancolleArcadeAuthError("Login rejected", login_code=login.login_code)


def build_http_kancolle_arcade_client(
    *,
    config: KancolleArcadeConfig | None = None,
    resilience: ResilienceConfig | None = None,
) -> KancolleArcadeClient:
    return KancolleArcadeClient(config=config or get_kancolle_arcade_config(resilience=resilience))
