"""Kancolle Arcade player-site configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import optional_env_var, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig

KANCOLLE_ARCADE_API_BASE_URL = "https://kancolle-arcade.net/ac/api/"
KANCOLLE_ARCADE_TIMEOUT_SECONDS = 20.0

JSESSIONID_ENV_VAR = "KCA_JSESSIONID"
USERNAME_ENV_VAR = "KCA_USERNAME"
PASSWORD_ENV_VAR = "KCA_PASSWORD"


def default_resilience_config() -> ResilienceConfig:
    return ResilienceConfig(
        name="kancolle_arcade",
        base_url=KANCOLLE_ARCADE_API_BASE_URL,
        timeout_seconds=KANCOLLE_ARCADE_TIMEOUT_SECONDS,
        ratelimit=RateLimit(max_calls=2, per_seconds=1.0),
        default_headers={"X-Requested-With": "XMLHttpRequest"},
    )


@dataclass(frozen=True)
class KancolleArcadeConfig:
    """Credentials for the player site: a session cookie, a login, or both."""

    jsessionid: str | None = None
    username: str | None = None
    password: str | None = field(default=None, repr=False)
    resilience: ResilienceConfig = field(default_factory=default_resilience_config)

    @property
    def can_login(self) -> bool:
        return self.username is not None and self.password is not None


def get_kancolle_arcade_config(
    *,
    resilience: ResilienceConfig | None = None,
) -> KancolleArcadeConfig:
    """Load credentials from ``KCA_JSESSIONID`` or ``KCA_USERNAME``/``KCA_PASSWORD``."""

    jsessionid = optional_env_var(JSESSIONID_ENV_VAR)
    if jsessionid is None:
        values = require_env_vars((USERNAME_ENV_VAR, PASSWORD_ENV_VAR))
        username, password = values[USERNAME_ENV_VAR], values[PASSWORD_ENV_VAR]
    else:
        # A login is optional when we already hold a session.
        username = optional_env_var(USERNAME_ENV_VAR)
        password = optional_env_var(PASSWORD_ENV_VAR)

    return KancolleArcadeConfig(
        jsessionid=jsessionid,
        username=username,
        password=password,
        resilience=resilience or default_resilience_config(),
    )
