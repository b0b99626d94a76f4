"""Logging setup shared by every entry point."""

from __future__ import annotations

import logging

from .env import optional_env_var

LOG_LEVEL_ENV_VAR = "KCA_LOG_LEVEL"


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with a terse CLI format.

    ``level`` defaults to ``KCA_LOG_LEVEL`` (a level name such as ``DEBUG``) and
    then to INFO. Pass ``force=True`` to reconfigure during tests.
    """

    if level is None:
        level_name = (optional_env_var(LOG_LEVEL_ENV_VAR) or "INFO").upper()
        level = logging.getLevelNamesMapping().get(level_name, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
