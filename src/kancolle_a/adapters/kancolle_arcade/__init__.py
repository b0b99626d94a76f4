"""Public interface for the Kancolle Arcade player-site adapter."""

from __future__ import annotations

from .client import (
    KANMUSU_LIST_URL,
    ApiEndpoint,
    KancolleArcadeAuthError,
    KancolleArcadeClient,
    build_http_kancolle_arcade_client,
)
from .translator import (
    parse_blueprint_entry,
    parse_marriage_list_entry,
    parse_picture_book_entry,
    parse_roster_entry,
    read_blueprints,
    read_marriage_list,
    read_picture_book,
    read_roster,
)

__all__ = [
    "KANMUSU_LIST_URL",
    "ApiEndpoint",
    "KancolleArcadeAuthError",
    "KancolleArcadeClient",
    "build_http_kancolle_arcade_client",
    "parse_blueprint_entry",
    "parse_marriage_list_entry",
    "parse_picture_book_entry",
    "parse_roster_entry",
    "read_blueprints",
    "read_marriage_list",
    "read_picture_book",
    "read_roster",
]
