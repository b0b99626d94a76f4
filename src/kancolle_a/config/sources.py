"""Locations of exported source files on disk."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from .env import optional_env_path

if TYPE_CHECKING:
    from pathlib import Path

TCBOOK_ENV_VAR = "KCA_TCBOOK"
CHARACTER_LIST_ENV_VAR = "KCA_CHARACTER_LIST"
BLUEPRINT_LIST_ENV_VAR = "KCA_BLUEPRINT_LIST"
KANMUSU_LIST_ENV_VAR = "KCA_KANMUSU_LIST"
WIKI_KANSEN_ENV_VAR = "KCA_WIKI_KANSEN"
WIKI_KAIZOU_KANSEN_ENV_VAR = "KCA_WIKI_KAIZOU_KANSEN"


@dataclass(frozen=True, slots=True, kw_only=True)
class SourceFilesConfig:
    """One optional file per source; ``None`` leaves that source out."""

    tcbook: Path | None = None
    character_list: Path | None = None
    blueprint_list: Path | None = None
    kanmusu_list: Path | None = None
    wiki_kansen: Path | None = None
    wiki_kaizou_kansen: Path | None = None

    @classmethod
    def from_environment(cls) -> SourceFilesConfig:
        return cls(
            tcbook=optional_env_path(TCBOOK_ENV_VAR),
            character_list=optional_env_path(CHARACTER_LIST_ENV_VAR),
            blueprint_list=optional_env_path(BLUEPRINT_LIST_ENV_VAR),
            kanmusu_list=optional_env_path(KANMUSU_LIST_ENV_VAR),
            wiki_kansen=optional_env_path(WIKI_KANSEN_ENV_VAR),
            wiki_kaizou_kansen=optional_env_path(WIKI_KAIZOU_KANSEN_ENV_VAR),
        )

    def overridden(self, **paths: Path | None) -> SourceFilesConfig:
        """Return a copy where every non-``None`` path in ``paths`` wins."""

        return replace(self, **{name: path for name, path in paths.items() if path is not None})

    @property
    def is_empty(self) -> bool:
        return all(
            path is None
            for path in (
                self.tcbook,
                self.character_list,
                self.blueprint_list,
                self.kanmusu_list,
                self.wiki_kansen,
                self.wiki_kaizou_kansen,
            )
        )


def get_source_files_config() -> SourceFilesConfig:
    return SourceFilesConfig.from_environment()
