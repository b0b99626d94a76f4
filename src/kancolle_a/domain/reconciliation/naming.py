"""Map a ship's display name to its base identity and upgrade stage.

Most ships gain a ``改`` suffix per upgrade (``時雨``, ``時雨改``, ``時雨改二``).
A handful are renamed instead, which the override tables below cover.
"""

from __future__ import annotations

from typing import Final

from .errors import UnrecognizedStageSuffixError

STAGE_MARKER: Final[str] = "改"

# Ships renamed on upgrade, or with non-改 variants.
_RENAMED_BASES: Final[dict[str, str]] = {
    "龍鳳": "大鯨",
    "Верный": "響",
    "Italia": "Littorio",
    "千代田甲": "千代田",
    "千代田航": "千代田",
    "千歳甲": "千歳",
    "千歳航": "千歳",
    "呂500": "U-511",
    # Not seen in collection data yet.
    "Октябрьская революция": "Гангут",
    "Гангут два": "Гангут",
    "大鷹": "春日丸",
}

_RENAMED_STAGE_OFFSETS: Final[dict[str, int]] = {
    "龍鳳": 1,
    "Верный": 2,
    "Italia": 1,
    "千代田甲": 2,
    "千歳甲": 2,
    "千代田航": 3,
    "千歳航": 3,
    "呂500": 2,
    # Not seen in collection data yet.
    "Октябрьская революция": 1,
    "Гангут два": 2,
    "大鷹": 1,
}

_SUFFIX_STAGES: Final[dict[str, int]] = {
    "": 0,
    "改": 1,
    "改二": 2,
    "改三": 3,
    "改二甲": 3,
    "改二丁": 3,
    "改二乙": 3,
    "改二特": 3,
    "改二丙": 3,
}


def _split_stage_suffix(name: str) -> tuple[str, str]:
    prefix, marker, rest = name.partition(STAGE_MARKER)
    return prefix, marker + rest


def base_identity(name: str) -> str:
    """Return the unmodified (blueprint) ship name for ``name``.

    Total over all strings: names without a stage suffix are returned as-is
    unless they are a known renamed stage.
    """

    prefix, _suffix = _split_stage_suffix(name)
    return _RENAMED_BASES.get(prefix, prefix)


def upgrade_stage_guess(name: str) -> int:
    """Guess the upgrade stage of ``name`` from its suffix.

    Raises ``UnrecognizedStageSuffixError`` for a suffix we have no mapping for;
    defaulting to 0 would break stage ordering later on.
    """

    prefix, suffix = _split_stage_suffix(name)
    try:
        suffix_stage = _SUFFIX_STAGES[suffix]
    except KeyError:
        raise UnrecognizedStageSuffixError(name, suffix) from None
    return _RENAMED_STAGE_OFFSETS.get(prefix, 0) + suffix_stage
