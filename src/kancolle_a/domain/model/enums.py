"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class SourceKind(StrEnum):
    """The independent exports a ship record can come from."""

    PICTURE_BOOK = "picture_book"
    ROSTER = "roster"
    MARRIAGE_LIST = "marriage_list"
    WIKI = "wiki"
    BLUEPRINT = "blueprint"


class CardPageSourceKind(StrEnum):
    """Historical event category that produced a picture-book page."""

    UNKNOWN = "Unknown"
    NORMAL = "Normal"

    # Limited-time drop events
    DECISIVE_BATTLE = "DecisiveBattle"
    SWIMSUIT = "Swimsuit"
    CHRISTMAS = "Christmas"
    HALLOWEEN = "Halloween"
    VALENTINE = "Valentine"
    PACIFIC_SAURY = "PacificSaury"
    FISHING = "Fishing"
    SUNDAY_BEST = "SundayBest"
    RAINY_SEASON = "RainySeason"
    YUKATA = "Yukata"

    # Bonus artwork belonging to one upgrade stage
    ORIGINAL_ILLUSTRATION_SINGLE = "OriginalIllustrationSingle"
    ORIGINAL_ILLUSTRATION_DOUBLE = "OriginalIllustrationDouble"
