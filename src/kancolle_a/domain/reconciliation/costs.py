"""Blueprint cost of purchasing an upgrade stage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from .naming import upgrade_stage_guess

if TYPE_CHECKING:
    from kancolle_a.domain.model.ships import Ship


@dataclass(frozen=True, slots=True)
class BlueprintCost:
    blueprints: int
    large_blueprints: int = 0


def _costs(*pairs: tuple[int, int]) -> tuple[BlueprintCost, ...]:
    return tuple(BlueprintCost(blueprints, large) for blueprints, large in pairs)


# Indexed by target stage - 1.
_COSTS_BY_NAME: Final[dict[str, tuple[BlueprintCost, ...]]] = {
    "千歳": _costs((3, 0), (4, 0), (5, 0), (6, 0), (8, 2)),
    "千代田": _costs((3, 0), (4, 0), (5, 0), (6, 0), (8, 2)),
    "春日丸": _costs((3, 0), (5, 0)),
}

_COSTS_BY_SHIP_TYPE: Final[dict[str, tuple[BlueprintCost, ...]]] = {
    "駆逐艦": _costs((3, 0), (6, 1), (6, 3)),
    "軽巡洋艦": _costs((3, 0), (6, 1), (6, 3)),
    "潜水艦": _costs((3, 0), (6, 1), (6, 3)),
    "戦艦": _costs((3, 0), (8, 2), (8, 4)),
    "軽空母": _costs((3, 0), (8, 2), (8, 4)),
    "正規空母": _costs((3, 0), (8, 2), (8, 4)),
    "重巡洋艦": _costs((3, 0), (8, 2), (8, 4)),
}

_DEFAULT_COSTS: Final[tuple[BlueprintCost, ...]] = _costs((3, 0))


def blueprint_cost(base_name: str, ship_type: str, stage_index: int) -> BlueprintCost | None:
    """Look up the cost table for ``base_name``/``ship_type`` at ``stage_index``.

    ``stage_index`` is the target stage minus one. Returns ``None`` past the end
    of the known table rather than extrapolating.
    """

    costs = _COSTS_BY_NAME.get(base_name) or _COSTS_BY_SHIP_TYPE.get(ship_type, _DEFAULT_COSTS)
    if not 0 <= stage_index < len(costs):
        return None
    return costs[stage_index]


def _base_name_and_type(ship: Ship) -> tuple[str, str] | None:
    if ship.blueprint is not None:
        return ship.blueprint.ship_name, ship.blueprint.ship_type

    first = ship.mods[0]
    if first.roster is not None and first.roster.remodel_level == 0:
        return first.roster.ship_name, first.roster.ship_type
    if first.picture_book is not None and upgrade_stage_guess(first.picture_book.ship_name) == 0:
        return first.picture_book.ship_name, first.picture_book.ship_type
    if first.wiki is not None and upgrade_stage_guess(first.wiki.ship_name) == 0:
        return first.wiki.ship_name, first.wiki.ship_type
    return None


def stage_cost(ship: Ship, target_stage: int) -> BlueprintCost | None:
    """Blueprints needed to upgrade ``ship`` into ``target_stage``.

    ``None`` when there is no defined cost: the base stage is never purchased,
    and stages beyond the highest one we know about are not guessed.
    """

    if target_stage <= 0 or not ship.mods:
        return None
    if ship.mods[-1].upgrade_stage < target_stage:
        return None
    identity = _base_name_and_type(ship)
    if identity is None:
        return None
    base_name, ship_type = identity
    return blueprint_cost(base_name, ship_type, target_stage - 1)
