"""Policies that decide which facility a plan builds next."""

from __future__ import annotations

import copy as _copy
from abc import ABC, abstractmethod
from collections.abc import Sequence

from .facility import FacilityCategory, FacilityType


class SelectionPolicy(ABC):
    """Chooses the next facility type to build from the available options."""

    name: str = ""

    @abstractmethod
    def select_facility(self, options: Sequence[FacilityType]) -> FacilityType:
        """Return the facility type to build next."""

    def clone(self) -> SelectionPolicy:
        """An independent copy of the policy and its selection state."""
        return _copy.copy(self)

    def __str__(self) -> str:
        return self.name


def _require_options(options: Sequence[FacilityType]) -> None:
    if not options:
        raise ValueError("No facility options to select from")


class NaiveSelection(SelectionPolicy):
    """Picks the options one after another, starting over at the end."""

    name = "nve"

    def __init__(self) -> None:
        self.last_index = -1

    def select_facility(self, options: Sequence[FacilityType]) -> FacilityType:
        _require_options(options)
        self.last_index = (self.last_index + 1) % len(options)
        return options[self.last_index]


class BalancedSelection(SelectionPolicy):
    """Picks the option that keeps the three scores closest together."""

    name = "bal"

    def __init__(
        self,
        life_quality_score: int = 0,
        economy_score: int = 0,
        environment_score: int = 0,
    ) -> None:
        self.life_quality_score = life_quality_score
        self.economy_score = economy_score
        self.environment_score = environment_score

    def distance(self, facility: FacilityType) -> int:
        """Spread between the highest and lowest score if ``facility`` were added."""
        scores = (
            self.life_quality_score + facility.life_quality_score,
            self.economy_score + facility.economy_score,
            self.environment_score + facility.environment_score,
        )
        return max(scores) - min(scores)

    def select_facility(self, options: Sequence[FacilityType]) -> FacilityType:
        _require_options(options)
        return min(options, key=self.distance)


class _CategorySelection(SelectionPolicy):
    """Cycles through the options of a single category."""

    category: FacilityCategory

    def __init__(self) -> None:
        self.last_index = -1

    def select_facility(self, options: Sequence[FacilityType]) -> FacilityType:
        _require_options(options)
        count = len(options)
        for offset in range(1, count + 1):
            index = (self.last_index + offset) % count
            if options[index].category is self.category:
                self.last_index = index
                return options[index]
        raise ValueError(f"No facility of category {self.category.name} to select")


class EconomySelection(_CategorySelection):
    """Cycles through economy facilities only."""

    name = "eco"
    category = FacilityCategory.ECONOMY


class SustainabilitySelection(_CategorySelection):
    """Cycles through environment facilities only."""

    name = "env"
    category = FacilityCategory.ENVIRONMENT


_POLICIES: dict[str, type[SelectionPolicy]] = {
    policy.name: policy
    for policy in (SustainabilitySelection, NaiveSelection, BalancedSelection, EconomySelection)
}


def is_policy_name(name: str) -> bool:
    """Whether ``name`` is the short name of a known policy."""
    return name in _POLICIES


def policy_from_name(name: str) -> SelectionPolicy:
    """A fresh policy for a short name such as ``eco``; raise ValueError if unknown."""
    try:
        return _POLICIES[name]()
    except KeyError:
        raise ValueError(f"Unknown selection policy: {name}") from None