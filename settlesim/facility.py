"""Facility types that may be built and facilities being built in a settlement."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, field
from enum import Enum


class FacilityStatus(Enum):
    """Construction state of a facility."""

    UNDER_CONSTRUCTIONS = 0
    OPERATIONAL = 1


class FacilityCategory(Enum):
    """What a facility mainly contributes to."""

    LIFE_QUALITY = 0
    ECONOMY = 1
    ENVIRONMENT = 2


@dataclass
class FacilityType:
    """A kind of facility: its cost and the scores it adds once operational."""

    name: str
    category: FacilityCategory
    price: int
    life_quality_score: int
    economy_score: int
    environment_score: int


@dataclass
class Facility(FacilityType):
    """A facility built for a settlement; it takes ``price`` steps to finish."""

    settlement_name: str = ""
    status: FacilityStatus = field(default=FacilityStatus.UNDER_CONSTRUCTIONS, init=False)
    time_left: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.time_left = self.price

    @classmethod
    def from_type(cls, facility_type: FacilityType, settlement_name: str) -> Facility:
        """Start building a facility of the given type for a settlement."""
        return cls(
            name=facility_type.name,
            category=facility_type.category,
            price=facility_type.price,
            life_quality_score=facility_type.life_quality_score,
            economy_score=facility_type.economy_score,
            environment_score=facility_type.environment_score,
            settlement_name=settlement_name,
        )

    def step(self) -> FacilityStatus:
        """Advance construction by one step and return the resulting status."""
        if self.time_left < 0:
            raise ValueError("Facility is in negative price")
        self.time_left -= 1
        if self.time_left == 0:
            self.status = FacilityStatus.OPERATIONAL
        return self.status

    def copy(self) -> Facility:
        """An independent copy, including construction progress."""
        return _copy.copy(self)

    def __str__(self) -> str:
        return (
            f"{self.name} {self.category.value} {self.price}"
            f"{self.life_quality_score}{self.economy_score}{self.environment_score}"
        )