"""Settlements and the number of facilities each can build at once."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SettlementType(Enum):
    """Size class of a settlement."""

    VILLAGE = 0
    CITY = 1
    METROPOLIS = 2


_CONSTRUCTION_LIMITS = {
    SettlementType.VILLAGE: 1,
    SettlementType.CITY: 2,
    SettlementType.METROPOLIS: 3,
}


@dataclass
class Settlement:
    """A named settlement of a given type."""

    name: str
    type: SettlementType

    def limit(self) -> int:
        """How many facilities may be under construction at the same time."""
        return _CONSTRUCTION_LIMITS[self.type]

    def type_name(self) -> str:
        """The type's upper-case name, such as ``VILLAGE``."""
        return self.type.name

    def __str__(self) -> str:
        return f"{self.name} {self.type.value}"