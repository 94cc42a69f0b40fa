"""Development plans: a settlement building facilities under a selection policy."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from .facility import Facility, FacilityType
from .selection_policy import SelectionPolicy
from .settlement import Settlement


class PlanStatus(Enum):
    """Whether a plan has room to start building another facility."""

    AVALIABLE = 0
    BUSY = 1


class Plan:
    """A settlement's development plan and the scores it has accumulated."""

    def __init__(
        self,
        plan_id: int,
        settlement: Settlement,
        selection_policy: SelectionPolicy,
        facility_options: Sequence[FacilityType],
    ) -> None:
        self.plan_id = plan_id
        self.settlement = settlement
        self.selection_policy = selection_policy
        self.facility_options = facility_options
        self.status = PlanStatus.AVALIABLE
        self.facilities: list[Facility] = []
        self.under_construction: list[Facility] = []
        self.life_quality_score = 0
        self.economy_score = 0
        self.environment_score = 0

    @property
    def settlement_name(self) -> str:
        """Name of the settlement the plan belongs to."""
        return self.settlement.name

    def step(self) -> None:
        """Start new construction if there is room, then advance all construction."""
        limit = self.settlement.limit()
        if self.status is PlanStatus.AVALIABLE:
            while len(self.under_construction) < limit:
                chosen = self.selection_policy.select_facility(self.facility_options)
                self.under_construction.append(
                    Facility.from_type(chosen, self.settlement.name)
                )

        still_building: list[Facility] = []
        for facility in self.under_construction:
            facility.step()
            if facility.time_left == 0:
                self.life_quality_score += facility.life_quality_score
                self.economy_score += facility.economy_score
                self.environment_score += facility.environment_score
                self.facilities.append(facility)
            else:
                still_building.append(facility)
        self.under_construction = still_building

        if len(self.under_construction) == limit:
            self.status = PlanStatus.BUSY
        else:
            self.status = PlanStatus.AVALIABLE

    def add_facility(self, facility: Facility) -> None:
        """Put a facility under construction in this plan."""
        self.under_construction.append(facility)

    def copy(
        self,
        settlement: Settlement | None = None,
        facility_options: Sequence[FacilityType] | None = None,
    ) -> Plan:
        """An independent copy, optionally bound to another settlement and options list."""
        duplicate = Plan(
            self.plan_id,
            self.settlement if settlement is None else settlement,
            self.selection_policy.clone(),
            self.facility_options if facility_options is None else facility_options,
        )
        duplicate.status = self.status
        duplicate.facilities = [facility.copy() for facility in self.facilities]
        duplicate.under_construction = [
            facility.copy() for facility in self.under_construction
        ]
        duplicate.life_quality_score = self.life_quality_score
        duplicate.economy_score = self.economy_score
        duplicate.environment_score = self.environment_score
        return duplicate

    def _score_lines(self) -> list[str]:
        return [
            f"SelectionPolicy: {self.selection_policy}",
            f"LifeQualityScore: {self.life_quality_score}",
            f"EconomyScore: {self.economy_score}",
            f"EnvironmentScore: {self.environment_score}",
        ]

    def status_report(self) -> str:
        """Full description of the plan, its scores and its facilities."""
        lines = [
            f"planID: {self.plan_id}",
            f"SettlementName: {self.settlement.name}",
            f"PlanStatus: {self.status.name}",
            *self._score_lines(),
            "Facilities Under Construction:",
        ]
        for facility in self.under_construction:
            lines.append(f"  FacilityName: {facility.name}")
            lines.append(f"  FacilityStatus: {facility.status.name}")
        lines.append("Operational Facilities:")
        for facility in self.facilities:
            lines.append(f"  FacilityName: {facility.name}")
            lines.append(f"  FacilityStatus: {facility.status.name}")
        return "\n".join(lines) + "\n"

    def close_summary(self) -> str:
        """Short summary printed when the simulation closes."""
        lines = [
            f"planID: {self.plan_id} SettlementName: {self.settlement.name}",
            *self._score_lines(),
        ]
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.status_report()