"""Commands that act on a simulation and are recorded in its actions log."""

from __future__ import annotations

import copy as _copy
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from .facility import FacilityCategory, FacilityType
from .selection_policy import is_policy_name, policy_from_name
from .settlement import Settlement, SettlementType


class ActionStatus(Enum):
    """Outcome of an action."""

    COMPLETED = 0
    ERROR = 1


class BaseAction(ABC):
    """A command run against a simulation.

    Failures are reported on standard output and recorded in ``status`` and
    ``error_msg``; they are part of the simulation's normal flow, not
    exceptions.
    """

    def __init__(self) -> None:
        self.status = ActionStatus.COMPLETED
        self.error_msg = ""

    @property
    def status_name(self) -> str:
        """The status as shown in the actions log."""
        return self.status.name

    def _complete(self) -> None:
        self.status = ActionStatus.COMPLETED

    def _error(self, message: str) -> None:
        self.status = ActionStatus.ERROR
        self.error_msg = message
        print(f"ERROR: {message}")

    @abstractmethod
    def act(self, simulation: Any) -> None:
        """Carry out the action on ``simulation``."""

    def clone(self) -> BaseAction:
        """An independent copy of the action, including its outcome."""
        return _copy.copy(self)

    @abstractmethod
    def _describe(self) -> str:
        """The command as written, without the status."""

    def __str__(self) -> str:
        return f"{self._describe()} {self.status_name}"


class SimulateStep(BaseAction):
    """Advance every plan by a number of steps."""

    def __init__(self, num_of_steps: int) -> None:
        super().__init__()
        self.num_of_steps = num_of_steps

    def act(self, simulation: Any) -> None:
        for _ in range(self.num_of_steps):
            simulation.step()
        self._complete()
        simulation.add_action(self.clone())

    def _describe(self) -> str:
        return f"step {self.num_of_steps}"


class AddPlan(BaseAction):
    """Create a plan for an existing settlement with a named policy."""

    def __init__(self, settlement_name: str, selection_policy: str) -> None:
        super().__init__()
        self.settlement_name = settlement_name
        self.selection_policy = selection_policy

    def act(self, simulation: Any) -> None:
        if simulation.has_settlement(self.settlement_name) and is_policy_name(
            self.selection_policy
        ):
            settlement = simulation.get_settlement(self.settlement_name)
            simulation.add_plan(settlement, policy_from_name(self.selection_policy))
            self._complete()
        else:
            self._error("Cannot create this plan")
        simulation.add_action(self.clone())

    def _describe(self) -> str:
        return f"plan {self.settlement_name} {self.selection_policy}"


class AddSettlement(BaseAction):
    """Add a new settlement."""

    def __init__(self, settlement_name: str, settlement_type: SettlementType) -> None:
        super().__init__()
        self.settlement_name = settlement_name
        self.settlement_type = settlement_type

    def act(self, simulation: Any) -> None:
        if simulation.has_settlement(self.settlement_name):
            self._error("Settlment already exsists")
        else:
            simulation.add_settlement(Settlement(self.settlement_name, self.settlement_type))
            self._complete()
        simulation.add_action(self.clone())

    def _describe(self) -> str:
        return f"settlement {self.settlement_name} {self.settlement_type.value}"


class AddFacility(BaseAction):
    """Add a new facility type to the options plans choose from."""

    def __init__(
        self,
        facility_name: str,
        facility_category: FacilityCategory,
        price: int,
        life_quality_score: int,
        economy_score: int,
        environment_score: int,
    ) -> None:
        super().__init__()
        self.facility_name = facility_name
        self.facility_category = facility_category
        self.price = price
        self.life_quality_score = life_quality_score
        self.economy_score = economy_score
        self.environment_score = environment_score

    def act(self, simulation: Any) -> None:
        if simulation.has_facility(self.facility_name):
            self._error("Facility already exsists")
        else:
            simulation.add_facility(
                FacilityType(
                    self.facility_name,
                    self.facility_category,
                    self.price,
                    self.life_quality_score,
                    self.economy_score,
                    self.environment_score,
                )
            )
            self._complete()
        simulation.add_action(self.clone())

    def _describe(self) -> str:
        return (
            f"facility {self.facility_name}{self.facility_category.value} {self.price} "
            f"{self.life_quality_score} {self.economy_score} {self.environment_score}"
        )


class PrintPlanStatus(BaseAction):
    """Print the full status of one plan."""

    def __init__(self, plan_id: int) -> None:
        super().__init__()
        self.plan_id = plan_id

    def act(self, simulation: Any) -> None:
        if simulation.has_plan(self.plan_id):
            print(simulation.get_plan(self.plan_id).status_report())
            self._complete()
        else:
            self._error("Plan doesn't exist")
        simulation.add_action(self.clone())

    def _describe(self) -> str:
        return f"planStatus {self.plan_id}"


class ChangePlanPolicy(BaseAction):
    """Give a plan a different selection policy."""

    def __init__(self, plan_id: int, new_policy: str) -> None:
        super().__init__()
        self.plan_id = plan_id
        self.new_policy = new_policy

    def act(self, simulation: Any) -> None:
        if is_policy_name(self.new_policy) and simulation.has_plan(self.plan_id):
            plan = simulation.get_plan(self.plan_id)
            if str(plan.selection_policy) == self.new_policy:
                self._error("Cannot change selection policy")
            else:
                plan.selection_policy = policy_from_name(self.new_policy)
                self._complete()
        else:
            self._error("Cannot change selection policy")
        simulation.add_action(self.clone())

    def _describe(self) -> str:
        return f"changePolicy {self.plan_id} {self.new_policy}"


class PrintActionsLog(BaseAction):
    """Print every action recorded so far."""

    def act(self, simulation: Any) -> None:
        for action in simulation.actions_log:
            print(action)
        self._complete()
        simulation.add_action(self.clone())

    def _describe(self) -> str:
        return "log"


class Close(BaseAction):
    """Print a summary of every plan and stop the simulation."""

    def act(self, simulation: Any) -> None:
        for plan in simulation.plans:
            print(plan.close_summary())
        simulation.close()
        self._complete()

    def _describe(self) -> str:
        return "close"


class BackupSimulation(BaseAction):
    """Keep a copy of the simulation's current state."""

    def act(self, simulation: Any) -> None:
        simulation.backup = simulation.copy()
        self._complete()
        simulation.add_action(self.clone())

    def _describe(self) -> str:
        return "backup"


class RestoreSimulation(BaseAction):
    """Return the simulation to the state kept by the last backup."""

    def act(self, simulation: Any) -> None:
        if simulation.backup is None:
            self._error("No backup available")
            return
        simulation.restore_from(simulation.backup)
        self._complete()
        simulation.add_action(self.clone())

    def _describe(self) -> str:
        return "restore"