"""The simulation: settlements, facility options, plans and the command loop."""

from __future__ import annotations

import copy as _copy
import sys
from collections.abc import Iterable, Sequence

from .actions import (
    AddFacility,
    AddPlan,
    AddSettlement,
    BackupSimulation,
    BaseAction,
    ChangePlanPolicy,
    Close,
    PrintActionsLog,
    PrintPlanStatus,
    RestoreSimulation,
    SimulateStep,
)
from .auxiliary import parse_arguments
from .facility import FacilityCategory, FacilityType
from .plan import Plan
from .selection_policy import SelectionPolicy, policy_from_name
from .settlement import Settlement, SettlementType

_SETTLEMENT_TYPES = {str(kind.value): kind for kind in SettlementType}
_FACILITY_CATEGORIES = {str(category.value): category for category in FacilityCategory}


def _settlement_type(code: str) -> SettlementType:
    try:
        return _SETTLEMENT_TYPES[code]
    except KeyError:
        raise ValueError(f"Unknown settlement type: {code}") from None


def _facility_category(code: str) -> FacilityCategory:
    try:
        return _FACILITY_CATEGORIES[code]
    except KeyError:
        raise ValueError(f"Unknown facility category: {code}") from None


class Simulation:
    """Holds the world state and runs commands against it."""

    def __init__(self) -> None:
        self.is_running = False
        self.plan_counter = 0
        self.actions_log: list[BaseAction] = []
        self.plans: list[Plan] = []
        self.settlements: list[Settlement] = []
        self.facilities_options: list[FacilityType] = []
        self.backup: Simulation | None = None

    @classmethod
    def from_config(cls, path: str) -> Simulation:
        """Build a simulation from a configuration file; raise OSError if unreadable."""
        simulation = cls()
        with open(path, encoding="utf-8") as config_file:
            simulation.load_config(config_file)
        return simulation

    def load_config(self, lines: Iterable[str]) -> None:
        """Read settlement, facility and plan lines; skip blank and ``#`` lines."""
        for line in lines:
            arguments = parse_arguments(line)
            if not arguments or arguments[0] == "#":
                continue
            keyword = arguments[0]
            if keyword == "settlement":
                self.add_settlement(
                    Settlement(arguments[1], _settlement_type(arguments[2]))
                )
            elif keyword == "facility":
                self.add_facility(
                    FacilityType(
                        arguments[1],
                        _facility_category(arguments[2]),
                        int(arguments[3]),
                        int(arguments[4]),
                        int(arguments[5]),
                        int(arguments[6]),
                    )
                )
            elif keyword == "plan":
                policy = policy_from_name(arguments[2])
                self.add_plan(self.get_settlement(arguments[1]), policy)

    def add_plan(self, settlement: Settlement, selection_policy: SelectionPolicy) -> Plan:
        """Create a plan with the next free id and return it."""
        plan = Plan(self.plan_counter, settlement, selection_policy, self.facilities_options)
        self.plan_counter += 1
        self.plans.append(plan)
        return plan

    def add_action(self, action: BaseAction) -> None:
        """Record an action in the log."""
        self.actions_log.append(action)

    def add_settlement(self, settlement: Settlement) -> bool:
        """Add a settlement unless one of that name exists; report whether it was added."""
        if self.has_settlement(settlement.name):
            return False
        self.settlements.append(settlement)
        return True

    def add_facility(self, facility: FacilityType) -> bool:
        """Add a facility option unless one of that name exists."""
        if self.has_facility(facility.name):
            return False
        self.facilities_options.append(facility)
        return True

    def has_settlement(self, name: str) -> bool:
        return any(settlement.name == name for settlement in self.settlements)

    def has_facility(self, name: str) -> bool:
        return any(facility.name == name for facility in self.facilities_options)

    def has_plan(self, plan_id: int) -> bool:
        return 0 <= plan_id < len(self.plans)

    def get_settlement(self, name: str) -> Settlement:
        """The settlement of that name; raise ValueError if there is none."""
        for settlement in self.settlements:
            if settlement.name == name:
                return settlement
        raise ValueError(f"Settlement {name} doesn't exist")

    def get_plan(self, plan_id: int) -> Plan:
        """The plan with that id; raise ValueError if there is none."""
        if self.has_plan(plan_id):
            return self.plans[plan_id]
        raise ValueError(f"Plan {plan_id} doesn't exist")

    def step(self) -> None:
        """Advance every plan by one step."""
        for plan in self.plans:
            plan.step()

    def open(self) -> None:
        self.is_running = True

    def close(self) -> None:
        self.is_running = False

    def _copy_state_from(self, other: Simulation) -> None:
        self.is_running = other.is_running
        self.plan_counter = other.plan_counter
        self.actions_log = [action.clone() for action in other.actions_log]
        self.settlements = [
            Settlement(settlement.name, settlement.type) for settlement in other.settlements
        ]
        self.facilities_options = [_copy.copy(option) for option in other.facilities_options]
        self.plans = [
            plan.copy(self.get_settlement(plan.settlement_name), self.facilities_options)
            for plan in other.plans
        ]

    def copy(self) -> Simulation:
        """An independent copy of the state; the backup is not carried over."""
        duplicate = Simulation()
        duplicate._copy_state_from(self)
        return duplicate

    def restore_from(self, other: Simulation) -> None:
        """Replace this state with a copy of ``other``'s, keeping the current backup."""
        if other is not self:
            self._copy_state_from(other)

    def execute(self, line: str) -> BaseAction | None:
        """Run one command line; return the action run, or None if there was none."""
        words = parse_arguments(line)
        if not words:
            return None
        command, count = words[0], len(words)
        action: BaseAction
        if command == "step" and count == 2:
            action = SimulateStep(int(words[1]))
        elif command == "plan" and count == 3:
            action = AddPlan(words[1], words[2])
        elif command == "settlement" and count == 3:
            action = AddSettlement(words[1], _settlement_type(words[2]))
        elif command == "facility" and count == 7:
            action = AddFacility(
                words[1],
                _facility_category(words[2]),
                int(words[3]),
                int(words[4]),
                int(words[5]),
                int(words[6]),
            )
        elif command == "planStatus" and count == 2:
            action = PrintPlanStatus(int(words[1]))
        elif command == "changePolicy" and count == 3:
            action = ChangePlanPolicy(int(words[1]), words[2])
        elif command == "log" and count == 1:
            action = PrintActionsLog()
        elif command == "close" and count == 1:
            self.close()
            action = Close()
        elif command == "backup" and count == 1:
            action = BackupSimulation()
        elif command == "restore" and count == 1:
            action = RestoreSimulation()
        else:
            print("unknown command")
            return None
        action.act(self)
        return action

    def start(self, lines: Iterable[str] | None = None) -> None:
        """Read and run commands until ``close`` or the input runs out."""
        print("The simulation has started")
        self.open()
        source = iter(sys.stdin if lines is None else lines)
        while self.is_running:
            print("enter next command")
            try:
                line = next(source)
            except StopIteration:
                break
            self.execute(line)

    def __str__(self) -> str:
        out = [
            "Simulation Status:",
            "===================",
            f"Running: {'Yes' if self.is_running else 'No'}",
            f"Plan Counter: {self.plan_counter}",
            "",
            "Actions Log:",
            "------------",
        ]
        if self.actions_log:
            out += [
                f"Action {number}: {action}"
                for number, action in enumerate(self.actions_log, start=1)
            ]
        else:
            out.append("No actions logged.")
        out += ["", "Plans:", "------"]
        if self.plans:
            out += [f"{plan}" for plan in self.plans]
        else:
            out.append("No plans available.")
        out += ["", "Settlements:", "------------"]
        if self.settlements:
            out += [str(settlement) for settlement in self.settlements]
        else:
            out.append("No settlements available.")
        out += ["", "Facility Options:", "-----------------"]
        if self.facilities_options:
            out += [facility.name for facility in self.facilities_options]
        else:
            out.append("No facilities available.")
        return "\n".join(out) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from a configuration file and standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("usage: simulation <config_path>")
        return 0
    config_path = args[0]
    try:
        simulation = Simulation.from_config(config_path)
    except OSError:
        print(f"Unable to open configuration file: {config_path}", file=sys.stderr)
        return 1
    simulation.start()
    return 0


if __name__ == "__main__":
    sys.exit(main())