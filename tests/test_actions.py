import copy

import pytest

from settlesim.actions import (
    ActionStatus,
    AddFacility,
    AddPlan,
    AddSettlement,
    BackupSimulation,
    ChangePlanPolicy,
    Close,
    PrintActionsLog,
    PrintPlanStatus,
    RestoreSimulation,
    SimulateStep,
)
from settlesim.facility import FacilityCategory, FacilityType
from settlesim.plan import Plan
from settlesim.selection_policy import NaiveSelection
from settlesim.settlement import Settlement, SettlementType


class FakeSimulation:
    """Minimal simulation state for exercising actions."""

    def __init__(self):
        self.running = True
        self.settlements = []
        self.facility_options = []
        self.plans = []
        self.actions_log = []
        self.backup = None

    def add_plan(self, settlement, selection_policy):
        self.plans.append(
            Plan(len(self.plans), settlement, selection_policy, self.facility_options)
        )

    def add_action(self, action):
        self.actions_log.append(action)

    def add_settlement(self, settlement):
        if self.has_settlement(settlement.name):
            return False
        self.settlements.append(settlement)
        return True

    def add_facility(self, facility):
        if self.has_facility(facility.name):
            return False
        self.facility_options.append(facility)
        return True

    def has_settlement(self, name):
        return any(s.name == name for s in self.settlements)

    def has_facility(self, name):
        return any(f.name == name for f in self.facility_options)

    def has_plan(self, plan_id):
        return 0 <= plan_id < len(self.plans)

    def get_settlement(self, name):
        return next(s for s in self.settlements if s.name == name)

    def get_plan(self, plan_id):
        return self.plans[plan_id]

    def step(self):
        for plan in self.plans:
            plan.step()

    def close(self):
        self.running = False

    def copy(self):
        state = {k: v for k, v in self.__dict__.items() if k != "backup"}
        duplicate = FakeSimulation()
        duplicate.__dict__.update(copy.deepcopy(state))
        return duplicate

    def restore_from(self, other):
        state = {k: v for k, v in other.__dict__.items() if k != "backup"}
        self.__dict__.update(copy.deepcopy(state))


@pytest.fixture
def sim():
    simulation = FakeSimulation()
    simulation.add_settlement(Settlement("Town", SettlementType.VILLAGE))
    simulation.add_facility(FacilityType("park", FacilityCategory.ENVIRONMENT, 2, 1, 0, 4))
    simulation.add_facility(FacilityType("bank", FacilityCategory.ECONOMY, 1, 0, 5, 0))
    simulation.add_plan(simulation.settlements[0], NaiveSelection())
    return simulation


def test_simulate_step_builds_and_logs(sim):
    action = SimulateStep(2)
    action.act(sim)
    plan = sim.plans[0]
    assert [f.name for f in plan.facilities] == ["park"]
    assert plan.environment_score == 4
    assert [str(a) for a in sim.actions_log] == ["step 2 COMPLETED"]
    assert sim.actions_log[0] is not action and sim.actions_log[0].num_of_steps == 2


def test_add_plan_success(sim):
    action = AddPlan("Town", "eco")
    action.act(sim)
    assert action.status is ActionStatus.COMPLETED
    assert len(sim.plans) == 2
    assert str(sim.plans[1].selection_policy) == "eco"
    assert str(sim.actions_log[-1]) == "plan Town eco COMPLETED"


@pytest.mark.parametrize("settlement, policy", [("Nowhere", "eco"), ("Town", "xyz")])
def test_add_plan_errors(sim, capsys, settlement, policy):
    action = AddPlan(settlement, policy)
    action.act(sim)
    assert action.status is ActionStatus.ERROR
    assert action.error_msg == "Cannot create this plan"
    assert capsys.readouterr().out == "ERROR: Cannot create this plan\n"
    assert len(sim.plans) == 1
    assert str(sim.actions_log[-1]) == f"plan {settlement} {policy} ERROR"


def test_add_settlement_success_and_duplicate(sim, capsys):
    AddSettlement("Harbor", SettlementType.CITY).act(sim)
    assert sim.get_settlement("Harbor").type is SettlementType.CITY
    duplicate = AddSettlement("Harbor", SettlementType.METROPOLIS)
    duplicate.act(sim)
    assert duplicate.status is ActionStatus.ERROR
    assert capsys.readouterr().out == "ERROR: Settlment already exsists\n"
    assert [str(a) for a in sim.actions_log] == [
        "settlement Harbor 1 COMPLETED",
        "settlement Harbor 2 ERROR",
    ]
    assert sim.get_settlement("Harbor").type is SettlementType.CITY


def test_add_facility_success_and_duplicate(sim, capsys):
    AddFacility("school", FacilityCategory.LIFE_QUALITY, 3, 1, 2, 3).act(sim)
    added = sim.facility_options[-1]
    assert added == FacilityType("school", FacilityCategory.LIFE_QUALITY, 3, 1, 2, 3)
    duplicate = AddFacility("park", FacilityCategory.ECONOMY, 1, 1, 1, 1)
    duplicate.act(sim)
    assert duplicate.status is ActionStatus.ERROR
    assert capsys.readouterr().out == "ERROR: Facility already exsists\n"
    assert str(sim.actions_log[0]) == "facility school0 3 1 2 3 COMPLETED"
    assert str(sim.actions_log[1]) == "facility park1 1 1 1 1 ERROR"


def test_print_plan_status(sim, capsys):
    PrintPlanStatus(0).act(sim)
    out = capsys.readouterr().out
    assert out == sim.plans[0].status_report() + "\n"
    assert str(sim.actions_log[-1]) == "planStatus 0 COMPLETED"


def test_print_plan_status_missing(sim, capsys):
    action = PrintPlanStatus(7)
    action.act(sim)
    assert capsys.readouterr().out == "ERROR: Plan doesn't exist\n"
    assert str(sim.actions_log[-1]) == "planStatus 7 ERROR"


def test_change_policy_success(sim):
    action = ChangePlanPolicy(0, "bal")
    action.act(sim)
    assert action.status is ActionStatus.COMPLETED
    assert str(sim.plans[0].selection_policy) == "bal"
    assert str(sim.actions_log[-1]) == "changePolicy 0 bal COMPLETED"


@pytest.mark.parametrize("plan_id, policy", [(0, "nve"), (5, "eco"), (0, "abc")])
def test_change_policy_errors(sim, capsys, plan_id, policy):
    action = ChangePlanPolicy(plan_id, policy)
    action.act(sim)
    assert action.status is ActionStatus.ERROR
    assert capsys.readouterr().out == "ERROR: Cannot change selection policy\n"
    assert str(sim.plans[0].selection_policy) == "nve"


def test_print_actions_log(sim, capsys):
    SimulateStep(1).act(sim)
    PrintActionsLog().act(sim)
    assert capsys.readouterr().out == "step 1 COMPLETED\n"
    assert [str(a) for a in sim.actions_log] == ["step 1 COMPLETED", "log COMPLETED"]


def test_close_prints_summaries_and_stops(sim, capsys):
    action = Close()
    action.act(sim)
    assert capsys.readouterr().out == sim.plans[0].close_summary() + "\n"
    assert sim.running is False
    assert sim.actions_log == []
    assert str(action) == "close COMPLETED"


def test_backup_and_restore(sim):
    BackupSimulation().act(sim)
    assert [str(a) for a in sim.backup.actions_log] == []
    AddSettlement("Harbor", SettlementType.CITY).act(sim)
    SimulateStep(1).act(sim)
    RestoreSimulation().act(sim)
    assert [s.name for s in sim.settlements] == ["Town"]
    assert sim.plans[0].under_construction == []
    assert [str(a) for a in sim.actions_log] == ["restore COMPLETED"]
    assert sim.backup is not None and sim.backup.settlements[0].name == "Town"


def test_restore_without_backup(sim, capsys):
    action = RestoreSimulation()
    action.act(sim)
    assert action.status is ActionStatus.ERROR
    assert capsys.readouterr().out == "ERROR: No backup available\n"
    assert sim.actions_log == []


def test_clone_is_independent():
    action = AddPlan("Town", "eco")
    twin = action.clone()
    twin.status = ActionStatus.ERROR
    assert action.status is ActionStatus.COMPLETED
    assert str(twin) == "plan Town eco ERROR"
    assert str(action) == "plan Town eco COMPLETED"