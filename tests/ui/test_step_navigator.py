# -*- coding: utf-8 -*-
"""
Tests for StepNavigator (step re-resolution, guards and validation).
"""
import pytest

from models.financials import FinancialFigures
from models.project_setup import (
    ContractClassification, ContractType, ProjectSetup, ProjectType, VillaCategory
)
from models.step_data import ContractData
from services.translation_manager import tr
from ui.wizards.framework import StepNavigator
from ui.wizards.project import ProjectWizardContext


def _villa(classification=ContractClassification.HOUSING_LOAN_PROGRAM):
    return ProjectSetup(
        project_type=ProjectType.VILLA,
        villa_category=VillaCategory.RESIDENTIAL,
        contract_type=ContractType.NEW,
        internal_code="M13",
        contract_classification=classification,
    )


@pytest.fixture
def navigator(qapp):
    return StepNavigator(ProjectWizardContext(setup=_villa()))


def _ids(navigator):
    return [step.id for step in navigator.steps]


class TestStepList:

    def test_initial_steps(self, navigator):
        assert _ids(navigator) == ["setup", "siteplan", "license", "contract", "award"]
        assert navigator.get_current_step().id == "setup"
        assert navigator.can_go_next()
        assert not navigator.can_go_previous()

    def test_set_setup_re_resolves(self, navigator):
        changes = []
        navigator.steps_changed.connect(changes.append)

        navigator.set_setup(_villa(ContractClassification.PRIVATE_FUNDING))

        assert _ids(navigator) == ["setup", "siteplan", "license", "contract"]
        assert [[s.id for s in steps] for steps in changes] == [
            ["setup", "siteplan", "license", "contract"]
        ]

    def test_same_steps_do_not_emit(self, navigator):
        changes = []
        navigator.steps_changed.connect(changes.append)
        navigator.set_setup(_villa().with_changes(internal_code="M15"))
        assert changes == []
        assert navigator.context.setup.internal_code == "M15"

    def test_index_is_clamped_when_steps_disappear(self, navigator, qtbot):
        assert navigator.goto_step(4)
        with qtbot.waitSignal(navigator.step_changed, timeout=1000) as blocker:
            navigator.set_setup(_villa(ContractClassification.PRIVATE_FUNDING))
        assert blocker.args == [4, 3]
        assert navigator.get_current_step().id == "contract"
        assert navigator.context.current_step_index == 3

    def test_switching_to_continue_contract_returns_to_setup(self, navigator):
        navigator.goto_step(2)
        navigator.set_setup(_villa().with_changes(contract_type="continue"))
        assert _ids(navigator) == ["setup"]
        assert navigator.current_index == 0
        assert not navigator.can_go_next()

    def test_setup_is_not_mutated(self, navigator):
        setup = _villa()
        before = setup.to_dict()
        navigator.set_setup(setup)
        navigator.set_setup(setup)
        assert setup.to_dict() == before


class TestNavigation:

    def test_next_validates_current_step(self, navigator, qtbot):
        navigator.context.set_setup(_villa().with_changes(internal_code=""))
        with qtbot.waitSignal(navigator.validation_failed, timeout=1000) as blocker:
            assert navigator.next_step() is False
        assert blocker.args == [tr("errors.internal_code_required")]
        assert navigator.current_index == 0

    def test_next_marks_step_completed(self, navigator):
        assert navigator.next_step()
        assert navigator.current_index == 1
        assert navigator.context.is_step_completed(0)

    def test_skip_validation(self, navigator):
        navigator.context.set_setup(_villa().with_changes(internal_code="M2"))
        assert navigator.next_step(skip_validation=True)

    def test_contract_step_validation(self, navigator):
        navigator.goto_step(3, skip_validation=True)
        navigator.context.contract = ContractData(
            classification=ContractClassification.HOUSING_LOAN_PROGRAM,
            figures=FinancialFigures(0, 0, 0),
        )
        failures = []
        navigator.validation_failed.connect(failures.append)
        assert navigator.next_step() is False
        assert failures == [tr("errors.total_project_value_required")]

    def test_single_step_list_keeps_cursor_on_setup(self, qapp):
        setup = ProjectSetup(project_type=ProjectType.VILLA, contract_type=ContractType.NEW,
                             internal_code="M1")
        navigator = StepNavigator(ProjectWizardContext(setup=setup))

        assert navigator.goto_step(0)
        assert navigator.goto_step(3)
        assert not navigator.goto_step(-1)
        assert navigator.current_index == 0

    def test_index_past_the_end_is_clamped(self, qapp, qtbot):
        navigator = StepNavigator(ProjectWizardContext(
            setup=_villa(ContractClassification.PRIVATE_FUNDING)
        ))

        with qtbot.waitSignal(navigator.step_changed, timeout=1000) as blocker:
            assert navigator.goto_step(4, skip_validation=True)
        assert blocker.args == [0, 3]
        assert navigator.get_current_step().id == "contract"
        assert navigator.goto_step(99, skip_validation=True)
        assert navigator.current_index == 3

    def test_goto_missing_step_id_is_clamped(self, qapp):
        navigator = StepNavigator(ProjectWizardContext(
            setup=_villa(ContractClassification.PRIVATE_FUNDING)
        ))

        assert navigator.goto_step_id("award")
        assert navigator.get_current_step().id == "contract"

    def test_goto_step_locked_by_can_enter(self, navigator):
        failures = []
        navigator.validation_failed.connect(failures.append)
        navigator.context.setup.villa_category = None

        assert not navigator.goto_step(2, skip_validation=True)
        assert failures == [tr("nav.step_locked")]

    def test_backward_navigation_skips_validation(self, navigator):
        navigator.goto_step(2, skip_validation=True)
        navigator.context.set_setup(_villa().with_changes(internal_code=""))
        assert navigator.goto_step(1)
        assert navigator.previous_step()
        assert not navigator.previous_step()

    def test_leave_guard_runs_after_validation(self, navigator):
        seen = []

        def guard(step_id):
            seen.append(step_id)
            return False, "taken"

        navigator.leave_guard = guard
        failures = []
        navigator.validation_failed.connect(failures.append)

        assert not navigator.next_step()
        assert seen == ["setup"]
        assert failures == ["taken"]

    def test_goto_step_id(self, navigator):
        assert navigator.goto_step_id("contract")
        assert navigator.get_current_step().id == "contract"
        assert not navigator.goto_step_id("unknown")

    def test_last_step(self, navigator):
        navigator.goto_step(4, skip_validation=True)
        assert not navigator.next_step()
        assert navigator.get_progress_percentage() == 100.0

    def test_reset(self, navigator):
        navigator.goto_step(2, skip_validation=True)
        navigator.reset()
        assert navigator.current_index == 0
        assert navigator.get_progress_percentage() == 0.0
