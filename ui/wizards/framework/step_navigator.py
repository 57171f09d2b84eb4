# -*- coding: utf-8 -*-
"""
Step Navigator - Manages navigation between wizard steps.

Handles:
- Re-resolving the step list when the setup changes
- Entry guards and step validation before navigation
- Progress tracking
"""

from typing import Callable, List, Optional, Tuple

from PyQt5.QtCore import QObject, pyqtSignal

from models.project_setup import ProjectSetup
from services.translation_manager import tr
from services.wizard.step_graph import STEP_INDEX, StepGraphResolver, WizardStep
from services.wizard.step_validator import StepValidator
from utils.logger import get_logger

logger = get_logger(__name__)

# step id -> (is_valid, message); runs after StepValidator when leaving a step forward
LeaveGuard = Callable[[str], Tuple[bool, str]]


class StepNavigator(QObject):
    """
    Manages navigation between wizard steps.

    Responsibilities:
    - Track current step
    - Keep the step list in sync with the setup
    - Validate before navigation
    - Emit signals for UI updates
    """

    # Signals
    steps_changed = pyqtSignal(list)  # List[WizardStep]
    step_changed = pyqtSignal(int, int)  # old_index, new_index
    can_go_next_changed = pyqtSignal(bool)
    can_go_previous_changed = pyqtSignal(bool)
    validation_failed = pyqtSignal(str)

    def __init__(self, context, leave_guard: Optional[LeaveGuard] = None):
        """
        Args:
            context: ProjectWizardContext
            leave_guard: Extra check when moving forward (e.g. internal code uniqueness)
        """
        super().__init__()
        self.context = context
        self.leave_guard = leave_guard
        self.steps: List[WizardStep] = StepGraphResolver.resolve_steps(context.setup)
        self.current_index = StepGraphResolver.clamp_index(context.current_step_index, self.steps)
        self.context.current_step_index = self.current_index

    def get_current_step(self) -> Optional[WizardStep]:
        if 0 <= self.current_index < len(self.steps):
            return self.steps[self.current_index]
        return None

    def get_step_count(self) -> int:
        return len(self.steps)

    def can_go_next(self) -> bool:
        return (
            self.current_index < len(self.steps) - 1
            and StepGraphResolver.can_enter(self.current_index + 1, self.context.setup)
        )

    def can_go_previous(self) -> bool:
        return self.current_index > 0

    # =========================================================================
    # Setup changes
    # =========================================================================

    def set_setup(self, setup: ProjectSetup):
        """
        Store new setup selections, re-resolve the steps and clamp the
        current index into the new list.
        """
        self.context.set_setup(setup)
        steps = StepGraphResolver.resolve_steps(setup)
        if steps != self.steps:
            logger.info(f"Steps re-resolved: {[s.id for s in steps]}")
            self.steps = steps
            self.steps_changed.emit(list(steps))

        clamped = StepGraphResolver.clamp_index(self.current_index, self.steps)
        if clamped != self.current_index:
            self._navigate_to(clamped)
        else:
            self._emit_navigation_state()

    # =========================================================================
    # Navigation
    # =========================================================================

    def _validate_current(self) -> bool:
        step = self.get_current_step()
        if step is None:
            return True

        is_valid, message = StepValidator.validate_step(step.id, self.context)
        if is_valid and self.leave_guard is not None:
            is_valid, message = self.leave_guard(step.id)

        if not is_valid:
            logger.warning(f"Step {step.id} validation failed: {message}")
            self.validation_failed.emit(message)
            return False
        return True

    def next_step(self, skip_validation: bool = False) -> bool:
        """
        Navigate to the next step.

        Args:
            skip_validation: If True, skip validation

        Returns:
            True if navigation was successful
        """
        if self.current_index >= len(self.steps) - 1:
            logger.debug(f"Cannot go next: already at last step ({self.current_index})")
            return False

        if not skip_validation and not self._validate_current():
            return False

        target = self.current_index + 1
        if not StepGraphResolver.can_enter(target, self.context.setup):
            self.validation_failed.emit(tr("nav.step_locked"))
            return False

        self.context.mark_step_completed(self.current_index)
        return self._navigate_to(target)

    def previous_step(self) -> bool:
        """Navigate to the previous step."""
        if not self.can_go_previous():
            logger.debug(f"Cannot go previous: already at first step ({self.current_index})")
            return False
        return self._navigate_to(self.current_index - 1)

    def goto_step(self, index: int, skip_validation: bool = False) -> bool:
        """
        Navigate to a specific step.

        An index past the end of the list lands on the last step. Refused
        when the step cannot be entered with the current setup. Going
        forward validates the current step first.
        """
        if index < 0:
            return False
        index = StepGraphResolver.clamp_index(index, self.steps)

        if index == self.current_index:
            return True

        if not StepGraphResolver.can_enter(index, self.context.setup):
            logger.debug(f"Step {index} cannot be entered with the current setup")
            self.validation_failed.emit(tr("nav.step_locked"))
            return False

        if index > self.current_index and not skip_validation:
            if not self._validate_current():
                return False

        return self._navigate_to(index)

    def _navigate_to(self, new_index: int) -> bool:
        if new_index < 0 or new_index >= len(self.steps):
            logger.error(f"Invalid step index: {new_index} (valid range: 0-{len(self.steps)-1})")
            return False

        old_index = self.current_index
        self.current_index = new_index
        self.context.current_step_index = new_index

        self.step_changed.emit(old_index, new_index)
        self._emit_navigation_state()

        logger.info(f"Navigation complete: step {self.steps[new_index].id} is now active")
        return True

    def _emit_navigation_state(self):
        self.can_go_next_changed.emit(self.can_go_next())
        self.can_go_previous_changed.emit(self.can_go_previous())

    def goto_step_id(self, step_id: str) -> bool:
        """
        Navigate to a step by id, without validation (used after saves).

        A step that is not in the current list is looked up at its usual
        position, which is then clamped.
        """
        for index, step in enumerate(self.steps):
            if step.id == step_id:
                return self.goto_step(index, skip_validation=True)
        if step_id not in STEP_INDEX:
            return False
        return self.goto_step(STEP_INDEX[step_id], skip_validation=True)

    def reset(self):
        """Reset navigator to first step."""
        self._navigate_to(0)

    def get_progress_percentage(self) -> float:
        if len(self.steps) <= 1:
            return 0.0
        return (self.current_index / (len(self.steps) - 1)) * 100.0
