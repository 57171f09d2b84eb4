# -*- coding: utf-8 -*-
"""
Step validation service for the project wizard.

Validates context data for each step without UI coupling.
"""

from typing import Tuple

from services.financial_service import validate_financials
from services.owner_reconciler import OwnerReconciler
from services.translation_manager import tr
from services.validation.validation_factory import ValidationFactory
from services.wizard.step_graph import (
    STEP_AWARD, STEP_CONTRACT, STEP_LICENSE, STEP_SETUP, STEP_SITEPLAN
)


class StepValidator:
    """Validates wizard step data based on context."""

    # Step constants
    STEP_SETUP = STEP_SETUP
    STEP_SITEPLAN = STEP_SITEPLAN
    STEP_LICENSE = STEP_LICENSE
    STEP_CONTRACT = STEP_CONTRACT
    STEP_AWARD = STEP_AWARD

    _factory = ValidationFactory()

    @staticmethod
    def validate_step(step_id: str, context) -> Tuple[bool, str]:
        """
        Validate step data from context.

        Args:
            step_id: Id of the current step
            context: ProjectWizardContext object

        Returns:
            Tuple of (is_valid, error_message)
        """
        if step_id == StepValidator.STEP_SETUP:
            errors = StepValidator._factory.validate(context.setup, "setup")
            if errors:
                return False, errors[0]
            return True, ""

        elif step_id == StepValidator.STEP_SITEPLAN:
            site_plan = context.site_plan
            if site_plan is None:
                return True, ""
            date_error = OwnerReconciler.validate_allocation_dates(
                site_plan.fields.get("allocation_date"), site_plan.fields.get("application_date")
            )
            if date_error:
                return False, date_error
            errors = OwnerReconciler.validate_owners(site_plan.owners)
            if errors:
                return False, errors[0]
            return True, ""

        elif step_id == StepValidator.STEP_CONTRACT:
            contract = context.contract
            if contract is None:
                return True, ""
            errors = validate_financials(contract.figures, contract.classification)
            if errors:
                return False, next(iter(errors.values()))
            return True, ""

        # License and awarding save on their own, always valid
        return True, ""

    @staticmethod
    def get_step_name(step_id: str) -> str:
        return tr(f"step.{step_id}")
