# -*- coding: utf-8 -*-
"""
Step graph of the project wizard.

Which steps exist, and in what order, is a pure function of the setup
selections. Nothing here touches the setup it is given.
"""

from dataclasses import dataclass
from typing import List, Sequence

from models.project_setup import ContractType, ProjectSetup, ProjectType, VillaCategory

STEP_SETUP = "setup"
STEP_SITEPLAN = "siteplan"
STEP_LICENSE = "license"
STEP_CONTRACT = "contract"
STEP_AWARD = "award"

# Position of each step in the full flow
STEP_INDEX = {
    STEP_SETUP: 0,
    STEP_SITEPLAN: 1,
    STEP_LICENSE: 2,
    STEP_CONTRACT: 3,
    STEP_AWARD: 4,
}

SITE_PLAN_VILLA_CATEGORIES = (VillaCategory.RESIDENTIAL, VillaCategory.COMMERCIAL)


@dataclass(frozen=True)
class WizardStep:
    id: str
    order: int

    @property
    def title_key(self) -> str:
        return f"step.{self.id}"


class StepGraphResolver:
    """Pure step-graph rules."""

    @staticmethod
    def allow_site_plan_flow(setup: ProjectSetup) -> bool:
        """New villa contracts (residential or commercial) go through the site plan."""
        if setup is None:
            return False
        return (
            setup.project_type == ProjectType.VILLA
            and setup.villa_category in SITE_PLAN_VILLA_CATEGORIES
            and setup.contract_type == ContractType.NEW
        )

    @staticmethod
    def setup_has_all_selections(setup: ProjectSetup) -> bool:
        if setup is None:
            return False
        if setup.project_type is None or setup.contract_type is None:
            return False
        if setup.project_type == ProjectType.VILLA and setup.villa_category is None:
            return False
        return True

    @classmethod
    def resolve_steps(cls, setup: ProjectSetup) -> List[WizardStep]:
        """
        [setup] always; siteplan/license/contract when the site-plan flow
        is allowed; award on top of those for housing-loan contracts.
        """
        ids = [STEP_SETUP]
        if cls.allow_site_plan_flow(setup):
            ids += [STEP_SITEPLAN, STEP_LICENSE, STEP_CONTRACT]
            if setup.is_housing_loan:
                ids.append(STEP_AWARD)
        return [WizardStep(id=step_id, order=order) for order, step_id in enumerate(ids)]

    @classmethod
    def can_enter(cls, index: int, setup: ProjectSetup) -> bool:
        """The setup step is always reachable, later steps need a complete setup."""
        if index == 0:
            return True
        return cls.allow_site_plan_flow(setup) and cls.setup_has_all_selections(setup)

    @staticmethod
    def clamp_index(index: int, steps: Sequence[WizardStep]) -> int:
        return max(0, min(index, max(0, len(steps) - 1)))
