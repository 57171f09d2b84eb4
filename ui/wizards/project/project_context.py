# -*- coding: utf-8 -*-
"""
Project Context - state of one project-editing session.

Holds:
- Setup selections and the draft state (unsaved / persisted project)
- Step data loaded or edited so far
- The session event bus shared by the steps
"""

from datetime import datetime
from typing import Any, Dict, Optional
import uuid

from models.draft_state import DraftState, Persisted, Unsaved
from models.project_setup import ProjectSetup
from models.step_data import AwardingData, ContractData, LicenseData, SitePlanData
from services.session_events import WizardSessionBus
from utils.logger import get_logger

logger = get_logger(__name__)


class ProjectWizardContext:
    """Context for the project records wizard."""

    def __init__(self, setup: Optional[ProjectSetup] = None,
                 draft_state: Optional[DraftState] = None):
        self.wizard_id: str = str(uuid.uuid4())
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()
        self.current_step_index: int = 0
        self.completed_steps: set = set()

        self.setup: ProjectSetup = setup or ProjectSetup()
        self.draft_state: DraftState = draft_state or Unsaved()

        # Step data, None until the step is loaded or edited
        self.site_plan: Optional[SitePlanData] = None
        self.license: Optional[LicenseData] = None
        self.contract: Optional[ContractData] = None
        self.awarding: Optional[AwardingData] = None

        self.bus = WizardSessionBus(self.project_id)

    @classmethod
    def for_project(cls, project_id: Any, setup: ProjectSetup) -> "ProjectWizardContext":
        """Context for editing an existing project."""
        return cls(setup=setup, draft_state=Persisted(project_id))

    @property
    def project_id(self) -> Optional[Any]:
        return self.draft_state.project_id

    @property
    def is_persisted(self) -> bool:
        return self.draft_state.is_persisted

    def mark_persisted(self, project_id: Any):
        """The project now exists on the server."""
        self.draft_state = Persisted(project_id)
        self.bus.bind(project_id)
        self.updated_at = datetime.now()
        logger.info(f"Project context persisted as project {project_id}")

    def set_setup(self, setup: ProjectSetup):
        self.setup = setup
        self.updated_at = datetime.now()

    def mark_step_completed(self, step_index: int):
        self.completed_steps.add(step_index)
        self.updated_at = datetime.now()

    def is_step_completed(self, step_index: int) -> bool:
        return step_index in self.completed_steps

    def to_dict(self) -> Dict[str, Any]:
        """Serializable summary of the session (step data is not included)."""
        return {
            "wizard_id": self.wizard_id,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "current_step_index": self.current_step_index,
            "completed_steps": sorted(self.completed_steps),
            "project_id": self.project_id,
            "setup": self.setup.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProjectWizardContext":
        project_id = data.get("project_id")
        context = cls(
            setup=ProjectSetup.from_dict(data.get("setup") or {}),
            draft_state=Persisted(project_id) if project_id else Unsaved(),
        )
        context.wizard_id = data.get("wizard_id", context.wizard_id)
        context.current_step_index = data.get("current_step_index", 0)
        context.completed_steps = set(data.get("completed_steps", []))
        if "created_at" in data:
            context.created_at = datetime.fromisoformat(data["created_at"])
        if "updated_at" in data:
            context.updated_at = datetime.fromisoformat(data["updated_at"])
        return context
