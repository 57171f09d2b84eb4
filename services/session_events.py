# -*- coding: utf-8 -*-
"""
Session-scoped events of one project-editing session.

Steps tell their siblings about out-of-band updates ("the site-plan owners
changed") through a WizardSessionBus owned by the wizard context. Every
payload carries the project id; a bus only re-emits payloads for its own
project.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from models.owner import Owner
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class OwnersUpdated:
    project_id: Any
    owners: List[Owner] = field(default_factory=list)


@dataclass(frozen=True)
class StepRecordUpdated:
    project_id: Any
    step: str
    record_id: Optional[Any] = None


class WizardSessionBus(QObject):
    """
    Typed publish/subscribe channel for one project.

    Subscribers connect to the signals, publishers call the publish_* methods.
    """

    siteplan_owners_updated = pyqtSignal(object)  # OwnersUpdated
    siteplan_owners_loaded = pyqtSignal(object)  # OwnersUpdated
    license_updated = pyqtSignal(object)  # StepRecordUpdated
    contract_updated = pyqtSignal(object)  # StepRecordUpdated
    awarding_updated = pyqtSignal(object)  # StepRecordUpdated

    def __init__(self, project_id: Any = None, parent=None):
        super().__init__(parent)
        self.project_id = project_id

    def bind(self, project_id: Any):
        """Attach the bus to a project (once the project exists)."""
        self.project_id = project_id

    def _accepts(self, event) -> bool:
        if self.project_id is None or str(event.project_id) != str(self.project_id):
            logger.debug(f"Ignoring {type(event).__name__} for project {event.project_id}")
            return False
        return True

    def publish_owners_updated(self, event: OwnersUpdated):
        if self._accepts(event):
            self.siteplan_owners_updated.emit(event)

    def publish_owners_loaded(self, event: OwnersUpdated):
        if self._accepts(event):
            self.siteplan_owners_loaded.emit(event)

    def publish_step_updated(self, event: StepRecordUpdated):
        """Route a step update to the signal of its step."""
        if not self._accepts(event):
            return
        signal = {
            "license": self.license_updated,
            "contract": self.contract_updated,
            "awarding": self.awarding_updated,
            "award": self.awarding_updated,
        }.get(event.step)
        if signal is None:
            raise ValueError(f"No update event for step {event.step!r}")
        signal.emit(event)
