# -*- coding: utf-8 -*-
"""
Contract Owners Controller
==========================
Keeps the contract step's owners in line with the site plan.

Reconciliation runs once when the contract step is entered and again each
time the session bus reports new site-plan owners. Edits made in between
(phone/email of the authorized owner) are never overwritten by anything
else.
"""

from typing import List, Optional, Sequence

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController
from models.owner import Owner
from services.owner_reconciler import CONTACT_FIELDS, OwnerReconciler
from services.session_events import OwnersUpdated, WizardSessionBus
from utils.logger import get_logger

logger = get_logger(__name__)


class ContractOwnersController(BaseController):
    """Owner list of the contract step."""

    owners_changed = pyqtSignal(list)  # List[Owner], authorized view

    def __init__(self, bus: Optional[WizardSessionBus] = None, parent=None):
        super().__init__(parent)
        self._owners: List[Owner] = []
        self._entered = False
        self._bus = bus
        if bus is not None:
            bus.siteplan_owners_updated.connect(self._on_siteplan_owners_updated)

    @property
    def owners(self) -> List[Owner]:
        """Reconciled owner set (every site-plan owner)."""
        return list(self._owners)

    @property
    def contract_owners(self) -> List[Owner]:
        """What the contract submits: the authorized owner only."""
        return OwnerReconciler.authorized_only(self._owners)

    def enter(self, site_plan_owners: Sequence[Owner],
              contract_owners: Sequence[Owner] = ()) -> List[Owner]:
        """Initial reconciliation when the contract step opens."""
        self._owners = OwnerReconciler.reconcile(site_plan_owners, contract_owners)
        self._entered = True
        logger.debug(f"Contract owners reconciled on entry ({len(self._owners)} owners)")
        self.owners_changed.emit(self.contract_owners)
        return self.contract_owners

    def set_contact(self, owner: Owner, field: str, value: str):
        """Edit phone/email of one owner of the contract view."""
        if field not in CONTACT_FIELDS:
            raise ValueError(f"Only {CONTACT_FIELDS} can be edited in the contract step")
        for idx, current in enumerate(self._owners):
            if current is owner or current == owner:
                self._owners[idx] = current.copy(**{field: value})
                self.owners_changed.emit(self.contract_owners)
                return
        raise ValueError("Owner is not part of the contract owners")

    def _on_siteplan_owners_updated(self, event: OwnersUpdated):
        if not self._entered:
            return
        self._owners = OwnerReconciler.reconcile(event.owners, self._owners)
        logger.info(f"Contract owners reconciled after site-plan update (project {event.project_id})")
        self.owners_changed.emit(self.contract_owners)
        self.data_changed.emit()
