# -*- coding: utf-8 -*-
"""
Draft Persistence Controller
============================
Decides when and how wizard data reaches the server.

A new project exists only in the wizard (Unsaved) until its site plan is
finished. Finishing the site plan creates the project, submits the site
plan, writes the chosen contract classification and switches the session
to Persisted(project_id). From then on every step loads and saves its own
record directly.
"""

from typing import Any, Optional, Tuple

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController, OperationResult
from models.draft_state import DraftState, Persisted, Unsaved
from models.project_setup import ContractClassification, ProjectSetup
from models.step_data import SitePlanData
from services.api_client import get_api_client
from services.awarding_service import AwardingService
from services.contract_service import ContractService
from services.draft_store import DraftStore
from services.error_mapper import map_exception
from services.exceptions import ApiException, NetworkException, ValidationException
from services.license_service import LicenseService
from services.session_events import OwnersUpdated, StepRecordUpdated
from services.siteplan_service import SitePlanService
from services.translation_manager import tr
from services.validation.validation_factory import ValidationFactory
from services.wizard.step_graph import (
    STEP_AWARD, STEP_CONTRACT, STEP_LICENSE, STEP_SETUP, STEP_SITEPLAN
)
from utils.logger import get_logger

logger = get_logger(__name__)

__all__ = ["DraftPersistenceOrchestrator", "DraftState", "Persisted", "Unsaved"]


class DraftPersistenceOrchestrator(BaseController):
    """
    Persistence of one project-editing session.

    Signals:
        project_created(project_id)
        step_saved(step_id, step data)
    """

    project_created = pyqtSignal(object)
    step_saved = pyqtSignal(str, object)

    def __init__(self, context, api_client=None, draft_store: Optional[DraftStore] = None,
                 navigator=None, parent=None):
        """
        Args:
            context: ProjectWizardContext of the session
            api_client: ProjectsApiClient (shared client when None)
            draft_store: Local store of the unsaved setup
            navigator: StepNavigator moved to License once the project exists
        """
        super().__init__(parent)
        self.context = context
        self.api = api_client or get_api_client()
        self.draft_store = draft_store or DraftStore()
        self.navigator = navigator
        self._validators = ValidationFactory()
        # Code the project had when it was loaded; re-checking it is pointless
        self._persisted_internal_code = context.setup.internal_code if context.is_persisted else None
        # Classification the server holds; compared on setup edits
        self._persisted_classification = (
            context.setup.contract_classification if context.is_persisted else None
        )

        self._services = {
            STEP_SITEPLAN: SitePlanService(self.api),
            STEP_LICENSE: LicenseService(self.api),
            STEP_CONTRACT: ContractService(self.api),
            STEP_AWARD: AwardingService(self.api),
        }

    @property
    def draft_state(self) -> DraftState:
        return self.context.draft_state

    def service_for(self, step_id: str):
        service = self._services.get(step_id)
        if service is None:
            raise ValueError(f"Step {step_id!r} has no server record")
        return service

    # ==================== Local draft ====================

    def begin_blank_project(self):
        """A new, empty project: forget any stored setup draft."""
        self.draft_store.clear()
        self.context.draft_state = Unsaved()
        self._apply_setup(ProjectSetup())
        self._persisted_internal_code = None
        self._persisted_classification = None

    def restore_setup_draft(self) -> Optional[ProjectSetup]:
        """Put the stored setup draft back into an unsaved session."""
        if self.context.is_persisted:
            return None
        setup = self.draft_store.load_setup()
        if setup is not None:
            self._apply_setup(setup)
            logger.info("Setup draft restored")
        return setup

    def update_setup(self, setup: ProjectSetup) -> OperationResult[ProjectSetup]:
        """
        Record new setup selections.

        Unsaved: kept in the context and the local draft only.
        Persisted: PATCH `projects/{id}/`, and the classification goes through
        the contract record when it differs from the one the server holds.
        Either way the steps are re-resolved.
        """
        if not self.context.is_persisted:
            self._apply_setup(setup)
            self.draft_store.save_setup(setup)
            return OperationResult.ok(data=setup)

        project_id = self.context.project_id

        def _patch():
            self.api.update_project(project_id, setup.to_project_payload())
            if setup.contract_classification != self._persisted_classification:
                self._services[STEP_CONTRACT].save_classification(
                    project_id, setup.contract_classification
                )
                self._persisted_classification = setup.contract_classification
            self._apply_setup(setup)
            return setup

        self._log_operation("update_setup", project_id=project_id)
        return self.execute_with_error_handling("update_setup", _patch)

    # ==================== Internal code ====================

    def check_internal_code(self, code: str) -> OperationResult[bool]:
        """
        Block a code already used by another project.

        Skipped when an existing project keeps its own code.
        """
        code = (code or "").strip()
        if self.context.is_persisted and code == (self._persisted_internal_code or ""):
            return OperationResult.ok(data=True)

        def _query():
            matches = self.api.find_projects_by_internal_code(code)
            own_id = str(self.context.project_id) if self.context.is_persisted else None
            others = [p for p in matches if str(p.get("id")) != own_id]
            if others:
                raise ValidationException(
                    tr("errors.internal_code_duplicate"), field="internal_code"
                )
            return True

        return self.execute_with_error_handling("check_internal_code", _query)

    def leave_guard(self, step_id: str) -> Tuple[bool, str]:
        """StepNavigator hook: the internal code must be unique before leaving setup."""
        if step_id != STEP_SETUP:
            return True, ""
        result = self.check_internal_code(self.context.setup.internal_code)
        return result.success, result.message

    # ==================== New project ====================

    def finish_site_plan(self, site_plan: SitePlanData) -> OperationResult[Any]:
        """
        Create the project from an unsaved session.

        Order:
            1. POST projects/ {status: draft, ...setup}
            2. abort when that fails or returns no id
            3. POST the site plan to the new project
            4. write the chosen classification (failure logged, not rolled back)
            5. switch to Persisted, clear the draft, notify, go to License

        Returns:
            OperationResult with the new project id
        """
        operation = "finish_site_plan"
        if self.is_loading:
            return OperationResult.fail(tr("errors.save_in_progress"))
        if self.context.is_persisted:
            return self.save_step(STEP_SITEPLAN, site_plan)

        setup = self.context.setup
        siteplan_service: SitePlanService = self._services[STEP_SITEPLAN]

        errors = self._validators.validate(setup, STEP_SETUP) + siteplan_service.validate(site_plan)
        if errors:
            return OperationResult.fail(errors[0], errors=errors)

        self._log_operation(operation, internal_code=setup.internal_code)
        try:
            self._emit_started(operation)

            payload = {"status": "draft"}
            payload.update(setup.to_project_payload())
            project = self.api.create_project(payload)
            project_id = (project or {}).get("id")
            if not project_id:
                message = tr("errors.project_id_missing")
                self._emit_error(operation, message)
                return OperationResult.fail(message)
            logger.info(f"Project {project_id} created")

            saved_site_plan = siteplan_service.save(project_id, site_plan)

            self._persisted_classification = ContractClassification.NONE
            if setup.contract_classification != ContractClassification.NONE:
                if self._write_classification(project_id, setup.contract_classification):
                    self._persisted_classification = setup.contract_classification

            self.context.mark_persisted(project_id)
            self.context.site_plan = saved_site_plan
            self._persisted_internal_code = setup.internal_code
            self.draft_store.clear()

            self._emit_completed(operation, True)
            self.project_created.emit(project_id)
            self.step_saved.emit(STEP_SITEPLAN, saved_site_plan)
            self._publish(STEP_SITEPLAN, saved_site_plan)

            if self.navigator is not None:
                self.navigator.goto_step_id(STEP_LICENSE)
            return OperationResult.ok(data=project_id)

        except (ValidationException, ApiException, NetworkException) as e:
            failed = OperationResult.from_exception(e)
            self._emit_error(operation, failed.message)
            return failed
        except Exception as e:
            error_msg = map_exception(e, context=operation)
            self._emit_error(operation, error_msg)
            return OperationResult.fail(error_msg)

    def _write_classification(self, project_id: Any, classification: ContractClassification) -> bool:
        try:
            self._services[STEP_CONTRACT].save_classification(project_id, classification)
        except (ApiException, NetworkException) as e:
            # Project and site plan stay; the next setup update writes it again
            logger.error(
                f"Classification write failed for project {project_id}: {map_exception(e)}"
            )
            return False
        return True

    def _apply_setup(self, setup: ProjectSetup):
        """Store the setup; through the navigator when one is attached so the steps follow."""
        if self.navigator is not None:
            self.navigator.set_setup(setup)
        else:
            self.context.set_setup(setup)

    # ==================== Existing project ====================

    def load_step(self, step_id: str) -> OperationResult[Any]:
        """
        Step data of the persisted project. `data` is None when the step
        has no record yet.
        """
        if not self.context.is_persisted:
            return OperationResult.fail(tr("errors.project_required"))

        project_id = self.context.project_id
        service = self.service_for(step_id)

        if step_id == STEP_LICENSE:
            data = service.load_with_site_plan(project_id)
        elif step_id == STEP_CONTRACT:
            data = service.load_with_license(project_id)
        else:
            data = service.load(project_id)

        self._store(step_id, data)
        if step_id == STEP_SITEPLAN and data is not None:
            self.context.bus.publish_owners_loaded(OwnersUpdated(project_id, list(data.owners)))
        return OperationResult.ok(data=data)

    def save_step(self, step_id: str, data: Any) -> OperationResult[Any]:
        """PATCH the step's record when it has an id, POST otherwise."""
        if not self.context.is_persisted:
            return OperationResult.fail(tr("errors.project_required"))

        project_id = self.context.project_id
        service = self.service_for(step_id)

        def _save():
            return service.save(project_id, data)

        self._log_operation("save_step", step=step_id, project_id=project_id)
        result = self.execute_with_error_handling(f"save_{step_id}", _save)
        if result.success:
            self._store(step_id, result.data)
            self.step_saved.emit(step_id, result.data)
            self._publish(step_id, result.data)
        return result

    def _store(self, step_id: str, data: Any):
        attribute = {
            STEP_SITEPLAN: "site_plan",
            STEP_LICENSE: "license",
            STEP_CONTRACT: "contract",
            STEP_AWARD: "awarding",
        }[step_id]
        setattr(self.context, attribute, data)

    def _publish(self, step_id: str, data: Any):
        project_id = self.context.project_id
        bus = self.context.bus
        if step_id == STEP_SITEPLAN:
            bus.publish_owners_updated(OwnersUpdated(project_id, list(data.owners)))
        else:
            bus.publish_step_updated(
                StepRecordUpdated(project_id, step_id, getattr(data, "id", None))
            )

