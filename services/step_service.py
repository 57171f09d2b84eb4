# -*- coding: utf-8 -*-
"""
Base class for the per-step gateways of an existing project.

Each step of the wizard is one sub-resource of the project
(`projects/{id}/{resource}/`). The backend returns it as a list holding at
most one record.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from services.api_client import get_api_client
from services.exceptions import ApiException, NetworkException, ValidationException
from utils.logger import get_logger

logger = get_logger(__name__)

# (JSON payload, multipart parts). Exactly one of the two is not None.
Submission = Tuple[Optional[Dict[str, Any]], Optional[List[Tuple[str, Tuple]]]]


class StepService(ABC):
    """
    load() -> step data or None ("no data yet")
    save() -> PATCH when the step data has an id, POST otherwise
    """

    resource: str = ""

    def __init__(self, api_client=None):
        self._api = api_client

    @property
    def api(self):
        if self._api is None:
            self._api = get_api_client()
        return self._api

    # ==================== Hooks ====================

    @abstractmethod
    def from_record(self, record: Dict[str, Any]) -> Any:
        """Server record -> step data."""

    @abstractmethod
    def build_submission(self, data: Any) -> Submission:
        """Step data -> request body."""

    def validate(self, data: Any) -> List[str]:
        """Client-side checks run before any network call."""
        return []

    def empty(self) -> Any:
        """Step data for a step that has never been saved."""
        return self.from_record({})

    # ==================== Gateway ====================

    def load_record(self, project_id: Any) -> Optional[Dict[str, Any]]:
        """
        First record of the step, or None.

        A failed request is treated like a step that was never filled.
        """
        try:
            records = self.api.list_resource(project_id, self.resource)
        except (ApiException, NetworkException) as e:
            logger.warning(f"Loading {self.resource} for project {project_id} failed: {e}")
            return None
        if not records:
            logger.debug(f"No {self.resource} yet for project {project_id}")
            return None
        return records[0]

    def load(self, project_id: Any) -> Optional[Any]:
        record = self.load_record(project_id)
        return self.from_record(record) if record is not None else None

    def save(self, project_id: Any, data: Any) -> Any:
        """
        Validate, then create or update the step's record.

        Raises:
            ValidationException: before any request when validation fails
            ApiException / NetworkException: when the request fails
        """
        errors = self.validate(data)
        if errors:
            raise ValidationException(errors[0], errors=errors, context=self.resource)

        payload, files = self.build_submission(data)
        record_id = getattr(data, "id", None)

        if record_id:
            logger.info(f"Updating {self.resource} {record_id} of project {project_id}")
            saved = self.api.update_resource(project_id, self.resource, record_id, payload, files)
        else:
            logger.info(f"Creating {self.resource} for project {project_id}")
            saved = self.api.create_resource(project_id, self.resource, payload, files)

        saved = dict(saved or {})
        saved.setdefault("id", record_id)
        return self.from_record(saved)
