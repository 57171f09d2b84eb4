# -*- coding: utf-8 -*-
"""
Site plan step: land data, owners and the site-plan document.
"""

import json
from typing import Any, Dict, List

from models.attachment import AttachmentState, StaticAttachmentSlot
from models.owner import Owner
from models.step_data import SitePlanData
from services.api_client import ProjectsApiClient
from services.attachment_manager import AttachmentLifecycleManager
from services.owner_reconciler import OwnerReconciler
from services.step_service import StepService, Submission
from utils.datetime_utils import to_iso_date
from utils.logger import get_logger

logger = get_logger(__name__)

DATE_FIELDS = ("application_date", "allocation_date")

# Keys of a server record that are not plain form fields
_RECORD_KEYS = ("id", "owners", "application_file", "application_file_name", "project")


def named_owners(owners: List[Owner]) -> List[Owner]:
    """Owners with at least one name (blank rows are not submitted)."""
    return [
        owner for owner in owners
        if (owner.owner_name_ar or "").strip() or (owner.owner_name_en or "").strip()
    ]


class SitePlanService(StepService):
    resource = "siteplan"

    def from_record(self, record: Dict[str, Any]) -> SitePlanData:
        record = record or {}
        owners = [Owner.from_api(o) for o in record.get("owners") or [] if isinstance(o, dict)]
        fields = {k: v for k, v in record.items() if k not in _RECORD_KEYS}
        return SitePlanData(
            id=record.get("id"),
            fields=fields,
            owners=owners or [Owner.empty()],
            application_file=AttachmentState.from_url(
                record.get("application_file"), record.get("application_file_name")
            ),
        )

    def validate(self, data: SitePlanData) -> List[str]:
        errors = []
        date_error = OwnerReconciler.validate_allocation_dates(
            data.fields.get("allocation_date"), data.fields.get("application_date")
        )
        if date_error:
            errors.append(date_error)
        errors.extend(OwnerReconciler.validate_owners(data.owners))
        return errors

    def build_submission(self, data: SitePlanData) -> Submission:
        """
        Multipart body: plain fields, the owners list as one JSON part,
        owner ID cards by owner index, and the site-plan document.
        """
        fields: Dict[str, Any] = {}
        for key, value in data.fields.items():
            if key in DATE_FIELDS:
                value = to_iso_date(value)
            if value is None or isinstance(value, (dict, list)):
                continue
            fields[key] = value

        owners = named_owners(data.owners)
        fields["owners"] = json.dumps([o.to_payload() for o in owners], ensure_ascii=False)

        owner_fields, parts = AttachmentLifecycleManager.serialize_owner_files(owners)
        fields.update(owner_fields)

        slot_fields, slot_parts = AttachmentLifecycleManager.serialize_static(
            StaticAttachmentSlot.APPLICATION_FILE, data.application_file
        )
        fields.update(slot_fields)
        parts.extend(slot_parts)

        return None, ProjectsApiClient.build_multipart(fields, parts)
