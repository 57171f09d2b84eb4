# -*- coding: utf-8 -*-
"""
Awarding step (housing-loan projects only).

Besides the awarding record itself this module derives the read-only
values the step shows: owner display name, consultant, and registration
numbers already used for the same consultant/contractor on other projects.
"""

from typing import Any, Dict, Optional, Sequence

from models.attachment import AttachmentState, StaticAttachmentSlot
from models.owner import Owner
from models.step_data import AwardingData, DEFAULT_REGISTRATION_NUMBER
from services.api_client import ProjectsApiClient
from services.attachment_manager import AttachmentLifecycleManager
from services.exceptions import ApiException, NetworkException
from services.license_service import LicenseService
from services.step_service import StepService, Submission
from utils.datetime_utils import to_iso_date
from utils.logger import get_logger

logger = get_logger(__name__)

PARTNERS_SUFFIX = " وشركاؤه"

CONSULTANT_NAME_FIELDS = ("design_consultant_name", "supervision_consultant_name")
CONTRACTOR_NAME_FIELDS = ("contractor_name",)


def owner_display_name(owners: Sequence[Owner]) -> str:
    """
    Authorized owner's name, else the first owner's. When nobody is
    authorized and there are several owners, " وشركاؤه" ("and partners")
    is appended.
    """
    if not owners:
        return ""
    authorized = next((o for o in owners if o.is_authorized), None)
    name = (authorized or owners[0]).display_name
    if authorized is None and len(owners) > 1:
        name += PARTNERS_SUFFIX
    return name


def consultant_to_show(license_fields: Dict[str, Any]) -> str:
    """Design consultant when the same office supervises, else the supervision consultant."""
    fields = license_fields or {}
    if fields.get("consultant_same"):
        return fields.get("design_consultant_name") or ""
    return fields.get("supervision_consultant_name") or ""


def _same_name(a: Any, b: str) -> bool:
    return bool(a) and str(a).strip().lower() == b.strip().lower()


def is_default_registration_number(value: Optional[str]) -> bool:
    return not value or value == DEFAULT_REGISTRATION_NUMBER


class AwardingService(StepService):
    resource = "awarding"

    def from_record(self, record: Dict[str, Any]) -> AwardingData:
        record = record or {}
        return AwardingData(
            id=record.get("id"),
            award_date=record.get("award_date") or None,
            consultant_registration_number=(
                record.get("consultant_registration_number") or DEFAULT_REGISTRATION_NUMBER
            ),
            project_number=record.get("project_number") or "",
            contractor_registration_number=(
                record.get("contractor_registration_number") or DEFAULT_REGISTRATION_NUMBER
            ),
            awarding_file=AttachmentState.from_url(
                record.get("awarding_file"), record.get("awarding_file_name")
            ),
        )

    def build_submission(self, data: AwardingData) -> Submission:
        fields: Dict[str, Any] = {
            "award_date": to_iso_date(data.award_date),
            "consultant_registration_number": data.consultant_registration_number or "",
            "project_number": data.project_number or "",
            "contractor_registration_number": data.contractor_registration_number or "",
        }
        slot_fields, parts = AttachmentLifecycleManager.serialize_static(
            StaticAttachmentSlot.AWARDING_FILE, data.awarding_file
        )
        fields.update(slot_fields)
        return None, ProjectsApiClient.build_multipart(fields, parts)

    # ==================== Registration number lookup ====================

    def lookup_registration_number(self, project_id: Any, name: str,
                                   kind: str = "consultant") -> Optional[str]:
        """
        Registration number already recorded for `name` on another project.

        Every other project's license is scanned for a matching consultant
        (design or supervision) or contractor name, case-insensitive; the
        number comes from that project's awarding record.

        Args:
            kind: "consultant" or "contractor"

        Returns:
            The first number found, or None
        """
        if not name or not name.strip():
            return None

        name_fields = CONSULTANT_NAME_FIELDS if kind == "consultant" else CONTRACTOR_NAME_FIELDS
        number_field = f"{kind}_registration_number"

        try:
            projects = self.api.list_projects()
        except (ApiException, NetworkException) as e:
            logger.error(f"Registration number lookup failed: {e}")
            return None

        licenses = LicenseService(self.api)
        for project in projects:
            other_id = project.get("id")
            if other_id is None or str(other_id) == str(project_id):
                continue

            license_record = licenses.load_record(other_id)
            if not license_record:
                continue
            if not any(_same_name(license_record.get(f), name) for f in name_fields):
                continue

            awarding = self.load_record(other_id) or {}
            number = awarding.get(number_field)
            if number:
                logger.info(f"Found {kind} registration number on project {other_id}")
                return number
        return None

    def prefill_registration_numbers(self, project_id: Any, data: AwardingData,
                                     license_fields: Dict[str, Any]) -> AwardingData:
        """Fill still-default registration numbers from other projects."""
        license_fields = license_fields or {}
        if is_default_registration_number(data.consultant_registration_number):
            found = self.lookup_registration_number(
                project_id, consultant_to_show(license_fields), "consultant"
            )
            if found:
                data.consultant_registration_number = found
        if is_default_registration_number(data.contractor_registration_number):
            found = self.lookup_registration_number(
                project_id, license_fields.get("contractor_name") or "", "contractor"
            )
            if found:
                data.contractor_registration_number = found
        return data
