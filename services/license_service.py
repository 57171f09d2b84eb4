# -*- coding: utf-8 -*-
"""
Building license step.
"""

from typing import Any, Dict, Optional

from models.attachment import AttachmentState, StaticAttachmentSlot
from models.step_data import LicenseData
from services.api_client import ProjectsApiClient
from services.attachment_manager import AttachmentLifecycleManager
from services.siteplan_service import SitePlanService
from services.step_service import StepService, Submission
from utils.datetime_utils import to_iso_date
from utils.logger import get_logger

logger = get_logger(__name__)

DATE_FIELDS = ("issue_date", "expiry_date", "technical_decision_date")

# license field <- site plan field. The site plan is the source for land data.
SITE_PLAN_LAND_FIELDS = (
    ("city", "municipality"),
    ("zone", "zone"),
    ("plot_no", "land_no"),
    ("sector", "sector"),
    ("plot_address", "plot_address"),
    ("plot_area_sqm", "plot_area_sqm"),
)

_RECORD_KEYS = ("id", "project", "owners", "building_license_file", "building_license_file_name")


def apply_site_plan_land_data(fields: Dict[str, Any],
                              site_plan: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Copy land data from the site-plan record into the license fields.

    Site-plan values win over what the license holds, empty site-plan
    values leave the license untouched.
    """
    merged = dict(fields)
    for license_key, site_plan_key in SITE_PLAN_LAND_FIELDS:
        value = (site_plan or {}).get(site_plan_key)
        if value not in (None, ""):
            merged[license_key] = value
    return merged


class LicenseService(StepService):
    resource = "license"

    def from_record(self, record: Dict[str, Any]) -> LicenseData:
        record = record or {}
        return LicenseData(
            id=record.get("id"),
            fields={k: v for k, v in record.items() if k not in _RECORD_KEYS},
            building_license_file=AttachmentState.from_url(
                record.get("building_license_file"), record.get("building_license_file_name")
            ),
        )

    def load_with_site_plan(self, project_id: Any) -> LicenseData:
        """The license (or a blank one) with land data taken from the site plan."""
        data = self.load(project_id) or self.empty()
        site_plan = self._load_site_plan_record(project_id)
        if site_plan:
            data.fields = apply_site_plan_land_data(data.fields, site_plan)
        return data

    def _load_site_plan_record(self, project_id: Any) -> Optional[Dict[str, Any]]:
        return SitePlanService(self.api).load_record(project_id)

    def build_submission(self, data: LicenseData) -> Submission:
        fields: Dict[str, Any] = {}
        for key, value in data.fields.items():
            if key in DATE_FIELDS:
                value = to_iso_date(value)
            if value is None or value == "" or isinstance(value, (dict, list)):
                continue
            fields[key] = value

        slot_fields, parts = AttachmentLifecycleManager.serialize_static(
            StaticAttachmentSlot.BUILDING_LICENSE_FILE, data.building_license_file
        )
        fields.update(slot_fields)
        return None, ProjectsApiClient.build_multipart(fields, parts)
