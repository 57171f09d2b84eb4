# -*- coding: utf-8 -*-
"""
Contract step: parties, totals, owners, documents and extensions.
"""

import json
from dataclasses import replace
from typing import Any, Dict, List, Optional

from models.attachment import (
    ContractExtension, CONTRACT_DOCUMENT_SLOTS, CONTRACT_TECHNICAL_SLOTS
)
from models.financials import FinancialFigures
from models.owner import Owner
from models.project_setup import ContractClassification
from models.step_data import ContractData
from services.api_client import ProjectsApiClient
from services.attachment_manager import AttachmentLifecycleManager
from services.financial_service import (
    figures_payload, normalize_for_classification, project_end_date, validate_financials
)
from services.license_service import LicenseService
from services.owner_reconciler import OwnerReconciler
from services.step_service import StepService, Submission
from utils.datetime_utils import to_iso_date
from utils.helpers import is_blank
from utils.logger import get_logger

logger = get_logger(__name__)

DATE_FIELDS = ("contract_date", "start_order_date", "project_end_date")

# contract field <- license field
LICENSE_CONTRACTOR_FIELDS = (
    ("contractor_name", "contractor_name"),
    ("contractor_name_en", "contractor_name_en"),
    ("contractor_trade_license", "contractor_license_no"),
    ("contractor_phone", "contractor_phone"),
    ("contractor_email", "contractor_email"),
)

CONTRACT_SLOTS = CONTRACT_DOCUMENT_SLOTS + CONTRACT_TECHNICAL_SLOTS

_RECORD_KEYS = (
    "id", "project", "owners", "attachments", "extensions", "contract_classification",
    "total_project_value", "total_bank_value", "total_owner_value",
) + tuple(
    key for slot in CONTRACT_SLOTS for key in (slot.value, slot.url_key, slot.name_key)
)


def apply_license_contractor_data(fields: Dict[str, Any],
                                  license_record: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Fill empty contractor fields from the license. Entered values are kept."""
    merged = dict(fields)
    for contract_key, license_key in LICENSE_CONTRACTOR_FIELDS:
        value = (license_record or {}).get(license_key)
        if is_blank(merged.get(contract_key)) and not is_blank(value):
            merged[contract_key] = value
    return merged


class ContractService(StepService):
    resource = "contract"

    def from_record(self, record: Dict[str, Any]) -> ContractData:
        record = record or {}
        owners = [Owner.from_api(o) for o in record.get("owners") or [] if isinstance(o, dict)]
        return ContractData(
            id=record.get("id"),
            fields={k: v for k, v in record.items() if k not in _RECORD_KEYS},
            classification=ContractClassification.parse(record.get("contract_classification")),
            figures=FinancialFigures.from_api(record),
            owners=owners,
            slots=AttachmentLifecycleManager.load_slots(record, CONTRACT_SLOTS),
            attachments=AttachmentLifecycleManager.filter_loaded_attachments(
                record.get("attachments")
            ),
            extensions=[
                ContractExtension.from_api(e) for e in record.get("extensions") or []
                if isinstance(e, dict)
            ],
        )

    def load_with_license(self, project_id: Any) -> ContractData:
        """The contract (or a blank one) with contractor data taken from the license."""
        data = self.load(project_id) or self.empty()
        license_record = LicenseService(self.api).load_record(project_id)
        if license_record:
            data.fields = apply_license_contractor_data(data.fields, license_record)
        return data

    def validate(self, data: ContractData) -> List[str]:
        return list(validate_financials(data.figures, data.classification).values())

    def build_submission(self, data: ContractData) -> Submission:
        """
        Multipart body. The classification is always sent (empty when none),
        the owners part holds the authorized owner only.
        """
        fields: Dict[str, Any] = {}
        for key, value in data.fields.items():
            if key in DATE_FIELDS:
                value = to_iso_date(value)
            if value is None or isinstance(value, (dict, list)):
                continue
            fields[key] = value

        fields["contract_classification"] = data.classification.value

        figures = normalize_for_classification(replace(data.figures), data.classification)
        fields.update(figures_payload(figures))

        end_date = project_end_date(
            data.fields.get("start_order_date"),
            data.fields.get("project_duration_months"),
            data.extensions,
        )
        if end_date:
            fields["project_end_date"] = end_date

        authorized = OwnerReconciler.authorized_only(data.owners)
        fields["owners"] = json.dumps([o.to_payload() for o in authorized], ensure_ascii=False)

        slot_fields, parts = AttachmentLifecycleManager.serialize_slots(data.slots)
        fields.update(slot_fields)

        attachments_json, attachment_parts = AttachmentLifecycleManager.serialize_dynamic(
            data.attachments
        )
        fields["attachments"] = attachments_json
        parts.extend(attachment_parts)

        extensions_json, extension_parts = AttachmentLifecycleManager.serialize_extensions(
            data.extensions
        )
        fields["extensions"] = extensions_json
        parts.extend(extension_parts)

        return None, ProjectsApiClient.build_multipart(fields, parts)

    def save_classification(self, project_id: Any,
                            classification: ContractClassification) -> Dict[str, Any]:
        """
        Write the classification through the contract record: PATCH the
        existing contract, or POST a contract holding only the classification.
        """
        payload = {"contract_classification": classification.value}
        existing = self.load_record(project_id)
        if existing and existing.get("id"):
            logger.info(f"Patching classification of contract {existing['id']}")
            return self.api.update_resource(project_id, self.resource, existing["id"], payload)
        logger.info(f"Creating contract with classification for project {project_id}")
        return self.api.create_resource(project_id, self.resource, payload)

    def load_classification(self, project_id: Any) -> ContractClassification:
        record = self.load_record(project_id) or {}
        return ContractClassification.parse(record.get("contract_classification"))

