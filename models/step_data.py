# -*- coding: utf-8 -*-
"""
Per-step data held by the wizard while a step is being edited.

`id` is the server id of the step's record (None until first saved).
`fields` carries the plain form fields the core does not interpret.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from models.attachment import (
    AttachmentState, ContractExtension, DynamicAttachment, StaticAttachmentSlot,
    CONTRACT_DOCUMENT_SLOTS, CONTRACT_TECHNICAL_SLOTS
)
from models.financials import FinancialFigures
from models.owner import Owner
from models.project_setup import ContractClassification

DEFAULT_REGISTRATION_NUMBER = "VR-"


def _empty_contract_slots() -> Dict[StaticAttachmentSlot, AttachmentState]:
    return {
        slot: AttachmentState.empty()
        for slot in CONTRACT_DOCUMENT_SLOTS + CONTRACT_TECHNICAL_SLOTS
    }


@dataclass
class SitePlanData:
    id: Optional[Any] = None
    fields: Dict[str, Any] = field(default_factory=dict)
    owners: List[Owner] = field(default_factory=lambda: [Owner.empty()])
    application_file: AttachmentState = field(default_factory=AttachmentState.empty)


@dataclass
class LicenseData:
    id: Optional[Any] = None
    fields: Dict[str, Any] = field(default_factory=dict)
    building_license_file: AttachmentState = field(default_factory=AttachmentState.empty)


@dataclass
class ContractData:
    id: Optional[Any] = None
    fields: Dict[str, Any] = field(default_factory=dict)
    classification: ContractClassification = ContractClassification.NONE
    figures: FinancialFigures = field(default_factory=FinancialFigures)
    # Authorized-owner view of the site-plan owners
    owners: List[Owner] = field(default_factory=list)
    slots: Dict[StaticAttachmentSlot, AttachmentState] = field(default_factory=_empty_contract_slots)
    attachments: List[DynamicAttachment] = field(default_factory=list)
    extensions: List[ContractExtension] = field(default_factory=list)


@dataclass
class AwardingData:
    id: Optional[Any] = None
    award_date: Optional[str] = None
    consultant_registration_number: str = DEFAULT_REGISTRATION_NUMBER
    project_number: str = ""
    contractor_registration_number: str = DEFAULT_REGISTRATION_NUMBER
    awarding_file: AttachmentState = field(default_factory=AttachmentState.empty)
