# -*- coding: utf-8 -*-
"""
Data models for the project wizard.
"""

from .project_setup import (
    ProjectSetup, ProjectType, VillaCategory, ContractType, ContractClassification
)
from .owner import Owner
from .attachment import (
    AttachmentState, AttachmentStatus, AttachmentType, UploadFile,
    StaticAttachmentSlot, DynamicAttachment, ContractExtension
)
from .financials import FinancialFigures, FeeBreakdown, ContractSummary

__all__ = [
    "ProjectSetup",
    "ProjectType",
    "VillaCategory",
    "ContractType",
    "ContractClassification",
    "Owner",
    "AttachmentState",
    "AttachmentStatus",
    "AttachmentType",
    "UploadFile",
    "StaticAttachmentSlot",
    "DynamicAttachment",
    "ContractExtension",
    "FinancialFigures",
    "FeeBreakdown",
    "ContractSummary",
]
