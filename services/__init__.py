# -*- coding: utf-8 -*-
"""
Project Records Wizard Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "ProjectsApiClient",
    "SitePlanService",
    "LicenseService",
    "ContractService",
    "AwardingService",
    "DraftStore",
    "WizardSessionBus",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "ProjectsApiClient":
        from .api_client import ProjectsApiClient
        return ProjectsApiClient
    elif name == "SitePlanService":
        from .siteplan_service import SitePlanService
        return SitePlanService
    elif name == "LicenseService":
        from .license_service import LicenseService
        return LicenseService
    elif name == "ContractService":
        from .contract_service import ContractService
        return ContractService
    elif name == "AwardingService":
        from .awarding_service import AwardingService
        return AwardingService
    elif name == "DraftStore":
        from .draft_store import DraftStore
        return DraftStore
    elif name == "WizardSessionBus":
        from .session_events import WizardSessionBus
        return WizardSessionBus
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
