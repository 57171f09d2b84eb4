# -*- coding: utf-8 -*-
"""
Project Records Wizard Controllers
==================================
Controller layer between the wizard UI and the services.

Controllers provide:
- Standardized error handling via OperationResult
- Qt signals for UI updates
- Loading state (one operation at a time)

Usage:
    from controllers import DraftPersistenceOrchestrator

    orchestrator = DraftPersistenceOrchestrator(context)
    result = orchestrator.finish_site_plan(site_plan)
    if not result.success:
        show_error(result.message)
"""

from controllers.base_controller import (
    BaseController,
    OperationResult,
)
from controllers.draft_persistence_controller import DraftPersistenceOrchestrator
from controllers.contract_owners_controller import ContractOwnersController

__all__ = [
    'BaseController',
    'OperationResult',
    'DraftPersistenceOrchestrator',
    'ContractOwnersController',
]
