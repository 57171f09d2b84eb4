# -*- coding: utf-8 -*-
"""
Validation Strategy Pattern - pluggable validation rules per wizard record.
"""

from abc import ABC, abstractmethod
from typing import Any, List

from models.project_setup import ContractType, ProjectSetup, ProjectType, VillaCategory
from services.translation_manager import tr
from services.validation.internal_code import format_internal_code, is_last_digit_odd


class ValidationStrategy(ABC):
    """
    Abstract base class for validation strategies.

    Each strategy implements the rules of one record type and returns
    user-facing error messages.
    """

    @abstractmethod
    def validate(self, record: Any) -> List[str]:
        """
        Validate a record and return list of error messages.

        Args:
            record: Record to validate

        Returns:
            List of error messages (empty list if valid)
        """
        pass

    def is_valid(self, record: Any) -> bool:
        return len(self.validate(record)) == 0


class SetupValidator(ValidationStrategy):
    """
    Project setup selections.

    Order: project type, villa category (villa only), contract type,
    internal code present, internal code ends with an odd digit.
    """

    def validate(self, record: Any) -> List[str]:
        setup = record if isinstance(record, ProjectSetup) else ProjectSetup.from_dict(record or {})
        errors = []

        if not isinstance(setup.project_type, ProjectType):
            errors.append(tr("errors.project_type_required"))
        elif setup.project_type == ProjectType.VILLA and not isinstance(setup.villa_category, VillaCategory):
            errors.append(tr("errors.villa_category_required"))

        if not isinstance(setup.contract_type, ContractType):
            errors.append(tr("errors.contract_type_required"))

        code = setup.internal_code or ""
        if len(format_internal_code(code)) <= 1:
            errors.append(tr("errors.internal_code_required"))
        elif not is_last_digit_odd(code):
            errors.append(tr("errors.internal_code_odd"))

        return errors
