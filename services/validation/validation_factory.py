# -*- coding: utf-8 -*-
"""
Validation Factory - registry of validators per wizard record type.
"""

from typing import Any, Dict, List, Optional

from .validation_strategy import ValidationStrategy, SetupValidator


class ValidationFactory:
    """
    Registry and factory for validation strategies.

    Record types are the wizard step ids ("setup", ...). Types with no
    registered validator are considered valid.
    """

    def __init__(self):
        self._validators: Dict[str, ValidationStrategy] = {}
        self._register_default_validators()

    def _register_default_validators(self):
        self.register_validator('setup', SetupValidator())

    def register_validator(self, record_type: str, validator: ValidationStrategy):
        """
        Register a validation strategy for a record type.

        Args:
            record_type: Type identifier (e.g. 'setup')
            validator: ValidationStrategy instance
        """
        self._validators[record_type.lower()] = validator

    def get_validator(self, record_type: str) -> Optional[ValidationStrategy]:
        return self._validators.get(record_type.lower())

    def validate(self, record: Any, record_type: str) -> List[str]:
        """
        Validate a record using the validator registered for its type.

        Returns:
            List of error messages (empty if valid)
        """
        validator = self.get_validator(record_type)
        if not validator:
            return []
        return validator.validate(record)

    def is_valid(self, record: Any, record_type: str) -> bool:
        return len(self.validate(record, record_type)) == 0

    def get_registered_types(self) -> List[str]:
        return list(self._validators.keys())
