# -*- coding: utf-8 -*-
"""Custom exceptions for the project wizard."""

from typing import Any, Dict, List, Optional


class ApiException(Exception):
    """Non-2xx response from the projects backend."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: Any = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data if response_data is not None else {}
        self.context = context

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code == 401

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class ValidationException(Exception):
    """
    Client-side validation failure, raised before any network call.

    `field` names the offending form field when there is one. `errors` holds
    translation keys or messages.
    """

    def __init__(self, message: str, field: str = None,
                 errors: Optional[List[str]] = None, context: str = None,
                 field_errors: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or []
        self.context = context
        self.field_errors = field_errors or ({field: message} if field else {})


class NetworkException(Exception):
    """Exception raised for network/connection errors."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context
