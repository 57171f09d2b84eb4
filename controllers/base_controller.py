# -*- coding: utf-8 -*-
"""
Base Controller
===============
Base class for the wizard controllers.

Provides the common signals, loading state and error handling.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from PyQt5.QtCore import QObject, pyqtSignal

from services.error_mapper import map_exception
from services.exceptions import ApiException, NetworkException, ValidationException
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


@dataclass
class OperationResult(Generic[T]):
    """Result of a controller operation."""
    success: bool
    data: Optional[T] = None
    message: str = ""
    errors: List[str] = None
    # Field name -> message, for errors that belong to one form field
    field_errors: Dict[str, str] = None

    def __post_init__(self):
        if self.errors is None:
            self.errors = []
        if self.field_errors is None:
            self.field_errors = {}

    @classmethod
    def ok(cls, data: T = None, message: str = "") -> 'OperationResult[T]':
        """Create a successful result."""
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, message: str, errors: List[str] = None,
             field_errors: Dict[str, str] = None) -> 'OperationResult[T]':
        """Create a failed result."""
        return cls(success=False, message=message, errors=errors or [],
                   field_errors=field_errors or {})

    @classmethod
    def from_exception(cls, error: Exception) -> 'OperationResult[T]':
        """Failed result carrying the user-facing message of `error`."""
        if isinstance(error, ValidationException):
            return cls.fail(error.message, errors=error.errors, field_errors=error.field_errors)
        return cls.fail(map_exception(error))


class BaseController(QObject):
    """
    Base controller class.

    Provides:
    - Common signal patterns
    - Error handling
    - Logging
    - Loading state
    """

    # Common signals
    operation_started = pyqtSignal(str)  # operation name
    operation_completed = pyqtSignal(str, bool)  # operation name, success
    operation_error = pyqtSignal(str, str)  # operation name, error message
    data_changed = pyqtSignal()
    loading_changed = pyqtSignal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._is_loading = False
        self._last_error = ""

    @property
    def is_loading(self) -> bool:
        """Check if controller is performing an operation."""
        return self._is_loading

    @property
    def last_error(self) -> str:
        """Get last error message."""
        return self._last_error

    def _set_loading(self, loading: bool):
        """Set loading state and emit signal."""
        self._is_loading = loading
        self.loading_changed.emit(loading)

    def _set_error(self, error: str):
        """Set error message."""
        self._last_error = error
        if error:
            logger.error(f"{self.__class__.__name__}: {error}")

    def _log_operation(self, operation: str, **kwargs):
        """Log an operation."""
        logger.info(f"{self.__class__.__name__}.{operation}: {kwargs}")

    def _emit_started(self, operation: str):
        """Emit operation started signal."""
        self.operation_started.emit(operation)
        self._set_loading(True)

    def _emit_completed(self, operation: str, success: bool):
        """Emit operation completed signal."""
        self.operation_completed.emit(operation, success)
        self._set_loading(False)
        if success:
            self.data_changed.emit()

    def _emit_error(self, operation: str, error: str):
        """Emit operation error signal."""
        self._set_error(error)
        self.operation_error.emit(operation, error)
        self._set_loading(False)

    def execute_with_error_handling(
        self,
        operation: str,
        func: Callable,
        *args,
        **kwargs
    ) -> OperationResult:
        """
        Run `func` as one operation.

        Validation, API and network errors come back as a failed result
        with a user-facing message. A second operation while one is
        running is refused.
        """
        if self._is_loading:
            logger.warning(f"{operation} refused: another operation is running")
            return OperationResult.fail(tr("errors.save_in_progress"))

        try:
            self._emit_started(operation)
            result = func(*args, **kwargs)
            self._emit_completed(operation, True)
            return OperationResult.ok(data=result)
        except (ValidationException, ApiException, NetworkException) as e:
            failed = OperationResult.from_exception(e)
            self._emit_error(operation, failed.message)
            return failed
        except Exception as e:
            error_msg = map_exception(e)
            self._emit_error(operation, error_msg)
            return OperationResult.fail(message=error_msg)
