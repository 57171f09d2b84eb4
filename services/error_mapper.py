# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from typing import Any, List, Optional

from services.translation_manager import tr, has_translation
from services.exceptions import ApiException, ValidationException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)

KNOWN_HTTP_STATUSES = (400, 401, 403, 404, 405, 408, 409, 413, 422, 429, 500, 502, 503, 504)

# Keys in a server error body that are not field errors
_GENERAL_KEYS = ("detail", "non_field_errors", "message", "owners")


def _prefix(context: Optional[str]) -> str:
    return f"[{context}] " if context else ""


def _first(value: Any) -> Any:
    if isinstance(value, list):
        return value[0] if value else None
    return value


def field_label(field: str) -> str:
    """Translated label of a form field, or the raw field name."""
    key = f"field.{field}"
    return tr(key) if has_translation(key) else field


def http_status_message(status: Optional[int], context: str = None) -> str:
    """Fixed user-facing message for an HTTP status code."""
    if status in KNOWN_HTTP_STATUSES:
        return f"{_prefix(context)}{tr(f'error.http.{status}')}"
    return f"{_prefix(context)}{tr('error.http.unknown', status=status)}"


def format_field_errors(response_data: Any) -> str:
    """
    Flatten a structured server error body into a bullet list.

    {"internal_code": ["exists"], "owners": [{}, {"id_number": ["bad"]}]}
    becomes
        • Internal code: exists
        • Owner 2 - ID number: bad
    """
    if not isinstance(response_data, dict):
        return ""

    lines: List[str] = []
    for field, value in response_data.items():
        if field in _GENERAL_KEYS:
            continue
        message = _first(value)
        if message and not isinstance(message, (dict, list)):
            lines.append(f"• {field_label(field)}: {message}")

    owners = response_data.get("owners")
    if isinstance(owners, list):
        for idx, owner_errors in enumerate(owners):
            if not isinstance(owner_errors, dict):
                continue
            owner = tr("error.owner_prefix", index=idx + 1)
            for field, value in owner_errors.items():
                message = _first(value)
                if message:
                    lines.append(f"• {owner} - {field_label(field)}: {message}")

    general = response_data.get("non_field_errors")
    if general:
        for message in (general if isinstance(general, list) else [general]):
            lines.append(f"• {message}")

    return "\n".join(lines)


def format_api_error(error: ApiException, context: str = None) -> str:
    """HTTP status message followed by whatever detail the server sent."""
    context = context or error.context
    message = http_status_message(error.status_code, context)
    data = error.response_data

    if isinstance(data, dict) and data:
        details = format_field_errors(data)
        if details:
            return f"{message}\n\n{details}"
        for key in ("detail", "message"):
            if data.get(key):
                return f"{message}\n\n{_first(data[key])}"
    return message


def map_network_error(error: NetworkException, context: str = None) -> str:
    """Map network exception to user-friendly translated message."""
    context = context or error.context
    msg = str(error.original_error) if error.original_error else error.message or ""
    if "timeout" in msg.lower() or "timed out" in msg.lower():
        return f"{_prefix(context)}{tr('error.timeout')}"
    return f"{_prefix(context)}{tr('error.network')}"


def map_exception(error: Exception, context: str = None) -> str:
    """Map any exception to a user-facing message.

    Technical details are logged, the returned text is what the user sees.
    """
    if isinstance(error, ApiException):
        if not error.context and context:
            error.context = context
        logger.warning(f"API error ({error.status_code}) {error.context or ''}: {error.response_data}")
        return format_api_error(error)

    if isinstance(error, NetworkException):
        logger.warning(f"Network error {context or ''}: {error}")
        return map_network_error(error, context)

    if isinstance(error, ValidationException):
        if error.errors:
            logger.warning(f"Validation error: {error.errors}")
        return error.message

    logger.error(f"Unexpected error {context or ''}: {error}", exc_info=error)
    return f"{_prefix(context)}{tr('error.unexpected')}"
