# -*- coding: utf-8 -*-
"""
Standard names for uploaded files.

A new binary is renamed from its field label, so server-side names stay
predictable whatever the user's original filename was.
"""

import re
from typing import Optional

from models.attachment import UploadFile
from utils.helpers import extract_file_name_from_url

DEFAULT_FILE_NAME = "ملف"
DEFAULT_EXTENSION = ".pdf"

# Directive words at the start of a field label ("please", "attach")
_LEADING_DIRECTIVES = (
    re.compile(r"^يرجى\s+", re.IGNORECASE),
    re.compile(r"^إرفاق\s+", re.IGNORECASE),
    re.compile(r"^attach\s+", re.IGNORECASE),
)

__all__ = [
    "label_to_file_name",
    "standard_file_name",
    "rename_for_upload",
    "extract_file_name_from_url",
]


def label_to_file_name(label: Optional[str]) -> str:
    """
    "يرجى إرفاق جدول الكميات" -> "جدول_الكميات"
    "Attach Price Offer"      -> "Price_Offer"
    """
    if not label:
        return DEFAULT_FILE_NAME

    cleaned = label.strip()
    for pattern in _LEADING_DIRECTIVES:
        cleaned = pattern.sub("", cleaned)
    cleaned = re.sub(r"\s+", "_", cleaned.strip())
    return cleaned or DEFAULT_FILE_NAME


def standard_file_name(label: Optional[str], index: int = 0,
                       extension: str = "", multi: bool = False) -> str:
    """
    `{base}_{index+1}{ext}` for slots that hold several files, `{base}{ext}`
    otherwise. The extension defaults to .pdf.
    """
    ext = extension or DEFAULT_EXTENSION
    if not ext.startswith("."):
        ext = f".{ext}"
    base = label_to_file_name(label)
    if multi or index > 0:
        return f"{base}_{index + 1}{ext}"
    return f"{base}{ext}"


def rename_for_upload(file: UploadFile, label: Optional[str],
                      index: int = 0, multi: bool = False) -> str:
    """Standard name for a new upload, keeping its original extension."""
    return standard_file_name(label, index, file.extension, multi)
