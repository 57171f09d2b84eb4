# -*- coding: utf-8 -*-
"""
Attachment models.

Every file field in the wizard (owner ID card, static contract slots,
dynamic contract attachments, extension files) shares the same four-state
file model held by AttachmentState.
"""

import mimetypes
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from utils.helpers import extract_file_name_from_url


class AttachmentStatus(Enum):
    EMPTY = "empty"
    NEW = "new"
    PERSISTED = "persisted"
    REMOVED = "removed"


@dataclass(frozen=True)
class UploadFile:
    """
    A binary chosen by the user, not yet sent to the server.

    Either `path` (read at submit time) or `content` must be given.
    """

    filename: str
    path: Optional[str] = None
    content: Optional[bytes] = None
    content_type: Optional[str] = None

    @classmethod
    def from_path(cls, path: str) -> "UploadFile":
        return cls(filename=os.path.basename(path), path=path)

    @property
    def extension(self) -> str:
        """Extension including the dot, or '' when the name has none."""
        _, ext = os.path.splitext(self.filename or "")
        return ext

    @property
    def mime_type(self) -> str:
        return (
            self.content_type
            or mimetypes.guess_type(self.filename or "")[0]
            or "application/octet-stream"
        )

    def read(self) -> bytes:
        if self.content is not None:
            return self.content
        if not self.path or not os.path.exists(self.path):
            raise ValueError(f"File not found: {self.path}")
        with open(self.path, "rb") as f:
            return f.read()

    def to_request_part(self, filename: Optional[str] = None) -> Tuple[str, bytes, str]:
        """(filename, bytes, mime) tuple as accepted by requests' `files=`."""
        return (filename or self.filename, self.read(), self.mime_type)


@dataclass(frozen=True)
class AttachmentState:
    """
    State of a single file slot.

    EMPTY      nothing attached
    NEW        `file` holds a binary to upload
    PERSISTED  `url`/`name` reference a file already on the server
    REMOVED    a previously persisted file the user asked to delete
    """

    status: AttachmentStatus = AttachmentStatus.EMPTY
    file: Optional[UploadFile] = None
    url: Optional[str] = None
    name: Optional[str] = None
    # NEW only: url of the persisted file this upload replaces
    previous_url: Optional[str] = None

    @classmethod
    def empty(cls) -> "AttachmentState":
        return cls()

    @classmethod
    def new(cls, file: UploadFile, previous_url: Optional[str] = None) -> "AttachmentState":
        if file is None:
            raise ValueError("A NEW attachment needs a file")
        return cls(status=AttachmentStatus.NEW, file=file, previous_url=previous_url)

    @classmethod
    def persisted(cls, url: str, name: Optional[str] = None) -> "AttachmentState":
        if not url:
            raise ValueError("A PERSISTED attachment needs a url")
        return cls(status=AttachmentStatus.PERSISTED, url=url, name=name)

    @classmethod
    def removed(cls) -> "AttachmentState":
        return cls(status=AttachmentStatus.REMOVED)

    @classmethod
    def from_url(cls, url: Optional[str], name: Optional[str] = None) -> "AttachmentState":
        """PERSISTED when the server returned a url, EMPTY otherwise."""
        if url:
            return cls.persisted(url, name or extract_file_name_from_url(url))
        return cls.empty()

    @property
    def is_empty(self) -> bool:
        return self.status == AttachmentStatus.EMPTY

    @property
    def is_new(self) -> bool:
        return self.status == AttachmentStatus.NEW

    @property
    def is_persisted(self) -> bool:
        return self.status == AttachmentStatus.PERSISTED

    @property
    def is_removed(self) -> bool:
        return self.status == AttachmentStatus.REMOVED

    @property
    def has_file(self) -> bool:
        """True when a new binary or an existing url is attached."""
        return self.is_new or self.is_persisted


class AttachmentType(Enum):
    """
    Type of a dynamic contract attachment.

    MAIN_CONTRACT is reserved for the principal contract document, which has
    its own static slot. It never appears in the dynamic list.
    """
    APPENDIX = "appendix"
    MAIN_CONTRACT = "main_contract"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Any) -> Optional["AttachmentType"]:
        if isinstance(value, cls):
            return value
        if value is None or value == "":
            return None
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


class StaticAttachmentSlot(Enum):
    """Singleton file fields with a fixed role."""

    # Site plan / license / awarding
    APPLICATION_FILE = "application_file"
    BUILDING_LICENSE_FILE = "building_license_file"
    AWARDING_FILE = "awarding_file"

    # Contract documents
    CONTRACT_FILE = "contract_file"
    CONTRACT_APPENDIX_FILE = "contract_appendix_file"
    CONTRACT_EXPLANATION_FILE = "contract_explanation_file"
    START_ORDER_FILE = "start_order_file"

    # Contract technical documents
    QUANTITIES_TABLE_FILE = "quantities_table_file"
    APPROVED_MATERIALS_TABLE_FILE = "approved_materials_table_file"
    PRICE_OFFER_FILE = "price_offer_file"
    CONTRACTUAL_DRAWINGS_FILE = "contractual_drawings_file"
    GENERAL_SPECIFICATIONS_FILE = "general_specifications_file"

    @property
    def url_key(self) -> str:
        return f"{self.value}_url"

    @property
    def name_key(self) -> str:
        return f"{self.value}_name"

    @property
    def delete_key(self) -> str:
        return f"{self.value}_delete"


CONTRACT_DOCUMENT_SLOTS = (
    StaticAttachmentSlot.CONTRACT_FILE,
    StaticAttachmentSlot.CONTRACT_APPENDIX_FILE,
    StaticAttachmentSlot.CONTRACT_EXPLANATION_FILE,
    StaticAttachmentSlot.START_ORDER_FILE,
)

CONTRACT_TECHNICAL_SLOTS = (
    StaticAttachmentSlot.QUANTITIES_TABLE_FILE,
    StaticAttachmentSlot.APPROVED_MATERIALS_TABLE_FILE,
    StaticAttachmentSlot.PRICE_OFFER_FILE,
    StaticAttachmentSlot.CONTRACTUAL_DRAWINGS_FILE,
    StaticAttachmentSlot.GENERAL_SPECIFICATIONS_FILE,
)


@dataclass
class DynamicAttachment:
    """User-addable, typed contract attachment row."""

    type: Optional[AttachmentType] = None
    date: Optional[str] = None
    notes: str = ""
    price: Union[str, float, None] = None
    file: AttachmentState = field(default_factory=AttachmentState.empty)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "DynamicAttachment":
        return cls(
            type=AttachmentType.parse(data.get("type")),
            date=data.get("date"),
            notes=data.get("notes") or "",
            price=data.get("price"),
            file=AttachmentState.from_url(data.get("file_url"), data.get("file_name")),
        )


@dataclass
class ContractExtension:
    """A contract duration extension (days and/or months)."""

    reason: str = ""
    days: Union[int, str, None] = 0
    months: Union[int, str, None] = 0
    extension_date: Optional[str] = None
    approval_number: str = ""
    file: AttachmentState = field(default_factory=AttachmentState.empty)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ContractExtension":
        return cls(
            reason=data.get("reason") or "",
            days=data.get("days") or 0,
            months=data.get("months") or 0,
            extension_date=data.get("extension_date"),
            approval_number=data.get("approval_number") or "",
            file=AttachmentState.from_url(data.get("file_url"), data.get("file_name")),
        )
