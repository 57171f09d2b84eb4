# -*- coding: utf-8 -*-
"""
Owner entity model.

Owners are edited in the site-plan step, which is the source of truth for
identity fields. The contract step consumes the authorized owner only and
may refine its phone/email.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from models.attachment import AttachmentState
from utils.datetime_utils import to_iso_date

# Fields sent to the backend in the `owners` JSON part
OWNER_PAYLOAD_FIELDS = (
    "id",
    "owner_name_ar",
    "owner_name_en",
    "nationality",
    "id_number",
    "id_issue_date",
    "id_expiry_date",
    "right_hold_type",
    "share_percent",
    "share_possession",
    "phone",
    "email",
    "is_authorized",
)


@dataclass
class Owner:
    """
    Owner of the land a project is built on.
    """

    id: Optional[Any] = None
    owner_name_ar: str = ""
    owner_name_en: str = ""
    nationality: str = ""
    id_number: str = ""
    id_issue_date: Optional[str] = None
    id_expiry_date: Optional[str] = None
    id_attachment: AttachmentState = field(default_factory=AttachmentState.empty)
    right_hold_type: str = "Ownership"
    share_percent: str = "100"
    share_possession: str = ""
    phone: str = ""
    email: str = ""
    is_authorized: bool = False

    @classmethod
    def empty(cls) -> "Owner":
        """Blank owner as shown when a site plan has no owners yet."""
        return cls()

    @property
    def display_name(self) -> str:
        return (self.owner_name_ar or self.owner_name_en or "").strip()

    def copy(self, **changes) -> "Owner":
        return replace(self, **changes)

    def to_payload(self) -> Dict[str, Any]:
        """JSON-part representation. The ID attachment travels as its own part."""
        payload = {name: getattr(self, name) for name in OWNER_PAYLOAD_FIELDS}
        payload["id_issue_date"] = to_iso_date(self.id_issue_date)
        payload["id_expiry_date"] = to_iso_date(self.id_expiry_date)
        if payload["id"] is None:
            payload.pop("id")
        return payload

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Owner":
        """Build from a server owner record."""
        data = data or {}
        share = data.get("share_percent")
        return cls(
            id=data.get("id"),
            owner_name_ar=data.get("owner_name_ar") or "",
            owner_name_en=data.get("owner_name_en") or "",
            nationality=data.get("nationality") or "",
            id_number=data.get("id_number") or "",
            id_issue_date=data.get("id_issue_date"),
            id_expiry_date=data.get("id_expiry_date"),
            id_attachment=AttachmentState.from_url(
                data.get("id_attachment"), data.get("id_attachment_name")
            ),
            right_hold_type=data.get("right_hold_type") or "Ownership",
            share_percent="" if share is None else str(share),
            share_possession=data.get("share_possession") or "",
            phone=data.get("phone") or "",
            email=data.get("email") or "",
            is_authorized=bool(data.get("is_authorized")),
        )
