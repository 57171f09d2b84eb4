# -*- coding: utf-8 -*-
"""
Attachment lifecycle.

Each file field moves between EMPTY, NEW, PERSISTED and REMOVED
(models.attachment.AttachmentState). This module applies the user actions to
those states and turns them into multipart parts for submission.
"""

import json
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from models.attachment import (
    AttachmentState, AttachmentStatus, AttachmentType, ContractExtension,
    DynamicAttachment, StaticAttachmentSlot, UploadFile
)
from models.owner import Owner
from services.file_naming import rename_for_upload
from services.translation_manager import tr
from utils.datetime_utils import to_iso_date
from utils.helpers import is_blank, to_optional_number
from utils.logger import get_logger

logger = get_logger(__name__)

FilePart = Tuple[str, Tuple[str, bytes, str]]


class AttachmentLifecycleManager:
    """State transitions and serialization for file fields."""

    # ==================== Transitions ====================

    @staticmethod
    def select_file(state: AttachmentState, file: UploadFile) -> AttachmentState:
        """
        User picked a file. Replacing a persisted file does not require
        removing it first; the replaced url is remembered.
        """
        if state.is_persisted:
            return AttachmentState.new(file, previous_url=state.url)
        if state.is_new:
            return AttachmentState.new(file, previous_url=state.previous_url)
        return AttachmentState.new(file)

    @staticmethod
    def remove_existing(state: AttachmentState) -> AttachmentState:
        """
        User removed the file.

        A persisted file (or a new upload that replaced one) becomes REMOVED so
        the server deletes it. A new upload with nothing behind it just
        goes back to EMPTY.
        """
        if state.is_persisted:
            return AttachmentState.removed()
        if state.is_new:
            return AttachmentState.removed() if state.previous_url else AttachmentState.empty()
        return state

    @staticmethod
    def clear(state: AttachmentState) -> AttachmentState:
        return AttachmentState.empty()

    @staticmethod
    def after_save(state: AttachmentState, url: Optional[str],
                   name: Optional[str] = None) -> AttachmentState:
        """State of a slot once the server has answered with its stored url."""
        return AttachmentState.from_url(url, name)

    # ==================== Dynamic attachments ====================

    @staticmethod
    def is_reserved(attachment: DynamicAttachment) -> bool:
        return attachment.type == AttachmentType.MAIN_CONTRACT

    @staticmethod
    def has_content(attachment: DynamicAttachment) -> bool:
        """A row counts when it has a type, a file, notes or a price."""
        return bool(
            attachment.type is not None
            or attachment.file.has_file
            or not is_blank(attachment.notes)
            or not is_blank(attachment.price)
        )

    @classmethod
    def filter_loaded_attachments(cls, records: Iterable[Dict[str, Any]]) -> List[DynamicAttachment]:
        """Server records to rows, dropping the reserved main-contract type."""
        rows = []
        for record in records or []:
            if not isinstance(record, dict):
                continue
            row = DynamicAttachment.from_api(record)
            if cls.is_reserved(row):
                logger.info("Dropping legacy main_contract attachment from dynamic list")
                continue
            rows.append(row)
        return rows

    @classmethod
    def clean_dynamic(cls, attachments: Sequence[DynamicAttachment]) -> List[DynamicAttachment]:
        """Rows that will be submitted, in order."""
        return [
            att for att in attachments or []
            if att is not None and not cls.is_reserved(att) and cls.has_content(att)
        ]

    @staticmethod
    def _file_metadata(state: AttachmentState) -> Dict[str, Optional[str]]:
        if state.status == AttachmentStatus.PERSISTED:
            return {"file_url": state.url, "file_name": state.name}
        # NEW uploads get their url from the server, REMOVED/EMPTY have none
        return {"file_url": None, "file_name": None}

    @classmethod
    def serialize_dynamic(
        cls,
        attachments: Sequence[DynamicAttachment],
        label: Optional[str] = None
    ) -> Tuple[str, List[FilePart]]:
        """
        Returns:
            (metadata JSON text, binary parts keyed `attachments[{idx}][file]`)
        """
        label = label or tr("file.contract_attachment")
        metadata = []
        parts: List[FilePart] = []

        for idx, att in enumerate(cls.clean_dynamic(attachments)):
            price = to_optional_number(att.price)
            entry = {
                "type": att.type.value if att.type else AttachmentType.APPENDIX.value,
                "date": to_iso_date(att.date),
                "notes": (att.notes or "").strip(),
                "price": price,
            }
            entry.update(cls._file_metadata(att.file))
            metadata.append(entry)

            if att.file.is_new:
                name = rename_for_upload(att.file.file, label, idx, multi=True)
                parts.append((f"attachments[{idx}][file]", att.file.file.to_request_part(name)))

        return json.dumps(metadata, ensure_ascii=False), parts

    # ==================== Static slots ====================

    @staticmethod
    def serialize_static(
        slot: StaticAttachmentSlot,
        state: AttachmentState,
        label: Optional[str] = None
    ) -> Tuple[Dict[str, str], List[FilePart]]:
        """
        NEW contributes a binary part under the slot name, REMOVED a
        `{slot}_delete` flag. PERSISTED and EMPTY contribute nothing.
        """
        if state.is_new:
            name = rename_for_upload(state.file, label or tr(f"file.{slot.value}"))
            return {}, [(slot.value, state.file.to_request_part(name))]
        if state.is_removed:
            return {slot.delete_key: "true"}, []
        return {}, []

    @classmethod
    def serialize_slots(
        cls,
        slots: Dict[StaticAttachmentSlot, AttachmentState]
    ) -> Tuple[Dict[str, str], List[FilePart]]:
        fields: Dict[str, str] = {}
        parts: List[FilePart] = []
        for slot, state in slots.items():
            slot_fields, slot_parts = cls.serialize_static(slot, state)
            fields.update(slot_fields)
            parts.extend(slot_parts)
        return fields, parts

    @staticmethod
    def load_slots(
        record: Dict[str, Any],
        slots: Iterable[StaticAttachmentSlot]
    ) -> Dict[StaticAttachmentSlot, AttachmentState]:
        """Server record to slot states (the url is stored under the slot name)."""
        record = record or {}
        return {
            slot: AttachmentState.from_url(
                record.get(slot.value) or record.get(slot.url_key),
                record.get(slot.name_key)
            )
            for slot in slots
        }

    # ==================== Owner ID cards ====================

    @staticmethod
    def serialize_owner_files(owners: Sequence[Owner]) -> Tuple[Dict[str, str], List[FilePart]]:
        """
        Per owner index: a new ID card goes as `owners[idx][id_attachment]`,
        a removed one as `owners[idx][id_attachment_delete]=true`. Persisted
        files are kept by the server and not re-sent.
        """
        label = tr("file.id_attachment")
        fields: Dict[str, str] = {}
        parts: List[FilePart] = []
        for idx, owner in enumerate(owners):
            state = owner.id_attachment
            if state.is_new:
                name = rename_for_upload(state.file, label, idx)
                parts.append((f"owners[{idx}][id_attachment]", state.file.to_request_part(name)))
            elif state.is_removed:
                fields[f"owners[{idx}][id_attachment_delete]"] = "true"
        return fields, parts

    # ==================== Contract extensions ====================

    @staticmethod
    def _extension_has_content(ext: ContractExtension) -> bool:
        return bool(
            not is_blank(ext.reason)
            or (to_optional_number(ext.days) or 0) > 0
            or (to_optional_number(ext.months) or 0) > 0
            or not is_blank(ext.extension_date)
            or not is_blank(ext.approval_number)
            or ext.file.has_file
        )

    @classmethod
    def serialize_extensions(
        cls,
        extensions: Sequence[ContractExtension]
    ) -> Tuple[str, List[FilePart]]:
        """Empty extensions are dropped; new files go as `extensions[{idx}][file]`."""
        label = tr("file.extension_file")
        cleaned = [ext for ext in extensions or [] if ext and cls._extension_has_content(ext)]
        metadata = []
        parts: List[FilePart] = []
        for idx, ext in enumerate(cleaned):
            entry = {
                "reason": (ext.reason or "").strip(),
                "days": int(to_optional_number(ext.days) or 0),
                "months": int(to_optional_number(ext.months) or 0),
                "extension_date": to_iso_date(ext.extension_date),
                "approval_number": (ext.approval_number or "").strip() or None,
            }
            entry.update(cls._file_metadata(ext.file))
            metadata.append(entry)
            if ext.file.is_new:
                name = rename_for_upload(ext.file.file, label, idx, multi=True)
                parts.append((f"extensions[{idx}][file]", ext.file.file.to_request_part(name)))
        return json.dumps(metadata, ensure_ascii=False), parts
