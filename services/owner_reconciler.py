# -*- coding: utf-8 -*-
"""
Owner reconciliation between the site-plan and contract steps.

The site plan owns the owner set and every identity field. The contract
step works on the authorized owner only and may refine phone/email.
"""

from typing import Dict, List, Optional, Sequence

from models.owner import Owner
from services.exceptions import ValidationException
from services.translation_manager import tr
from utils.datetime_utils import parse_date
from utils.helpers import round_half_up, to_number
from utils.logger import get_logger

logger = get_logger(__name__)

# Fields the contract step may override
CONTACT_FIELDS = ("phone", "email")


def owner_key(owner: Owner) -> Optional[str]:
    """
    Matching key: ID number (trimmed, case-insensitive), else Arabic name.
    """
    id_number = (owner.id_number or "").strip()
    if id_number:
        return f"id:{id_number.casefold()}"
    name = (owner.owner_name_ar or "").strip()
    if name:
        return f"name:{name}"
    return None


class OwnerReconciler:
    """Merging, authorization and validation of owner lists."""

    @staticmethod
    def reconcile(source: Sequence[Owner], target: Sequence[Owner]) -> List[Owner]:
        """
        Merge the contract view (`target`) onto the site-plan owners (`source`).

        Every source owner produces one record with its own identity fields.
        Phone/email come from the matching target owner when non-empty.
        Target owners with no source match are dropped.
        """
        target_by_key: Dict[str, Owner] = {}
        for owner in target or []:
            key = owner_key(owner)
            if key and key not in target_by_key:
                target_by_key[key] = owner

        merged = []
        for owner in source or []:
            key = owner_key(owner)
            match = target_by_key.get(key) if key else None
            overrides = {}
            if match is not None:
                for field in CONTACT_FIELDS:
                    value = getattr(match, field) or ""
                    if value.strip():
                        overrides[field] = value
            merged.append(owner.copy(**overrides))
        return merged

    @staticmethod
    def select_authorized(owners: Sequence[Owner], index: int) -> List[Owner]:
        """Single-select: owner `index` becomes the only authorized owner."""
        if not 0 <= index < len(owners):
            raise IndexError(f"Owner index out of range: {index}")
        return [owner.copy(is_authorized=(idx == index)) for idx, owner in enumerate(owners)]

    @staticmethod
    def authorized_only(owners: Sequence[Owner]) -> List[Owner]:
        """The contract's view of the owners."""
        return [owner for owner in owners or [] if owner.is_authorized]

    @staticmethod
    def add_owner(owners: Sequence[Owner]) -> List[Owner]:
        """Append a blank owner. Its share starts at 0 so the sum stays put."""
        return list(owners) + [Owner(share_percent="0")]

    @staticmethod
    def remove_owner(owners: Sequence[Owner], index: int) -> List[Owner]:
        """Remove owner `index`. The sole remaining owner cannot be removed."""
        if len(owners) <= 1:
            raise ValidationException(tr("errors.owner_remove_last"), field="owners")
        if not 0 <= index < len(owners):
            raise IndexError(f"Owner index out of range: {index}")
        return [owner for idx, owner in enumerate(owners) if idx != index]

    @staticmethod
    def share_sum(owners: Sequence[Owner]) -> float:
        return sum(to_number(owner.share_percent) for owner in owners or [])

    @classmethod
    def validate_owners(cls, owners: Sequence[Owner]) -> List[str]:
        """
        Client-side owner checks, in the order they are reported:
        share sum, authorized owner, owner names.
        """
        if not owners:
            return [tr("errors.owners_required")]

        errors = []
        if round_half_up(cls.share_sum(owners)) != 100:
            errors.append(tr("errors.owners_share_sum_100"))

        authorized = sum(1 for owner in owners if owner.is_authorized)
        if authorized != 1:
            errors.append(tr("errors.owner_authorized_required"))

        for idx, owner in enumerate(owners):
            if not (owner.owner_name_ar or "").strip() and not (owner.owner_name_en or "").strip():
                errors.append(tr("errors.owner_name_required", index=idx + 1))
        return errors

    @staticmethod
    def validate_allocation_dates(allocation_date, application_date) -> Optional[str]:
        """Allocation must come strictly before application when both are set."""
        allocation = parse_date(allocation_date)
        application = parse_date(application_date)
        if allocation and application and allocation >= application:
            return tr("errors.allocation_before_application")
        return None
