# -*- coding: utf-8 -*-
"""
Contract financial derivation and validation.

For housing-loan contracts the owner's share is derived from the total and
the bank financing. Otherwise the owner pays the whole total.
"""

import math
from datetime import date
from typing import Any, Dict, Iterable, Optional

from app.config import Config
from models.attachment import ContractExtension
from models.financials import ContractSummary, FeeBreakdown, FinancialFigures
from models.project_setup import ContractClassification
from services.translation_manager import tr
from utils.datetime_utils import add_months, parse_date
from utils.helpers import round_half_up, to_number, to_optional_number
from utils.logger import get_logger

logger = get_logger(__name__)


def derive_owner_value(total: Any, bank: Any) -> float:
    """max(0, total - bank). Never negative, equals total when bank is 0."""
    return max(0.0, to_number(total) - to_number(bank))


def recompute_owner_value(figures: FinancialFigures) -> bool:
    """
    Refresh the stored owner value from total/bank.

    The stored value is only touched when it drifts by more than the money
    tolerance, so float noise does not bounce edits back and forth.

    Returns:
        True if the stored value was changed
    """
    derived = derive_owner_value(figures.total_project_value, figures.total_bank_value)
    current = to_optional_number(figures.total_owner_value)
    if current is not None and abs(current - derived) <= Config.MONEY_TOLERANCE:
        return False
    figures.total_owner_value = derived
    return True


def normalize_for_classification(figures: FinancialFigures,
                                 classification: ContractClassification) -> FinancialFigures:
    """
    Outside the housing-loan program there is no bank financing: the owner
    value equals the total and the bank value is 0.
    """
    if classification == ContractClassification.HOUSING_LOAN_PROGRAM:
        return figures
    figures.total_owner_value = to_number(figures.total_project_value)
    figures.total_bank_value = 0
    return figures


def _finite(value: Any) -> Optional[float]:
    number = to_optional_number(value)
    if number is None or not math.isfinite(number):
        return None
    return number


def validate_financials(figures: FinancialFigures,
                        classification: ContractClassification) -> Dict[str, str]:
    """
    Submit-time checks.

    Returns:
        Mapping of field name to error message (empty when valid)
    """
    errors: Dict[str, str] = {}

    total = _finite(figures.total_project_value)
    if total is None or total <= 0:
        errors["total_project_value"] = tr("errors.total_project_value_required")
        return errors

    if classification != ContractClassification.HOUSING_LOAN_PROGRAM:
        return errors

    bank = _finite(figures.total_bank_value)
    if bank is None or bank < 0:
        errors["total_bank_value"] = tr("errors.total_bank_value_invalid")
        return errors

    # The stored value can be stale if the user submits right after editing
    stored = _finite(figures.total_owner_value)
    derived = derive_owner_value(total, bank)
    if stored is None or abs(stored - derived) > Config.MONEY_TOLERANCE:
        logger.warning(f"Owner value mismatch: stored={stored} derived={derived}")
        errors["total_owner_value"] = tr("errors.owner_value_autocalc")
    return errors


# ==================== Percent fields ====================

def clamp_percent(value: Any) -> Optional[float]:
    """Clamp a percentage to [0, 100]. Blank stays None."""
    number = to_optional_number(value)
    if number is None:
        return None
    return min(100.0, max(0.0, number))


def normalize_percent(value: Any) -> str:
    """
    Display form of a clamped percentage: "12.0" -> "12", "12.50" -> "12.5".
    """
    number = clamp_percent(value)
    if number is None:
        return ""
    return f"{number:.6f}".rstrip("0").rstrip(".")


# ==================== Consultant fees ====================

def fee_inclusive(gross: Any, pct: Any) -> FeeBreakdown:
    """
    Split a consultant fee out of a gross amount that already includes it:
    fee = round(gross * pct / (100 + pct)).
    """
    g = to_number(gross)
    r = to_number(pct)
    if g <= 0 or r <= 0:
        return FeeBreakdown(fee=0, net=g)
    fee = round_half_up(g * (r / (100 + r)))
    return FeeBreakdown(fee=fee, net=g - fee)


def _includes(value: Any) -> bool:
    return value is True or value == "yes"


def _party_percent(contract: Dict[str, Any], party: str) -> float:
    if not _includes(contract.get(f"{party}_includes_consultant")):
        return 0.0
    pct = (
        to_number(contract.get(f"{party}_fee_design_percent"))
        + to_number(contract.get(f"{party}_fee_supervision_percent"))
    )
    if contract.get(f"{party}_fee_extra_mode") == "percent":
        pct += to_number(contract.get(f"{party}_fee_extra_value"))
    return pct


def compute_contract_summary(contract: Dict[str, Any]) -> Optional[ContractSummary]:
    """
    Financial summary of one contract record.

    Returns None when the contract has no positive total.
    """
    if not isinstance(contract, dict):
        return None

    gross_total = to_number(contract.get("total_project_value"))
    if gross_total <= 0:
        return None

    housing_loan = (
        ContractClassification.parse(contract.get("contract_classification"))
        == ContractClassification.HOUSING_LOAN_PROGRAM
    )
    gross_bank = to_number(contract.get("total_bank_value")) if housing_loan else 0.0

    calculated_owner = max(0.0, gross_total - gross_bank) if housing_loan else gross_total
    saved_owner = to_number(contract.get("total_owner_value"))
    gross_owner = (
        saved_owner if abs(saved_owner - calculated_owner) < Config.MONEY_TOLERANCE
        else calculated_owner
    )

    owner_pct = _party_percent(contract, "owner")
    bank_pct = _party_percent(contract, "bank")

    if owner_pct > 0 and bank_pct > 0 and abs(owner_pct - bank_pct) < 1e-6:
        total_pct = owner_pct
    elif owner_pct > 0 and bank_pct > 0:
        # Weighted by the amounts each percentage applies to
        total_fees = (
            gross_owner * owner_pct / (100 + owner_pct)
            + gross_bank * bank_pct / (100 + bank_pct)
        )
        total_net = gross_total - total_fees
        total_pct = (total_fees / total_net) * 100 if total_net > 0 else 0.0
    else:
        total_pct = owner_pct or bank_pct or 0.0

    return ContractSummary(
        gross_total=gross_total,
        gross_bank=gross_bank,
        gross_owner=gross_owner,
        owner_pct=owner_pct,
        bank_pct=bank_pct,
        total_pct=total_pct,
        total=fee_inclusive(gross_total, total_pct),
        bank=fee_inclusive(gross_bank, bank_pct),
        owner=fee_inclusive(gross_owner, owner_pct),
        contract=contract,
    )


def with_vat_total(amount: Any, rate: float = None) -> float:
    """Amount plus VAT (rounded half up)."""
    rate = Config.VAT_RATE if rate is None else rate
    base = to_number(amount)
    return base + round_half_up(base * rate)


# ==================== Dates ====================

def project_end_date(start_order_date: Any, duration_months: Any,
                     extensions: Iterable[ContractExtension] = ()) -> Optional[str]:
    """
    Start order date + duration months + every extension's months, then
    + every extension's days.

    Returns:
        ISO date, or None when the start date or duration is missing/invalid
    """
    start: Optional[date] = parse_date(start_order_date)
    months = to_optional_number(duration_months)
    if start is None or months is None or months <= 0:
        return None

    total_months = int(months)
    total_days = 0
    for ext in extensions or []:
        total_months += int(to_number(ext.months))
        total_days += int(to_number(ext.days))

    end = add_months(start, total_months)
    if total_days > 0:
        end = date.fromordinal(end.toordinal() + total_days)
    return end.isoformat()


def figures_payload(figures: FinancialFigures) -> Dict[str, Optional[float]]:
    """Numeric payload of the contract totals."""
    return {
        "total_project_value": to_optional_number(figures.total_project_value),
        "total_bank_value": to_optional_number(figures.total_bank_value),
        "total_owner_value": to_optional_number(figures.total_owner_value),
    }

