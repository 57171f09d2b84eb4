# -*- coding: utf-8 -*-
"""
Contract financial figures.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class FinancialFigures:
    """
    Contract totals as entered/derived in the contract step.

    total_owner_value is derived from the other two for housing-loan
    contracts (see services.financial_service).
    """

    total_project_value: Any = None
    total_bank_value: Any = None
    total_owner_value: Any = None

    def to_payload(self) -> Dict[str, Any]:
        return {
            "total_project_value": self.total_project_value,
            "total_bank_value": self.total_bank_value,
            "total_owner_value": self.total_owner_value,
        }

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "FinancialFigures":
        data = data or {}
        return cls(
            total_project_value=data.get("total_project_value"),
            total_bank_value=data.get("total_bank_value"),
            total_owner_value=data.get("total_owner_value"),
        )


@dataclass(frozen=True)
class FeeBreakdown:
    """Consultant fee split out of a gross amount that already includes it."""

    fee: float
    net: float


@dataclass(frozen=True)
class ContractSummary:
    gross_total: float
    gross_bank: float
    gross_owner: float
    owner_pct: float
    bank_pct: float
    total_pct: float
    total: FeeBreakdown
    bank: FeeBreakdown
    owner: FeeBreakdown
    contract: Optional[Dict[str, Any]] = None
