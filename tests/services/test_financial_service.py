# -*- coding: utf-8 -*-
"""
Tests for contract financial derivation, validation and dates.
"""
import pytest

from models.attachment import ContractExtension
from models.financials import FeeBreakdown, FinancialFigures
from models.project_setup import ContractClassification
from services.financial_service import (
    clamp_percent, compute_contract_summary, derive_owner_value, fee_inclusive,
    figures_payload, normalize_for_classification, normalize_percent,
    project_end_date, recompute_owner_value, validate_financials, with_vat_total
)
from services.translation_manager import tr
from utils.datetime_utils import add_months, parse_date, to_display_date, to_iso_date
from utils.helpers import round_half_up, to_number

HOUSING = ContractClassification.HOUSING_LOAN_PROGRAM
PRIVATE = ContractClassification.PRIVATE_FUNDING


class TestOwnerValue:

    def test_derive(self):
        assert derive_owner_value("1,000,000", "600000") == 400000
        assert derive_owner_value(500, 800) == 0
        assert derive_owner_value(500, None) == 500

    def test_recompute_within_tolerance_is_left_alone(self):
        figures = FinancialFigures(1000, 400, 600.005)
        assert recompute_owner_value(figures) is False
        assert figures.total_owner_value == 600.005

    def test_recompute_updates_stale_value(self):
        figures = FinancialFigures(1000, 400, 100)
        assert recompute_owner_value(figures) is True
        assert figures.total_owner_value == 600

    def test_private_funding_normalization(self):
        figures = normalize_for_classification(FinancialFigures("900", 300, 600), PRIVATE)
        assert figures.total_owner_value == 900
        assert figures.total_bank_value == 0

    def test_housing_loan_is_not_normalized(self):
        figures = normalize_for_classification(FinancialFigures(900, 300, 600), HOUSING)
        assert figures.total_bank_value == 300


class TestValidateFinancials:

    def test_total_required(self):
        errors = validate_financials(FinancialFigures(0, 0, 0), PRIVATE)
        assert errors == {"total_project_value": tr("errors.total_project_value_required")}

    def test_private_funding_only_needs_total(self):
        assert validate_financials(FinancialFigures(1000, None, None), PRIVATE) == {}

    def test_negative_bank_value(self):
        errors = validate_financials(FinancialFigures(1000, -1, 1001), HOUSING)
        assert list(errors) == ["total_bank_value"]

    def test_stale_owner_value(self):
        errors = validate_financials(FinancialFigures(1000, 400, 500), HOUSING)
        assert errors == {"total_owner_value": tr("errors.owner_value_autocalc")}

    def test_consistent_housing_loan(self):
        assert validate_financials(FinancialFigures(1000, 400, 600), HOUSING) == {}


class TestPercentAndFees:

    def test_clamp_percent(self):
        assert clamp_percent("150") == 100
        assert clamp_percent(-3) == 0
        assert clamp_percent("") is None

    def test_normalize_percent(self):
        assert normalize_percent("12.0") == "12"
        assert normalize_percent("12.50") == "12.5"
        assert normalize_percent(None) == ""

    def test_fee_inclusive(self):
        assert fee_inclusive(105000, 5) == FeeBreakdown(fee=5000, net=100000)
        assert fee_inclusive(1000, 0) == FeeBreakdown(fee=0, net=1000)

    def test_vat(self):
        assert with_vat_total(1000) == 1050
        assert with_vat_total(10, rate=0.05) == 11


class TestContractSummary:

    def test_no_total(self):
        assert compute_contract_summary({"total_project_value": 0}) is None
        assert compute_contract_summary(None) is None

    def test_housing_loan_with_equal_percents(self):
        summary = compute_contract_summary({
            "contract_classification": "housing_loan_program",
            "total_project_value": 210000,
            "total_bank_value": 105000,
            "total_owner_value": 105000,
            "owner_includes_consultant": "yes",
            "owner_fee_design_percent": 2,
            "owner_fee_supervision_percent": 3,
            "bank_includes_consultant": True,
            "bank_fee_design_percent": 5,
        })
        assert summary.total_pct == 5
        assert summary.total == FeeBreakdown(fee=10000, net=200000)
        assert summary.bank.fee == 5000
        assert summary.owner.fee == 5000

    def test_private_funding_ignores_bank(self):
        summary = compute_contract_summary({
            "contract_classification": "private_funding",
            "total_project_value": 1000,
            "total_bank_value": 400,
        })
        assert summary.gross_bank == 0
        assert summary.gross_owner == 1000
        assert summary.total_pct == 0


class TestDates:

    def test_project_end_date(self):
        assert project_end_date("2024-01-31", 1) == "2024-02-29"
        extensions = [ContractExtension(months=2, days=5), ContractExtension(days="3")]
        assert project_end_date("15/01/2024", "6", extensions) == "2024-09-23"

    def test_project_end_date_needs_start_and_duration(self):
        assert project_end_date(None, 6) is None
        assert project_end_date("2024-01-01", "") is None
        assert project_end_date("2024-01-01", 0) is None

    def test_date_conversions(self):
        assert to_iso_date("15/01/1990") == "1990-01-15"
        assert to_display_date("1990-01-15T10:00:00") == "15/01/1990"
        assert parse_date("31/02/2024") is None
        assert add_months(parse_date("2023-12-31"), 2).isoformat() == "2024-02-29"

    def test_figures_payload(self):
        assert figures_payload(FinancialFigures("1,000", "", 1000)) == {
            "total_project_value": 1000.0,
            "total_bank_value": None,
            "total_owner_value": 1000.0,
        }


class TestNumberHelpers:

    @pytest.mark.parametrize("raw,expected", [
        ("AED 1,250.50", 1250.5),
        ("", 0.0),
        ("abc", 0.0),
        (float("inf"), 0.0),
        (True, 0.0),
    ])
    def test_to_number(self, raw, expected):
        assert to_number(raw) == expected

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
