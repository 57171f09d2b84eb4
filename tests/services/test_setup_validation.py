# -*- coding: utf-8 -*-
"""
Tests for setup validation, the internal code and per-step validation.
"""
import pytest

from models.financials import FinancialFigures
from models.owner import Owner
from models.project_setup import (
    ContractClassification, ContractType, ProjectSetup, ProjectType, VillaCategory
)
from models.step_data import ContractData, SitePlanData
from services.translation_manager import tr
from services.validation import (
    SetupValidator, ValidationFactory, format_internal_code, is_last_digit_odd
)
from services.wizard.step_validator import StepValidator
from ui.wizards.project import ProjectWizardContext


@pytest.fixture
def valid_setup():
    return ProjectSetup(
        project_type=ProjectType.VILLA,
        villa_category=VillaCategory.RESIDENTIAL,
        contract_type=ContractType.NEW,
        internal_code="M13",
        contract_classification=ContractClassification.PRIVATE_FUNDING,
    )


class TestInternalCode:

    def test_format_keeps_digits_only(self):
        assert format_internal_code("m-12a3") == "M123"
        assert format_internal_code("") == "M"

    def test_format_truncates(self):
        assert len(format_internal_code("9" * 60)) == 40

    def test_last_digit_odd(self):
        assert is_last_digit_odd("M13")
        assert not is_last_digit_odd("M12")
        assert not is_last_digit_odd("M")


class TestSetupValidator:

    def test_valid(self, valid_setup):
        assert SetupValidator().validate(valid_setup) == []

    def test_empty_setup_error_order(self):
        assert SetupValidator().validate(ProjectSetup()) == [
            tr("errors.project_type_required"),
            tr("errors.contract_type_required"),
            tr("errors.internal_code_required"),
        ]

    def test_villa_needs_category(self, valid_setup):
        valid_setup.villa_category = None
        assert SetupValidator().validate(valid_setup) == [tr("errors.villa_category_required")]

    def test_non_villa_does_not_need_category(self, valid_setup):
        setup = valid_setup.with_changes(project_type="maintenance")
        assert SetupValidator().validate(setup) == []

    def test_even_code(self, valid_setup):
        setup = valid_setup.with_changes(internal_code="M14")
        assert SetupValidator().validate(setup) == [tr("errors.internal_code_odd")]

    def test_accepts_draft_dict(self, valid_setup):
        assert SetupValidator().is_valid(valid_setup.to_dict())


class TestValidationFactory:

    def test_registered_types(self):
        assert ValidationFactory().get_registered_types() == ["setup"]

    def test_unknown_type_is_valid(self):
        assert ValidationFactory().validate({"anything": 1}, "license") == []

    def test_case_insensitive_lookup(self, valid_setup):
        assert ValidationFactory().is_valid(valid_setup, "SETUP")


class TestStepValidator:

    @pytest.fixture
    def context(self, qapp, valid_setup):
        return ProjectWizardContext(setup=valid_setup)

    def test_setup_step(self, context):
        assert StepValidator.validate_step("setup", context) == (True, "")
        context.set_setup(context.setup.with_changes(internal_code="M2"))
        assert StepValidator.validate_step("setup", context) == (False, tr("errors.internal_code_odd"))

    def test_site_plan_not_loaded(self, context):
        assert StepValidator.validate_step("siteplan", context) == (True, "")

    def test_site_plan_dates_before_owners(self, context):
        context.site_plan = SitePlanData(
            fields={"allocation_date": "2024-05-01", "application_date": "2024-04-01"},
            owners=[Owner(share_percent="10")],
        )
        assert StepValidator.validate_step("siteplan", context) == (
            False, tr("errors.allocation_before_application")
        )

    def test_site_plan_owners(self, context):
        context.site_plan = SitePlanData(owners=[Owner(owner_name_ar="أ", share_percent="100")])
        assert StepValidator.validate_step("siteplan", context) == (
            False, tr("errors.owner_authorized_required")
        )

    def test_contract_financials(self, context):
        context.contract = ContractData(
            classification=ContractClassification.HOUSING_LOAN_PROGRAM,
            figures=FinancialFigures(1000, 400, 100),
        )
        assert StepValidator.validate_step("contract", context) == (
            False, tr("errors.owner_value_autocalc")
        )

    def test_license_and_award_always_valid(self, context):
        assert StepValidator.validate_step("license", context) == (True, "")
        assert StepValidator.validate_step("award", context) == (True, "")

    def test_step_name(self):
        assert StepValidator.get_step_name("contract") == tr("step.contract")
