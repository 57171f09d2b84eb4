# -*- coding: utf-8 -*-
"""
Tests for owner reconciliation, authorization and validation.
"""
import pytest

from models.owner import Owner
from services.exceptions import ValidationException
from services.owner_reconciler import OwnerReconciler, owner_key
from services.translation_manager import tr


@pytest.fixture
def site_plan_owners():
    return [
        Owner(owner_name_ar="أحمد", id_number=" 784-AB ", share_percent="60",
              phone="050111", email="a@site.ae", is_authorized=True),
        Owner(owner_name_ar="سارة", share_percent="40", phone="050222"),
    ]


class TestOwnerKey:

    def test_id_number_is_trimmed_and_casefolded(self):
        assert owner_key(Owner(id_number=" 784-ab ")) == owner_key(Owner(id_number="784-AB"))

    def test_falls_back_to_arabic_name(self):
        assert owner_key(Owner(owner_name_ar=" سارة ")) == "name:سارة"

    def test_no_key(self):
        assert owner_key(Owner()) is None


class TestReconcile:

    def test_contact_fields_come_from_target(self, site_plan_owners):
        target = [Owner(owner_name_ar="other", id_number="784-ab", phone="055999", email="")]
        merged = OwnerReconciler.reconcile(site_plan_owners, target)

        assert merged[0].phone == "055999"
        assert merged[0].email == "a@site.ae"
        assert merged[0].owner_name_ar == "أحمد"
        assert merged[0].id_number == " 784-AB "

    def test_contact_values_are_copied_as_typed(self, site_plan_owners):
        target = [Owner(id_number="784-AB", phone=" 055 999 ", email="   ")]
        merged = OwnerReconciler.reconcile(site_plan_owners, target)

        assert merged[0].phone == " 055 999 "
        assert merged[0].email == "a@site.ae"

    def test_unmatched_target_entries_are_dropped(self, site_plan_owners):
        target = [Owner(owner_name_ar="غريب", phone="1")]
        merged = OwnerReconciler.reconcile(site_plan_owners, target)
        assert [o.owner_name_ar for o in merged] == ["أحمد", "سارة"]

    def test_match_by_name_when_no_id(self, site_plan_owners):
        target = [Owner(owner_name_ar="سارة", email="s@mail.ae")]
        merged = OwnerReconciler.reconcile(site_plan_owners, target)
        assert merged[1].email == "s@mail.ae"
        assert merged[1].phone == "050222"

    def test_idempotent(self, site_plan_owners):
        target = [Owner(id_number="784-AB", phone="055999"), Owner(owner_name_ar="x")]
        once = OwnerReconciler.reconcile(site_plan_owners, target)
        twice = OwnerReconciler.reconcile(site_plan_owners, once)
        assert twice == once

    def test_source_is_not_modified(self, site_plan_owners):
        OwnerReconciler.reconcile(site_plan_owners, [Owner(id_number="784-ab", phone="9")])
        assert site_plan_owners[0].phone == "050111"


class TestAuthorization:

    def test_select_is_single_select(self, site_plan_owners):
        owners = OwnerReconciler.select_authorized(site_plan_owners, 1)
        assert [o.is_authorized for o in owners] == [False, True]

    def test_exactly_one_after_any_sequence(self, site_plan_owners):
        owners = OwnerReconciler.add_owner(site_plan_owners)
        for index in [2, 0, 1, 1, 2, 0]:
            owners = OwnerReconciler.select_authorized(owners, index)
            assert sum(o.is_authorized for o in owners) == 1

    def test_select_out_of_range(self, site_plan_owners):
        with pytest.raises(IndexError):
            OwnerReconciler.select_authorized(site_plan_owners, 5)

    def test_authorized_only(self, site_plan_owners):
        assert [o.owner_name_ar for o in OwnerReconciler.authorized_only(site_plan_owners)] == ["أحمد"]


class TestAddRemove:

    def test_added_owner_has_zero_share(self, site_plan_owners):
        owners = OwnerReconciler.add_owner(site_plan_owners)
        assert len(owners) == 3
        assert owners[-1].share_percent == "0"
        assert owners[-1].right_hold_type == "Ownership"

    def test_remove_owner(self, site_plan_owners):
        owners = OwnerReconciler.remove_owner(site_plan_owners, 0)
        assert [o.owner_name_ar for o in owners] == ["سارة"]

    def test_sole_owner_cannot_be_removed(self):
        with pytest.raises(ValidationException):
            OwnerReconciler.remove_owner([Owner.empty()], 0)


class TestValidateOwners:

    def test_valid(self, site_plan_owners):
        assert OwnerReconciler.validate_owners(site_plan_owners) == []

    def test_shares_must_sum_to_100(self):
        owners = [
            Owner(owner_name_ar="a", share_percent="60", is_authorized=True),
            Owner(owner_name_ar="b", share_percent="39"),
        ]
        errors = OwnerReconciler.validate_owners(owners)
        assert errors == [tr("errors.owners_share_sum_100")]

    def test_rounded_sum_is_accepted(self):
        owners = [
            Owner(owner_name_ar="a", share_percent="33.33", is_authorized=True),
            Owner(owner_name_ar="b", share_percent="33.33"),
            Owner(owner_name_ar="c", share_percent="33.34"),
        ]
        assert OwnerReconciler.validate_owners(owners) == []

    def test_error_order(self):
        owners = [Owner(share_percent="50"), Owner(owner_name_en="B", share_percent="10")]
        errors = OwnerReconciler.validate_owners(owners)
        assert errors == [
            tr("errors.owners_share_sum_100"),
            tr("errors.owner_authorized_required"),
            tr("errors.owner_name_required", index=1),
        ]

    def test_no_owners(self):
        assert OwnerReconciler.validate_owners([]) == [tr("errors.owners_required")]


class TestAllocationDates:

    def test_allocation_must_precede_application(self):
        assert OwnerReconciler.validate_allocation_dates("2024-03-01", "2024-03-01")
        assert OwnerReconciler.validate_allocation_dates("02/03/2024", "2024-03-01")
        assert OwnerReconciler.validate_allocation_dates("2024-02-28", "2024-03-01") is None

    def test_missing_dates_are_not_checked(self):
        assert OwnerReconciler.validate_allocation_dates(None, "2024-03-01") is None
