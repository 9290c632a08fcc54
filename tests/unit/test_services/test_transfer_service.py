# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for transfer_service."""

from datetime import date

import pytest
from pydantic import ValidationError

from absence_registration.models import AccrualType, TransferState
from absence_registration.schemas.balance import HolidayBalanceSnapshot
from absence_registration.schemas.transfer import TransferRequest
from absence_registration.services import transfer_service
from absence_registration.services.transfer_service import (
    MAX_TRANSFER_DAYS_PER_YEAR,
    TransferService,
    calculate_year_end_summary,
    days_at_risk_of_forfeiture,
    has_mandatory_vacation_been_taken,
    is_approaching_deadline,
    max_transferable_days,
    prepare_year_end_transfer,
    process_transfer,
    validate_transfer,
)

EMAIL = "jens@example.dk"


def make_balance(**overrides) -> HolidayBalanceSnapshot:
    values = {
        "employee_email": EMAIL,
        "employee_name": "Jens Hansen",
        "holiday_year": "2024-2025",
        "accrued_days": 25.0,
    }
    values.update(overrides)
    return HolidayBalanceSnapshot(**values)


def make_request(days: float, agreement_date: date = date(2024, 12, 31), **overrides):
    values = {
        "employee_email": EMAIL,
        "employee_name": "Jens Hansen",
        "current_holiday_year": "2024-2025",
        "feriedage_to_transfer": days,
        "agreement_date": agreement_date,
    }
    values.update(overrides)
    return TransferRequest(**values)


@pytest.mark.parametrize(
    "overrides,expected",
    [
        ({}, 5.0),
        ({"used_days": 10.0}, 0.0),
        ({"used_days": 2.0}, 3.0),
        ({"pending_days": 4.0}, 1.0),
        ({"transferred_in_days": 5.0, "used_days": 5.0}, 5.0),
        ({"carried_over_days": 1.0, "used_days": 3.0}, 3.0),
    ],
)
def test_max_transferable_days(overrides, expected):
    assert max_transferable_days(make_balance(**overrides)) == expected


@pytest.mark.parametrize("accrued", [25.0, 40.0, 100.0, 1000.0])
def test_max_transferable_never_exceeds_cap(accrued):
    assert max_transferable_days(make_balance(accrued_days=accrued)) <= MAX_TRANSFER_DAYS_PER_YEAR


def test_mandatory_vacation_helpers():
    assert not has_mandatory_vacation_been_taken(make_balance(used_days=19.5))
    assert has_mandatory_vacation_been_taken(make_balance(used_days=20.0))
    assert days_at_risk_of_forfeiture(make_balance(used_days=5.0)) == 15.0
    # Capped at what is left
    assert days_at_risk_of_forfeiture(make_balance(accrued_days=8.0, used_days=5.0)) == 3.0


def test_six_days_exceeds_yearly_maximum():
    balance = make_balance(used_days=10.0)
    result = validate_transfer(balance, make_request(6.0))

    assert result.is_valid is False
    assert result.state == TransferState.REJECTED
    assert any("more than 5 feriedage" in e for e in result.errors)


def test_five_days_within_deadline_succeeds():
    balance = make_balance()
    assert max_transferable_days(balance) == 5.0

    result = process_transfer(balance, make_request(5.0))

    assert result.success is True
    assert result.state == TransferState.APPLIED
    assert result.next_year_seed.holiday_year == "2025-2026"
    assert result.next_year_seed.transferred_in_days == 5.0
    assert result.current_year_update.transferred_out_days == 5.0
    assert result.current_year_update.has_transfer_agreement is True
    assert result.current_year_update.transfer_agreement_date == date(2024, 12, 31)


def test_transfer_accrual_record():
    result = process_transfer(make_balance(), make_request(5.0, notes="Aftale med HR"))
    record = result.transfer_accrual_record

    assert record.accrual_type == AccrualType.YEAR_START_TRANSFER
    assert record.holiday_year == "2025-2026"
    assert record.accrual_date == date(2024, 12, 31)
    assert record.days_accrued == 5.0
    assert record.feriefridage_accrued == 0.0
    assert record.notes == "Transferred from 2024-2025: Aftale med HR"


def test_transfer_accrual_note_without_notes():
    result = process_transfer(make_balance(), make_request(3.0))
    assert result.transfer_accrual_record.notes == "Transferred from 2024-2025"


def test_deadline_passed_rejects_regardless_of_amount():
    balance = make_balance()
    result = validate_transfer(balance, make_request(1.0, agreement_date=date(2026, 1, 15)))

    assert result.is_valid is False
    assert result.is_deadline_passed is True
    assert result.deadline_date == date(2025, 12, 31)
    assert any("deadline has passed" in e for e in result.errors)


def test_january_agreement_for_holiday_year_2024_2025():
    """Agreements can still be made until Dec 31 of the second year."""
    result = validate_transfer(make_balance(), make_request(1.0, agreement_date=date(2025, 1, 15)))
    assert result.is_deadline_passed is False
    assert result.is_valid is True


def test_deadline_for_previous_year_has_passed():
    balance = make_balance(holiday_year="2023-2024")
    result = validate_transfer(
        balance,
        make_request(1.0, agreement_date=date(2025, 1, 15), current_holiday_year="2023-2024"),
    )
    assert result.is_valid is False
    assert result.is_deadline_passed is True


def test_negative_amount_is_rejected():
    result = validate_transfer(make_balance(), make_request(-1.0))
    assert result.is_valid is False
    assert "Transfer amount cannot be negative." in result.errors


@pytest.mark.parametrize("amount", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_amount_is_rejected(amount):
    request = make_request(1.0).model_copy(update={"feriedage_to_transfer": amount})

    result = process_transfer(make_balance(), request)

    assert result.success is False
    assert result.state == TransferState.REJECTED
    assert "Transfer amount must be a finite number." in result.validation.errors
    assert result.next_year_seed is None
    assert result.transfer_accrual_record is None


def test_non_finite_feriefridage_is_rejected():
    request = make_request(1.0).model_copy(
        update={"feriefridage_to_transfer": float("nan")}
    )
    result = validate_transfer(make_balance(), request)
    assert result.is_valid is False
    assert "Transfer amount must be a finite number." in result.errors


@pytest.mark.parametrize("field", ["feriedage_to_transfer", "feriefridage_to_transfer"])
def test_transfer_request_requires_finite_amounts(field):
    with pytest.raises(ValidationError):
        make_request(1.0, **{field: float("nan")})


def test_more_than_available_is_rejected():
    result = validate_transfer(make_balance(used_days=2.0), make_request(4.0))
    assert result.is_valid is False
    assert result.max_feriedage_transferable == 3.0
    assert any("Only 3 days are available" in e for e in result.errors)


def test_mandatory_days_only_warn():
    result = validate_transfer(make_balance(), make_request(5.0))
    assert result.is_valid is True
    assert result.state == TransferState.VALIDATED
    assert result.mandatory_days_taken == 0.0
    assert result.days_at_risk == 20.0
    assert any("mandatory 20 vacation days" in w for w in result.warnings)


def test_feriefridage_request_warns():
    result = validate_transfer(
        make_balance(used_days=0.0), make_request(1.0, feriefridage_to_transfer=2.0)
    )
    assert result.is_valid is True
    assert any("not covered by Ferieloven" in w for w in result.warnings)


def test_rejected_process_carries_errors_and_no_updates():
    result = process_transfer(make_balance(used_days=10.0), make_request(6.0))

    assert result.success is False
    assert result.state == TransferState.REJECTED
    assert result.error == " ".join(result.validation.errors)
    assert result.current_year_update is None
    assert result.next_year_seed is None
    assert result.transfer_accrual_record is None


def test_feriefridage_in_transfer_fragments():
    result = process_transfer(make_balance(), make_request(2.0, feriefridage_to_transfer=1.5))
    assert result.current_year_update.feriefridage_transferred_out == 1.5
    assert result.next_year_seed.feriefridage_transferred_in == 1.5
    assert result.transfer_accrual_record.feriefridage_accrued == 1.5


def test_prepare_year_end_transfer():
    transfer = prepare_year_end_transfer(make_balance(), 4.0, date(2025, 10, 1))
    assert transfer.current_year.holiday_year == "2024-2025"
    assert transfer.next_year.holiday_year == "2025-2026"
    assert transfer.next_year.transfer_source == "2024-2025"


def test_year_end_summary_without_agreement():
    summary = calculate_year_end_summary(
        make_balance(used_days=15.0, accrued_days=25.0, feriefridage_accrued=5.0)
    )
    assert summary.total_available == 10.0
    assert summary.mandatory_days_remaining == 5.0
    assert summary.days_to_be_forfeited == 5.0
    assert summary.days_transferable_with_agreement == 0.0
    assert summary.days_to_be_paid_out == 0.0
    assert summary.feriefridage_remaining == 5.0
    assert summary.recommendations == [
        "You need to take 5 more mandatory vacation days to avoid forfeiture.",
        "5 feriefridage remaining. Check company policy for transfer/payout rules.",
    ]


def test_year_end_summary_fifth_week():
    summary = calculate_year_end_summary(make_balance(accrued_days=25.0, used_days=0.0))
    assert summary.days_transferable_with_agreement == 5.0
    assert summary.days_to_be_paid_out == 5.0
    assert (
        "You can transfer up to 5 days to next year with a written agreement by December 31."
        in summary.recommendations
    )
    assert (
        "5 days (5th week) will be paid out if no transfer agreement is made."
        in summary.recommendations
    )


def test_year_end_summary_with_agreement():
    summary = calculate_year_end_summary(
        make_balance(
            accrued_days=25.0,
            used_days=0.0,
            has_transfer_agreement=True,
            transferred_out_days=3.0,
        )
    )
    assert summary.days_to_be_paid_out == 2.0
    assert not any("paid out" in r for r in summary.recommendations)


@pytest.mark.parametrize(
    "as_of,expected",
    [
        (date(2025, 11, 30), False),
        (date(2025, 12, 1), True),
        (date(2025, 12, 31), True),
        (date(2026, 1, 1), False),
    ],
)
def test_is_approaching_deadline(as_of, expected):
    assert is_approaching_deadline("2024-2025", 30, as_of) is expected


def test_is_approaching_deadline_custom_lookahead():
    assert is_approaching_deadline("2024-2025", 60, date(2025, 11, 1))
    assert not is_approaching_deadline("2024-2025", 7, date(2025, 12, 20))


class TestTransferService:
    """Tests for TransferService against the SQLAlchemy record store."""

    def test_process_applies_transfer(self, store, make_accrual):
        store.create_accrual_record(make_accrual(days=25.0))
        service = TransferService(store)

        result = service.process(make_request(5.0))

        assert result.success is True
        current = store.get_holiday_balance(EMAIL, "2024-2025")
        assert current.transferred_out_days == 5.0
        assert current.has_transfer_agreement is True
        nxt = store.get_holiday_balance(EMAIL, "2025-2026")
        assert nxt.transferred_in_days == 5.0

        accruals = store.fetch_accrual_records(EMAIL, "2025-2026")
        assert len(accruals) == 1
        assert accruals[0].accrual_type == AccrualType.YEAR_START_TRANSFER

        next_balance = service.balances.calculate_for_user(EMAIL, "2025-2026")
        assert next_balance.transferred_in_days == 5.0
        assert next_balance.available_days == 5.0

    def test_applying_twice_is_idempotent(self, store, make_accrual):
        store.create_accrual_record(make_accrual(days=25.0))
        service = TransferService(store)
        result = service.process(make_request(5.0))

        store.apply_transfer(result)

        assert len(store.fetch_accrual_records(EMAIL, "2025-2026")) == 1
        assert store.get_holiday_balance(EMAIL, "2025-2026").transferred_in_days == 5.0

    @pytest.mark.parametrize("second_date", [date(2024, 12, 31), date(2025, 1, 10)])
    def test_reprocessing_replaces_transfer_in(self, store, make_accrual, second_date):
        store.create_accrual_record(make_accrual(days=25.0))
        service = TransferService(store)
        assert service.process(make_request(3.0)).success is True

        result = service.process(make_request(5.0, agreement_date=second_date))

        assert result.success is True
        assert store.get_holiday_balance(EMAIL, "2024-2025").transferred_out_days == 5.0
        assert store.get_holiday_balance(EMAIL, "2025-2026").transferred_in_days == 5.0
        accruals = store.fetch_accrual_records(EMAIL, "2025-2026")
        assert [a.days_accrued for a in accruals] == [5.0]
        assert accruals[0].accrual_date == second_date
        next_balance = service.balances.calculate_for_user(EMAIL, "2025-2026")
        assert next_balance.transferred_in_days == 5.0

    def test_reprocessing_keeps_other_year_start_entries(self, store, make_accrual):
        store.create_accrual_record(make_accrual(days=25.0))
        store.create_accrual_record(
            make_accrual(
                days=1.0,
                holiday_year="2025-2026",
                accrual_date=date(2025, 9, 1),
                accrual_type=AccrualType.YEAR_START_TRANSFER,
            )
        )
        service = TransferService(store)

        service.process(make_request(3.0))
        service.process(make_request(4.0))

        accruals = store.fetch_accrual_records(EMAIL, "2025-2026")
        assert sorted(a.days_accrued for a in accruals) == [1.0, 4.0]

    def test_rejected_transfer_persists_nothing(self, store, make_accrual, make_absence):
        store.create_accrual_record(make_accrual(days=25.0))
        store.create_absence_record(make_absence(days=10.0))

        result = TransferService(store).process(make_request(6.0))

        assert result.success is False
        assert store.get_holiday_balance(EMAIL, "2024-2025") is None
        assert store.fetch_accrual_records(EMAIL, "2025-2026") == []

    def test_validate_uses_stored_balance(self, store, make_accrual):
        store.create_accrual_record(make_accrual(days=22.0))
        result = TransferService(store).validate(make_request(3.0))
        assert result.max_feriedage_transferable == 2.0
        assert result.is_valid is False

    def test_year_end_summary_response(self, store, make_accrual):
        store.create_accrual_record(make_accrual(days=25.0))
        summary = TransferService(store).year_end_summary(
            EMAIL, "2024-2025", lookahead_days=30, as_of=date(2025, 12, 15)
        )
        assert summary.transfer_deadline == date(2025, 12, 31)
        assert summary.is_approaching_deadline is True
        assert summary.days_transferable_with_agreement == 5.0

    def test_apply_rejected_result_raises(self, store):
        result = process_transfer(make_balance(used_days=10.0), make_request(6.0))
        with pytest.raises(ValueError):
            store.apply_transfer(result)


def test_module_constants():
    assert transfer_service.MANDATORY_VACATION_DAYS == 20
    assert transfer_service.MAX_TRANSFER_DAYS_PER_YEAR == 5
    assert transfer_service.ANNUAL_VACATION_DAYS == 25
