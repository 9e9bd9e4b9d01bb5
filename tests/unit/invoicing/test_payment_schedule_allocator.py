"""Unit tests for PaymentScheduleAllocator"""

import pytest
from datetime import date
from decimal import Decimal
from src.app.invoicing import PaymentScheduleAllocator
from src.domain.payment_schedule import PaymentSchedule


@pytest.fixture
def allocator():
    return PaymentScheduleAllocator()


def assert_invariant(allocator, schedule, grand_total):
    total = (
        schedule.token_amount
        + schedule.agreement_amount
        + schedule.registration_amount
        + allocator.remaining(schedule, grand_total)
    )
    assert total == grand_total


class TestStageCascade:

    def test_worked_example(self, allocator):
        """
        Given: grand total 900000
        When: token 300000, then agreement 400000
        Then: agreement proposed 600000 after the token; registration 200000
              after the agreement; nothing remains
        """
        # Arrange
        schedule = PaymentSchedule()
        grand_total = Decimal("900000")

        # Act & Assert
        allocator.set_token(schedule, Decimal("300000"), grand_total)
        assert schedule.agreement_amount == Decimal("600000")
        assert schedule.registration_amount == Decimal("0")

        allocator.set_agreement_due(schedule, Decimal("400000"), grand_total)
        assert schedule.registration_amount == Decimal("200000")
        assert allocator.remaining(schedule, grand_total) == Decimal("0")

    def test_token_change_resets_downstream_proposals(self, allocator):
        schedule = PaymentSchedule()
        grand_total = Decimal("900000")
        allocator.set_token(schedule, 300000, grand_total)
        allocator.set_agreement_due(schedule, 400000, grand_total)

        allocator.set_token(schedule, 100000, grand_total)

        assert schedule.agreement_amount == Decimal("800000")
        assert schedule.registration_amount == Decimal("0")

    def test_agreement_change_leaves_token_untouched(self, allocator):
        schedule = PaymentSchedule()
        grand_total = Decimal("900000")
        allocator.set_token(schedule, 300000, grand_total)

        allocator.set_agreement_due(schedule, 100000, grand_total)

        assert schedule.token_amount == Decimal("300000")
        assert schedule.registration_amount == Decimal("500000")

    def test_registration_is_terminal(self, allocator):
        schedule = PaymentSchedule()
        grand_total = Decimal("900000")
        allocator.set_token(schedule, 300000, grand_total)
        allocator.set_agreement_due(schedule, 400000, grand_total)

        allocator.set_registration_due(schedule, 150000, grand_total)

        assert schedule.token_amount == Decimal("300000")
        assert schedule.agreement_amount == Decimal("400000")
        assert schedule.registration_amount == Decimal("150000")
        assert allocator.remaining(schedule, grand_total) == Decimal("50000")


class TestStageClamping:

    def test_token_clamps_to_grand_total(self, allocator):
        schedule = allocator.set_token(PaymentSchedule(), 1000, Decimal("600"))

        assert schedule.token_amount == Decimal("600")
        assert schedule.agreement_amount == Decimal("0")

    def test_negative_token_clamps_to_zero(self, allocator):
        schedule = allocator.set_token(PaymentSchedule(), -5, Decimal("600"))

        assert schedule.token_amount == Decimal("0")
        assert schedule.agreement_amount == Decimal("600")

    def test_agreement_clamps_to_balance_after_token(self, allocator):
        schedule = PaymentSchedule()
        allocator.set_token(schedule, 200, Decimal("600"))

        allocator.set_agreement_due(schedule, 1000, Decimal("600"))

        assert schedule.agreement_amount == Decimal("400")
        assert schedule.registration_amount == Decimal("0")

    def test_registration_clamps_to_balance_after_agreement(self, allocator):
        schedule = PaymentSchedule()
        allocator.set_token(schedule, 200, Decimal("600"))
        allocator.set_agreement_due(schedule, 300, Decimal("600"))

        allocator.set_registration_due(schedule, 1000, Decimal("600"))

        assert schedule.registration_amount == Decimal("100")

    def test_zero_grand_total_clamps_everything(self, allocator):
        schedule = PaymentSchedule()

        allocator.set_token(schedule, 100, Decimal("0"))
        allocator.set_agreement_due(schedule, 100, Decimal("0"))
        allocator.set_registration_due(schedule, 100, Decimal("0"))

        assert schedule.allocated == Decimal("0")
        assert allocator.remaining(schedule, Decimal("0")) == Decimal("0")


class TestGrandTotalDrift:

    def test_stages_are_frozen_when_total_shrinks(self, allocator):
        schedule = PaymentSchedule()
        allocator.set_token(schedule, 300000, Decimal("900000"))
        allocator.set_agreement_due(schedule, 400000, Decimal("900000"))

        new_total = Decimal("500000")

        assert schedule.token_amount == Decimal("300000")
        assert allocator.remaining(schedule, new_total) == Decimal("-400000")
        assert allocator.is_overallocated(schedule, new_total) is True
        assert allocator.is_balanced(schedule, new_total) is False

    def test_stage_edit_after_shrink_never_goes_negative(self, allocator):
        schedule = PaymentSchedule()
        allocator.set_token(schedule, 300000, Decimal("900000"))
        allocator.set_agreement_due(schedule, 400000, Decimal("900000"))

        allocator.set_registration_due(schedule, 100, Decimal("500000"))
        allocator.set_agreement_due(schedule, 100, Decimal("200000"))

        assert schedule.registration_amount == Decimal("0")
        assert schedule.agreement_amount == Decimal("0")

    def test_growth_shows_unallocated_balance(self, allocator):
        schedule = allocator.set_token(PaymentSchedule(), 100, Decimal("1000"))

        assert allocator.remaining(schedule, Decimal("1500")) == Decimal("500")


class TestDueDates:

    def test_due_dates_are_set_independently_of_amounts(self, allocator):
        schedule = PaymentSchedule()
        allocator.set_token(schedule, 100, Decimal("1000"))

        allocator.set_agreement_due_date(schedule, date(2024, 2, 1))
        allocator.set_registration_due_date(schedule, date(2024, 3, 1))

        assert schedule.agreement_due_date == date(2024, 2, 1)
        assert schedule.registration_due_date == date(2024, 3, 1)
        assert schedule.agreement_amount == Decimal("900")


STAGE_SEQUENCES = [
    [("token", 300000), ("agreement", 400000), ("registration", 100000)],
    [("registration", 50), ("agreement", 700000), ("token", 1000000), ("agreement", 5)],
    [("agreement", 200000), ("token", "123456.78"), ("registration", 999999), ("agreement", "0.01")],
    [("token", -1), ("registration", -1), ("agreement", 900001), ("registration", 1)],
]


class TestScheduleProperties:

    @pytest.mark.parametrize("sequence", STAGE_SEQUENCES)
    def test_stages_always_sum_to_grand_total(self, allocator, sequence):
        grand_total = Decimal("900000")
        schedule = PaymentSchedule()
        setters = {
            "token": allocator.set_token,
            "agreement": allocator.set_agreement_due,
            "registration": allocator.set_registration_due,
        }

        for stage, amount in sequence:
            setters[stage](schedule, amount, grand_total)
            assert_invariant(allocator, schedule, grand_total)
            assert allocator.remaining(schedule, grand_total) >= Decimal("0")

    @pytest.mark.parametrize("setter_name", ["set_token", "set_agreement_due", "set_registration_due"])
    def test_setters_are_idempotent(self, allocator, setter_name):
        grand_total = Decimal("900000")
        schedule = PaymentSchedule()
        allocator.set_token(schedule, 100000, grand_total)
        allocator.set_agreement_due(schedule, 500000, grand_total)
        setter = getattr(allocator, setter_name)

        setter(schedule, 200000, grand_total)
        once = schedule.model_dump()
        setter(schedule, 200000, grand_total)

        assert schedule.model_dump() == once
