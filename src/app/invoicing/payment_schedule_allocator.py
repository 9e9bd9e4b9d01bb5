"""Payment Schedule Allocator

Splits the grand total into token, agreement and registration stages.

Stages are ordered token -> agreement -> registration. Setting a stage
clamps it to what the upstream stages leave over and proposes "the rest"
for the next stage. Upstream stages are never touched, so an explicit
smaller agreement amount only shifts the registration default.

When the grand total changes after stages were set, amounts are kept as
they are; remaining() shows the imbalance until the user revisits them.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Any, Optional
from src.domain.payment_schedule import PaymentSchedule
from .amounts import ZERO, clamp, to_decimal

logger = logging.getLogger(__name__)


class PaymentScheduleAllocator:

    def set_token(self, schedule: PaymentSchedule, amount: Any, grand_total: Decimal) -> PaymentSchedule:
        grand_total = _non_negative(grand_total)
        token = clamp(to_decimal(amount), ZERO, grand_total)
        agreement = grand_total - token

        schedule.token_amount = token
        schedule.agreement_amount = agreement
        schedule.registration_amount = ZERO

        logger.debug(f"Token {token} of {grand_total}: agreement proposed {agreement}")
        return schedule

    def set_agreement_due(
        self, schedule: PaymentSchedule, amount: Any, grand_total: Decimal
    ) -> PaymentSchedule:
        grand_total = _non_negative(grand_total)
        agreement = clamp(to_decimal(amount), ZERO, grand_total - schedule.token_amount)
        registration = clamp(grand_total - schedule.token_amount - agreement)

        schedule.agreement_amount = agreement
        schedule.registration_amount = registration

        logger.debug(f"Agreement {agreement} of {grand_total}: registration proposed {registration}")
        return schedule

    def set_registration_due(
        self, schedule: PaymentSchedule, amount: Any, grand_total: Decimal
    ) -> PaymentSchedule:
        grand_total = _non_negative(grand_total)
        upper = grand_total - schedule.token_amount - schedule.agreement_amount
        schedule.registration_amount = clamp(to_decimal(amount), ZERO, upper)
        return schedule

    def set_agreement_due_date(self, schedule: PaymentSchedule, due_date: Optional[date]) -> PaymentSchedule:
        schedule.agreement_due_date = due_date
        return schedule

    def set_registration_due_date(
        self, schedule: PaymentSchedule, due_date: Optional[date]
    ) -> PaymentSchedule:
        schedule.registration_due_date = due_date
        return schedule

    def remaining(self, schedule: PaymentSchedule, grand_total: Decimal) -> Decimal:
        """Balance not assigned to any stage; negative after the total shrank"""
        return grand_total - schedule.token_amount - schedule.agreement_amount - schedule.registration_amount

    def is_balanced(self, schedule: PaymentSchedule, grand_total: Decimal) -> bool:
        return self.remaining(schedule, grand_total) == ZERO

    def is_overallocated(self, schedule: PaymentSchedule, grand_total: Decimal) -> bool:
        return self.remaining(schedule, grand_total) < ZERO


def _non_negative(grand_total: Any) -> Decimal:
    return clamp(to_decimal(grand_total))
