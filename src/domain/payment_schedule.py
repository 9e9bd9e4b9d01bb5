"""Payment Schedule Domain Entity

Stage split of an invoice's grand total.
"""

from datetime import date
from decimal import Decimal
from typing import Optional
from sqlmodel import Field
from src.domain.base import BaseModel


class PaymentSchedule(BaseModel):
    """
    Payment Schedule - token / agreement / registration stages

    Domain Rules:
    - token + agreement + registration + remaining == grand total
    - remaining is never stored (see PaymentScheduleAllocator.remaining)
    - Stages are ordered: token -> agreement -> registration
    """

    token_amount: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Token amount paid at booking"
    )

    agreement_amount: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Amount due at agreement"
    )

    agreement_due_date: Optional[date] = Field(
        default=None,
        description="Agreement payment due date"
    )

    registration_amount: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Amount due at registration"
    )

    registration_due_date: Optional[date] = Field(
        default=None,
        description="Registration payment due date"
    )

    @property
    def allocated(self) -> Decimal:
        return self.token_amount + self.agreement_amount + self.registration_amount
