"""GetPaymentBreakdown Use Case

Payment details of an invoice as shown on the invoice document: the token
already paid, the agreement and registration amounts still due, and the
balance left over.
"""

from decimal import Decimal
from libs.result import Result, Return
from src.app.invoicing import InvoiceAggregator
from src.domain.invoice import Invoice
from .dtos import PaymentBreakdownResponseDTO, PaymentStageDTO

ZERO = Decimal("0")

STAGE_LABELS = {
    "token": "Token Amount",
    "agreement": "Agreement Payment",
    "registration": "Registration Payment",
}


class GetPaymentBreakdown:
    """
    Use case: Payment breakdown of an invoice

    Read-only. Stages with a zero amount are left out. The grand total is
    the stamped total_amount of a stored invoice, or the line item sum for
    a draft that was not stamped yet.
    """

    def __init__(self):
        self.aggregator = InvoiceAggregator()

    async def execute(self, invoice: Invoice) -> Result[PaymentBreakdownResponseDTO]:
        """
        Build the payment breakdown

        Args:
            invoice: Stored invoice or draft payload

        Returns:
            Result[PaymentBreakdownResponseDTO]: Stage rows and balance
        """
        schedule = invoice.payment_schedule
        grand_total = invoice.total_amount or self.aggregator.grand_total(invoice.line_items)

        stages = []
        if schedule.token_amount > ZERO:
            stages.append(
                PaymentStageDTO(
                    stage="token",
                    label=STAGE_LABELS["token"],
                    amount=schedule.token_amount,
                    status="paid",
                )
            )
        if schedule.agreement_amount > ZERO:
            stages.append(
                PaymentStageDTO(
                    stage="agreement",
                    label=STAGE_LABELS["agreement"],
                    amount=schedule.agreement_amount,
                    status="due",
                    due_date=schedule.agreement_due_date,
                )
            )
        if schedule.registration_amount > ZERO:
            stages.append(
                PaymentStageDTO(
                    stage="registration",
                    label=STAGE_LABELS["registration"],
                    amount=schedule.registration_amount,
                    status="due",
                    due_date=schedule.registration_due_date,
                )
            )

        total_paid = schedule.token_amount
        total_due = schedule.agreement_amount + schedule.registration_amount

        return Return.ok(
            PaymentBreakdownResponseDTO(
                invoice_number=invoice.invoice_number,
                grand_total=grand_total,
                stages=stages,
                total_paid=total_paid,
                total_due=total_due,
                balance=grand_total - total_paid - total_due,
            )
        )
