"""SubmitInvoice Use Case

Validates a form session and stores its payload through the persistence
collaborator (create in create mode, update in edit mode).
"""

import logging
from datetime import datetime
from typing import List, Optional
from libs.result import Result, Return, Error
from src.app.invoicing import AvailabilityResolver, InvoiceAggregator, InvoiceForm, PaymentScheduleAllocator
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.invoice import Invoice
from .dtos import InvoiceResponseDTO

logger = logging.getLogger(__name__)


class SubmitInvoice:
    """
    Use Case: Submit a plot sales invoice

    Business Rules:
    1. Customer name is required
    2. At least one line item must carry a plot or an amount
    3. Every plot is re-checked against the latest sibling invoices
       (another user may have sold it since the form was opened)
    4. Payment stages may not exceed the grand total
    5. New invoices get a generated invoice number when none was entered

    Flow:
    1. Build the payload from the form
    2. Validate the payload
    3. Re-check plot exclusivity against a fresh sibling snapshot
    4. Create or update the invoice
    5. Commit transaction
    6. Return response
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.aggregator = InvoiceAggregator()
        self.allocator = PaymentScheduleAllocator()

    async def execute(self, form: InvoiceForm) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice submission

        Args:
            form: Form session holding the draft invoice

        Returns:
            Result[InvoiceResponseDTO]: Success with stored invoice summary or error
        """
        try:
            # Step 1: Build payload
            payload = form.to_payload()

            # Step 2: Validate payload
            validation_error = self._validate(payload)
            if validation_error:
                logger.warning(f"Invoice rejected: {validation_error.message}")
                return Return.err(validation_error)

            # Step 3: Re-check plot exclusivity
            sibling_invoices = await self.invoice_repo.list_all()
            conflict = self._find_plot_conflict(form.resolver, payload, sibling_invoices)
            if conflict:
                logger.warning(f"Invoice rejected: {conflict.message}")
                return Return.err(conflict)

            # Step 4: Create or update
            if form.is_edit_mode:
                stored = await self.invoice_repo.update(payload.id, payload)
                created = False
            else:
                if not payload.invoice_number:
                    payload.invoice_number = await self.invoice_repo.generate_invoice_number()
                stored = await self.invoice_repo.create(payload)
                created = True

            # Step 5: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Invoice {stored.invoice_number} {'created' if created else 'updated'} "
                f"with grand total {stored.total_amount}"
            )

            # Step 6: Build response
            return Return.ok(self._to_response_dto(stored, created))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Invoice submission failed: {e}")
            return Return.err(
                Error(
                    code="SUBMIT_INVOICE_FAILED",
                    message="Failed to submit invoice",
                    reason=str(e),
                )
            )

    def _validate(self, payload: Invoice) -> Optional[Error]:
        if not payload.customer_name.strip():
            return Error(
                code="INVALID_INVOICE",
                message="Customer name is required",
                reason="Missing customer name",
            )

        priced_lines = [
            item for item in payload.line_items if item.has_plot or item.total_amount > 0
        ]
        if not priced_lines:
            return Error(
                code="INVALID_INVOICE",
                message="Invoice needs at least one line item with a plot or an amount",
                reason="No priced line items",
            )

        if self.allocator.is_overallocated(payload.payment_schedule, payload.total_amount):
            remaining = self.allocator.remaining(payload.payment_schedule, payload.total_amount)
            return Error(
                code="INVALID_PAYMENT_SCHEDULE",
                message=f"Payment stages exceed the grand total {payload.total_amount} by {-remaining}",
                reason="Grand total changed after the payment stages were set",
            )

        return None

    def _find_plot_conflict(
        self,
        resolver: AvailabilityResolver,
        payload: Invoice,
        sibling_invoices: List[Invoice],
    ) -> Optional[Error]:
        seen = set()
        for item in payload.line_items:
            if not item.has_plot:
                continue

            key = (item.property_name, item.plot_number)
            allocated = resolver.allocated_plot_numbers(
                item.property_name, sibling_invoices, payload.id
            )
            if key in seen or item.plot_number in allocated:
                return Error(
                    code="PLOT_UNAVAILABLE",
                    message=f"Plot {item.plot_number} of {item.property_name} is not available",
                    reason="Plot is already allocated to another invoice",
                )
            seen.add(key)

        return None

    def _to_response_dto(self, invoice: Invoice, created: bool) -> InvoiceResponseDTO:
        schedule = invoice.payment_schedule
        return InvoiceResponseDTO(
            invoice_id=invoice.id,
            invoice_number=invoice.invoice_number,
            customer_name=invoice.customer_name,
            status=invoice.status.value,
            line_item_count=len(invoice.line_items),
            gross_total=self.aggregator.gross_total(invoice.line_items),
            total_discount=self.aggregator.total_discount(invoice.line_items),
            grand_total=invoice.total_amount,
            token_amount=schedule.token_amount,
            agreement_amount=schedule.agreement_amount,
            registration_amount=schedule.registration_amount,
            remaining=self.allocator.remaining(schedule, invoice.total_amount),
            created=created,
            submitted_at=datetime.utcnow(),
        )
