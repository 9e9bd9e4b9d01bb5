"""OpenInvoiceForm Use Case

Loads the plot catalog and sibling invoices and starts a form session.
"""

import logging
from typing import Optional
from libs.result import Result, Return, Error
from src.app.invoicing import InvoiceForm, PlotCatalog
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.plot_repository import PlotRepository

logger = logging.getLogger(__name__)


class OpenInvoiceForm:
    """
    Use Case: Open an invoice form in create or edit mode

    Business Rules:
    1. Without an invoice ID the form starts a new draft (create mode)
    2. With an invoice ID the stored invoice is loaded (edit mode) and is
       excluded from its own plot exclusivity check
    3. The catalog and sibling invoices are snapshots taken at open time

    Flow:
    1. Load the stored invoice (edit mode only)
    2. Load plot master data
    3. Load sibling invoices
    4. Build the form session
    """

    def __init__(
        self,
        plot_repo: PlotRepository,
        invoice_repo: InvoiceRepository,
    ):
        self.plot_repo = plot_repo
        self.invoice_repo = invoice_repo

    async def execute(self, invoice_id: Optional[str] = None) -> Result[InvoiceForm]:
        """
        Execute form opening

        Args:
            invoice_id: Stored invoice to edit, or None for a new invoice

        Returns:
            Result[InvoiceForm]: Form session or error
        """
        try:
            # Step 1: Load the invoice being edited
            invoice = None
            if invoice_id is not None:
                invoice = await self.invoice_repo.get_by_id(invoice_id)
                if not invoice:
                    return Return.err(
                        Error(
                            code="INVOICE_NOT_FOUND",
                            message=f"Invoice with ID {invoice_id} not found",
                            reason="Invoice does not exist",
                        )
                    )

            # Step 2: Load plot master data
            plots = await self.plot_repo.list_all()

            # Step 3: Load sibling invoices for exclusivity checks
            sibling_invoices = await self.invoice_repo.list_all()

            # Step 4: Build the form session
            form = InvoiceForm(PlotCatalog(plots), sibling_invoices, invoice)

            mode = "edit" if form.is_edit_mode else "create"
            logger.info(
                f"Opened invoice form in {mode} mode with {len(form.catalog)} plots "
                f"and {len(sibling_invoices)} sibling invoices"
            )
            return Return.ok(form)

        except Exception as e:
            logger.error(f"Failed to open invoice form: {e}")
            return Return.err(
                Error(
                    code="OPEN_INVOICE_FORM_FAILED",
                    message="Failed to load invoice form data",
                    reason=str(e),
                )
            )
