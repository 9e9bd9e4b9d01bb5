"""Invoice Form Session

Holds one draft invoice while the user builds it, in create mode or in
edit mode of a stored invoice.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Any, Callable, List, Optional, Sequence
from config import ApplicationConfig
from libs.result import Result, Return, Error
from src.domain.invoice import Invoice, InvoiceStatus, InvoiceType
from src.domain.line_item import LineItem
from src.domain.plot import PlotRecord
from .availability_resolver import AvailabilityResolver
from .invoice_aggregator import InvoiceAggregator
from .line_item_calculator import LineItemCalculator
from .payment_schedule_allocator import PaymentScheduleAllocator
from .plot_catalog import PlotCatalog

logger = logging.getLogger(__name__)


class InvoiceForm:
    """
    Draft invoice editing session

    Business Rules:
    1. Edit mode excludes the stored invoice from its own exclusivity check
    2. A plot is offered to one line only, within the draft as well
    3. The draft always keeps at least one line item
    4. Stage amounts are clamped against the current grand total

    Sibling invoices and the catalog are read-only snapshots handed in by
    the caller; the form never mutates them.

    Usage:
        form = InvoiceForm(catalog, sibling_invoices)
        line = form.line_items[0]
        form.select_property(line.id, "Greenfield Phase 1")
        result = form.select_plot(line.id, "A2")
        form.set_token(Decimal("100000"))
        payload = form.to_payload()
    """

    def __init__(
        self,
        catalog: PlotCatalog,
        sibling_invoices: Sequence[Invoice],
        invoice: Optional[Invoice] = None,
    ):
        self.catalog = catalog
        self.sibling_invoices = list(sibling_invoices)
        self.resolver = AvailabilityResolver(catalog)
        self.calculator = LineItemCalculator(self.resolver)
        self.aggregator = InvoiceAggregator()
        self.allocator = PaymentScheduleAllocator()

        if invoice is None:
            self.invoice = Invoice(
                status=InvoiceStatus(ApplicationConfig.DEFAULT_INVOICE_STATUS),
                invoice_type=InvoiceType(ApplicationConfig.DEFAULT_INVOICE_TYPE),
            )
        else:
            self.invoice = invoice.model_copy(deep=True)
            for item in self.invoice.line_items:
                self.calculator.recalculate(item)

        if not self.invoice.line_items:
            self.invoice.line_items.append(LineItem())

    @property
    def is_edit_mode(self) -> bool:
        return self.invoice.id is not None

    @property
    def exclude_invoice_id(self) -> Optional[str]:
        return self.invoice.id

    @property
    def line_items(self) -> List[LineItem]:
        return self.invoice.line_items

    # Line items

    def add_line_item(self) -> LineItem:
        item = LineItem()
        self.invoice.line_items.append(item)
        return item

    def remove_line_item(self, line_id: str) -> Result[LineItem]:
        found = self._find(line_id)
        if found.is_err():
            return found
        if len(self.invoice.line_items) <= 1:
            return Return.err(
                Error(
                    code="LAST_LINE_ITEM",
                    message="An invoice needs at least one line item",
                    reason="The last line item cannot be removed",
                )
            )
        self.invoice.line_items.remove(found.value)
        return found

    def get_line_item(self, line_id: str) -> Result[LineItem]:
        return self._find(line_id)

    def available_plots(self, line_id: str) -> Result[List[PlotRecord]]:
        """Plots the given line may pick: unsold, and not taken by another line of this draft"""
        found = self._find(line_id)
        if found.is_err():
            return found
        item = found.value
        return Return.ok(self._available_for(item, item.property_name))

    def select_property(self, line_id: str, property_name: str) -> Result[LineItem]:
        return self._update(line_id, lambda item: self.calculator.set_property(item, property_name))

    def select_plot(
        self, line_id: str, plot_number: str, property_name: Optional[str] = None
    ) -> Result[LineItem]:
        found = self._find(line_id)
        if found.is_err():
            return found
        item = found.value
        property_name = property_name if property_name is not None else item.property_name

        taken_by_other_line = any(
            other.id != item.id
            and other.property_name == property_name
            and other.plot_number == plot_number
            for other in self.invoice.line_items
        )
        if taken_by_other_line:
            logger.warning(f"Plot {property_name!r}/{plot_number!r} already on another line of this invoice")
            return Return.err(
                Error(
                    code="PLOT_UNAVAILABLE",
                    message=f"Plot {plot_number} of {property_name} is not available",
                    reason="Plot is already on another line of this invoice",
                )
            )

        return self.calculator.set_plot(
            item,
            plot_number,
            property_name,
            self.sibling_invoices,
            self.exclude_invoice_id,
        )

    def set_area(self, line_id: str, area: Any) -> Result[LineItem]:
        return self._update(line_id, lambda item: self.calculator.set_area(item, area))

    def set_price_per_unit_area(self, line_id: str, price: Any) -> Result[LineItem]:
        return self._update(line_id, lambda item: self.calculator.set_price_per_unit_area(item, price))

    def set_discount(self, line_id: str, discount: Any) -> Result[LineItem]:
        return self._update(line_id, lambda item: self.calculator.set_discount(item, discount))

    # Totals and payment schedule

    @property
    def grand_total(self) -> Decimal:
        return self.aggregator.grand_total(self.invoice.line_items)

    @property
    def remaining(self) -> Decimal:
        return self.allocator.remaining(self.invoice.payment_schedule, self.grand_total)

    def set_token(self, amount: Any):
        return self.allocator.set_token(self.invoice.payment_schedule, amount, self.grand_total)

    def set_agreement_due(self, amount: Any, due_date: Optional[date] = None):
        schedule = self.allocator.set_agreement_due(self.invoice.payment_schedule, amount, self.grand_total)
        if due_date is not None:
            self.allocator.set_agreement_due_date(schedule, due_date)
        return schedule

    def set_registration_due(self, amount: Any, due_date: Optional[date] = None):
        schedule = self.allocator.set_registration_due(
            self.invoice.payment_schedule, amount, self.grand_total
        )
        if due_date is not None:
            self.allocator.set_registration_due_date(schedule, due_date)
        return schedule

    def to_payload(self) -> Invoice:
        """Copy of the draft with the grand total stamped, ready for create/update"""
        payload = self.invoice.model_copy(deep=True)
        payload.total_amount = self.grand_total
        return payload

    def _available_for(self, item: LineItem, property_name: str) -> List[PlotRecord]:
        taken_on_draft = {
            other.plot_number
            for other in self.invoice.line_items
            if other.id != item.id and other.property_name == property_name and other.plot_number
        }
        return [
            plot
            for plot in self.resolver.available_plots(
                property_name, self.sibling_invoices, self.exclude_invoice_id
            )
            if plot.plot_number not in taken_on_draft
        ]

    def _find(self, line_id: str) -> Result[LineItem]:
        for item in self.invoice.line_items:
            if item.id == line_id:
                return Return.ok(item)
        return Return.err(
            Error(
                code="LINE_ITEM_NOT_FOUND",
                message=f"Line item {line_id} not found",
                reason="Line item is not part of this invoice",
            )
        )

    def _update(self, line_id: str, change: Callable[[LineItem], LineItem]) -> Result[LineItem]:
        found = self._find(line_id)
        if found.is_err():
            return found
        return Return.ok(change(found.value))
