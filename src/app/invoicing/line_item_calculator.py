"""Line Item Calculator

Cascading recomputation of a line item's derived amounts.

Dependency chain:
    property -> default price
    plot -> area
    area, price_per_unit_area -> total_amount
    total_amount, discount -> final_amount

Every setter computes the complete set of new values first and assigns
them together, so a line item is never seen with stale derived fields.
"""

import logging
from decimal import Decimal
from typing import Any, Iterable, Optional
from libs.result import Result, Return, Error
from src.domain.invoice import Invoice
from src.domain.line_item import LineItem
from .amounts import ZERO, clamp, to_decimal
from .availability_resolver import AvailabilityResolver

logger = logging.getLogger(__name__)


class LineItemCalculator:
    """
    Per-line pricing rules

    Business Rules:
    1. Changing the property clears the plot and area, and prefills the
       price with the property's default price
    2. A plot can only be picked while it is available (exclusivity)
    3. Negative area/price clamp to 0
    4. Discount is clamped into [0, total_amount], also when the total shrinks
    5. Out-of-range input is clamped, never rejected
    """

    def __init__(self, resolver: AvailabilityResolver):
        self.resolver = resolver

    @property
    def catalog(self):
        return self.resolver.catalog

    def set_property(self, item: LineItem, property_name: str) -> LineItem:
        """Select a property: plot numbers are scoped to it, so the plot is reset"""
        price = self.catalog.default_price(property_name)
        return self._apply(
            item,
            property_name=property_name,
            plot_number="",
            area=ZERO,
            price_per_unit_area=price,
            discount=item.discount,
        )

    def set_plot(
        self,
        item: LineItem,
        plot_number: str,
        property_name: str,
        all_invoices: Iterable[Invoice],
        exclude_invoice_id: Optional[str] = None,
    ) -> Result[LineItem]:
        """
        Select a plot and prefill its area

        Args:
            item: Line item to update
            plot_number: Plot to select
            property_name: Property the plot belongs to
            all_invoices: Sibling invoices for the exclusivity check
            exclude_invoice_id: Invoice being edited (its own plots stay available)

        Returns:
            Result[LineItem]: Updated item, or PLOT_UNAVAILABLE with the item untouched
        """
        available = self.resolver.available_plots(property_name, all_invoices, exclude_invoice_id)
        plot = next((p for p in available if p.plot_number == plot_number), None)

        if plot is None:
            if self.catalog.find_plot(property_name, plot_number) is None:
                reason = "Plot does not exist in the project master data"
            else:
                reason = "Plot is already allocated to another invoice"
            logger.warning(f"Rejected plot selection {property_name!r}/{plot_number!r}: {reason}")
            return Return.err(
                Error(
                    code="PLOT_UNAVAILABLE",
                    message=f"Plot {plot_number} of {property_name} is not available",
                    reason=reason,
                )
            )

        # Picking a plot of another property behaves like picking that property first
        if item.property_name == property_name:
            price = item.price_per_unit_area
        else:
            price = self.catalog.default_price(property_name)

        self._apply(
            item,
            property_name=property_name,
            plot_number=plot.plot_number,
            area=plot.area,
            price_per_unit_area=price,
            discount=item.discount,
        )
        return Return.ok(item)

    def set_area(self, item: LineItem, area: Any) -> LineItem:
        return self._apply(
            item,
            area=clamp(to_decimal(area)),
            price_per_unit_area=item.price_per_unit_area,
            discount=item.discount,
        )

    def set_price_per_unit_area(self, item: LineItem, price: Any) -> LineItem:
        return self._apply(
            item,
            area=item.area,
            price_per_unit_area=clamp(to_decimal(price)),
            discount=item.discount,
        )

    def set_discount(self, item: LineItem, discount: Any) -> LineItem:
        """Set the discount; only final_amount is recomputed"""
        discount = clamp(to_decimal(discount), ZERO, item.total_amount)
        item.discount = discount
        item.final_amount = item.total_amount - discount
        return item

    def recalculate(self, item: LineItem) -> LineItem:
        """Re-derive total and final amounts from the item's current inputs"""
        return self._apply(
            item,
            area=clamp(item.area),
            price_per_unit_area=clamp(item.price_per_unit_area),
            discount=item.discount,
        )

    def _apply(
        self,
        item: LineItem,
        area: Decimal,
        price_per_unit_area: Decimal,
        discount: Decimal,
        **selection: str,
    ) -> LineItem:
        total_amount = area * price_per_unit_area
        discount = clamp(discount, ZERO, total_amount)
        final_amount = total_amount - discount

        for field, value in selection.items():
            setattr(item, field, value)
        item.area = area
        item.price_per_unit_area = price_per_unit_area
        item.total_amount = total_amount
        item.discount = discount
        item.final_amount = final_amount

        logger.debug(
            f"Line {item.id}: {area} x {price_per_unit_area} = {total_amount}, "
            f"discount {discount}, final {final_amount}"
        )
        return item
