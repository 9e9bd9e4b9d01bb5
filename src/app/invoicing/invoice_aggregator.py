"""Invoice Aggregator

Totals over finalized line items.
"""

from decimal import Decimal
from typing import Iterable
from src.domain.line_item import LineItem
from .amounts import ZERO


class InvoiceAggregator:
    """Pure sums over line items; an empty invoice totals 0"""

    def grand_total(self, line_items: Iterable[LineItem]) -> Decimal:
        return sum((item.final_amount for item in line_items), ZERO)

    def gross_total(self, line_items: Iterable[LineItem]) -> Decimal:
        """Sum before discounts"""
        return sum((item.total_amount for item in line_items), ZERO)

    def total_discount(self, line_items: Iterable[LineItem]) -> Decimal:
        return sum((item.discount for item in line_items), ZERO)
