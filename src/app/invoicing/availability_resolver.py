"""Availability Resolver

Computes which plots of a property are still unsold.
"""

import logging
from typing import Iterable, List, Optional, Set
from src.domain.invoice import Invoice
from src.domain.plot import PlotRecord
from .plot_catalog import PlotCatalog

logger = logging.getLogger(__name__)


class AvailabilityResolver:
    """
    Exclusivity check for plot allocation

    Business Rules:
    1. A plot is allocated when any line item of any sibling invoice holds
       its (property, plot number)
    2. The invoice being edited is ignored, so its own plots stay selectable
    3. Output order follows the catalog, whatever the invoice order

    The check is advisory: it reflects the sibling snapshot the caller passes
    in and does not reserve anything. Plots already double-booked in that
    snapshot stay excluded; existing data is not repaired here.
    """

    def __init__(self, catalog: PlotCatalog):
        self.catalog = catalog

    def allocated_plot_numbers(
        self,
        property_name: str,
        all_invoices: Iterable[Invoice],
        exclude_invoice_id: Optional[str] = None,
    ) -> Set[str]:
        allocated = set()
        for invoice in all_invoices:
            if exclude_invoice_id is not None and invoice.id == exclude_invoice_id:
                continue
            for item in invoice.line_items:
                if item.property_name == property_name and item.plot_number:
                    allocated.add(item.plot_number)
        return allocated

    def available_plots(
        self,
        property_name: str,
        all_invoices: Iterable[Invoice],
        exclude_invoice_id: Optional[str] = None,
    ) -> List[PlotRecord]:
        """
        Plots of the property not held by any other invoice

        Args:
            property_name: Property to list plots for
            all_invoices: Sibling invoices (read-only snapshot)
            exclude_invoice_id: Invoice being edited, ignored by the check

        Returns:
            Unsold plots in catalog order
        """
        plots = self.catalog.list_plots(property_name)
        if not plots:
            return []

        allocated = self.allocated_plot_numbers(property_name, all_invoices, exclude_invoice_id)
        available = [plot for plot in plots if plot.plot_number not in allocated]

        logger.debug(
            f"Property {property_name!r}: {len(available)} of {len(plots)} plots available"
        )
        return available

    def is_available(
        self,
        property_name: str,
        plot_number: str,
        all_invoices: Iterable[Invoice],
        exclude_invoice_id: Optional[str] = None,
    ) -> bool:
        return any(
            plot.plot_number == plot_number
            for plot in self.available_plots(property_name, all_invoices, exclude_invoice_id)
        )
