"""Plot sales pricing and payment allocation engine"""
from .plot_catalog import PlotCatalog
from .availability_resolver import AvailabilityResolver
from .line_item_calculator import LineItemCalculator
from .invoice_aggregator import InvoiceAggregator
from .payment_schedule_allocator import PaymentScheduleAllocator
from .invoice_form import InvoiceForm

__all__ = [
    "PlotCatalog",
    "AvailabilityResolver",
    "LineItemCalculator",
    "InvoiceAggregator",
    "PaymentScheduleAllocator",
    "InvoiceForm",
]
