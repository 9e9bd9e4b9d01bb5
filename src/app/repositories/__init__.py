from .plot_repository import PlotRepository
from .invoice_repository import InvoiceRepository

__all__ = [
    "PlotRepository",
    "InvoiceRepository",
]
