from .base import BaseModel, generate_uuid
from .plot import PlotRecord
from .line_item import LineItem
from .payment_schedule import PaymentSchedule
from .invoice import Invoice, InvoiceStatus, InvoiceType, LeadSource

__all__ = [
    "BaseModel",
    "generate_uuid",
    "PlotRecord",
    "LineItem",
    "PaymentSchedule",
    "Invoice",
    "InvoiceStatus",
    "InvoiceType",
    "LeadSource",
]
