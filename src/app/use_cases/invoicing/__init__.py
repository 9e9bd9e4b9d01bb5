"""Invoicing use cases"""
from .open_invoice_form import OpenInvoiceForm
from .submit_invoice import SubmitInvoice
from .get_payment_breakdown import GetPaymentBreakdown
from .dtos import (
    InvoiceResponseDTO,
    PaymentStageDTO,
    PaymentBreakdownResponseDTO,
)

__all__ = [
    "OpenInvoiceForm",
    "SubmitInvoice",
    "GetPaymentBreakdown",
    "InvoiceResponseDTO",
    "PaymentStageDTO",
    "PaymentBreakdownResponseDTO",
]
