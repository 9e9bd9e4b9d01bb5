"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for use case responses.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field


class InvoiceResponseDTO(BaseModel):
    """
    Response DTO for a submitted invoice

    Returned by SubmitInvoice.
    """

    invoice_id: str = Field(
        ...,
        description="Stored invoice ID"
    )

    invoice_number: Optional[str] = Field(
        default=None,
        description="Invoice number"
    )

    customer_name: str = Field(
        ...,
        description="Customer name"
    )

    status: str = Field(
        ...,
        description="Invoice status (paid, pending, overdue, partial)"
    )

    line_item_count: int = Field(
        ...,
        description="Number of line items"
    )

    gross_total: Decimal = Field(
        ...,
        description="Sum of line item totals before discount"
    )

    total_discount: Decimal = Field(
        ...,
        description="Sum of line item discounts"
    )

    grand_total: Decimal = Field(
        ...,
        description="Sum of line item final amounts"
    )

    token_amount: Decimal = Field(
        ...,
        description="Token stage amount"
    )

    agreement_amount: Decimal = Field(
        ...,
        description="Agreement stage amount"
    )

    registration_amount: Decimal = Field(
        ...,
        description="Registration stage amount"
    )

    remaining: Decimal = Field(
        ...,
        description="grand_total minus all stages"
    )

    created: bool = Field(
        ...,
        description="True when the invoice was created, False when updated"
    )

    submitted_at: datetime = Field(
        ...,
        description="Submission timestamp"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_id": "inv_123",
                "invoice_number": "INV-2024-000001",
                "customer_name": "Asha Menon",
                "status": "pending",
                "line_item_count": 1,
                "gross_total": "500000",
                "total_discount": "50000",
                "grand_total": "450000",
                "token_amount": "50000",
                "agreement_amount": "300000",
                "registration_amount": "100000",
                "remaining": "0",
                "created": True,
                "submitted_at": "2024-01-01T00:00:00Z"
            }
        }


class PaymentStageDTO(BaseModel):
    """One row of the payment details table"""

    stage: str = Field(
        ...,
        description="Stage key (token, agreement, registration)"
    )

    label: str = Field(
        ...,
        description="Display label (e.g., 'Agreement Payment')"
    )

    amount: Decimal = Field(
        ...,
        description="Stage amount"
    )

    status: str = Field(
        ...,
        description="paid for the token, due for later stages"
    )

    due_date: Optional[date] = Field(
        default=None,
        description="Due date of the stage, if any"
    )


class PaymentBreakdownResponseDTO(BaseModel):
    """
    Response DTO for the payment breakdown of an invoice

    Returned by GetPaymentBreakdown. Only stages with a non-zero amount are listed.
    """

    invoice_number: Optional[str] = Field(
        default=None,
        description="Invoice number"
    )

    grand_total: Decimal = Field(
        ...,
        description="Invoice grand total"
    )

    stages: List[PaymentStageDTO] = Field(
        default_factory=list,
        description="Non-zero payment stages in schedule order"
    )

    total_paid: Decimal = Field(
        ...,
        description="Amount already paid (token)"
    )

    total_due: Decimal = Field(
        ...,
        description="Amount due at agreement and registration"
    )

    balance: Decimal = Field(
        ...,
        description="grand_total - total_paid - total_due"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_number": "INV-2024-000001",
                "grand_total": "900000",
                "stages": [
                    {"stage": "token", "label": "Token Amount", "amount": "300000",
                     "status": "paid", "due_date": None},
                    {"stage": "agreement", "label": "Agreement Payment", "amount": "400000",
                     "status": "due", "due_date": "2024-02-01"},
                    {"stage": "registration", "label": "Registration Payment", "amount": "200000",
                     "status": "due", "due_date": "2024-03-01"}
                ],
                "total_paid": "300000",
                "total_due": "600000",
                "balance": "0"
            }
        }
