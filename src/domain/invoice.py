"""Invoice Domain Entity

Plot sales invoice with its line items and payment schedule.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional
from sqlmodel import Field
from src.domain.base import BaseModel
from src.domain.line_item import LineItem
from src.domain.payment_schedule import PaymentSchedule


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    PAID = "paid"
    PENDING = "pending"
    OVERDUE = "overdue"
    PARTIAL = "partial"


class InvoiceType(str, Enum):
    """Invoice types"""
    PROJECT = "project"      # Plot sale against a project
    CUSTOMER = "customer"
    EXPENSE = "expense"


class LeadSource(str, Enum):
    """How the customer reached the sales team"""
    MARKETING_DATA = "Marketing Data"
    OLD_DATA = "Old Data"
    DIRECT_LEAD = "Direct Lead"
    REFERRAL = "Referral"
    SOCIAL_MEDIA = "Social Media"
    OTHERS = "Others"


class Invoice(BaseModel):
    """
    Invoice - Sale of one or more plots to a customer

    Domain Rules:
    - id is None until the persistence collaborator stores the invoice
    - total_amount is the sum of line_items.final_amount (stamped on submit)
    - Each plot appears on at most one invoice (advisory, see AvailabilityResolver)
    - payment_schedule stages never exceed total_amount on submit
    """

    id: Optional[str] = Field(
        default=None,
        description="Stored invoice identifier (None while drafting a new invoice)"
    )

    invoice_number: Optional[str] = Field(
        default=None,
        description="Invoice number (e.g., INV-2024-000001), assigned on create"
    )

    customer_name: str = Field(
        default="",
        description="Customer name"
    )

    customer_phone: Optional[str] = Field(
        default=None,
        description="Customer phone number"
    )

    reference: Optional[str] = Field(
        default=None,
        description="Free-form reference (broker, campaign, ...)"
    )

    lead_source: Optional[LeadSource] = Field(
        default=None,
        description="Lead source"
    )

    project_name: str = Field(
        default="",
        description="Project the plots belong to"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.PENDING,
        description="Invoice status (paid, pending, overdue, partial)"
    )

    invoice_type: InvoiceType = Field(
        default=InvoiceType.PROJECT,
        description="Invoice type (project, customer, expense)"
    )

    invoice_date: date = Field(
        default_factory=date.today,
        description="Invoice date"
    )

    due_date: Optional[date] = Field(
        default=None,
        description="Payment due date"
    )

    line_items: List[LineItem] = Field(
        default_factory=list,
        description="Ordered line items"
    )

    payment_schedule: PaymentSchedule = Field(
        default_factory=PaymentSchedule,
        description="Token / agreement / registration split"
    )

    total_amount: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Grand total (sum of line item final amounts)"
    )

    notes: Optional[str] = Field(
        default=None,
        description="Internal notes"
    )
