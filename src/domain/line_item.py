"""Line Item Domain Entity

One row of a plot sales invoice.
"""

from decimal import Decimal
from sqlmodel import Field
from src.domain.base import BaseModel, generate_uuid


class LineItem(BaseModel):
    """
    Line Item - Sale of one plot (or a manually priced area)

    Domain Rules:
    - total_amount = area * price_per_unit_area
    - 0 <= discount <= total_amount
    - final_amount = total_amount - discount
    - Derived fields are only written by LineItemCalculator
    """

    id: str = Field(
        default_factory=generate_uuid,
        description="Identifier, unique within the invoice"
    )

    property_name: str = Field(
        default="",
        description="Selected property (empty if unselected)"
    )

    plot_number: str = Field(
        default="",
        description="Selected plot within the property (empty if unselected)"
    )

    area: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Area in cents, prefilled from the plot"
    )

    price_per_unit_area: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Price per cent, prefilled from the property"
    )

    total_amount: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="area * price_per_unit_area"
    )

    discount: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Discount, at most total_amount"
    )

    final_amount: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="total_amount - discount"
    )

    @property
    def has_plot(self) -> bool:
        return bool(self.property_name and self.plot_number)
