"""Plot Domain Entity

A sellable unit of land from the project master data.
"""

from decimal import Decimal
from typing import Optional
from sqlmodel import Field
from config import ApplicationConfig
from src.domain.base import BaseModel


class PlotRecord(BaseModel):
    """
    Plot Record - One plot of a project phase

    Domain Rules:
    - plot_number is unique within a property
    - area is positive (unit: cents)
    - price_per_unit_area is non-negative
    - Read-only for the invoicing engine (edited on the master data screen)
    """

    id: Optional[str] = Field(
        default=None,
        description="Master data identifier"
    )

    project_name: str = Field(
        description="Project name (e.g., 'Greenfield')"
    )

    property_name: str = Field(
        description="Property/phase within the project (e.g., 'Greenfield Phase 1')"
    )

    plot_number: str = Field(
        description="Plot number, unique within the property"
    )

    area: Decimal = Field(
        gt=0,
        description="Plot area in cents"
    )

    price_per_unit_area: Decimal = Field(
        ge=0,
        description="Price per cent"
    )

    is_active: bool = Field(
        default=True,
        description="Inactive master rows are hidden from the catalog"
    )

    @property
    def total_value(self) -> Decimal:
        return self.area * self.price_per_unit_area

    @property
    def label(self) -> str:
        return (
            f"Plot {self.plot_number} ({self.area} {ApplicationConfig.AREA_UNIT}) - "
            f"{ApplicationConfig.CURRENCY_LABEL} {self.total_value}"
        )
