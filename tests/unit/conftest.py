"""Shared fixtures for unit tests"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.invoicing import PlotCatalog, AvailabilityResolver, LineItemCalculator
from src.domain.invoice import Invoice
from src.domain.line_item import LineItem
from src.domain.plot import PlotRecord


@pytest.fixture
def mock_uow():
    """Mock unit of work"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def greenfield_plots():
    """Plot master data for two phases of the Greenfield project"""
    return [
        PlotRecord(
            id="p1",
            project_name="Greenfield",
            property_name="Greenfield Phase 1",
            plot_number="A1",
            area=Decimal("5"),
            price_per_unit_area=Decimal("100000"),
        ),
        PlotRecord(
            id="p2",
            project_name="Greenfield",
            property_name="Greenfield Phase 1",
            plot_number="A2",
            area=Decimal("3"),
            price_per_unit_area=Decimal("100000"),
        ),
        PlotRecord(
            id="p3",
            project_name="Greenfield",
            property_name="Greenfield Phase 2",
            plot_number="B1",
            area=Decimal("4.5"),
            price_per_unit_area=Decimal("80000"),
        ),
        PlotRecord(
            id="p4",
            project_name="Greenfield",
            property_name="Greenfield Phase 2",
            plot_number="B2",
            area=Decimal("6"),
            price_per_unit_area=Decimal("85000"),
        ),
        PlotRecord(
            id="p5",
            project_name="Riverside",
            property_name="Riverside Farm Lands",
            plot_number="R1",
            area=Decimal("10"),
            price_per_unit_area=Decimal("40000"),
        ),
    ]


@pytest.fixture
def catalog(greenfield_plots):
    return PlotCatalog(greenfield_plots)


@pytest.fixture
def resolver(catalog):
    return AvailabilityResolver(catalog)


@pytest.fixture
def calculator(resolver):
    return LineItemCalculator(resolver)


@pytest.fixture
def make_invoice():
    """Factory for stored invoices holding the given (property, plot) pairs"""

    def _make_invoice(invoice_id, *plots, customer_name="Customer"):
        return Invoice(
            id=invoice_id,
            invoice_number=f"INV-2024-{invoice_id}",
            customer_name=customer_name,
            project_name="Greenfield",
            line_items=[
                LineItem(property_name=property_name, plot_number=plot_number)
                for property_name, plot_number in plots
            ],
        )

    return _make_invoice
