"""Plot Catalog

Read-only view over the plot master data snapshot.
"""

from decimal import Decimal
from typing import Iterable, List, Optional
from src.domain.plot import PlotRecord
from .amounts import ZERO


class PlotCatalog:
    """
    Read-only view over plot master records

    Unknown projects and properties yield empty results rather than errors:
    the master data may still be loading when the form first renders.
    """

    def __init__(self, plots: Iterable[PlotRecord]):
        self._plots: List[PlotRecord] = [plot for plot in plots if plot.is_active]

    def list_projects(self) -> List[str]:
        return _unique(plot.project_name for plot in self._plots)

    def list_properties(self, project_name: str) -> List[str]:
        """Property names of a project, in source order, without duplicates"""
        return _unique(
            plot.property_name for plot in self._plots if plot.project_name == project_name
        )

    def list_plots(self, property_name: str) -> List[PlotRecord]:
        return [plot for plot in self._plots if plot.property_name == property_name]

    def find_plot(self, property_name: str, plot_number: str) -> Optional[PlotRecord]:
        for plot in self._plots:
            if plot.property_name == property_name and plot.plot_number == plot_number:
                return plot
        return None

    def default_price(self, property_name: str) -> Decimal:
        """Price per unit area of the first plot of the property (0 if unknown)"""
        for plot in self._plots:
            if plot.property_name == property_name:
                return plot.price_per_unit_area
        return ZERO

    def __len__(self) -> int:
        return len(self._plots)


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered = []
    for value in values:
        if value and value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered
