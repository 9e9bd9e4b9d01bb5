"""Plot Repository Interface

Read access to the project master data (plots).
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.plot import PlotRecord


class PlotRepository(ABC):
    """
    Repository interface for plot master data

    The invoicing engine only reads plots; the master data screen owns writes.
    """

    @abstractmethod
    async def list_all(self, project_name: Optional[str] = None) -> List[PlotRecord]:
        """
        Retrieve plot master records

        Args:
            project_name: Optional filter by project

        Returns:
            Plot records in master data order
        """
        pass
