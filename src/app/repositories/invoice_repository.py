"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.invoice import Invoice


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Implemented by the remote store client of the surrounding application.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice payload to persist

        Returns:
            Stored Invoice with its assigned ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: str) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Invoice]:
        """
        Retrieve every invoice with its line items

        Used as the sibling snapshot for plot exclusivity checks.

        Returns:
            List of invoices
        """
        pass

    @abstractmethod
    async def update(self, invoice_id: str, invoice: Invoice) -> Invoice:
        """
        Replace a stored invoice

        Args:
            invoice_id: ID of the invoice to replace
            invoice: Invoice payload with updated values

        Returns:
            Updated Invoice
        """
        pass

    @abstractmethod
    async def generate_invoice_number(self) -> str:
        """
        Generate a unique invoice number

        Format: {prefix}-YYYY-NNNNNN (e.g., INV-2024-000001)

        Returns:
            Unique invoice number string
        """
        pass
