"""Invoicing gateway port (abstract interface).

Defines the contract every invoicing adapter implements, so the invoicing
workflow can run against Diamante in production and an in-memory double in
tests without changes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class InvoiceResult:
    """Outcome of an invoice request. Failures are reported, never raised."""

    success: bool
    invoice_number: str | None = None
    invoice_url: str | None = None
    error_message: str | None = None


class InvoicingGateway(ABC):
    """Abstract invoicing gateway interface."""

    @abstractmethod
    def is_configured(self) -> bool:
        """True when the gateway has everything it needs to reach the invoicing system."""
        ...

    @abstractmethod
    def test_connection(self) -> bool:
        """Probe the invoicing system. Never raises."""
        ...

    @abstractmethod
    def create_invoice(self, order, user, order_items, products) -> InvoiceResult:
        """Issue an invoice for a placed order."""
        ...

    @abstractmethod
    def sync_inventory(self, order_items) -> bool:
        """Report sold quantities to the invoicing system. Best effort."""
        ...
