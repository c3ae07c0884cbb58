"""Invoicing gateway factory.

Provides get_gateway() / set_gateway() to swap implementations:
- DiamanteGateway, configured from the environment, by default
- FakeInvoicingGateway for development and testing
"""

from storefront.billing.gateway.diamante_adapter import DiamanteGateway
from storefront.billing.gateway.port import InvoiceResult, InvoicingGateway
from storefront.config import BillingSettings

_current_gateway: InvoicingGateway | None = None


def get_gateway() -> InvoicingGateway:
    """Return the active invoicing gateway. Defaults to Diamante."""
    global _current_gateway
    if _current_gateway is None:
        _current_gateway = DiamanteGateway(BillingSettings.from_env())
    return _current_gateway


def set_gateway(gateway: InvoicingGateway) -> None:
    """Override the active invoicing gateway (useful for tests)."""
    global _current_gateway
    _current_gateway = gateway


def reset_gateway() -> None:
    global _current_gateway
    _current_gateway = None


__all__ = ["InvoiceResult", "InvoicingGateway", "get_gateway", "reset_gateway", "set_gateway"]
