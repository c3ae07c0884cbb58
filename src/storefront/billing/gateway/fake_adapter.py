"""Configurable fake invoicing gateway for development and testing.

Simulates Diamante without network calls. It can be switched between
configured and unconfigured, and told to fail invoice or sync requests. Every
call is recorded in ``calls``.
"""

from uuid import uuid4

from storefront.billing.gateway.port import InvoiceResult, InvoicingGateway
from storefront.billing.payload import build_invoice_payload


class FakeInvoicingGateway(InvoicingGateway):
    def __init__(self, configured: bool = True, connected: bool = True) -> None:
        self.configured = configured
        self.connected = connected
        self.should_succeed: bool = True
        self.failure_reason: str = "Error 500: Invoice rejected"
        self.sync_succeeds: bool = True
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Error 500: Invoice rejected") -> None:
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def calls_to(self, method: str) -> list[dict]:
        return [call for call in self.calls if call["method"] == method]

    def is_configured(self) -> bool:
        return self.configured

    def test_connection(self) -> bool:
        self.calls.append({"method": "test_connection"})
        return self.configured and self.connected

    def create_invoice(self, order, user, order_items, products) -> InvoiceResult:
        if not self.configured:
            return InvoiceResult(success=False, error_message="Diamante API is not configured")

        try:
            payload = build_invoice_payload(order, user, order_items, products)
        except Exception as exc:
            return InvoiceResult(success=False, error_message=str(exc))
        self.calls.append({"method": "create_invoice", "order_id": str(order.id), "payload": payload})

        if self.should_succeed:
            number = f"FT-{uuid4().hex[:8].upper()}"
            return InvoiceResult(
                success=True,
                invoice_number=number,
                invoice_url=f"https://diamante.test/invoices/{number}.pdf",
            )
        return InvoiceResult(success=False, error_message=self.failure_reason)

    def sync_inventory(self, order_items) -> bool:
        if not self.configured:
            return False
        self.calls.append(
            {
                "method": "sync_inventory",
                "items": [{"productId": str(i.product_id), "quantity": i.quantity} for i in order_items],
            }
        )
        return self.sync_succeeds
