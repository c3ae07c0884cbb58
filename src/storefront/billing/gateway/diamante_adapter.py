"""Diamante invoicing API adapter.

Talks to the Diamante HTTP API with a bearer key. Every request carries the
configured timeout. Transport and HTTP errors are turned into failure results
or ``False``; nothing here raises into the caller.
"""

import requests

from storefront.billing.gateway.port import InvoiceResult, InvoicingGateway
from storefront.billing.payload import build_invoice_payload
from storefront.config import BillingSettings
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

NOT_CONFIGURED_MESSAGE = "Diamante API is not configured"


def _error_detail(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason or "Unexpected response"
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason or "Unexpected response"


class DiamanteGateway(InvoicingGateway):
    def __init__(self, settings: BillingSettings, session: requests.Session | None = None) -> None:
        self.settings = settings
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.settings.api_url}{path}"

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.settings.api_key}",
            "Content-Type": "application/json",
        }

    def is_configured(self) -> bool:
        return bool(self.settings.api_url and self.settings.api_key)

    def test_connection(self) -> bool:
        if not self.is_configured():
            return False

        try:
            response = self.session.get(self._url("/status"), headers=self._headers(), timeout=self.settings.timeout)
        except requests.RequestException as exc:
            logger.warning("diamante_connection_failed", error=str(exc))
            return False

        logger.info("diamante_connection_checked", status_code=response.status_code)
        return response.status_code == 200

    def create_invoice(self, order, user, order_items, products) -> InvoiceResult:
        if not self.is_configured():
            return InvoiceResult(success=False, error_message=NOT_CONFIGURED_MESSAGE)

        try:
            payload = build_invoice_payload(order, user, order_items, products)
            response = self.session.post(
                self._url("/invoices"),
                json=payload,
                headers=self._headers(),
                timeout=self.settings.timeout,
            )
        except Exception as exc:
            logger.error("diamante_invoice_failed", order_id=str(order.id), error=str(exc))
            return InvoiceResult(success=False, error_message=str(exc))

        if not response.ok:
            message = f"Error {response.status_code}: {_error_detail(response)}"
            logger.error("diamante_invoice_rejected", order_id=str(order.id), status_code=response.status_code)
            return InvoiceResult(success=False, error_message=message)

        try:
            body = response.json()
        except ValueError:
            body = None

        if not isinstance(body, dict) or not body.get("invoiceNumber"):
            logger.error("diamante_invoice_unexpected_response", order_id=str(order.id))
            return InvoiceResult(success=False, error_message="Unexpected response from Diamante")

        logger.info("diamante_invoice_created", order_id=str(order.id), invoice_number=body["invoiceNumber"])
        return InvoiceResult(
            success=True,
            invoice_number=str(body["invoiceNumber"]),
            invoice_url=body.get("invoiceUrl"),
        )

    def sync_inventory(self, order_items) -> bool:
        if not self.is_configured():
            return False

        payload = {
            "items": [{"productId": str(item.product_id), "quantity": item.quantity} for item in order_items],
        }
        try:
            response = self.session.post(
                self._url("/inventory/sync"),
                json=payload,
                headers=self._headers(),
                timeout=self.settings.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("diamante_inventory_sync_failed", error=str(exc))
            return False

        if not response.ok:
            logger.warning("diamante_inventory_sync_rejected", status_code=response.status_code)
            return False

        logger.info("diamante_inventory_synced", item_count=len(payload["items"]))
        return True
