"""Diamante invoicing endpoints."""

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain

from storefront.account.user import User
from storefront.api.dependencies import current_user
from storefront.api.schemas import BillingStatusResponse, InvoiceResponse
from storefront.billing.gateway import get_gateway
from storefront.billing.invoicing import InvoiceOrder

billing_router = APIRouter(prefix="/billing", tags=["billing"])


@billing_router.get("/status", response_model=BillingStatusResponse)
async def billing_status():
    gateway = get_gateway()
    if not gateway.is_configured():
        return JSONResponse(
            status_code=503,
            content={"success": False, "message": "Diamante API is not configured"},
        )

    if not await run_in_threadpool(gateway.test_connection):
        return JSONResponse(
            status_code=503,
            content={"success": False, "message": "Could not connect to Diamante"},
        )

    return BillingStatusResponse(success=True, message="Connected to Diamante")


@billing_router.post("/invoice/{order_id}", response_model=InvoiceResponse)
async def invoice_order(order_id: str, user: User = Depends(current_user)):
    command = InvoiceOrder(customer_id=str(user.id), order_id=order_id)
    result = await run_in_threadpool(current_domain.process, command, asynchronous=False)

    if not result.success:
        body = InvoiceResponse(success=False, message="Could not create the invoice", error=result.error_message)
        return JSONResponse(status_code=500, content=body.model_dump(by_alias=True))

    return InvoiceResponse(
        success=True,
        message="Invoice created",
        invoice_number=result.invoice_number,
        invoice_url=result.invoice_url,
    )
