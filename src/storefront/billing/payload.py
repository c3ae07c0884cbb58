"""Translation of an order bundle into the Diamante invoice request body."""

from storefront.shared.money import to_decimal

DEFAULT_COUNTRY = "Portugal"
DEFAULT_PAYMENT_METHOD = "card"


class MissingProductError(Exception):
    """An order item refers to a product that is not part of the bundle."""


def split_address(text: str | None) -> dict:
    """Break a free-text shipping address into its invoice components.

    Segments are comma separated: street, postal code, city. Missing segments
    become empty strings. The street keeps its original spacing.

    >>> split_address("Rua X, 1000-001, Lisboa")["postalCode"]
    '1000-001'
    """
    parts = (text or "").split(",")
    return {
        "street": parts[0],
        "postalCode": parts[1].strip() if len(parts) > 1 else "",
        "city": parts[2].strip() if len(parts) > 2 else "",
        "country": DEFAULT_COUNTRY,
    }


def _line(item, products_by_id) -> dict:
    product = products_by_id.get(str(item.product_id))
    if product is None:
        raise MissingProductError(f"Product {item.product_id} not found")

    return {
        "reference": product.invoice_reference(),
        "description": product.name,
        "quantity": item.quantity,
        # JSON number
        "unitPrice": float(to_decimal(item.price, "price")),
        "vatRate": product.effective_vat_rate(),
    }


def build_invoice_payload(order, user, order_items, products) -> dict:
    products_by_id = {str(product.id): product for product in products}
    items = [_line(item, products_by_id) for item in order_items]

    customer = {
        "name": user.display_name(),
        "email": user.email,
        "address": split_address(order.shipping_address),
    }
    if user.vat_number:
        customer["vatNumber"] = user.vat_number
    if user.phone:
        customer["phone"] = user.phone

    payload = {
        "orderId": str(order.id),
        "customer": customer,
        "items": items,
        "paymentMethod": order.payment_method or DEFAULT_PAYMENT_METHOD,
        "notes": f"Order #{order.id} - {order.status}",
    }
    if user.vat_number:
        payload["vatNumber"] = user.vat_number
    return payload
