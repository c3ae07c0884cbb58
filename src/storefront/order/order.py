"""Order aggregate — an immutable commitment of cart contents at frozen prices.

State Machine:
    PENDING → PROCESSING → SHIPPED → DELIVERED
    PENDING, PROCESSING → CANCELLED
    PENDING, PROCESSING, SHIPPED, DELIVERED → INVOICED (once, via record_invoice)

The total is computed once, at placement, from the order items. It is never
recomputed, so later catalogue price changes do not touch historical orders.
"""

from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.order.events import OrderInvoiced, OrderPlaced, OrderStatusChanged
from storefront.shared.errors import Conflict
from storefront.shared.money import format_money, to_decimal

MIN_SHIPPING_ADDRESS_LENGTH = 5


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    INVOICED = "invoiced"


_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.PROCESSING, OrderStatus.CANCELLED, OrderStatus.INVOICED},
    OrderStatus.PROCESSING: {OrderStatus.SHIPPED, OrderStatus.CANCELLED, OrderStatus.INVOICED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED, OrderStatus.INVOICED},
    OrderStatus.DELIVERED: {OrderStatus.INVOICED},
    OrderStatus.INVOICED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}


@storefront.entity(part_of="Order")
class OrderItem:
    """A purchased product line. ``price`` is the unit price captured at placement."""

    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    price = String(required=True, max_length=20)
    created_at = DateTime()

    def unit_price(self) -> Decimal:
        return to_decimal(self.price, "price")

    def line_total(self) -> Decimal:
        return self.unit_price() * self.quantity


@storefront.aggregate
class Order:
    customer_id = Identifier(required=True)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    items = HasMany(OrderItem)
    total = String(required=True, max_length=20)
    shipping_address = Text(required=True)
    phone_number = String(max_length=30)
    payment_method = String(max_length=50)
    vat_number = String(max_length=30)  # NIF used on the invoice
    notes = Text()
    diamante_invoice_id = String(max_length=100)
    diamante_invoice_url = String(max_length=500)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def shipping_address_must_be_meaningful(self):
        if len((self.shipping_address or "").strip()) < MIN_SHIPPING_ADDRESS_LENGTH:
            raise ValidationError(
                {"shipping_address": [f"Shipping address must be at least {MIN_SHIPPING_ADDRESS_LENGTH} characters"]}
            )

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(
        cls,
        customer_id,
        lines,
        shipping_address,
        phone_number=None,
        payment_method=None,
        vat_number=None,
        notes=None,
    ):
        """Create a pending order.

        Args:
            customer_id: The shopper placing the order.
            lines: Iterable of ``(product, quantity)`` pairs. Each product's
                current price is frozen into its order item.
            shipping_address: Free-text delivery address.
        """
        lines = list(lines)
        if not lines:
            raise ValidationError({"cart": ["Cart is empty"]})

        now = datetime.now(UTC)
        order_items = [
            OrderItem(
                product_id=str(product.id),
                quantity=quantity,
                price=format_money(product.unit_price()),
                created_at=now,
            )
            for product, quantity in lines
        ]
        total = sum((item.line_total() for item in order_items), Decimal("0.00"))

        order = cls(
            customer_id=customer_id,
            status=OrderStatus.PENDING.value,
            total=format_money(total),
            shipping_address=shipping_address,
            phone_number=phone_number,
            payment_method=payment_method,
            vat_number=vat_number,
            notes=notes,
            items=order_items,
            created_at=now,
            updated_at=now,
        )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_id=str(customer_id),
                total=order.total,
                item_count=len(order_items),
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def total_amount(self) -> Decimal:
        return to_decimal(self.total, "total")

    def is_invoiced(self) -> bool:
        return bool(self.diamante_invoice_id)

    def can_be_invoiced(self) -> bool:
        return not self.is_invoiced() and OrderStatus.INVOICED in _VALID_TRANSITIONS.get(
            OrderStatus(self.status), set()
        )

    def belongs_to(self, customer_id) -> bool:
        return str(self.customer_id) == str(customer_id)

    # -------------------------------------------------------------------
    # State changes
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status: OrderStatus) -> None:
        current = OrderStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    def change_status(self, new_status: OrderStatus) -> None:
        self._assert_can_transition(new_status)
        previous = self.status
        now = datetime.now(UTC)
        self.status = new_status.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=previous,
                new_status=new_status.value,
                changed_at=now,
            )
        )

    def record_invoice(self, invoice_number: str, invoice_url: str | None = None) -> None:
        """Attach the external invoice identifiers. An order is invoiced at most once."""
        if self.is_invoiced():
            raise Conflict(f"Order {self.id} already has invoice {self.diamante_invoice_id}")
        if not invoice_number:
            raise ValidationError({"invoice_number": ["Invoice number is required"]})

        self._assert_can_transition(OrderStatus.INVOICED)
        now = datetime.now(UTC)
        self.diamante_invoice_id = invoice_number
        self.diamante_invoice_url = invoice_url
        self.status = OrderStatus.INVOICED.value
        self.updated_at = now

        self.raise_(
            OrderInvoiced(
                order_id=str(self.id),
                invoice_number=invoice_number,
                invoice_url=invoice_url,
                invoiced_at=now,
            )
        )


@storefront.repository(part_of=Order)
class OrderRepository:
    def for_customer(self, customer_id) -> list[Order]:
        return self._dao.query.filter(customer_id=str(customer_id)).order_by("-created_at").all().items
