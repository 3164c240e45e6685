"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the calling layer (CLI, HTTP, GraphQL) and the
application layer without exposing domain aggregates.  Amounts stay as
Decimal so a caller can pay exactly the total it was shown.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from aquaworld.domain.model.order import Order
from aquaworld.domain.model.payment import Payment
from aquaworld.domain.model.product import Product


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    category: str
    description: str
    price: Decimal
    currency: str
    stock: int
    image_url: str | None


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_id: int
    quantity: int
    unit_price: Decimal
    line_total: Decimal


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as handed to the calling layer."""

    id: int
    order_number: str
    user_id: int
    status: str
    items: list[OrderLineItemDTO]
    total_price: Decimal
    currency: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class PaymentDTO:
    id: int
    order_id: int
    amount: Decimal
    currency: str
    status: str
    payment_method: str
    transaction_id: str
    created_at: datetime
    updated_at: datetime


# --- Mapping ------------------------------------------------------------------


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        category=product.category,
        description=product.description,
        price=product.price.amount,
        currency=product.price.currency,
        stock=product.stock,
        image_url=product.image_url,
    )


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        order_number=order.order_number,
        user_id=order.user_id,
        status=order.status.value,
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                quantity=item.quantity.value,
                unit_price=item.unit_price.amount,
                line_total=item.line_total.amount,
            )
            for item in order.items
        ],
        total_price=order.total_price.amount,
        currency=order.total_price.currency,
        created_at=order.created_at,
        updated_at=order.updated_at,
    )


def to_payment_dto(payment: Payment) -> PaymentDTO:
    return PaymentDTO(
        id=payment.id,  # type: ignore[arg-type]
        order_id=payment.order_id,
        amount=payment.amount.amount,
        currency=payment.amount.currency,
        status=payment.status.value,
        payment_method=payment.payment_method,
        transaction_id=payment.transaction_id,
        created_at=payment.created_at,
        updated_at=payment.updated_at,
    )
