"""Application service: Process Payment use case.

Checks, in order:
1. the order exists (NotFoundError);
2. the order has no payment yet (ConflictError), whatever the amount;
3. the amount equals the order total exactly (ValidationError).

The payment is stored PENDING, charged through the gateway and settled
as SUCCESS or FAILED.  If the gateway itself errors, the PENDING record
is removed again so the order can be paid on a retry.  The order itself
is not touched.
"""

from __future__ import annotations

from decimal import Decimal

from aquaworld.application.dto import PaymentDTO, to_payment_dto
from aquaworld.domain.exceptions import ConflictError, NotFoundError, ValidationError
from aquaworld.domain.model.payment import Payment
from aquaworld.domain.model.value_objects import Money, parse_amount
from aquaworld.domain.repository.order_repository import OrderRepository
from aquaworld.domain.repository.payment_repository import PaymentRepository
from aquaworld.domain.service.payment_gateway import (
    ImmediateApprovalGateway,
    PaymentGateway,
)


class ProcessPaymentHandler:

    def __init__(
        self,
        payment_repo: PaymentRepository,
        order_repo: OrderRepository,
        gateway: PaymentGateway | None = None,
    ) -> None:
        self._payment_repo = payment_repo
        self._order_repo = order_repo
        self._gateway = gateway or ImmediateApprovalGateway()

    def handle(
        self,
        order_id: int,
        amount: str | Decimal | Money,
        payment_method: str,
    ) -> PaymentDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found")

        if self._payment_repo.get_by_order_id(order_id) is not None:
            raise ConflictError(f"Payment already exists for order {order.order_number}")

        total = order.total_price
        if isinstance(amount, Money):
            value, currency = amount.amount, amount.currency
        else:
            value, currency = parse_amount(amount), total.currency
        if value != total.amount or currency != total.currency:
            raise ValidationError(
                "Payment amount does not match order total. "
                f"Expected: {total.amount} {total.currency}, "
                f"Received: {value} {currency}"
            )

        payment = Payment.open(order_id, Money(value, currency), payment_method)
        if not self._payment_repo.add(payment):
            raise ConflictError(f"Payment already exists for order {order.order_number}")

        try:
            approved = self._gateway.charge(payment)
        except Exception:
            self._payment_repo.remove(payment.id)
            raise

        if approved:
            payment.succeed()
        else:
            payment.fail()
        self._payment_repo.save(payment)

        return to_payment_dto(payment)
