"""Application service: payment queries."""

from __future__ import annotations

from aquaworld.application.dto import PaymentDTO, to_payment_dto
from aquaworld.domain.exceptions import NotFoundError
from aquaworld.domain.repository.payment_repository import PaymentRepository


class ShowPaymentHandler:

    def __init__(self, payment_repo: PaymentRepository) -> None:
        self._payment_repo = payment_repo

    def handle(self, payment_id: int) -> PaymentDTO:
        payment = self._payment_repo.get_by_id(payment_id)
        if payment is None:
            raise NotFoundError(f"Payment {payment_id} not found")
        return to_payment_dto(payment)

    def for_order(self, order_id: int) -> PaymentDTO:
        payment = self._payment_repo.get_by_order_id(order_id)
        if payment is None:
            raise NotFoundError(f"No payment found for order {order_id}")
        return to_payment_dto(payment)
