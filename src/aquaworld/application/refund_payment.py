"""Application service: Refund Payment use case.

Refunding only changes the payment.  Cancelling the order or returning
its stock is a separate call the caller makes if it wants both.
"""

from __future__ import annotations

from aquaworld.application.dto import PaymentDTO, to_payment_dto
from aquaworld.domain.exceptions import NotFoundError
from aquaworld.domain.model.payment import Payment
from aquaworld.domain.repository.payment_repository import PaymentRepository


def _refund(payment: Payment) -> Payment:
    payment.refund()
    return payment


class RefundPaymentHandler:

    def __init__(self, payment_repo: PaymentRepository) -> None:
        self._payment_repo = payment_repo

    def handle(self, payment_id: int) -> PaymentDTO:
        payment = self._payment_repo.atomic_update(payment_id, _refund)
        if payment is None:
            raise NotFoundError(f"Payment {payment_id} not found")
        return to_payment_dto(payment)
