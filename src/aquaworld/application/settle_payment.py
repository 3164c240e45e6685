"""Application service: Settle Payment use case.

Used when a provider reports its verdict after the fact: a PENDING
payment becomes SUCCESS or FAILED.  Settled payments cannot be
re-settled; refunds go through the refund use case.
"""

from __future__ import annotations

from aquaworld.application.dto import PaymentDTO, to_payment_dto
from aquaworld.domain.exceptions import NotFoundError
from aquaworld.domain.model.payment import Payment, PaymentStatus
from aquaworld.domain.repository.payment_repository import PaymentRepository


class SettlePaymentHandler:

    def __init__(self, payment_repo: PaymentRepository) -> None:
        self._payment_repo = payment_repo

    def handle(self, payment_id: int, outcome: str | PaymentStatus) -> PaymentDTO:
        status = PaymentStatus.parse(outcome)

        def settle(payment: Payment) -> Payment:
            payment.settle(status)
            return payment

        payment = self._payment_repo.atomic_update(payment_id, settle)
        if payment is None:
            raise NotFoundError(f"Payment {payment_id} not found")
        return to_payment_dto(payment)
