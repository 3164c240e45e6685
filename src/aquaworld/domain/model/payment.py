"""Payment aggregate.

One payment per order.  A payment starts PENDING, is settled by the
payment gateway into SUCCESS or FAILED, and only a SUCCESS payment can
be refunded.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from aquaworld.domain.exceptions import InvalidInputError, ValidationError
from aquaworld.domain.model.value_objects import Money


class PaymentStatus(Enum):
    PENDING = "PENDING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"

    @classmethod
    def parse(cls, raw: str | PaymentStatus) -> PaymentStatus:
        if isinstance(raw, PaymentStatus):
            return raw
        try:
            return cls(raw.strip().upper())
        except (AttributeError, ValueError):
            raise InvalidInputError(f"Unknown payment status: {raw!r}") from None


def new_transaction_id() -> str:
    return f"TXN-{uuid.uuid4()}".upper()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Payment:
    """A charge against one order.

    Invariants: an order has at most one payment, and only a SUCCESS
    payment can be refunded.
    """

    id: int | None
    order_id: int
    amount: Money
    payment_method: str
    transaction_id: str
    status: PaymentStatus = PaymentStatus.PENDING
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @staticmethod
    def open(order_id: int, amount: Money, payment_method: str) -> Payment:
        """Start a new PENDING payment with a fresh transaction id."""
        if not payment_method or not payment_method.strip():
            raise InvalidInputError("Payment method is required")
        return Payment(
            id=None,
            order_id=order_id,
            amount=amount,
            payment_method=payment_method.strip(),
            transaction_id=new_transaction_id(),
        )

    # --- State transitions ----------------------------------------------------

    def succeed(self) -> None:
        self._settle(PaymentStatus.SUCCESS)

    def fail(self) -> None:
        self._settle(PaymentStatus.FAILED)

    def settle(self, outcome: PaymentStatus) -> None:
        """Record the gateway's verdict on a PENDING payment."""
        if outcome not in (PaymentStatus.SUCCESS, PaymentStatus.FAILED):
            raise InvalidInputError(
                f"A payment can only be settled as SUCCESS or FAILED, not {outcome.value}"
            )
        self._settle(outcome)

    def refund(self) -> None:
        """Transition SUCCESS -> REFUNDED."""
        if self.status == PaymentStatus.REFUNDED:
            raise ValidationError(f"Payment {self.transaction_id} is already refunded")
        if self.status != PaymentStatus.SUCCESS:
            raise ValidationError(
                "Can only refund successfully processed payments "
                f"(payment {self.transaction_id} is {self.status.value})"
            )
        self.status = PaymentStatus.REFUNDED
        self.updated_at = _utcnow()

    def _settle(self, outcome: PaymentStatus) -> None:
        if self.status != PaymentStatus.PENDING:
            raise ValidationError(
                f"Payment {self.transaction_id} is already settled "
                f"({self.status.value})"
            )
        self.status = outcome
        self.updated_at = _utcnow()
