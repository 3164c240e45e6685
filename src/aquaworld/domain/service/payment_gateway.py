"""Payment gateway integration point.

A processed payment is created PENDING and handed to a gateway, which
decides whether it settles as SUCCESS or FAILED.  The store ships with a
gateway that approves everything synchronously; a real provider client
implements the same interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from aquaworld.domain.model.payment import Payment


class PaymentGateway(ABC):

    @abstractmethod
    def charge(self, payment: Payment) -> bool:
        """Charge *payment*; return True when the provider approves it."""


class ImmediateApprovalGateway(PaymentGateway):
    """Approves every charge without contacting a provider."""

    def charge(self, payment: Payment) -> bool:
        return True
