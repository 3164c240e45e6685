"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from aquaworld.domain.model.value_objects import DEFAULT_CURRENCY
from aquaworld.infrastructure.config import Settings
from aquaworld.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from aquaworld.infrastructure.persistence.in_memory_payment_repository import (
    InMemoryPaymentRepository,
)
from aquaworld.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from aquaworld.infrastructure.seed_catalog import sample_products

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Repositories:
    products: InMemoryProductRepository
    orders: InMemoryOrderRepository
    payments: InMemoryPaymentRepository
    currency: str = DEFAULT_CURRENCY


def build_repositories(settings: Settings) -> Repositories:
    """Create empty stores and, unless disabled, load the sample catalog."""
    repos = Repositories(
        products=InMemoryProductRepository(),
        orders=InMemoryOrderRepository(),
        payments=InMemoryPaymentRepository(),
        currency=settings.currency,
    )
    if settings.seed_catalog:
        for product in sample_products(settings.currency):
            repos.products.save(product)
        logger.info("catalog_seeded", products=len(repos.products.list_all()))
    else:
        logger.info("catalog_seeding_skipped")
    return repos
