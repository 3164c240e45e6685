"""Product aggregate.

Products live independently of orders. Their price can change at any
time; their stock moves only through the StockLedger domain service,
which calls ``take_stock`` / ``return_stock`` under a per-product lock.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from aquaworld.domain.exceptions import InsufficientStockError, InvalidInputError
from aquaworld.domain.model.value_objects import Money

CATEGORY_GUPPIES = "guppies"
CATEGORY_FISH_FOOD = "fish_food"
CATEGORY_EQUIPMENT = "equipment"
CATEGORY_DECORATIONS = "decorations"
CATEGORY_MEDICINES = "medicines"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _required(field_name: str, value: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(f"Product {field_name} is required")
    return value.strip()


@dataclass
class Product:
    """A product in the catalog.

    Invariant: ``stock`` is never negative.
    """

    id: int | None
    name: str
    category: str
    price: Money
    stock: int = 0
    description: str = ""
    image_url: str | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if self.stock < 0:
            raise InvalidInputError(f"Product stock cannot be negative, got {self.stock}")

    @staticmethod
    def create(
        name: str,
        category: str,
        price: Money,
        stock: int = 0,
        description: str = "",
        image_url: str | None = None,
    ) -> Product:
        """Build a new catalog entry; the repository assigns its ID."""
        if not isinstance(stock, int) or isinstance(stock, bool):
            raise InvalidInputError(f"Product stock must be an integer, got {stock!r}")
        return Product(
            id=None,
            name=_required("name", name),
            category=_required("category", category),
            price=price,
            stock=stock,
            description=description or "",
            image_url=image_url,
        )

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    def has_stock_for(self, quantity: int) -> bool:
        return self.stock >= quantity

    def take_stock(self, quantity: int) -> int:
        """Remove *quantity* units from stock and return what is left.

        Raises InsufficientStockError, leaving stock unchanged, when the
        product does not hold enough units.
        """
        if not self.has_stock_for(quantity):
            raise InsufficientStockError(
                f"Insufficient stock for {self.name} "
                f"(need {quantity}, have {self.stock} available)"
            )
        self.stock -= quantity
        self.updated_at = _utcnow()
        return self.stock

    def return_stock(self, quantity: int) -> int:
        """Put *quantity* units back into stock and return the new level."""
        self.stock += quantity
        self.updated_at = _utcnow()
        return self.stock

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture a price snapshot at creation time.
        """
        self.price = new_price
        self.updated_at = _utcnow()

    def revise(
        self,
        *,
        name: str | None = None,
        category: str | None = None,
        description: str | None = None,
        image_url: str | None = None,
    ) -> None:
        """Change catalog details.  Fields left as None keep their value."""
        new_name = self.name if name is None else _required("name", name)
        new_category = self.category if category is None else _required("category", category)
        self.name = new_name
        self.category = new_category
        if description is not None:
            self.description = description
        if image_url is not None:
            self.image_url = image_url
        self.updated_at = _utcnow()
