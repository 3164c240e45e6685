"""Sample AquaWorld catalog loaded at startup."""

from __future__ import annotations

from aquaworld.domain.model.product import (
    CATEGORY_DECORATIONS,
    CATEGORY_EQUIPMENT,
    CATEGORY_FISH_FOOD,
    CATEGORY_GUPPIES,
    CATEGORY_MEDICINES,
    Product,
)
from aquaworld.domain.model.value_objects import Money

_IMAGES = "https://aquaworld.com/images"

# (name, category, description, price, stock, image)
SAMPLE_PRODUCTS: list[tuple[str, str, str, str, int, str]] = [
    ("Red Guppy Male - Premium", CATEGORY_GUPPIES,
     "Beautiful red male guppy with full tail fin and vibrant colors",
     "5.99", 25, "red-guppy.jpg"),
    ("Blue Guppy Male - Platinum", CATEGORY_GUPPIES,
     "Stunning blue male guppy with platinum highlights",
     "6.49", 18, "blue-guppy.jpg"),
    ("Black Lace Guppy Female", CATEGORY_GUPPIES,
     "Elegant black female guppy perfect for breeding",
     "4.99", 30, "black-guppy.jpg"),
    ("Yellow Guppy Pair", CATEGORY_GUPPIES,
     "Bright yellow male and female pair for breeding",
     "9.99", 12, "yellow-guppy.jpg"),
    ("Premium Guppy Food - Flakes", CATEGORY_FISH_FOOD,
     "High-quality nutritious flakes for guppies and tropical fish",
     "8.99", 50, "food-flakes.jpg"),
    ("Guppy Fry Food - Micro Pellets", CATEGORY_FISH_FOOD,
     "Special micro pellets for guppy fry and small fish",
     "12.99", 35, "fry-food.jpg"),
    ("Color Enhancement Pellets", CATEGORY_FISH_FOOD,
     "Pellets with color enhancers to brighten guppy colors",
     "14.99", 28, "color-pellets.jpg"),
    ("10 Gallon Aquarium Starter Kit", CATEGORY_EQUIPMENT,
     "Complete 10-gallon tank with filter, heater, and light",
     "49.99", 15, "tank-10g.jpg"),
    ("Submersible Tank Filter", CATEGORY_EQUIPMENT,
     "Efficient internal filter for 20-40 gallon tanks",
     "24.99", 22, "filter.jpg"),
    ("Aquarium Heater - 50W", CATEGORY_EQUIPMENT,
     "Adjustable 50W heater for maintaining optimal temperature",
     "19.99", 40, "heater.jpg"),
    ("Aquatic Plant - Cabomba", CATEGORY_DECORATIONS,
     "Live cabomba plant for tank decoration and oxygen production",
     "5.99", 60, "cabomba.jpg"),
    ("Driftwood - Large", CATEGORY_DECORATIONS,
     "Natural driftwood for tank decoration and hiding spots",
     "17.99", 8, "driftwood.jpg"),
    ("Fish Antibiotic Treatment", CATEGORY_MEDICINES,
     "Effective antibiotic treatment for fish diseases",
     "16.99", 20, "antibiotic.jpg"),
]


def sample_products(currency: str = "USD") -> list[Product]:
    """Fresh, unsaved Product objects for the sample catalog."""
    return [
        Product(
            id=None,
            name=name,
            category=category,
            description=description,
            price=Money.of(price, currency),
            stock=stock,
            image_url=f"{_IMAGES}/{image}",
        )
        for name, category, description, price, stock, image in SAMPLE_PRODUCTS
    ]
