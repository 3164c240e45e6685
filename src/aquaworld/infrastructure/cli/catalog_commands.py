"""CLI commands for browsing and maintaining the product catalog."""

from __future__ import annotations

import click
import structlog

from aquaworld.application.add_product import AddProductHandler
from aquaworld.application.browse_catalog import BrowseCatalogHandler, GetProductHandler
from aquaworld.application.update_product import UpdateProductHandler
from aquaworld.domain.exceptions import DomainException
from aquaworld.infrastructure.bootstrap import Repositories
from aquaworld.infrastructure.cli.formatting import display_product, display_products

logger = structlog.get_logger(__name__)


@click.command("list")
@click.pass_obj
def catalog_list(repos: Repositories) -> None:
    """List all products in the catalog."""
    display_products(BrowseCatalogHandler(repos.products).list_all())


@click.command("search")
@click.argument("fragment")
@click.pass_obj
def catalog_search(repos: Repositories, fragment: str) -> None:
    """Find products whose name contains FRAGMENT."""
    display_products(BrowseCatalogHandler(repos.products).search_by_name(fragment))


@click.command("category")
@click.argument("category")
@click.pass_obj
def catalog_category(repos: Repositories, category: str) -> None:
    """List products in CATEGORY (e.g. guppies, fish_food)."""
    display_products(BrowseCatalogHandler(repos.products).list_by_category(category))


@click.command("in-stock")
@click.pass_obj
def catalog_in_stock(repos: Repositories) -> None:
    """List products with at least one unit in stock."""
    display_products(BrowseCatalogHandler(repos.products).list_in_stock())


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def catalog_show(repos: Repositories, product_id: int) -> None:
    """Show one product."""
    try:
        product = GetProductHandler(repos.products).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_product(product)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--category", required=True, help="Category (e.g. guppies).")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", default=0, show_default=True, type=int, help="Opening stock.")
@click.option("--description", default="", help="Short description.")
@click.option("--image-url", default=None, help="Product image URL.")
@click.pass_obj
def catalog_add(
    repos: Repositories,
    name: str,
    category: str,
    price: str,
    stock: int,
    description: str,
    image_url: str | None,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(repos.products, currency=repos.currency)

    try:
        product = handler.handle(
            name=name,
            category=category,
            price=price,
            stock=stock,
            description=description,
            image_url=image_url,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    logger.info("product_added", product_id=product.id, name=product.name)
    display_product(product)


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--category", default=None, help="New category.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--description", default=None, help="New description.")
@click.option("--image-url", default=None, help="New image URL.")
@click.pass_obj
def catalog_update(
    repos: Repositories,
    product_id: int,
    name: str | None,
    category: str | None,
    price: str | None,
    description: str | None,
    image_url: str | None,
) -> None:
    """Change a product's details.  Stock moves only through orders."""
    try:
        product = UpdateProductHandler(repos.products).handle(
            product_id,
            name=name,
            category=category,
            description=description,
            price=price,
            image_url=image_url,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    logger.info("product_updated", product_id=product.id)
    display_product(product)
