"""Shared click output helpers."""

from __future__ import annotations

from decimal import Decimal

import click

from aquaworld.application.dto import OrderDTO, PaymentDTO, ProductDTO


def money(amount: Decimal) -> str:
    return f"${amount:.2f}"


def display_products(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<32} {'Category':<12} {'Price':>9} {'Stock':>6}")
    click.echo("-" * 69)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<32} {p.category:<12} {money(p.price):>9} {p.stock:>6}"
        )


def display_order(dto: OrderDTO) -> None:
    click.echo(f"Order {dto.order_number} (#{dto.id})  status={dto.status}")
    click.echo(f"User:     {dto.user_id}")
    click.echo(f"Created:  {dto.created_at:%Y-%m-%d %H:%M UTC}")
    click.echo()
    click.echo(f"  {'Product':<10} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*38}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<10} {item.quantity:>5} "
            f"{money(item.unit_price):>10} {money(item.line_total):>10}"
        )
    click.echo(f"  {'-'*38}")
    click.echo(f"  {'Order Total':<18} {money(dto.total_price):>20}")


def display_payment(dto: PaymentDTO) -> None:
    click.echo(
        f"Payment #{dto.id} for order #{dto.order_id}: {money(dto.amount)} "
        f"via {dto.payment_method}  status={dto.status}  txn={dto.transaction_id}"
    )


def display_product(p: ProductDTO) -> None:
    click.echo(f"#{p.id} {p.name}  [{p.category}]")
    if p.description:
        click.echo(f"  {p.description}")
    click.echo(f"  Price: {money(p.price)}   Stock: {p.stock}")
