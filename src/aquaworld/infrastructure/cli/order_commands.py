"""CLI commands for orders and the end-to-end demo."""

from __future__ import annotations

import click
import structlog

from aquaworld.application.cancel_order import CancelOrderHandler
from aquaworld.application.create_order import CreateOrderHandler
from aquaworld.application.dto import OrderItemSpec
from aquaworld.application.process_payment import ProcessPaymentHandler
from aquaworld.application.refund_payment import RefundPaymentHandler
from aquaworld.application.show_order import ShowOrderHandler
from aquaworld.application.update_order_status import UpdateOrderStatusHandler
from aquaworld.domain.exceptions import DomainException
from aquaworld.infrastructure.bootstrap import Repositories
from aquaworld.infrastructure.cli.formatting import display_order, display_payment

logger = structlog.get_logger(__name__)


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '2001:3,2005:1' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        pid_str, qty_str = pair.rsplit(":", 1)
        try:
            specs.append(OrderItemSpec(product_id=int(pid_str), quantity=int(qty_str)))
        except ValueError:
            raise click.BadParameter(
                f"Invalid item '{pair}'. Product ID and quantity must be integers."
            )
    return specs


@click.command("place")
@click.option("--user", "user_id", required=True, type=int, help="Ordering user ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.pass_obj
def order_place(repos: Repositories, user_id: int, items: str) -> None:
    """Place an order against the catalog and show it."""
    specs = _parse_items(items)
    handler = CreateOrderHandler(order_repo=repos.orders, product_repo=repos.products)

    try:
        dto = handler.handle(user_id=user_id, item_specs=specs)
    except DomainException as exc:
        logger.warning("order_rejected", user_id=user_id, reason=str(exc))
        raise click.ClickException(str(exc))

    logger.info("order_placed", order_number=dto.order_number, total=str(dto.total_price))
    display_order(dto)


@click.command("demo")
@click.option("--user", "user_id", default=1001, show_default=True, type=int)
@click.option("--items", default="2001:3,2005:1", show_default=True,
              help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--method", default="CREDIT_CARD", show_default=True, help="Payment method.")
@click.pass_obj
def demo(repos: Repositories, user_id: int, items: str, method: str) -> None:
    """Walk one order through create, pay, refund and cancel."""
    specs = _parse_items(items)
    orders = ShowOrderHandler(repos.orders)

    try:
        created = CreateOrderHandler(repos.orders, repos.products).handle(user_id, specs)
        click.echo("== created")
        display_order(created)

        payment = ProcessPaymentHandler(repos.payments, repos.orders).handle(
            created.id, created.total_price, method
        )
        click.echo("== paid")
        display_payment(payment)

        confirmed = UpdateOrderStatusHandler(repos.orders, repos.products).handle(
            created.id, "CONFIRMED"
        )
        click.echo(f"== status -> {confirmed.status}")

        refunded = RefundPaymentHandler(repos.payments).handle(payment.id)
        click.echo("== refunded")
        display_payment(refunded)

        cancelled = CancelOrderHandler(repos.orders, repos.products).handle(created.id)
        click.echo(f"== status -> {cancelled.status}")
    except DomainException as exc:
        logger.warning("demo_aborted", reason=str(exc))
        raise click.ClickException(str(exc))

    click.echo()
    click.echo(f"Orders for user {user_id}: "
               + ", ".join(o.order_number for o in orders.for_user(user_id)))
