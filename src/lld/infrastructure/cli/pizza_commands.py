"""CLI commands for the pizza pricing example."""

from __future__ import annotations

import click

from lld.domain.exceptions import DomainException
from lld.domain.model.menu import BASE_PIZZAS, TOPPINGS
from lld.infrastructure.bootstrap import (
    price_pizza_handler,
    sample_pizzas,
    show_menu_handler,
)


@click.command("demo")
def pizza_demo() -> None:
    """Price the two sample pizzas."""
    for pizza in sample_pizzas():
        click.echo(pizza.cost())


@click.command("cost")
@click.option(
    "--base",
    default="margherita",
    show_default=True,
    help=f"Base pizza ({', '.join(BASE_PIZZAS)}).",
)
@click.option(
    "--topping",
    "toppings",
    multiple=True,
    help=f"Topping to add, repeatable, innermost first ({', '.join(TOPPINGS)}).",
)
def pizza_cost(base: str, toppings: tuple[str, ...]) -> None:
    """Compute the price of a pizza with the given toppings."""
    handler = price_pizza_handler()

    try:
        dto = handler.handle(base=base, toppings=toppings)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{dto.description}: {dto.cost}")


@click.command("menu")
def pizza_menu() -> None:
    """List base pizzas and toppings with their prices."""
    entries = show_menu_handler().handle()

    click.echo(f"{'Name':<16} {'Kind':<8} {'Price':>6}")
    click.echo("-" * 32)
    for entry in entries:
        price = f"+{entry.price}" if entry.kind == "topping" else str(entry.price)
        click.echo(f"{entry.name:<16} {entry.kind:<8} {price:>6}")
