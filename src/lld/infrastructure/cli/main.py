import click

from lld.infrastructure.bootstrap import configure_logging
from lld.infrastructure.cli.pizza_commands import pizza_cost, pizza_demo, pizza_menu
from lld.infrastructure.cli.shape_commands import shape_demo, shape_draw


@click.group()
@click.option("--verbose", is_flag=True, help="Enable debug logging on stderr.")
def cli(verbose: bool) -> None:
    """LLD — design pattern examples"""
    configure_logging(verbose)


@cli.group()
def pizza() -> None:
    """Decorator example: price a pizza and its toppings."""


@cli.group()
def shape() -> None:
    """Factory example: build and draw shapes by key."""


# Register subcommands
pizza.add_command(pizza_cost)
pizza.add_command(pizza_demo)
pizza.add_command(pizza_menu)
shape.add_command(shape_demo)
shape.add_command(shape_draw)
