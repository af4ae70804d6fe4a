"""CLI commands for the shape factory example."""

from __future__ import annotations

import click

from lld.domain.exceptions import DomainException
from lld.infrastructure.bootstrap import draw_shape_handler, shape_factory


@click.command("demo")
def shape_demo() -> None:
    """Draw the sample shape."""
    shape = shape_factory().get_shape("CIRCLE")
    shape.draw()


@click.command("draw")
@click.argument("key")
def shape_draw(key: str) -> None:
    """Draw the shape registered under KEY (case-sensitive)."""
    handler = draw_shape_handler()

    try:
        handler.handle(key)
    except DomainException as exc:
        raise click.ClickException(str(exc))
