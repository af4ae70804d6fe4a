"""Drawable shapes produced by the shape factory."""

from __future__ import annotations

from abc import ABC, abstractmethod

import click


class Shape(ABC):

    @abstractmethod
    def draw(self) -> None:
        """Render the shape to standard output."""


class Circle(Shape):

    def draw(self) -> None:
        click.echo("Circle")


class Rectangle(Shape):

    def draw(self) -> None:
        click.echo("Rectangle")
