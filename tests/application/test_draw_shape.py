"""Tests for the DrawShape use case."""

import pytest

from lld.application.draw_shape import DrawShapeHandler
from lld.domain.exceptions import EntityNotFoundError, UnknownShapeError
from lld.domain.service.shape_factory import ShapeFactory


def _handler() -> DrawShapeHandler:
    return DrawShapeHandler(shape_factory=ShapeFactory())


class TestDrawShape:

    def test_draws_circle(self, capsys):
        _handler().handle("CIRCLE")
        assert capsys.readouterr().out == "Circle\n"

    def test_draws_rectangle(self, capsys):
        _handler().handle("Rectangle")
        assert capsys.readouterr().out == "Rectangle\n"


class TestDrawUnknownShape:

    def test_unknown_key_raises(self, capsys):
        with pytest.raises(UnknownShapeError, match="Unknown shape 'SQUARE'"):
            _handler().handle("SQUARE")
        assert capsys.readouterr().out == ""

    def test_error_lists_supported_keys(self):
        with pytest.raises(UnknownShapeError, match="CIRCLE, Rectangle"):
            _handler().handle("RECTANGLE")

    def test_is_a_not_found_error(self):
        with pytest.raises(EntityNotFoundError):
            _handler().handle("triangle")
