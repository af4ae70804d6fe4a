"""Unit tests for the shape factory and the shapes it builds."""

import pytest

from lld.domain.model.shape import Circle, Rectangle
from lld.domain.service.shape_factory import ShapeFactory, ShapeKind


@pytest.fixture
def factory() -> ShapeFactory:
    return ShapeFactory()


class TestRecognizedKeys:

    def test_circle(self, factory):
        assert isinstance(factory.get_shape("CIRCLE"), Circle)

    def test_rectangle(self, factory):
        assert isinstance(factory.get_shape("Rectangle"), Rectangle)

    def test_new_instance_per_call(self, factory):
        first = factory.get_shape("CIRCLE")
        second = factory.get_shape("CIRCLE")
        assert first is not second
        assert type(first) is type(second)

    def test_supported_keys_keep_their_spelling(self, factory):
        assert factory.supported_keys() == ["CIRCLE", "Rectangle"]
        assert [k.value for k in ShapeKind] == factory.supported_keys()


class TestUnrecognizedKeys:

    @pytest.mark.parametrize(
        "key", ["SQUARE", "RECTANGLE", "circle", "Circle", "rectangle", "", " CIRCLE"]
    )
    def test_returns_none(self, factory, key):
        assert factory.get_shape(key) is None


class TestDraw:

    def test_circle_draw(self, capsys):
        assert Circle().draw() is None
        assert capsys.readouterr().out == "Circle\n"

    def test_rectangle_draw(self, capsys):
        Rectangle().draw()
        assert capsys.readouterr().out == "Rectangle\n"

    def test_factory_shapes_draw(self, factory, capsys):
        factory.get_shape("CIRCLE").draw()
        factory.get_shape("Rectangle").draw()
        assert capsys.readouterr().out == "Circle\nRectangle\n"
