# tests/test_shapes.py
"""
Unit tests for the abstract Shape hierarchy.
"""

import math

import pytest

from oopconcepts import shapes
from oopconcepts.shapes import Circle, Rectangle, Shape, Triangle


class TestShapes:
    """Test geometry of each variant."""

    def test_circle(self):
        c = Circle("c", 5.0)
        assert c.area() == pytest.approx(math.pi * 25)
        assert c.perimeter() == pytest.approx(10 * math.pi)

    def test_rectangle(self):
        r = Rectangle("r", 4.0, 6.0)
        assert r.area() == 24.0
        assert r.perimeter() == 20.0

    def test_triangle_heron(self):
        t = Triangle("t", 3.0, 4.0, 5.0)
        assert t.area() == pytest.approx(6.0)
        assert t.perimeter() == 12.0

    @pytest.mark.parametrize("shape", [
        Circle("c", 2.5),
        Rectangle("r", 1.5, 7.0),
        Triangle("t", 5.0, 6.0, 7.0),
    ])
    def test_idempotent(self, shape):
        """Test that area and perimeter are pure."""
        assert shape.area() == shape.area()
        assert shape.perimeter() == shape.perimeter()

    @pytest.mark.parametrize("sides", [(1.0, 1.0, 5.0), (2.0, 3.0, 10.0)])
    def test_impossible_triangle_area_is_nan(self, sides):
        """Test that sides breaking the triangle inequality give NaN, not an error."""
        t = Triangle("bad", *sides)

        assert math.isnan(t.area())
        assert t.perimeter() == sum(sides)

    def test_degenerate_triangle(self):
        assert Triangle("flat", 1.0, 2.0, 3.0).area() == 0.0

    def test_geometry_read_only(self):
        c = Circle("c", 1.0)
        with pytest.raises(AttributeError):
            c.radius = 2.0

    def test_default_display(self, capsys):
        Rectangle("My Rectangle", 1, 1).display()
        assert capsys.readouterr().out == "Shape: My Rectangle\n"

    def test_abstract(self):
        with pytest.raises(TypeError):
            Shape("Invalid")


def test_main_output(capsys):
    assert shapes.main() == 0
    out = capsys.readouterr().out

    assert out.startswith("=== Shape Information ===")
    assert "Shape: My Circle\nArea: 78.5398\nPerimeter: 31.4159" in out
    assert "Shape: My Rectangle\nArea: 24\nPerimeter: 20" in out
    assert "Shape: My Triangle\nArea: 6\nPerimeter: 12" in out
