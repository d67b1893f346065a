"""Geometric shapes and their areas."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Circle:
    """A circle given by its radius."""

    radius: float


@dataclass(frozen=True)
class Rectangle:
    """A rectangle given by its width and height."""

    width: float
    height: float


@dataclass(frozen=True)
class Triangle:
    """A triangle given by the lengths of its three sides."""

    a: float
    b: float
    c: float


Shape = Union[Circle, Rectangle, Triangle]


def area(shape: Shape) -> float:
    """Return the area of a shape.

    Triangles use Heron's formula; side lengths that cannot form a
    triangle give NaN. Anything that is not a shape raises TypeError.
    """
    match shape:
        case Circle(radius):
            return math.pi * radius * radius
        case Rectangle(width, height):
            return width * height
        case Triangle(a, b, c):
            s = (a + b + c) / 2.0
            product = s * (s - a) * (s - b) * (s - c)
            return math.sqrt(product) if product >= 0 else math.nan
        case _:
            raise TypeError(f"not a shape: {shape!r}")