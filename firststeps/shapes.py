"""Geometric shapes with areas."""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass


class Shape(ABC):
    """Anything with an area."""

    @abstractmethod
    def area(self) -> float:
        """Return the area of the shape."""


@dataclass(frozen=True)
class Rectangle(Shape):
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Circle(Shape):
    radius: float

    def area(self) -> float:
        return self.radius * self.radius * math.pi


@dataclass(frozen=True)
class Triangle(Shape):
    base: float
    height: float

    def area(self) -> float:
        return (self.base * self.height) * 0.5


def perimeter(rectangle: Rectangle) -> float:
    """Return the perimeter of a rectangle."""
    return 2 * (rectangle.width + rectangle.height)