"""Bridge - decouple an abstraction from its implementation so the two can vary independently."""
from abc import ABC, abstractmethod
from typing import List

from patternbook.application.decorators import pattern_example
from patternbook.domain.catalog import PatternCategory


class Renderer(ABC):
    """Implementor."""

    @abstractmethod
    def render_circle(self, radius: float) -> str:
        ...

    @abstractmethod
    def render_square(self, side: float) -> str:
        ...


class VectorRenderer(Renderer):
    def render_circle(self, radius: float) -> str:
        return f'<circle r="{radius}"/>'

    def render_square(self, side: float) -> str:
        return f'<rect width="{side}" height="{side}"/>'


class RasterRenderer(Renderer):
    def render_circle(self, radius: float) -> str:
        return f"pixels for circle of radius {radius}"

    def render_square(self, side: float) -> str:
        return f"pixels for square of side {side}"


class Shape(ABC):
    """Abstraction; holds a reference to its implementor."""

    def __init__(self, renderer: Renderer):
        self.renderer = renderer

    @abstractmethod
    def draw(self) -> str:
        ...

    @abstractmethod
    def resize(self, factor: float) -> None:
        ...


class Circle(Shape):
    def __init__(self, renderer: Renderer, radius: float):
        super().__init__(renderer)
        self.radius = radius

    def draw(self) -> str:
        return self.renderer.render_circle(self.radius)

    def resize(self, factor: float) -> None:
        self.radius *= factor


class Square(Shape):
    def __init__(self, renderer: Renderer, side: float):
        super().__init__(renderer)
        self.side = side

    def draw(self) -> str:
        return self.renderer.render_square(self.side)

    def resize(self, factor: float) -> None:
        self.side *= factor


@pattern_example(
    name="Bridge",
    category=PatternCategory.STRUCTURAL,
    intent="Decouple an abstraction from its implementation so that the two can vary independently.",
    aliases=("Handle/Body",),
    participants=(Renderer, Shape, Circle, VectorRenderer),
    related=("adapter", "abstract-factory"),
)
def demo() -> List[str]:
    lines = []
    for renderer in (VectorRenderer(), RasterRenderer()):
        circle = Circle(renderer, 5)
        circle.resize(2)
        lines.append(circle.draw())
        lines.append(Square(renderer, 3).draw())
    return lines
