"""Flyweight - share fine-grained objects to support large numbers of them efficiently."""
import threading
from dataclasses import dataclass
from typing import Dict, List, Tuple

from patternbook.application.decorators import pattern_example
from patternbook.domain.catalog import PatternCategory


@dataclass(frozen=True)
class GlyphStyle:
    """Intrinsic state; immutable so it can be shared."""
    font: str
    size: int
    color: str


class GlyphStyleFactory:
    """Keeps the shared registry of styles, one object per distinct key."""

    def __init__(self):
        self._styles: Dict[Tuple[str, int, str], GlyphStyle] = {}
        self._lock = threading.Lock()

    def get_style(self, font: str, size: int, color: str) -> GlyphStyle:
        key = (font, size, color)
        with self._lock:
            style = self._styles.get(key)
            if style is None:
                style = GlyphStyle(font, size, color)
                self._styles[key] = style
            return style

    def count(self) -> int:
        with self._lock:
            return len(self._styles)


@dataclass
class Glyph:
    """Extrinsic state (character and position) plus a shared style."""
    char: str
    x: int
    y: int
    style: GlyphStyle


class TextLayout:
    def __init__(self, factory: GlyphStyleFactory):
        self.factory = factory
        self.glyphs: List[Glyph] = []

    def write(self, text: str, y: int, font: str = "Helvetica", size: int = 12, color: str = "black") -> None:
        style = self.factory.get_style(font, size, color)
        for x, char in enumerate(text):
            self.glyphs.append(Glyph(char, x, y, style))


@pattern_example(
    name="Flyweight",
    category=PatternCategory.STRUCTURAL,
    intent="Use sharing to support large numbers of fine-grained objects efficiently.",
    participants=(GlyphStyle, GlyphStyleFactory, Glyph),
    related=("composite", "singleton"),
)
def demo() -> List[str]:
    factory = GlyphStyleFactory()
    layout = TextLayout(factory)
    layout.write("Design Patterns", y=0, size=24, color="navy")
    layout.write("Elements of Reusable Object-Oriented Software", y=1)
    layout.write("Gamma, Helm, Johnson, Vlissides", y=2)

    distinct = len({id(g.style) for g in layout.glyphs})
    return [
        f"glyphs laid out: {len(layout.glyphs)}",
        f"style objects created: {factory.count()}",
        f"distinct style objects referenced: {distinct}",
        f"same request returns same object: {factory.get_style('Helvetica', 12, 'black') is layout.glyphs[-1].style}",
    ]
