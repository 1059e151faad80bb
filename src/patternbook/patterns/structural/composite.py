"""Composite - treat individual objects and compositions of objects uniformly."""
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Tuple

from patternbook.application.decorators import pattern_example
from patternbook.domain.catalog import PatternCategory


class Node(ABC):
    """Component."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def size(self) -> int:
        ...

    def walk(self, depth: int = 0) -> Iterator[Tuple[int, "Node"]]:
        yield depth, self


class File(Node):
    """Leaf."""

    def __init__(self, name: str, size: int):
        super().__init__(name)
        self._size = size

    def size(self) -> int:
        return self._size


class Directory(Node):
    """Composite; its size is the sum of its children."""

    def __init__(self, name: str, children: Optional[List[Node]] = None):
        super().__init__(name)
        self.children: List[Node] = list(children or [])

    def add(self, node: Node) -> "Directory":
        if node is self:
            raise ValueError("A directory cannot contain itself")
        self.children.append(node)
        return self

    def remove(self, node: Node) -> None:
        self.children.remove(node)

    def size(self) -> int:
        return sum(child.size() for child in self.children)

    def walk(self, depth: int = 0) -> Iterator[Tuple[int, Node]]:
        yield depth, self
        for child in self.children:
            yield from child.walk(depth + 1)


@pattern_example(
    name="Composite",
    category=PatternCategory.STRUCTURAL,
    intent="Compose objects into tree structures and let clients treat individual objects and compositions uniformly.",
    participants=(Node, File, Directory),
    related=("decorator", "iterator", "visitor"),
)
def demo() -> List[str]:
    src = Directory("src").add(File("main.py", 1200)).add(File("util.py", 300))
    root = Directory("project").add(src).add(File("README.md", 500))

    lines = [f"{'  ' * depth}{node.name} ({node.size()} bytes)" for depth, node in root.walk()]
    lines.append(f"leaf and composite share size(): {File('x', 7).size()} / {src.size()}")
    return lines
