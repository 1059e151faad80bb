"""Iterator - sequential access to an aggregate without exposing its representation."""
from collections import deque
from typing import Generic, Iterator, List, Optional, TypeVar

from patternbook.application.decorators import pattern_example
from patternbook.domain.catalog import PatternCategory

T = TypeVar("T")


class TreeNode(Generic[T]):
    def __init__(self, value: T, left: Optional["TreeNode[T]"] = None, right: Optional["TreeNode[T]"] = None):
        self.value = value
        self.left = left
        self.right = right


class InOrderIterator(Generic[T]):
    """Explicit external iterator keeping its own stack."""

    def __init__(self, root: Optional[TreeNode[T]]):
        self._stack: List[TreeNode[T]] = []
        self._push_left(root)

    def _push_left(self, node: Optional[TreeNode[T]]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left

    def __iter__(self) -> "InOrderIterator[T]":
        return self

    def __next__(self) -> T:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        self._push_left(node.right)
        return node.value


class BinaryTree(Generic[T]):
    """Aggregate; iterable in order by default, other orders on request."""

    def __init__(self, root: Optional[TreeNode[T]] = None):
        self.root = root

    def insert(self, value: T) -> None:
        if self.root is None:
            self.root = TreeNode(value)
            return
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(value)
                    return
                node = node.right

    def __iter__(self) -> Iterator[T]:
        return InOrderIterator(self.root)

    def breadth_first(self) -> Iterator[T]:
        """Generator-based internal traversal."""
        queue = deque([self.root] if self.root else [])
        while queue:
            node = queue.popleft()
            yield node.value
            queue.extend(child for child in (node.left, node.right) if child is not None)


@pattern_example(
    name="Iterator",
    category=PatternCategory.BEHAVIORAL,
    intent="Provide a way to access the elements of an aggregate object sequentially without exposing its underlying representation.",
    aliases=("Cursor",),
    participants=(InOrderIterator, BinaryTree),
    related=("composite", "memento"),
)
def demo() -> List[str]:
    tree: BinaryTree[int] = BinaryTree()
    for value in (50, 30, 70, 20, 40, 60, 80):
        tree.insert(value)

    iterator = iter(tree)
    return [
        f"in order: {list(tree)}",
        f"breadth first: {list(tree.breadth_first())}",
        f"manual next(): {next(iterator)}, {next(iterator)}",
        f"empty tree yields: {list(BinaryTree())}",
    ]
