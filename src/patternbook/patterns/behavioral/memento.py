"""Memento - capture and restore an object's internal state without violating encapsulation."""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Tuple

from patternbook.application.decorators import pattern_example
from patternbook.domain.base.exceptions import DomainException
from patternbook.domain.catalog import PatternCategory


class EmptyHistoryError(DomainException):
    pass


@dataclass(frozen=True)
class EditorMemento:
    """Opaque snapshot; only the Editor reads its fields."""
    content: str
    cursor: Tuple[int, int]
    taken_at: datetime


class Editor:
    """Originator."""

    def __init__(self):
        self.content = ""
        self.cursor = (0, 0)

    def type(self, text: str) -> None:
        self.content += text
        lines = self.content.split("\n")
        self.cursor = (len(lines) - 1, len(lines[-1]))

    def save(self) -> EditorMemento:
        return EditorMemento(self.content, self.cursor, datetime.now(timezone.utc))

    def restore(self, memento: EditorMemento) -> None:
        self.content = memento.content
        self.cursor = memento.cursor


class History:
    """Caretaker; stores mementos without looking inside them."""

    def __init__(self, editor: Editor, limit: int = 50):
        self._editor = editor
        self._snapshots: List[EditorMemento] = []
        self._limit = limit

    def checkpoint(self) -> None:
        self._snapshots.append(self._editor.save())
        if len(self._snapshots) > self._limit:
            self._snapshots.pop(0)

    def undo(self) -> None:
        if not self._snapshots:
            raise EmptyHistoryError("No snapshot to restore")
        self._editor.restore(self._snapshots.pop())

    def __len__(self) -> int:
        return len(self._snapshots)


@pattern_example(
    name="Memento",
    category=PatternCategory.BEHAVIORAL,
    intent="Without violating encapsulation, capture and externalize an object's internal state so it can be restored later.",
    aliases=("Token",),
    participants=(EditorMemento, Editor, History),
    related=("command", "iterator"),
)
def demo() -> List[str]:
    editor = Editor()
    history = History(editor)

    history.checkpoint()
    editor.type("Design")
    history.checkpoint()
    editor.type(" Patterns\nby GoF")
    lines = [f"current: {editor.content!r} cursor={editor.cursor}"]

    history.undo()
    lines.append(f"undo: {editor.content!r} cursor={editor.cursor}")
    history.undo()
    lines.append(f"undo: {editor.content!r} cursor={editor.cursor}")
    try:
        history.undo()
    except EmptyHistoryError as e:
        lines.append(f"undo refused: {e}")
    return lines
