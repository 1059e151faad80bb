"""Template Method - define the skeleton of an algorithm, deferring steps to subclasses."""
import csv
import io
import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from patternbook.application.decorators import pattern_example
from patternbook.domain.catalog import PatternCategory

Record = Dict[str, Any]


class ReportExporter(ABC):
    """The ``export`` skeleton is fixed; subclasses fill in the steps."""

    def export(self, records: List[Record]) -> str:
        rows = [self.transform(r) for r in records if self.include(r)]
        return self.serialize(rows)

    def include(self, record: Record) -> bool:
        """Hook; subclasses may filter records."""
        return True

    def transform(self, record: Record) -> Record:
        return dict(record)

    @abstractmethod
    def serialize(self, rows: List[Record]) -> str:
        ...


class CsvExporter(ReportExporter):
    def serialize(self, rows: List[Record]) -> str:
        if not rows:
            return ""
        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=list(rows[0]), lineterminator="\n")
        writer.writeheader()
        writer.writerows(rows)
        return buffer.getvalue()


class JsonExporter(ReportExporter):
    def serialize(self, rows: List[Record]) -> str:
        return json.dumps(rows, sort_keys=True)


class ActiveUsersJsonExporter(JsonExporter):
    """Uses the hook and overrides a step."""

    def include(self, record: Record) -> bool:
        return bool(record.get("active"))

    def transform(self, record: Record) -> Record:
        return {"name": record["name"].title()}


@pattern_example(
    name="Template Method",
    category=PatternCategory.BEHAVIORAL,
    intent="Define the skeleton of an algorithm in an operation, deferring some steps to subclasses.",
    participants=(ReportExporter, CsvExporter, ActiveUsersJsonExporter),
    related=("factory-method", "strategy"),
)
def demo() -> List[str]:
    users = [
        {"name": "ada lovelace", "active": True},
        {"name": "alan turing", "active": False},
        {"name": "grace hopper", "active": True},
    ]
    lines = ["csv:"]
    lines.extend(CsvExporter().export(users).splitlines())
    lines.append(f"json: {JsonExporter().export(users[:1])}")
    lines.append(f"active users: {ActiveUsersJsonExporter().export(users)}")
    return lines
