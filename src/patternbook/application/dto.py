"""Data Transfer Objects for the pattern catalog."""
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict

from patternbook.application.decorators import PatternRegistration
from patternbook.domain.catalog import DemoResult


class BaseDTO(BaseModel):
    """Base class for all DTOs; ``to_dict`` is the stable serialization API."""
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BaseDTO':
        return cls.model_validate(data)


class PatternSummaryDTO(BaseDTO):
    """Row in a catalog listing."""

    name: str
    slug: str
    category: str
    intent: str
    aliases: List[str] = []

    @classmethod
    def from_registration(cls, registration: PatternRegistration) -> 'PatternSummaryDTO':
        entry = registration.entry
        return cls(
            name=entry.name,
            slug=entry.slug,
            category=entry.category.value,
            intent=entry.intent,
            aliases=list(entry.aliases),
        )


class CodeSnippetDTO(BaseDTO):
    """Source of one participant of a pattern."""

    name: str
    source: str


class PatternDetailDTO(PatternSummaryDTO):
    """Full description of a pattern including its illustrating source code."""

    module: str
    participants: List[str] = []
    related: List[str] = []
    snippets: List[CodeSnippetDTO] = []


class DemoResultDTO(BaseDTO):
    """Outcome of a demo run."""

    pattern: str
    category: str
    succeeded: bool
    duration_ms: float
    output: List[str] = []
    error: str = ""

    @classmethod
    def from_domain(cls, result: DemoResult) -> 'DemoResultDTO':
        return cls(
            pattern=result.pattern,
            category=result.category.value,
            succeeded=result.succeeded,
            duration_ms=round(result.duration_ms, 3),
            output=list(result.output),
            error=result.error or "",
        )
