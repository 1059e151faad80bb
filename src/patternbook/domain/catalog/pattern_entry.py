"""Pattern catalog entries."""
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from patternbook.domain.catalog.value_objects import PatternCategory, slugify


class PatternEntry(BaseModel):
    """Metadata describing one pattern in the catalog."""
    model_config = ConfigDict(frozen=True)

    name: str
    slug: str = ""
    category: PatternCategory
    intent: str
    aliases: Tuple[str, ...] = ()
    participants: Tuple[str, ...] = ()
    module: str = ""
    related: Tuple[str, ...] = ()

    @field_validator("name", "intent")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty names and intents."""
        if not v or not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    @model_validator(mode="before")
    @classmethod
    def derive_slug(cls, data):
        """Derive the slug from the name when not given explicitly."""
        if isinstance(data, dict) and not data.get("slug") and data.get("name"):
            data = dict(data)
            data["slug"] = slugify(data["name"])
        return data

    def matches(self, term: str) -> bool:
        """Check whether term names this pattern (name, slug or alias)."""
        needle = term.strip().lower()
        if not needle:
            return False
        if needle in (self.name.lower(), self.slug) or slugify(needle) == self.slug:
            return True
        return any(needle == alias.lower() or slugify(needle) == slugify(alias)
                   for alias in self.aliases)

    def mentions(self, term: str) -> bool:
        """Check whether term appears in the name, aliases or intent."""
        needle = term.strip().lower()
        if not needle:
            return False
        haystack = [self.name, self.intent, *self.aliases]
        return any(needle in text.lower() for text in haystack)


class DemoResult(BaseModel):
    """Outcome of running a pattern's demonstration."""

    pattern: str
    category: PatternCategory
    output: List[str] = Field(default_factory=list)
    duration_ms: float = 0.0
    succeeded: bool = True
    error: Optional[str] = None
