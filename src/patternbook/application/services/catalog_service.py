"""Catalog application service - list, inspect, search and run pattern examples."""
import inspect
import textwrap
import time
from typing import Dict, List, Optional

from patternbook.application.decorators import PatternRegistration
from patternbook.application.dto import (
    CodeSnippetDTO,
    DemoResultDTO,
    PatternDetailDTO,
    PatternSummaryDTO,
)
from patternbook.domain.catalog import DemoResult, PatternCategory
from patternbook.infrastructure.logging.logger import get_logger
from patternbook.infrastructure.registry.pattern_registry import PatternRegistry


class CatalogService:
    """
    Application service for the pattern catalog.

    Read operations return DTOs; demos are executed in isolation and their
    failures are reported in the result rather than raised.
    """

    def __init__(self, registry: PatternRegistry):
        self._registry = registry
        self._logger = get_logger(__name__)

    def list_patterns(self, category: Optional[PatternCategory] = None) -> List[PatternSummaryDTO]:
        """
        List catalog entries ordered by category, then name.

        Args:
            category: Only list patterns of this category

        Returns:
            Pattern summaries
        """
        return [
            PatternSummaryDTO.from_registration(r)
            for r in self._registry.list_registrations(category)
        ]

    def get_pattern(self, name: str) -> PatternDetailDTO:
        """
        Get full details of a pattern, including participant source code.

        Raises:
            PatternNotFoundError: If no pattern matches ``name``
        """
        registration = self._registry.get(name)
        entry = registration.entry
        return PatternDetailDTO(
            name=entry.name,
            slug=entry.slug,
            category=entry.category.value,
            intent=entry.intent,
            aliases=list(entry.aliases),
            module=entry.module,
            participants=list(entry.participants),
            related=[slug for slug in entry.related if self._registry.is_registered(slug)],
            snippets=self._collect_snippets(registration),
        )

    def search(self, term: str) -> List[PatternSummaryDTO]:
        """Patterns whose name, alias or intent contains ``term`` (case-insensitive)."""
        return [
            PatternSummaryDTO.from_registration(r)
            for r in self._registry.list_registrations()
            if r.entry.mentions(term)
        ]

    def categories(self) -> Dict[str, int]:
        """Number of patterns per category; every category is present."""
        counts = {category.value: 0 for category in PatternCategory.ordered()}
        for registration in self._registry.list_registrations():
            counts[registration.entry.category.value] += 1
        return counts

    def run_demo(self, name: str) -> DemoResultDTO:
        """
        Run the demonstration of one pattern.

        Raises:
            PatternNotFoundError: If no pattern matches ``name``
        """
        registration = self._registry.get(name)
        return DemoResultDTO.from_domain(self._execute(registration))

    def run_all_demos(self, category: Optional[PatternCategory] = None) -> List[DemoResultDTO]:
        """Run every demo, in catalog order."""
        return [
            DemoResultDTO.from_domain(self._execute(r))
            for r in self._registry.list_registrations(category)
        ]

    def _execute(self, registration: PatternRegistration) -> DemoResult:
        entry = registration.entry
        self._logger.debug(f"Running demo for {entry.slug}")
        start = time.perf_counter()
        try:
            output = [str(line) for line in registration.demo()]
        except Exception as e:
            elapsed = (time.perf_counter() - start) * 1000
            self._logger.error(f"Demo for {entry.slug} failed: {e}", exc_info=True)
            return DemoResult(
                pattern=entry.name,
                category=entry.category,
                duration_ms=elapsed,
                succeeded=False,
                error=f"{type(e).__name__}: {e}",
            )

        elapsed = (time.perf_counter() - start) * 1000
        self._logger.debug(f"Demo for {entry.slug} completed in {elapsed:.2f}ms")
        return DemoResult(
            pattern=entry.name,
            category=entry.category,
            output=output,
            duration_ms=elapsed,
        )

    def _collect_snippets(self, registration: PatternRegistration) -> List[CodeSnippetDTO]:
        snippets = []
        for participant, qualified_name in zip(registration.participants, registration.entry.participants):
            try:
                source = textwrap.dedent(inspect.getsource(participant)).rstrip()
            except (OSError, TypeError) as e:
                self._logger.warning(f"No source available for {qualified_name}: {e}")
                continue
            snippets.append(CodeSnippetDTO(name=qualified_name, source=source))
        return snippets
