"""Jinja-based Markdown rendering of the pattern catalog."""
from typing import Any, Dict, List, Optional

from jinja2 import Environment, StrictUndefined, TemplateError

from patternbook.application.dto import PatternDetailDTO
from patternbook.domain.catalog import PatternCategory
from patternbook.infrastructure.exceptions import RenderingError

CATALOG_TEMPLATE = """\
# {{ title }}

{{ description }}

## Contents

{% for section in sections %}
- [{{ section.label }} patterns](#{{ section.anchor }}){% if section.patterns %}: {% for p in section.patterns %}[{{ p.name }}](#{{ p.slug }}){% if not loop.last %}, {% endif %}{% endfor %}{% endif %}

{% endfor %}
{% for section in sections %}
<a id="{{ section.anchor }}"></a>
## {{ section.label }} patterns

{% if not section.patterns %}
_No patterns in this category._

{% endif %}
{% for p in section.patterns %}
<a id="{{ p.slug }}"></a>
### {{ p.name }}

**Intent:** {{ p.intent }}

{% if p.aliases %}
**Also known as:** {{ p.aliases | join(", ") }}

{% endif %}
{% for snippet in p.snippets %}
```python
{{ snippet.source }}
```

{% endfor %}
{% if p.related %}
**Related:** {% for slug in p.related %}[{{ slug }}](#{{ slug }}){% if not loop.last %}, {% endif %}{% endfor %}

{% endif %}
{% endfor %}
{% endfor %}
"""

DEFAULT_DESCRIPTION = (
    "The Gang-of-Four design patterns plus a handful of modern ones, each "
    "illustrated with a short, self-contained Python example."
)

class MarkdownCatalogRenderer:
    """Renders pattern details into a single Markdown document."""

    def __init__(self, logger: Any, template: str = CATALOG_TEMPLATE):
        self.logger = logger
        self._env = Environment(
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            autoescape=False,
        )
        try:
            self._template = self._env.from_string(template)
        except TemplateError as e:
            raise RenderingError(f"Invalid catalog template: {e}")

    def render(self, patterns: List[PatternDetailDTO], title: str,
               description: Optional[str] = None) -> str:
        """
        Render the catalog.

        Args:
            patterns: Pattern details, in the order they should appear
            title: Document title
            description: Introductory paragraph

        Returns:
            Markdown text

        Raises:
            RenderingError: If the template fails to render
        """
        context = {
            "title": title,
            "description": description or DEFAULT_DESCRIPTION,
            "sections": self._build_sections(patterns),
        }
        try:
            markdown = self._template.render(**context)
        except TemplateError as e:
            self.logger.error(f"Failed to render catalog: {e}")
            raise RenderingError(f"Failed to render catalog: {e}")

        self.logger.debug(f"Rendered catalog with {len(patterns)} patterns")
        return markdown

    def _build_sections(self, patterns: List[PatternDetailDTO]) -> List[Dict[str, Any]]:
        sections = []
        for category in PatternCategory.ordered():
            sections.append({
                "label": category.label,
                "anchor": f"{category.value}-patterns",
                "patterns": [p for p in patterns if p.category == category.value],
            })
        return sections
