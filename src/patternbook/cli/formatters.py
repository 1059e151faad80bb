"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML serialization
- Rich tables for pattern listings, categories and demo results
- Plain list formatting for detailed views
"""
import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str, width: int = 120) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    elif format_type == "table":
        return format_table_output(data, width)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any, width: int = 120) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_table(data["patterns"], width)
    elif isinstance(data, dict) and "categories" in data:
        return format_categories_table(data["categories"], width)
    elif isinstance(data, dict) and "demos" in data:
        return format_demos_table(data["demos"], width)
    else:
        # Details read better as a list than as a one-row table
        return format_list_output(data)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_list(data["patterns"])
    elif isinstance(data, dict) and "pattern" in data:
        return format_pattern_detail(data["pattern"])
    elif isinstance(data, dict) and "demos" in data:
        return format_demos_list(data["demos"])
    elif isinstance(data, dict) and "categories" in data:
        return "\n".join(f"{name}: {count}" for name, count in data["categories"].items())
    else:
        return json.dumps(data, indent=2, default=str)


def _render_table(table: Table, width: int) -> str:
    console = Console(width=width, legacy_windows=False, force_terminal=False, color_system=None)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_patterns_table(patterns: List[Dict], width: int = 120) -> str:
    """Format pattern summaries as a table."""
    if not patterns:
        return "No patterns found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="green", no_wrap=True)
    table.add_column("Category", style="cyan", no_wrap=True)
    table.add_column("Also known as", style="yellow")
    table.add_column("Intent")

    for pattern in patterns:
        table.add_row(
            pattern.get("name", "N/A"),
            pattern.get("category", "N/A"),
            ", ".join(pattern.get("aliases") or []),
            pattern.get("intent", ""),
        )
    return _render_table(table, width)


def format_categories_table(categories: Dict[str, int], width: int = 120) -> str:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Category", style="cyan")
    table.add_column("Patterns", justify="right", style="yellow")
    for name, count in categories.items():
        table.add_row(name, str(count))
    table.add_row("total", str(sum(categories.values())), style="bold")
    return _render_table(table, width)


def format_demos_table(demos: List[Dict], width: int = 120) -> str:
    """Format demo results as a table, one row per transcript line."""
    if not demos:
        return "No demos run."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Pattern", style="green", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("ms", justify="right", style="yellow")
    table.add_column("Output")

    for demo in demos:
        status = "ok" if demo.get("succeeded") else "FAILED"
        output = demo.get("output") or []
        if not demo.get("succeeded"):
            output = output + [demo.get("error", "")]
        table.add_row(
            demo.get("pattern", "N/A"),
            status,
            f"{demo.get('duration_ms', 0):.2f}",
            "\n".join(output),
        )
    return _render_table(table, width)


def format_patterns_list(patterns: List[Dict]) -> str:
    if not patterns:
        return "No patterns found."

    lines = []
    for pattern in patterns:
        lines.append(f"{pattern.get('name')} [{pattern.get('category')}]")
        lines.append(f"  slug:   {pattern.get('slug')}")
        if pattern.get("aliases"):
            lines.append(f"  aka:    {', '.join(pattern['aliases'])}")
        lines.append(f"  intent: {pattern.get('intent')}")
        lines.append("")
    return "\n".join(lines).rstrip()


def format_pattern_detail(pattern: Dict) -> str:
    lines = [
        f"{pattern.get('name')} [{pattern.get('category')}]",
        f"Intent: {pattern.get('intent')}",
    ]
    if pattern.get("aliases"):
        lines.append(f"Also known as: {', '.join(pattern['aliases'])}")
    if pattern.get("related"):
        lines.append(f"Related: {', '.join(pattern['related'])}")
    lines.append(f"Module: {pattern.get('module')}")
    for snippet in pattern.get("snippets") or []:
        lines.append("")
        lines.append(f"--- {snippet['name']} ---")
        lines.append(snippet["source"])
    return "\n".join(lines)


def format_demos_list(demos: List[Dict]) -> str:
    lines = []
    for demo in demos:
        status = "ok" if demo.get("succeeded") else "FAILED"
        lines.append(f"== {demo.get('pattern')} ({status}, {demo.get('duration_ms', 0):.2f} ms)")
        lines.extend(f"  {line}" for line in demo.get("output") or [])
        if not demo.get("succeeded"):
            lines.append(f"  error: {demo.get('error')}")
        lines.append("")
    return "\n".join(lines).rstrip()
