"""Tests for CLI output formatting."""
import json

import yaml

from patternbook.cli.formatters import format_output

PATTERNS = {
    "patterns": [
        {"name": "Proxy", "slug": "proxy", "category": "structural",
         "intent": "Provide a surrogate.", "aliases": ["Surrogate"]},
    ]
}

DEMOS = {
    "demos": [
        {"pattern": "Observer", "category": "behavioral", "succeeded": True,
         "duration_ms": 0.5, "output": ["notified 2"], "error": ""},
        {"pattern": "Broken", "category": "modern", "succeeded": False,
         "duration_ms": 1.25, "output": [], "error": "RuntimeError: boom"},
    ]
}


class TestFormatOutput:

    def test_json_is_default(self):
        assert json.loads(format_output(PATTERNS, "json")) == PATTERNS
        assert json.loads(format_output(PATTERNS, "unknown")) == PATTERNS

    def test_yaml(self):
        assert yaml.safe_load(format_output(PATTERNS, "yaml")) == PATTERNS

    def test_patterns_table(self):
        table = format_output(PATTERNS, "table", width=100)

        assert "Proxy" in table
        assert "Surrogate" in table
        assert "\x1b[" not in table

    def test_empty_patterns(self):
        assert format_output({"patterns": []}, "table") == "No patterns found."
        assert format_output({"patterns": []}, "list") == "No patterns found."

    def test_patterns_list(self):
        assert format_output(PATTERNS, "list").splitlines() == [
            "Proxy [structural]",
            "  slug:   proxy",
            "  aka:    Surrogate",
            "  intent: Provide a surrogate.",
        ]

    def test_demos_list_reports_failures(self):
        text = format_output(DEMOS, "list")

        assert "== Observer (ok, 0.50 ms)" in text
        assert "  notified 2" in text
        assert "== Broken (FAILED, 1.25 ms)" in text
        assert "  error: RuntimeError: boom" in text

    def test_demos_table(self):
        table = format_output(DEMOS, "table")
        assert "FAILED" in table
        assert "RuntimeError: boom" in table

    def test_categories(self):
        data = {"categories": {"creational": 5, "modern": 4}}

        assert format_output(data, "list") == "creational: 5\nmodern: 4"
        assert "9" in format_output(data, "table")

    def test_detail_in_table_format_falls_back_to_list(self):
        data = {"pattern": {"name": "Proxy", "category": "structural", "intent": "Surrogate.",
                            "aliases": [], "related": ["adapter"], "module": "m",
                            "snippets": [{"name": "m.Image", "source": "class Image: ..."}]}}
        text = format_output(data, "table")

        assert text.startswith("Proxy [structural]")
        assert "Related: adapter" in text
        assert "--- m.Image ---" in text
