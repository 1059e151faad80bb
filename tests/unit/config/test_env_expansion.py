"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from patternbook.config.utils.env_expansion import expand_config_env_vars, expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_simple_env_var(self):
        """Test expansion of simple environment variable."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("$TEST_VAR") == "/test/path"

    def test_expand_braced_env_var_with_subpath(self):
        """Test expansion of braced environment variable with subpath."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("${TEST_VAR}/subdir") == "/test/path/subdir"

    def test_default_used_when_unset(self):
        """Test that ${VAR:default} falls back to the default."""
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("${LOG_DIR:/tmp/logs}/app.log") == "/tmp/logs/app.log"

    def test_default_ignored_when_set(self):
        """Test that a set variable wins over the default."""
        with patch.dict(os.environ, {"LOG_DIR": "/var/log"}):
            assert expand_env_vars("${LOG_DIR:/tmp/logs}") == "/var/log"

    def test_empty_default(self):
        """Test that an empty default expands to an empty string."""
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("x${MISSING:}y") == "xy"

    def test_expand_nonexistent_env_var(self):
        """Test that unknown variables without default are left as written."""
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("$NONEXISTENT_VAR") == "$NONEXISTENT_VAR"
            assert expand_env_vars("${NONEXISTENT_VAR}") == "${NONEXISTENT_VAR}"

    def test_expand_nested_values(self):
        """Test expansion in nested dictionaries and lists."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {
                "logging": {"file": {"path": "$TEST_VAR/app.log"}},
                "catalog": {"packages": ["$TEST_VAR", "plain"]},
            }
            assert expand_env_vars(config) == {
                "logging": {"file": {"path": "/test/path/app.log"}},
                "catalog": {"packages": ["/test/path", "plain"]},
            }

    def test_expand_non_string_values(self):
        """Test that non-string values are returned unchanged."""
        config = {"number": 42, "boolean": True, "none": None}
        assert expand_env_vars(config) == config

    def test_expand_config_env_vars(self):
        """Test the main configuration expansion function."""
        with patch.dict(os.environ, {"CATALOG_TITLE": "Patterns"}):
            config = {"catalog": {"title": "$CATALOG_TITLE"}}
            assert expand_config_env_vars(config) == {"catalog": {"title": "Patterns"}}
