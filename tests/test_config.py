"""Unit tests for pageactions.config — PageActionsConfig and related functions."""

from __future__ import annotations

from pathlib import Path

import pytest

from pageactions.config import PageActionsConfig, PageActionsConfigError
from pageactions.models import DEFAULT_TIMEOUT_MS, DEFAULT_VIEWPORT


# ---------------------------------------------------------------------------
# 1. Default values
# ---------------------------------------------------------------------------

class TestPageActionsConfigDefaults:
    """PageActionsConfig should have sensible defaults for every field."""

    def test_default_url_is_empty(self):
        assert PageActionsConfig().url == ""

    def test_default_actions_is_empty_list(self):
        assert PageActionsConfig().actions == []

    def test_default_actions_not_shared(self):
        a = PageActionsConfig()
        a.actions.append("click .x")
        assert PageActionsConfig().actions == []

    def test_default_headless_is_true(self):
        assert PageActionsConfig().headless is True

    def test_default_viewport_matches_models_constant(self):
        assert PageActionsConfig().viewport == DEFAULT_VIEWPORT

    def test_default_timeout_matches_models_constant(self):
        assert PageActionsConfig().timeout == DEFAULT_TIMEOUT_MS


# ---------------------------------------------------------------------------
# 2. from_file() — happy path
# ---------------------------------------------------------------------------

class TestFromFile:
    """PageActionsConfig.from_file() should load and parse valid YAML."""

    def test_from_file_with_valid_yaml(self, tmp_path: Path, sample_config_yaml: str):
        config_file = tmp_path / "pageactions.yaml"
        config_file.write_text(sample_config_yaml, encoding="utf-8")

        cfg = PageActionsConfig.from_file(config_file)

        assert cfg.url == "http://localhost:3000/login"
        assert cfg.actions == [
            "set field #username to alice",
            "check field #remember",
            "click button[type=submit]",
            "wait for path to be /dashboard",
        ]
        assert cfg.headless is False
        assert cfg.viewport == (1920, 1080)
        assert cfg.timeout == 5000

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        config_file = tmp_path / "pageactions.yaml"
        config_file.write_text("", encoding="utf-8")

        cfg = PageActionsConfig.from_file(config_file)

        assert cfg.url == ""
        assert cfg.actions == []

    def test_partial_viewport_uses_default_height(self, tmp_path: Path):
        config_file = tmp_path / "pageactions.yaml"
        config_file.write_text("viewport:\n  width: 800\n", encoding="utf-8")

        assert PageActionsConfig.from_file(config_file).viewport == (800, DEFAULT_VIEWPORT[1])


# ---------------------------------------------------------------------------
# 3. from_file() — errors
# ---------------------------------------------------------------------------

class TestFromFileErrors:
    """Invalid config files should raise PageActionsConfigError."""

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(PageActionsConfigError, match="Config file not found"):
            PageActionsConfig.from_file(tmp_path / "nope.yaml")

    def test_non_mapping_document(self, tmp_path: Path):
        config_file = tmp_path / "pageactions.yaml"
        config_file.write_text("- click .foo\n", encoding="utf-8")

        with pytest.raises(PageActionsConfigError, match="must be a YAML mapping"):
            PageActionsConfig.from_file(config_file)

    def test_actions_must_be_a_list(self, tmp_path: Path):
        config_file = tmp_path / "pageactions.yaml"
        config_file.write_text("actions: click .foo\n", encoding="utf-8")

        with pytest.raises(PageActionsConfigError, match="'actions' must be a list"):
            PageActionsConfig.from_file(config_file)

    def test_invalid_timeout(self, tmp_path: Path):
        config_file = tmp_path / "pageactions.yaml"
        config_file.write_text("timeout: soon\n", encoding="utf-8")

        with pytest.raises(PageActionsConfigError, match="'timeout' must be an integer"):
            PageActionsConfig.from_file(config_file)

    def test_yaml_syntax_error(self, tmp_path: Path):
        config_file = tmp_path / "pageactions.yaml"
        config_file.write_text("actions: [click .foo\n", encoding="utf-8")

        with pytest.raises(PageActionsConfigError, match="YAML parse error"):
            PageActionsConfig.from_file(config_file)
