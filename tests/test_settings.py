"""Tests for core.settings, core.logging_config and core.utils.formatting."""

import logging
from pathlib import Path
from typing import Iterator

import pytest
import yaml

from core.logging_config import setup_logging
from core.settings import get_default_settings, get_setting, load_settings, reload_settings
from core.utils.formatting import format_credits, format_rate


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    reload_settings()
    yield
    reload_settings()


class TestLoadSettings:
    """Defaults merged with config/settings.yaml."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        settings = load_settings(tmp_path)
        assert settings == get_default_settings()
        assert get_setting(settings, "wizard.team_size") == 6

    def test_file_overrides_nested_keys(self, tmp_path: Path) -> None:
        (tmp_path / "settings.yaml").write_text(
            yaml.safe_dump({"wizard": {"team_size": 4, "seed": 7}})
        )
        settings = load_settings(tmp_path)
        assert get_setting(settings, "wizard.team_size") == 4
        assert get_setting(settings, "wizard.seed") == 7
        assert get_setting(settings, "wizard.starting_balance") == 100000

    def test_invalid_yaml_falls_back(self, tmp_path: Path) -> None:
        (tmp_path / "settings.yaml").write_text("wizard: [unclosed")
        assert load_settings(tmp_path) == get_default_settings()

    def test_cached_until_reload(self, tmp_path: Path) -> None:
        first = load_settings(tmp_path)
        (tmp_path / "settings.yaml").write_text(yaml.safe_dump({"wizard": {"team_size": 3}}))
        assert load_settings(tmp_path) is first
        reload_settings()
        assert get_setting(load_settings(tmp_path), "wizard.team_size") == 3

    def test_defaults_are_copies(self) -> None:
        get_default_settings()["wizard"]["team_size"] = 99
        assert get_default_settings()["wizard"]["team_size"] == 6


class TestGetSetting:
    def test_missing_path_returns_default(self) -> None:
        assert get_setting({"a": {"b": 1}}, "a.c", "x") == "x"
        assert get_setting({"a": 1}, "a.b") is None


class TestSetupLogging:
    def test_writes_to_rotating_file(self, tmp_path: Path) -> None:
        root = logging.getLogger()
        saved = root.handlers[:], root.level
        try:
            setup_logging(tmp_path, {"logging": {"file": "logs/test.log", "level": "debug"}})
            logging.getLogger("crew_creation.test").debug("hello")
            for h in root.handlers:
                h.flush()
            assert "hello" in (tmp_path / "logs" / "test.log").read_text(encoding="utf-8")
        finally:
            for h in root.handlers[:]:
                root.removeHandler(h)
                h.close()
            for h in saved[0]:
                root.addHandler(h)
            root.setLevel(saved[1])


class TestFormatting:
    def test_credits(self) -> None:
        assert format_credits(12500) == "12,500 cr"
        assert format_credits(-200) == "-200 cr"
        assert format_credits(0) == "0 cr"

    def test_rate(self) -> None:
        assert format_rate(0.12345, "AU/h", 3) == "0.123 AU/h"
        assert format_rate(2, "AU", 0) == "2 AU"
