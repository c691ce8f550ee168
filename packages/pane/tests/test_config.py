"""Tests for chat_pane.config and chat_pane.theme"""
import pytest
from pydantic import ValidationError

from chat_pane.config import (
    ENV_SCROLL_STEP,
    ENV_THEME,
    ConfigError,
    PaneSettings,
    load_settings,
)
from chat_pane.theme import DARK, LIGHT, Theme, ThemeError, get_theme


class TestTheme:
    def test_presets(self):
        assert get_theme("light") is LIGHT
        assert get_theme("dark") is DARK

    def test_light_colours(self):
        assert (LIGHT.fg, LIGHT.bg, LIGHT.label_fg) == ("black", "white", "blue")

    def test_unknown_theme(self):
        with pytest.raises(ThemeError):
            get_theme("solarized")

    def test_unknown_colour_rejected(self):
        with pytest.raises(ValidationError):
            Theme(fg="chartreuse")

    def test_frozen(self):
        with pytest.raises(ValidationError):
            LIGHT.fg = "red"


class TestPaneSettings:
    def test_defaults(self):
        s = PaneSettings()
        assert s.theme == "dark"
        assert s.scroll_step == 10
        assert s.initial_fetch is None

    def test_from_dict_ignores_unknown_keys(self):
        s = PaneSettings.from_dict({"theme": "light", "slack_token": "xoxp"})
        assert s.theme == "light"

    def test_merge_skips_none(self):
        s = PaneSettings(scroll_step=5).merge({"scroll_step": None, "theme": "light"})
        assert s.scroll_step == 5
        assert s.theme == "light"

    def test_env_overrides(self):
        s = PaneSettings().with_env({ENV_THEME: "light", ENV_SCROLL_STEP: "3"})
        assert s.theme == "light"
        assert s.scroll_step == 3

    def test_bad_env_scroll_step(self):
        with pytest.raises(ConfigError):
            PaneSettings().with_env({ENV_SCROLL_STEP: "many"})

    @pytest.mark.parametrize(
        "data",
        [
            {"theme": "neon"},
            {"scroll_step": 0},
            {"tab_width": -1},
            {"initial_fetch": -2},
        ],
    )
    def test_validation_errors(self, data):
        with pytest.raises(ConfigError):
            load_settings(data, environ={})

    def test_load_settings(self):
        s = load_settings({"theme": "light", "initial_fetch": 50}, environ={})
        assert s.theme == "light"
        assert s.initial_fetch == 50

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)
        assert issubclass(ThemeError, ValueError)
