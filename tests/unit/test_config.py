"""Unit tests for configuration utilities.

These tests verify theme name resolution and preset lookup.
"""

from __future__ import annotations

import pytest

from usagebar.config import THEMES, load_theme, resolve_theme_name
from usagebar.core.exceptions import ThemeNotFoundError


@pytest.mark.config
@pytest.mark.usefixtures("clean_env")
class TestResolveThemeName:
    """Tests for resolve_theme_name."""

    def test_defaults_to_dark(self) -> None:
        """Without a name or environment variable, 'dark' is used."""
        assert resolve_theme_name() == "dark"

    def test_environment_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """USAGEBAR_THEME is used when no name is given."""
        monkeypatch.setenv("USAGEBAR_THEME", "light")

        assert resolve_theme_name() == "light"

    def test_explicit_name_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An explicit name overrides the environment."""
        monkeypatch.setenv("USAGEBAR_THEME", "light")

        assert resolve_theme_name("plain") == "plain"

    def test_empty_environment_variable_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An empty USAGEBAR_THEME falls back to the default."""
        monkeypatch.setenv("USAGEBAR_THEME", "")

        assert resolve_theme_name() == "dark"

    def test_name_is_normalized(self) -> None:
        """Names are stripped and lower-cased."""
        assert resolve_theme_name("  Light ") == "light"


@pytest.mark.config
@pytest.mark.usefixtures("clean_env")
class TestLoadTheme:
    """Tests for load_theme."""

    @pytest.mark.parametrize("name", sorted(THEMES))
    def test_loads_presets(self, name: str) -> None:
        """Every bundled preset can be loaded by name."""
        assert load_theme(name) is THEMES[name]

    def test_default_preset(self) -> None:
        """Without a name, the dark preset is loaded."""
        assert load_theme() is THEMES["dark"]

    def test_unknown_theme_raises(self) -> None:
        """Unknown names raise ThemeNotFoundError listing the presets."""
        with pytest.raises(ThemeNotFoundError) as exc_info:
            load_theme("neon")

        assert exc_info.value.name == "neon"
        assert exc_info.value.available == sorted(THEMES)

    def test_unknown_theme_from_environment_raises(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A bad USAGEBAR_THEME is reported, not silently ignored."""
        monkeypatch.setenv("USAGEBAR_THEME", "neon")

        with pytest.raises(ThemeNotFoundError):
            load_theme()
