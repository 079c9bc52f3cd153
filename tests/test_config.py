"""Tests for environment-driven settings."""

import pytest

from geotime import config, rendering
from geotime.config import Settings
from geotime.rendering import DisplayPipeline, FormatTier, display
from geotime.timestamp import Geotime


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("GEOTIME_DEFAULT_PATTERN", raising=False)
        monkeypatch.delenv("GEOTIME_MAGNITUDE_MAX_YEARS", raising=False)
        settings = Settings(_env_file=None)
        assert settings.default_pattern == "%Y-%m-%dT%H:%M:%SZ"
        assert settings.magnitude_max_years == 1e15

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GEOTIME_DEFAULT_PATTERN", "%Y")
        monkeypatch.setenv("GEOTIME_MAGNITUDE_MAX_YEARS", "1000")
        settings = Settings(_env_file=None)
        assert settings.default_pattern == "%Y"
        assert settings.magnitude_max_years == 1000.0

    def test_limit_must_be_positive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GEOTIME_MAGNITUDE_MAX_YEARS", "0")
        with pytest.raises(ValueError):
            Settings(_env_file=None)


class TestDisplayUsesSettings:
    """The default pipeline reads the module-level settings at render time."""

    def test_default_pattern(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            config, "settings", Settings(_env_file=None, default_pattern="%Y")
        )
        assert display(Geotime(0)) == "1970"

    def test_built_in_default_pattern(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(config, "settings", Settings(_env_file=None))
        assert display(Geotime(1_500)) == "1970-01-01T00:00:01Z"

    def test_magnitude_limit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            config,
            "settings",
            Settings(_env_file=None, magnitude_max_years=1000),
        )
        result = DisplayPipeline().render(Geotime(2**63), "%Y")
        assert result.tier == FormatTier.RAW
        assert result.text == f"{Geotime(2**63)!r} ms ago"

    def test_shared_pipeline_follows_limit(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        assert display(Geotime(2**63), "%Y") == "299.87 M years from now"
        monkeypatch.setattr(
            config,
            "settings",
            Settings(_env_file=None, magnitude_max_years=1000),
        )
        assert display(Geotime(2**63), "%Y") == f"{Geotime(2**63)!r} ms ago"

    def test_explicit_limit_ignores_settings(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(
            config,
            "settings",
            Settings(_env_file=None, magnitude_max_years=1000),
        )
        result = DisplayPipeline(max_years=1e15).render(Geotime(2**63), "%Y")
        assert result.tier == FormatTier.MAGNITUDE


class TestDefaultPipeline:
    """display() renders through one shared pipeline."""

    def test_is_shared_instance(self) -> None:
        assert isinstance(rendering.default_pipeline, DisplayPipeline)
        assert rendering.default_pipeline is rendering.default_pipeline

    def test_display_uses_default_pipeline(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        class FixedCalendar:
            def format(self, value: Geotime, pattern: str) -> str:
                return "fixed"

        monkeypatch.setattr(
            rendering, "default_pipeline", DisplayPipeline(calendar=FixedCalendar())
        )
        assert display(Geotime(0)) == "fixed"
