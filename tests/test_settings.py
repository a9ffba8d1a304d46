"""Tests for environment-driven settings."""
import pytest
from pydantic import ValidationError

from habitarcade.settings import Settings, WheelSettings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    # Keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)


class TestWheelSettings:
    def test_defaults(self):
        settings = WheelSettings()
        assert settings.tick_interval_ms == 20.0
        assert settings.decay_factor == 0.99
        assert settings.stop_threshold == 0.1
        assert (settings.min_velocity, settings.max_velocity) == (10.0, 20.0)

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("HABITARCADE_WHEEL_TICK_INTERVAL_MS", "16")
        assert WheelSettings().tick_interval_ms == 16.0

    def test_inverted_velocity_range_rejected(self):
        with pytest.raises(ValidationError):
            WheelSettings(min_velocity=30.0, max_velocity=20.0)

    @pytest.mark.parametrize("decay", [0.0, 1.0, 1.5])
    def test_decay_must_be_a_fraction(self, decay):
        with pytest.raises(ValidationError):
            WheelSettings(decay_factor=decay)


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.env == "simulator"
        assert settings.is_simulator is True
        assert settings.display.width == 300
        assert settings.headless_spins == 3

    def test_env_selects_headless(self, monkeypatch):
        monkeypatch.setenv("HABITARCADE_ENV", "headless")
        monkeypatch.setenv("HABITARCADE_DEBUG", "true")
        settings = Settings()
        assert settings.is_simulator is False
        assert settings.debug is True

    def test_unknown_env_rejected(self, monkeypatch):
        monkeypatch.setenv("HABITARCADE_ENV", "kiosk")
        with pytest.raises(ValidationError):
            Settings()
