# pylint: disable=missing-module-docstring,missing-function-docstring

import pytest

from config import AppConfig


def test_defaults_match_listener_constants(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "SPEAKER_URL",
        "MAX_PACING_DELAY_MS",
        "DISTRACTION_PROBABILITY",
        "DISTRACTION_POLICY",
        "MAX_RECONNECTION_ATTEMPTS",
        "RECONNECT_DELAY_MS",
        "RECENT_TRANSLATIONS_CAPACITY",
    ):
        monkeypatch.delenv(name, raising=False)

    config = AppConfig.load_from_env()

    assert config.speaker_url == "ws://localhost:3000"
    assert config.max_pacing_delay_ms == 5_000
    assert config.distraction_probability == 0.10
    assert config.distraction_pause_ms == 1_000
    assert config.distraction_policy == "abort"
    assert config.max_reconnection_attempts == 5
    assert config.reconnect_delay_ms == 5_000
    assert config.recent_translations_capacity == 10


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SPEAKER_URL", "ws://mars:4000")
    monkeypatch.setenv("DISTRACTION_PROBABILITY", "0")
    monkeypatch.setenv("DISTRACTION_POLICY", "RESUME")
    monkeypatch.setenv("MAX_PACING_DELAY_MS", "250")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    config = AppConfig.load_from_env()

    assert config.speaker_url == "ws://mars:4000"
    assert config.distraction_probability == 0.0
    assert config.distraction_policy == "resume"
    assert config.max_pacing_delay_ms == 250
    assert config.log_level == "debug"


def test_invalid_policy_rejected(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DISTRACTION_POLICY", "panic")

    with pytest.raises(ValueError):
        AppConfig.load_from_env()


def test_probability_out_of_range_rejected():
    with pytest.raises(ValueError):
        AppConfig(distraction_probability=2.0)
