"""Tests for settings resolution."""

from __future__ import annotations

import pytest

from logo_animator.config import (
    DEFAULT_IMAGE_MODEL,
    DEFAULT_MESSAGE_INTERVAL_SECONDS,
    DEFAULT_VIDEO_MODEL,
    DEFAULT_VIDEO_POLL_SECONDS,
    AspectRatio,
    get_api_key,
    load_settings,
)

ENV_VARS = (
    "GEMINI_API_KEY",
    "GOOGLE_GENAI_API_KEY",
    "API_KEY",
    "LOGO_IMAGE_MODEL",
    "LOGO_VIDEO_MODEL",
    "LOGO_VIDEO_POLL_SECONDS",
    "LOGO_ANIMATOR_OUTPUT_DIR",
    "LOGO_MESSAGE_INTERVAL_SECONDS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings.api_key is None
    assert settings.image_model == DEFAULT_IMAGE_MODEL
    assert settings.video_model == DEFAULT_VIDEO_MODEL
    assert settings.video_poll_seconds == DEFAULT_VIDEO_POLL_SECONDS
    assert settings.message_interval_seconds == DEFAULT_MESSAGE_INTERVAL_SECONDS
    assert settings.output_dir == "outputs"


def test_overrides(monkeypatch):
    monkeypatch.setenv("LOGO_VIDEO_MODEL", "veo-3.1-fast-generate-preview")
    monkeypatch.setenv("LOGO_VIDEO_POLL_SECONDS", "2.5")
    monkeypatch.setenv("LOGO_ANIMATOR_OUTPUT_DIR", "/tmp/clips")
    settings = load_settings()
    assert settings.video_model == "veo-3.1-fast-generate-preview"
    assert settings.video_poll_seconds == 2.5
    assert settings.output_dir == "/tmp/clips"


@pytest.mark.parametrize("raw", ["fast", "0", "-3"])
def test_invalid_numbers_fall_back(monkeypatch, raw):
    monkeypatch.setenv("LOGO_MESSAGE_INTERVAL_SECONDS", raw)
    assert load_settings().message_interval_seconds == DEFAULT_MESSAGE_INTERVAL_SECONDS


def test_api_key_precedence(monkeypatch):
    monkeypatch.setenv("API_KEY", "generic")
    assert get_api_key() == "generic"
    monkeypatch.setenv("GEMINI_API_KEY", "gemini")
    assert get_api_key() == "gemini"


def test_aspect_ratio_values():
    assert AspectRatio("16:9") is AspectRatio.LANDSCAPE
    assert AspectRatio.PORTRAIT.value == "9:16"
    assert AspectRatio.PORTRAIT.label == "Portrait (9:16)"
