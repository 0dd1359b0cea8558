"""
Configuration, constants, and data models for AI Logo Animator.
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional


# ---------- Data Models ----------
class AspectRatio(str, Enum):
    """Aspect ratios supported by the video model."""
    LANDSCAPE = "16:9"
    PORTRAIT = "9:16"

    @property
    def label(self) -> str:
        return "Landscape (16:9)" if self is AspectRatio.LANDSCAPE else "Portrait (9:16)"


@dataclass
class StudioSettings:
    """Runtime settings resolved from the environment."""
    api_key: Optional[str]
    image_model: str
    video_model: str
    video_poll_seconds: float
    output_dir: str
    message_interval_seconds: float


# ---------- Gemini Models ----------
DEFAULT_IMAGE_MODEL = "imagen-4.0-generate-001"
DEFAULT_VIDEO_MODEL = "veo-2.0-generate-001"

# Checked in order; GEMINI_API_KEY is the official name.
API_KEY_ENV_VARS = ("GEMINI_API_KEY", "GOOGLE_GENAI_API_KEY", "API_KEY")

DEFAULT_VIDEO_POLL_SECONDS = 10.0
DEFAULT_MESSAGE_INTERVAL_SECONDS = 4.0
DEFAULT_OUTPUT_DIR = "outputs"

BILLING_DOCS_URL = "https://ai.google.dev/gemini-api/docs/billing"


# ---------- Prompts ----------
DEFAULT_LOGO_PROMPT = "A minimalist, geometric fox logo, clean lines, orange and white."
DEFAULT_ANIMATION_PROMPT = "The fox logo winks, and then futuristic digital circuits glow behind it."

VIDEO_LOADING_MESSAGES = (
    "Warming up the animation engine...",
    "Teaching the pixels to dance...",
    "Composing a symphony of light and motion...",
    "This can take a few minutes, please be patient...",
    "Rendering the final masterpiece...",
    "Almost there, adding the final sparkle...",
)


# ---------- User-facing error messages ----------
MSG_EMPTY_LOGO_PROMPT = "Please enter a description for your logo."
MSG_LOGO_FAILED = "Failed to generate logo."
MSG_MISSING_ANIMATION_INPUT = "Please generate or upload a logo to animate."
MSG_EMPTY_ANIMATION_PROMPT = "Please enter a prompt for the animation."
MSG_CREDENTIAL_MISSING = "Please select an API key to generate videos."
MSG_VIDEO_FAILED = "An unknown error occurred during video generation."
MSG_CREDENTIAL_INVALID = "API Key not found or invalid. Please re-select your API key."
MSG_FILE_READ_FAILED = "Failed to read the uploaded file."
MSG_SELECTOR_FAILED = "Failed to open API key selector. Please try again."

# Substring of the API error returned for an unknown or revoked key.
ENTITY_NOT_FOUND_SIGNATURE = "Requested entity was not found"


def get_api_key() -> Optional[str]:
    """Return the first non-empty API key from the environment."""
    for name in API_KEY_ENV_VARS:
        value = os.getenv(name, "").strip()
        if value:
            return value
    return None


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def load_settings() -> StudioSettings:
    """
    Build settings from environment variables.

    Returns:
        StudioSettings with defaults filled in for anything unset or invalid
    """
    return StudioSettings(
        api_key=get_api_key(),
        image_model=os.getenv("LOGO_IMAGE_MODEL", DEFAULT_IMAGE_MODEL),
        video_model=os.getenv("LOGO_VIDEO_MODEL", DEFAULT_VIDEO_MODEL),
        video_poll_seconds=_float_env("LOGO_VIDEO_POLL_SECONDS", DEFAULT_VIDEO_POLL_SECONDS),
        output_dir=os.getenv("LOGO_ANIMATOR_OUTPUT_DIR", DEFAULT_OUTPUT_DIR),
        message_interval_seconds=_float_env(
            "LOGO_MESSAGE_INTERVAL_SECONDS", DEFAULT_MESSAGE_INTERVAL_SECONDS
        ),
    )
