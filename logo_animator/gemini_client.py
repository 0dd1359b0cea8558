"""
Gemini API client initialization.
"""

from __future__ import annotations
from typing import Optional

from google import genai

from .config import get_api_key


def get_genai_client(api_key: Optional[str] = None) -> Optional[genai.Client]:
    """
    Initialize and return Gemini API client.

    Args:
        api_key: Explicit key; falls back to the environment when omitted

    Returns:
        genai.Client instance or None if API key not available
    """
    api_key = api_key or get_api_key()
    if not api_key:
        return None
    return genai.Client(api_key=api_key)
