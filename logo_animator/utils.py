"""
Utility functions for AI Logo Animator.
"""

from __future__ import annotations
import base64
import io
import logging
import os
from pathlib import Path
from typing import Tuple
from PIL import Image

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Return a package logger with a single stream handler.

    Args:
        name: Short component name, e.g. "workflow"

    Returns:
        Logger named ``logo_animator.<name>``
    """
    logger = logging.getLogger(f"logo_animator.{name}")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(os.getenv("LOGO_ANIMATOR_LOG_LEVEL", "INFO").upper())
        logger.propagate = False
    return logger


def load_image_bytes(file) -> Tuple[bytes, str]:
    """
    Load an uploaded file or path and convert it to PNG bytes.

    Args:
        file: Streamlit UploadedFile, binary file object, or filesystem path

    Returns:
        Tuple of (image_bytes, mime_type)
    """
    if isinstance(file, (str, Path)):
        with open(file, "rb") as fh:
            raw = fh.read()
    else:
        raw = file.read()
    image = Image.open(io.BytesIO(raw))
    if image.mode not in ("RGB", "RGBA"):
        image = image.convert("RGBA")
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue(), "image/png"


def to_data_url(b64_data: str, mime_type: str = "image/jpeg") -> str:
    """Wrap a base64 payload in a data URL."""
    return f"data:{mime_type};base64,{b64_data}"


def split_data_url(data_url: str) -> Tuple[str, str]:
    """
    Split a data URL into its MIME type and base64 payload.

    A bare base64 string (no ``data:`` prefix) is returned as PNG.
    """
    if not data_url.startswith("data:") or "," not in data_url:
        return "image/png", data_url
    header, payload = data_url.split(",", 1)
    mime = header[len("data:"):].split(";", 1)[0] or "image/png"
    return mime, payload


def file_to_data_url(file) -> str:
    """Read an image file into the same data URL encoding used for generated logos."""
    image_bytes, mime = load_image_bytes(file)
    return to_data_url(base64.b64encode(image_bytes).decode("utf-8"), mime)
