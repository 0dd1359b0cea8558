"""Pytest configuration and fakes for AI Logo Animator tests."""

from __future__ import annotations

import asyncio
from typing import List, Optional, Tuple

import pytest

from logo_animator.config import AspectRatio
from logo_animator.workflow import WorkflowController

LOGO_B64 = "UExBQ0VIT0xERVI="
VIDEO_REF = "outputs/logo_test.mp4"


class FakeGenerationClient:
    """In-memory stand-in for the Gemini generation client."""

    def __init__(
        self,
        image_b64: str = LOGO_B64,
        video: str = VIDEO_REF,
        image_error: Optional[Exception] = None,
        video_error: Optional[Exception] = None,
        video_delay: float = 0.0,
    ):
        self.image_b64 = image_b64
        self.video = video
        self.image_error = image_error
        self.video_error = video_error
        self.video_delay = video_delay
        self.image_gate: Optional[asyncio.Event] = None
        self.video_gate: Optional[asyncio.Event] = None
        self.image_calls: List[str] = []
        self.video_calls: List[Tuple[str, str, AspectRatio, str]] = []

    async def generate_image(self, prompt: str) -> str:
        self.image_calls.append(prompt)
        if self.image_gate is not None:
            await self.image_gate.wait()
        if self.image_error is not None:
            raise self.image_error
        return self.image_b64

    async def generate_video(self, prompt, image_b64, aspect_ratio, mime_type="image/png"):
        self.video_calls.append((prompt, image_b64, aspect_ratio, mime_type))
        if self.video_delay:
            await asyncio.sleep(self.video_delay)
        if self.video_gate is not None:
            await self.video_gate.wait()
        if self.video_error is not None:
            raise self.video_error
        return self.video


class FakeCredentials:
    """Credential provider with scripted answers."""

    def __init__(self, selected: bool = True, check_error=None, select_error=None):
        self.selected = selected
        self.check_error = check_error
        self.select_error = select_error
        self.checks = 0
        self.selections = 0

    async def has_selected_credential(self) -> bool:
        self.checks += 1
        if self.check_error is not None:
            raise self.check_error
        return self.selected

    async def open_credential_selector(self) -> None:
        self.selections += 1
        if self.select_error is not None:
            raise self.select_error


@pytest.fixture
def client():
    return FakeGenerationClient()


@pytest.fixture
def credentials():
    return FakeCredentials()


@pytest.fixture
def controller(client, credentials):
    ctrl = WorkflowController(
        client=client,
        credentials=credentials,
        file_reader=lambda f: "data:image/png;base64,VVBMT0FE",
        message_interval=0.01,
    )
    yield ctrl
    ctrl.close()


def run(coro):
    """Drive a coroutine to completion on a fresh event loop."""
    return asyncio.run(coro)
