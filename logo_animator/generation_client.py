"""
Gemini generation client - Imagen logo generation and Veo logo animation.
"""

from __future__ import annotations

import asyncio
import base64
import os
import uuid
from typing import Callable, Optional

import requests
from google.genai import types as genai_types

from .config import AspectRatio, StudioSettings, load_settings
from .credentials import ApiKeyCredentialProvider
from .errors import CredentialMissing, RemoteGenerationError
from .gemini_client import get_genai_client
from .utils import get_logger

logger = get_logger("generation_client")

DOWNLOAD_TIMEOUT = 60


class GeminiGenerationClient:
    """
    Remote generation client backed by the Gemini API.

    A fresh ``genai.Client`` is built for every call from the provider's current
    key, so a key selected mid-session is picked up on the next request.
    """

    def __init__(
        self,
        credentials: ApiKeyCredentialProvider,
        settings: Optional[StudioSettings] = None,
        client_factory: Callable = get_genai_client,
    ):
        self.credentials = credentials
        self.settings = settings or load_settings()
        self._client_factory = client_factory
        self._last_clip: Optional[str] = None

    def _client(self):
        api_key = self.credentials.api_key
        client = self._client_factory(api_key) if api_key else None
        if client is None:
            raise CredentialMissing("No Gemini API key is configured.")
        return client

    async def generate_image(self, prompt: str) -> str:
        """
        Generate a square JPEG logo.

        Returns:
            Base64 payload of the first generated image
        """
        client = self._client()
        logger.info(f"Requesting logo from {self.settings.image_model}")
        response = await client.aio.models.generate_images(
            model=self.settings.image_model,
            prompt=prompt,
            config=genai_types.GenerateImagesConfig(
                number_of_images=1,
                output_mime_type="image/jpeg",
                aspect_ratio="1:1",
            ),
        )
        images = getattr(response, "generated_images", None) or []
        if not images or images[0].image is None or not images[0].image.image_bytes:
            raise RemoteGenerationError("Image generation failed, no images returned.")
        image_bytes = images[0].image.image_bytes
        logger.info(f"Logo received ({len(image_bytes)} bytes)")
        return base64.b64encode(image_bytes).decode("utf-8")

    async def generate_video(
        self,
        prompt: str,
        image_b64: str,
        aspect_ratio: AspectRatio,
        mime_type: str = "image/png",
    ) -> str:
        """
        Animate a logo with Veo and download the clip.

        Polls the long-running operation until it finishes; there is no overall
        deadline.

        Returns:
            Local path of the downloaded MP4
        """
        client = self._client()
        ratio = AspectRatio(aspect_ratio).value
        logger.info(f"Requesting {ratio} animation from {self.settings.video_model}")
        operation = await client.aio.models.generate_videos(
            model=self.settings.video_model,
            prompt=prompt,
            image=genai_types.Image(
                image_bytes=base64.b64decode(image_b64),
                mime_type=mime_type,
            ),
            config=genai_types.GenerateVideosConfig(
                number_of_videos=1,
                aspect_ratio=ratio,
            ),
        )

        polls = 0
        while not operation.done:
            await asyncio.sleep(self.settings.video_poll_seconds)
            operation = await client.aio.operations.get(operation)
            polls += 1
            if polls % 6 == 0:
                logger.info(f"Still rendering... ({polls} polls)")

        if operation.error:
            message = operation.error.get("message") if isinstance(operation.error, dict) else None
            raise RemoteGenerationError(message or str(operation.error))

        videos = getattr(operation.response, "generated_videos", None) or []
        uri = videos[0].video.uri if videos and videos[0].video else None
        if not uri:
            raise RemoteGenerationError("Video generation completed, but no download link was found.")

        logger.info("Animation complete, downloading clip")
        return await asyncio.to_thread(self._download, uri)

    def _download(self, uri: str) -> str:
        resp = requests.get(uri, params={"key": self.credentials.api_key}, timeout=DOWNLOAD_TIMEOUT)
        resp.raise_for_status()
        os.makedirs(self.settings.output_dir, exist_ok=True)
        path = os.path.join(self.settings.output_dir, f"logo_{uuid.uuid4().hex[:12]}.mp4")
        with open(path, "wb") as f:
            f.write(resp.content)
        logger.info(f"Clip saved to {path}")
        self._discard_previous_clip()
        self._last_clip = path
        return path

    def _discard_previous_clip(self) -> None:
        """Only the newest clip is shown, so older downloads are removed."""
        if self._last_clip is None:
            return
        try:
            os.remove(self._last_clip)
        except FileNotFoundError:
            pass
        except OSError as exc:
            logger.warning(f"Could not remove old clip {self._last_clip}: {exc}")
        self._last_clip = None
