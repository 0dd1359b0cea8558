"""
Workflow Controller - logo generation and animation state machine.

Owns the session state and the async operations that mutate it. The
presentation layer only reads ``controller.state`` and calls the operations
below; every failure is written to the single ``error`` slot and raised as a
typed ``LogoAnimatorError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol, Union

from .config import (
    DEFAULT_ANIMATION_PROMPT,
    DEFAULT_LOGO_PROMPT,
    DEFAULT_MESSAGE_INTERVAL_SECONDS,
    ENTITY_NOT_FOUND_SIGNATURE,
    MSG_CREDENTIAL_INVALID,
    MSG_CREDENTIAL_MISSING,
    MSG_EMPTY_ANIMATION_PROMPT,
    MSG_EMPTY_LOGO_PROMPT,
    MSG_FILE_READ_FAILED,
    MSG_LOGO_FAILED,
    MSG_MISSING_ANIMATION_INPUT,
    MSG_SELECTOR_FAILED,
    MSG_VIDEO_FAILED,
    VIDEO_LOADING_MESSAGES,
    AspectRatio,
)
from .errors import (
    CredentialInvalid,
    CredentialMissing,
    CredentialSelectionFailed,
    LocalIOFailure,
    OperationInProgress,
    RemoteFailure,
    SessionClosed,
    ValidationError,
)
from .progress import ProgressTicker
from .utils import file_to_data_url, get_logger, split_data_url, to_data_url

logger = get_logger("workflow")


# ---------- Collaborator interfaces ----------
class GenerationClient(Protocol):
    async def generate_image(self, prompt: str) -> str: ...

    async def generate_video(
        self, prompt: str, image_b64: str, aspect_ratio: AspectRatio, mime_type: str = ...
    ) -> str: ...


class CredentialProvider(Protocol):
    async def has_selected_credential(self) -> bool: ...

    async def open_credential_selector(self) -> None: ...


# ---------- State ----------
class LogoStage(str, Enum):
    IDLE = "idle"
    GENERATING = "generating_logo"
    READY = "logo_ready"
    FAILED = "logo_failed"


class AnimationStage(str, Enum):
    NO_INPUT = "no_input"
    INPUT_READY = "input_ready"
    GENERATING = "generating_video"
    READY = "video_ready"
    FAILED = "video_failed"


@dataclass
class SessionState:
    """Everything the UI renders. Not persisted."""
    logo_prompt: str = DEFAULT_LOGO_PROMPT
    animation_prompt: str = DEFAULT_ANIMATION_PROMPT
    generated_logo: Optional[str] = None
    logo_to_animate: Optional[str] = None
    generated_video: Optional[str] = None
    is_generating_logo: bool = False
    is_generating_video: bool = False
    aspect_ratio: AspectRatio = AspectRatio.LANDSCAPE
    has_credential: bool = False
    error: Optional[str] = None
    video_loading_message: str = VIDEO_LOADING_MESSAGES[0]


def _coerce_aspect_ratio(value: Union[AspectRatio, str]) -> AspectRatio:
    try:
        return AspectRatio(value)
    except ValueError:
        raise ValidationError(f"Unsupported aspect ratio: {value!r}") from None


class WorkflowController:
    """Drives the two-step design-then-animate workflow for one session."""

    def __init__(
        self,
        client: GenerationClient,
        credentials: CredentialProvider,
        file_reader: Callable[[object], str] = file_to_data_url,
        message_interval: float = DEFAULT_MESSAGE_INTERVAL_SECONDS,
        state: Optional[SessionState] = None,
    ):
        self.client = client
        self.credentials = credentials
        self.file_reader = file_reader
        self.state = state or SessionState()
        self.progress_listener: Optional[Callable[[str], None]] = None
        self._ticker = ProgressTicker(self._on_progress, interval=message_interval)
        self._closed = False
        self._last_logo_failed = False
        self._last_video_failed = False

    # ---------- Derived stages ----------
    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def logo_stage(self) -> LogoStage:
        s = self.state
        if s.is_generating_logo:
            return LogoStage.GENERATING
        if s.generated_logo:
            return LogoStage.READY
        if self._last_logo_failed:
            return LogoStage.FAILED
        return LogoStage.IDLE

    @property
    def animation_stage(self) -> AnimationStage:
        s = self.state
        if s.is_generating_video:
            return AnimationStage.GENERATING
        if s.generated_video:
            return AnimationStage.READY
        if not s.logo_to_animate:
            return AnimationStage.NO_INPUT
        if self._last_video_failed:
            return AnimationStage.FAILED
        return AnimationStage.INPUT_READY

    @property
    def ticker_running(self) -> bool:
        return self._ticker.running

    # ---------- Setters ----------
    def set_logo_prompt(self, text: str) -> None:
        self._ensure_open()
        if self.state.is_generating_logo:
            raise OperationInProgress("Logo generation is already running.")
        self.state.logo_prompt = text

    def set_animation_prompt(self, text: str) -> None:
        self._ensure_open()
        if self.state.is_generating_video:
            raise OperationInProgress("Video generation is already running.")
        self.state.animation_prompt = text

    def set_aspect_ratio(self, value: Union[AspectRatio, str]) -> None:
        self._ensure_open()
        if self.state.is_generating_video:
            raise OperationInProgress("Video generation is already running.")
        self.state.aspect_ratio = _coerce_aspect_ratio(value)

    # ---------- Operations ----------
    async def request_logo(self, prompt: Optional[str] = None) -> Optional[str]:
        """
        Generate a logo and make it the default animation input.

        Returns:
            Data URL of the logo, or None if the controller was closed meanwhile
        """
        self._ensure_open()
        s = self.state
        if s.is_generating_logo:
            raise OperationInProgress("Logo generation is already running.")
        text = s.logo_prompt if prompt is None else prompt
        if not text.strip():
            s.error = MSG_EMPTY_LOGO_PROMPT
            raise ValidationError(MSG_EMPTY_LOGO_PROMPT)
        s.logo_prompt = text

        s.is_generating_logo = True
        s.error = None
        s.generated_logo = None
        s.logo_to_animate = None
        s.generated_video = None
        self._last_logo_failed = False
        self._last_video_failed = False
        logger.info("Logo generation started")

        try:
            image_b64 = await self.client.generate_image(s.logo_prompt)
        except Exception as exc:
            if self._closed:
                logger.info("Logo request failed after session closed; ignoring")
                return None
            logger.error(f"Logo generation failed: {exc}")
            message = str(exc) or MSG_LOGO_FAILED
            s.error = message
            self._last_logo_failed = True
            raise RemoteFailure(message) from exc
        finally:
            if not self._closed:
                s.is_generating_logo = False

        if self._closed:
            logger.info("Logo arrived after session closed; ignoring")
            return None
        image_url = to_data_url(image_b64, "image/jpeg")
        s.generated_logo = image_url
        s.logo_to_animate = image_url
        logger.info("Logo generation finished")
        return image_url

    async def request_animation(
        self,
        prompt: Optional[str] = None,
        input_image: Optional[str] = None,
        aspect_ratio: Optional[Union[AspectRatio, str]] = None,
    ) -> Optional[str]:
        """
        Animate the current input image.

        Arguments left as None are taken from the session state; given ones are
        stored back. The credential is re-verified right before dispatch.

        Returns:
            Video reference, or None if the controller was closed meanwhile
        """
        self._ensure_open()
        s = self.state
        if s.is_generating_video:
            raise OperationInProgress("Video generation is already running.")
        ratio = s.aspect_ratio if aspect_ratio is None else _coerce_aspect_ratio(aspect_ratio)
        text = s.animation_prompt if prompt is None else prompt
        image = s.logo_to_animate if input_image is None else input_image

        if not image:
            s.error = MSG_MISSING_ANIMATION_INPUT
            raise ValidationError(MSG_MISSING_ANIMATION_INPUT)
        if not text.strip():
            s.error = MSG_EMPTY_ANIMATION_PROMPT
            raise ValidationError(MSG_EMPTY_ANIMATION_PROMPT)

        s.aspect_ratio = ratio
        s.animation_prompt = text
        if image != s.logo_to_animate:
            s.logo_to_animate = image
            s.generated_video = None

        await self._verify_credential()
        if self._closed:
            return None

        s.is_generating_video = True
        s.error = None
        s.generated_video = None
        self._last_video_failed = False
        source = s.logo_to_animate
        logger.info(f"Video generation started ({s.aspect_ratio.value})")

        try:
            mime, payload = split_data_url(source)
            self._ticker.start()
            video = await self.client.generate_video(
                s.animation_prompt, payload, s.aspect_ratio, mime_type=mime
            )
        except Exception as exc:
            if self._closed:
                logger.info("Video request failed after session closed; ignoring")
                return None
            logger.error(f"Video generation failed: {exc}")
            self._last_video_failed = True
            message = str(exc) or MSG_VIDEO_FAILED
            if ENTITY_NOT_FOUND_SIGNATURE in message:
                s.error = MSG_CREDENTIAL_INVALID
                s.has_credential = False
                raise CredentialInvalid(MSG_CREDENTIAL_INVALID) from exc
            s.error = message
            raise RemoteFailure(message) from exc
        finally:
            self._ticker.stop()
            if not self._closed:
                s.is_generating_video = False

        if self._closed:
            logger.info("Video arrived after session closed; ignoring")
            return None
        if s.logo_to_animate != source:
            logger.info("Animation input changed while rendering; not keeping the video")
            return video
        s.generated_video = video
        logger.info("Video generation finished")
        return video

    def replace_animation_input(self, file) -> str:
        """Swap the animation input for an uploaded image; clears any previous video."""
        self._ensure_open()
        s = self.state
        if s.is_generating_video:
            raise OperationInProgress("Video generation is already running.")
        try:
            image_url = self.file_reader(file)
        except Exception as exc:
            logger.error(f"Could not read uploaded file: {exc}")
            s.error = MSG_FILE_READ_FAILED
            raise LocalIOFailure(MSG_FILE_READ_FAILED) from exc
        s.logo_to_animate = image_url
        s.generated_video = None
        s.error = None
        self._last_video_failed = False
        return image_url

    async def refresh_credential_status(self) -> bool:
        """Best-effort query of the credential provider; never raises."""
        self._ensure_open()
        try:
            selected = await self.credentials.has_selected_credential()
        except Exception as exc:
            logger.warning(f"Credential provider not available: {exc}")
            return self.state.has_credential
        if not self._closed:
            self.state.has_credential = bool(selected)
        return self.state.has_credential

    async def select_credential(self) -> None:
        """Open the key selector and assume the user picked a key."""
        self._ensure_open()
        try:
            await self.credentials.open_credential_selector()
        except Exception as exc:
            logger.error(f"Could not open API key selection: {exc}")
            if not self._closed:
                self.state.error = MSG_SELECTOR_FAILED
            raise CredentialSelectionFailed(MSG_SELECTOR_FAILED) from exc
        if self._closed:
            return
        self.state.has_credential = True
        self.state.error = None

    def close(self) -> None:
        """Discard the session. Late results are dropped."""
        self._ticker.stop()
        self._closed = True
        logger.info("Session closed")

    # ---------- Internals ----------
    async def _verify_credential(self) -> None:
        try:
            selected = bool(await self.credentials.has_selected_credential())
        except Exception as exc:
            logger.warning(f"Credential check failed: {exc}")
            selected = False
        if self._closed:
            return
        self.state.has_credential = selected
        if not selected:
            self.state.error = MSG_CREDENTIAL_MISSING
            raise CredentialMissing(MSG_CREDENTIAL_MISSING)

    def _on_progress(self, message: str) -> None:
        self.state.video_loading_message = message
        if self.progress_listener is not None:
            self.progress_listener(message)

    def _ensure_open(self) -> None:
        if self._closed:
            raise SessionClosed("This session has been closed.")
