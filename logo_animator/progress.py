"""
Rotating status messages shown while a video is rendering.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Optional, Sequence

from .config import DEFAULT_MESSAGE_INTERVAL_SECONDS, VIDEO_LOADING_MESSAGES
from .utils import get_logger

logger = get_logger("progress")


class ProgressTicker:
    """
    Cancellable periodic task that cycles through ``messages``.

    ``start`` emits the first message immediately and then advances every
    ``interval`` seconds, wrapping around. ``stop`` cancels the task; no message
    is emitted after it returns. A failing ``on_message`` is logged and the
    rotation carries on.
    """

    def __init__(
        self,
        on_message: Callable[[str], None],
        messages: Sequence[str] = VIDEO_LOADING_MESSAGES,
        interval: float = DEFAULT_MESSAGE_INTERVAL_SECONDS,
    ):
        if not messages:
            raise ValueError("ProgressTicker needs at least one message")
        self.on_message = on_message
        self.messages = tuple(messages)
        self.interval = interval
        self.index = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def current(self) -> str:
        return self.messages[self.index]

    def start(self) -> None:
        """Reset to the first message and begin ticking. Requires a running loop."""
        self.stop()
        self.index = 0
        self._emit()
        self._task = asyncio.get_running_loop().create_task(self._run())

    def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            self.index = (self.index + 1) % len(self.messages)
            self._emit()

    def _emit(self) -> None:
        try:
            self.on_message(self.current)
        except Exception as exc:
            logger.warning(f"Progress listener failed: {exc}")
