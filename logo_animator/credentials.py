"""
Credential provider - tracks the Gemini API key selected for paid video generation.
"""

from __future__ import annotations
from typing import Callable, Optional

from .config import get_api_key
from .errors import CredentialSelectionError
from .utils import get_logger

logger = get_logger("credentials")


class ApiKeyCredentialProvider:
    """
    Holds the API key the session is allowed to use.

    ``selector`` is called by :meth:`open_credential_selector` and should return
    the key the user picked (the Streamlit app reads it from the sidebar field).
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        selector: Optional[Callable[[], Optional[str]]] = None,
        use_environment: bool = True,
    ):
        if api_key is None and use_environment:
            api_key = get_api_key()
        self._api_key = (api_key or "").strip() or None
        self.selector = selector

    @property
    def api_key(self) -> Optional[str]:
        return self._api_key

    async def has_selected_credential(self) -> bool:
        return self._api_key is not None

    async def open_credential_selector(self) -> None:
        if self.selector is None:
            raise CredentialSelectionError("No API key selector is available.")
        key = (self.selector() or "").strip()
        if not key:
            raise CredentialSelectionError("No API key was entered.")
        self._api_key = key
        logger.info("API key selected")

    def clear(self) -> None:
        """Forget the selected key."""
        self._api_key = None
