"""
AI Logo Animator - Modular Components

This package contains the core modules for the AI Logo Animator:
- config: Configuration, constants, and settings
- errors: Exception types surfaced through the session error slot
- utils: Logging and image/data-URL helpers
- gemini_client: Gemini API client initialization
- credentials: API key provider gating video generation
- generation_client: Imagen/Veo calls (logo image and logo animation)
- progress: Rotating status messages while a video renders
- workflow: Workflow controller (session state machine)
"""

# Lazy imports to avoid circular dependencies and hot-reload issues
__all__ = [
    # Config
    "AspectRatio",
    "StudioSettings",
    "load_settings",
    "VIDEO_LOADING_MESSAGES",
    "BILLING_DOCS_URL",
    # Errors
    "LogoAnimatorError",
    "ValidationError",
    "CredentialMissing",
    "CredentialInvalid",
    "CredentialSelectionFailed",
    "RemoteFailure",
    "LocalIOFailure",
    "OperationInProgress",
    "SessionClosed",
    # Utils
    "file_to_data_url",
    "split_data_url",
    "to_data_url",
    "get_logger",
    # Collaborators
    "ApiKeyCredentialProvider",
    "GeminiGenerationClient",
    "ProgressTicker",
    # Controller
    "WorkflowController",
    "SessionState",
    "LogoStage",
    "AnimationStage",
]

_CONFIG_NAMES = ("AspectRatio", "StudioSettings", "load_settings", "VIDEO_LOADING_MESSAGES", "BILLING_DOCS_URL")
_ERROR_NAMES = (
    "LogoAnimatorError",
    "ValidationError",
    "CredentialMissing",
    "CredentialInvalid",
    "CredentialSelectionFailed",
    "RemoteFailure",
    "LocalIOFailure",
    "OperationInProgress",
    "SessionClosed",
)
_UTIL_NAMES = ("file_to_data_url", "split_data_url", "to_data_url", "get_logger")
_WORKFLOW_NAMES = ("WorkflowController", "SessionState", "LogoStage", "AnimationStage")


def __getattr__(name):
    """Lazy import to avoid circular dependencies and streamlit hot-reload issues."""
    if name in __all__:
        if name in _CONFIG_NAMES:
            from . import config
            return getattr(config, name)
        elif name in _ERROR_NAMES:
            from . import errors
            return getattr(errors, name)
        elif name in _UTIL_NAMES:
            from . import utils
            return getattr(utils, name)
        elif name == "ApiKeyCredentialProvider":
            from .credentials import ApiKeyCredentialProvider
            return ApiKeyCredentialProvider
        elif name == "GeminiGenerationClient":
            from .generation_client import GeminiGenerationClient
            return GeminiGenerationClient
        elif name == "ProgressTicker":
            from .progress import ProgressTicker
            return ProgressTicker
        elif name in _WORKFLOW_NAMES:
            from . import workflow
            return getattr(workflow, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
