"""
Exception types raised by the workflow controller and its collaborators.
"""

from __future__ import annotations


class LogoAnimatorError(Exception):
    """Base class for workflow errors. The message is user-facing."""


class ValidationError(LogoAnimatorError):
    """Empty prompt, missing animation input, or an unknown option."""


class CredentialMissing(LogoAnimatorError):
    """No API key is selected, so video generation is blocked."""


class CredentialInvalid(LogoAnimatorError):
    """The API rejected the selected key."""


class CredentialSelectionFailed(LogoAnimatorError):
    """The key selector could not be opened or returned nothing."""


class RemoteFailure(LogoAnimatorError):
    """A generation request failed on the API side."""


class LocalIOFailure(LogoAnimatorError):
    """An uploaded file could not be read as an image."""


class OperationInProgress(LogoAnimatorError):
    """A request of the same kind is already running."""


class SessionClosed(LogoAnimatorError):
    """The controller was discarded."""


# ---------- Collaborator errors ----------
class RemoteGenerationError(Exception):
    """Raised by the generation client when a response carries no result."""


class CredentialSelectionError(Exception):
    """Raised by a credential provider when no key could be selected."""
