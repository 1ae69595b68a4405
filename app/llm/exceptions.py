class ExternalModelError(Exception):
    """Raised when the external model call fails or returns unusable output."""


class ExternalModelIncompleteError(ExternalModelError):
    """Raised when the model output was cut off before it formed complete JSON.

    Transient: callers may retry the request.
    """


class ExternalModelNetworkError(ExternalModelError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
