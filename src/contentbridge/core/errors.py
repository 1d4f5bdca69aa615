class ContentBridgeError(Exception):
    """Base error for all user-facing content bridge exceptions."""


class ConfigurationError(ContentBridgeError):
    """Raised when configuration is invalid or incomplete."""


class ProjectNotInitializedError(ContentBridgeError):
    """Raised when the bridge home or document registry is missing."""


class ContentResolutionError(ContentBridgeError):
    """Raised when a content URI cannot be opened or queried by the host."""


class DocumentPublishError(ContentBridgeError):
    """Raised when a local file cannot be published as a document."""


class ContentCopyError(ContentBridgeError):
    """Raised when a copy request does not complete."""
