"""Custom exceptions for the compounding calculator."""


class CompounderError(Exception):
    """Base exception for all calculator errors."""

    pass


class InvalidParameterError(CompounderError, ValueError):
    """Engine called with arguments outside its preconditions."""

    def __init__(self, message: str, name: str = "", value: object = None):
        super().__init__(message)
        self.name = name
        self.value = value


class MetricsError(CompounderError, ZeroDivisionError):
    """Summary metrics are undefined for the given inputs."""

    pass


class ShareError(CompounderError):
    """Base class for share-link errors."""

    pass


class ClipboardError(ShareError):
    """Writing the share link to the clipboard failed."""

    pass


class ConfigurationError(CompounderError):
    """Invalid or missing configuration."""

    pass
