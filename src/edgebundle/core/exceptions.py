"""
Exception hierarchy for edgebundle.

Malformed graph data (unresolved targets, untyped edges, duplicate ids)
is expected input and never raises. Only failures that make rendering
impossible are modelled here.
"""


class EdgeBundleError(Exception):
    """Base class for all edgebundle errors."""


class DataLoadError(EdgeBundleError):
    """
    Raised when the input document cannot be read or parsed.

    Attributes:
        path: Location of the document that failed to load.
        message: Human-readable reason.
    """

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"Failed to load '{path}': {message}")


class ConfigError(EdgeBundleError):
    """Raised when a configuration file exists but is invalid."""

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"Invalid config '{path}': {message}")
