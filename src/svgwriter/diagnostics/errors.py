"""SVGWriter exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ConfigurationError",
    "NodeConstructionError",
    "SVGWriterError",
    "SerializationDepthError",
    "SerializationError",
    "UnknownNodeKindError",
]


class SVGWriterError(Exception):
    """Base exception for all SVGWriter errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize SVGWriterError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class SerializationError(SVGWriterError):
    """Runtime error while walking a document tree."""


class UnknownNodeKindError(SerializationError):
    """A child is none of the six serializable node kinds.

    Raised only in strict mode. With ``strict=False`` the child is skipped
    and a warning is logged instead.
    """


class SerializationDepthError(SerializationError):
    """Maximum element nesting depth exceeded during serialization.

    Indicates either generated adversarial input or a tree with a cycle
    built through programmatic construction.
    """


class ConfigurationError(SVGWriterError, ValueError):
    """Unknown option name or invalid option value for SerializerConfig."""


class NodeConstructionError(SVGWriterError, ValueError):
    """Node built with an invalid payload (empty name, unsupported value type)."""
