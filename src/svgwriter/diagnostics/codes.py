"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Tree errors (malformed nodes, unknown node kinds)
        2000-2999: Serialization errors (runtime walk failures)
        3000-3999: Configuration errors (unknown or invalid options)
    """

    # Tree errors (1000-1999)
    UNKNOWN_NODE_KIND = 1001
    INVALID_ATTRIBUTE_VALUE = 1002
    EMPTY_NAME = 1003
    DUPLICATE_ATTRIBUTE = 1004

    # Serialization errors (2000-2999)
    MAX_DEPTH_EXCEEDED = 2001

    # Configuration errors (3000-3999)
    UNKNOWN_CONFIG_OPTION = 3001
    INVALID_CONFIG_VALUE = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        node_path: Element path at the point of failure (e.g. "svg > g > text")
        option_name: Configuration option that caused the error
        expected_type: Expected type for a value
        received_type: Actual type received
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    node_path: str | None = None
    option_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[UNKNOWN_NODE_KIND]: Cannot serialize node of type 'dict'
              --> svg > g
              = received: dict
              = help: Build the tree from svgwriter.syntax.ast node classes

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
