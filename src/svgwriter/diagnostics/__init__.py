"""Diagnostic system for SVGWriter errors.

Provides structured error diagnostics with codes, hints and element paths.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ConfigurationError,
    NodeConstructionError,
    SerializationDepthError,
    SerializationError,
    SVGWriterError,
    UnknownNodeKindError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "NodeConstructionError",
    "OutputFormat",
    "SVGWriterError",
    "SerializationDepthError",
    "SerializationError",
    "UnknownNodeKindError",
]
