"""SVGWriter - SVG/XML document tree serializer.

Turns an in-memory document tree into markup text, with compact or pretty
output, configurable delimiters and entity encoding, and extraction of the
root element's declared width and height.

Public API:
    serialize - Serialize a document tree (convenience function)
    SVGSerializer - Reusable, thread-safe serializer
    SerializerConfig - Immutable formatting options
    resolve_config - Overlay option overrides on the defaults
    SerializationResult - Markup plus SVGInfo (width/height)

Exceptions:
    SVGWriterError - Base exception class
    ConfigurationError - Unknown or invalid option
    UnknownNodeKindError - Unrecognized child in strict mode
    SerializationDepthError - Nesting deeper than max_depth

Submodules:
    svgwriter.syntax.ast - Node types (Document, Element, Text, Comment, ...)
    svgwriter.entities - Entity encoding
    svgwriter.diagnostics - Error types and diagnostic formatting
"""

from .config import SerializerConfig, resolve_config
from .diagnostics import (
    ConfigurationError,
    SerializationDepthError,
    SVGWriterError,
    UnknownNodeKindError,
)
from .syntax import SerializationResult, SVGInfo, SVGSerializer, serialize

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("svgwriter")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "SVGInfo",
    "SVGSerializer",
    "SVGWriterError",
    "SerializationDepthError",
    "SerializationResult",
    "SerializerConfig",
    "UnknownNodeKindError",
    "__version__",
    "resolve_config",
    "serialize",
]
