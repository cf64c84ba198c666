"""Document tree and serialization package.

Provides the immutable node types and the markup serializer.
Tree construction from raw markup (parsing) is left to the caller.

Python 3.13+.
"""

from .ast import (
    Attribute,
    AttributeValue,
    CData,
    Comment,
    Container,
    Doctype,
    Document,
    Element,
    Node,
    ProcessingInstruction,
    Text,
)
from .serializer import SerializationResult, SVGInfo, SVGSerializer, serialize

__all__ = [
    "Attribute",
    "AttributeValue",
    "CData",
    "Comment",
    "Container",
    "Doctype",
    "Document",
    "Element",
    "Node",
    "ProcessingInstruction",
    "SVGInfo",
    "SVGSerializer",
    "SerializationResult",
    "Text",
    "serialize",
]
