"""Enumerations for SVGWriter type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class NodeKind(StrEnum):
    """Structural kind of a document tree node.

    Assigned once per node class, so the serializer dispatches on this
    discriminant instead of probing for payload fields.

    StrEnum provides automatic string conversion: str(NodeKind.ELEMENT) == "element"
    """

    ELEMENT = "element"
    """Element with name, attributes and children: <rect x="0"/>"""

    TEXT = "text"
    """Character data subject to entity encoding: a &lt; b"""

    DOCTYPE = "doctype"
    """Document-type declaration: <!DOCTYPE svg>"""

    PROCESSING_INSTRUCTION = "processing_instruction"
    """Processing instruction: <?xml version="1.0"?>"""

    COMMENT = "comment"
    """Comment: <!-- note -->"""

    CDATA = "cdata"
    """Character-data section emitted verbatim: <![CDATA[ ... ]]>"""


class DimensionCapture(StrEnum):
    """Which root element wins when several carry width and height.

    StrEnum provides automatic string conversion: str(DimensionCapture.LAST) == "last"
    """

    LAST = "last"
    """The root-tagged element processed last in traversal order wins."""

    FIRST = "first"
    """The first root-tagged element encountered wins; later ones are ignored."""


__all__ = [
    "DimensionCapture",
    "NodeKind",
]
