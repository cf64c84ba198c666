"""Document tree node definitions.

Immutable node types for a parsed SVG/XML document. The tree is built once
by a parser (or programmatically) and only read by the serializer.

Every serializable node carries a class-level ``kind`` discriminant, so
consumers dispatch on ``node.kind`` instead of probing for payload fields.
Includes type guards as static methods (eliminates circular imports).

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import ClassVar, TypeIs

from svgwriter.diagnostics import ErrorTemplate, NodeConstructionError
from svgwriter.enums import NodeKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Containers
    "Document",
    "Element",
    "Attribute",
    # Leaf nodes
    "Text",
    "Comment",
    "CData",
    "Doctype",
    "ProcessingInstruction",
    # Type aliases
    "AttributeValue",
    "Node",
    "Container",
]

type AttributeValue = str | int | float | bool

_ATTRIBUTE_VALUE_TYPES = (str, int, float, bool)


def _freeze_children(owner: object, children: Iterable["Node"]) -> None:
    """Store children as a tuple on a frozen dataclass instance."""
    if not isinstance(children, tuple):
        object.__setattr__(owner, "children", tuple(children))


# ============================================================================
# CONTAINERS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Document:
    """Root container holding the top-level nodes of a document.

    Typical children: an optional ProcessingInstruction (``<?xml ...?>``),
    an optional Doctype, comments, and a single ``svg`` Element.
    """

    children: tuple["Node", ...] = ()

    def __post_init__(self) -> None:
        """Coerce children to a tuple."""
        _freeze_children(self, self.children)

    def is_empty(self) -> bool:
        """True when the document has no children."""
        return not self.children


@dataclass(frozen=True, slots=True)
class Attribute:
    """Element attribute: name="value".

    The value is kept raw; the serializer stringifies and encodes it.
    Booleans render as ``true``/``false``.
    """

    name: str
    value: AttributeValue

    def __post_init__(self) -> None:
        """Validate name and value type."""
        if not isinstance(self.name, str) or not self.name:
            raise NodeConstructionError(ErrorTemplate.empty_name("Attribute"))
        if not isinstance(self.value, _ATTRIBUTE_VALUE_TYPES):
            raise NodeConstructionError(
                ErrorTemplate.invalid_attribute_value(self.name, self.value)
            )

    @property
    def text(self) -> str:
        """Value as it appears in markup, before entity encoding."""
        if isinstance(self.value, bool):
            return "true" if self.value else "false"
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Element:
    """Element with attributes and children.

    Attributes are an ordered tuple; serialization preserves their order.
    Names must be unique within one element.

    Examples:
        <rect x="0" y="0"/>
        <text x="10">Hello <tspan>world</tspan></text>
    """

    kind: ClassVar[NodeKind] = NodeKind.ELEMENT

    name: str
    attributes: tuple[Attribute, ...] = ()
    children: tuple["Node", ...] = ()

    def __post_init__(self) -> None:
        """Validate name, coerce sequences to tuples, reject duplicate attributes."""
        if not isinstance(self.name, str) or not self.name:
            raise NodeConstructionError(ErrorTemplate.empty_name("Element"))
        if not isinstance(self.attributes, tuple):
            object.__setattr__(self, "attributes", tuple(self.attributes))
        _freeze_children(self, self.children)

        seen: set[str] = set()
        for attr in self.attributes:
            if attr.name in seen:
                raise NodeConstructionError(
                    ErrorTemplate.duplicate_attribute(self.name, attr.name)
                )
            seen.add(attr.name)

    @classmethod
    def from_mapping(
        cls,
        name: str,
        attributes: Mapping[str, AttributeValue] | None = None,
        children: Iterable["Node"] = (),
    ) -> "Element":
        """Build an element from an insertion-ordered attribute mapping.

        Example:
            >>> Element.from_mapping("rect", {"x": 0, "y": 0})
            Element(name='rect', attributes=(Attribute(name='x', value=0), ...), children=())
        """
        attrs = tuple(Attribute(key, value) for key, value in (attributes or {}).items())
        return cls(name=name, attributes=attrs, children=tuple(children))

    def is_elem(self, names: str | Iterable[str]) -> bool:
        """Check whether the tag matches a name or any name in a collection."""
        if isinstance(names, str):
            return self.name == names
        return self.name in names

    def has_attr(self, name: str) -> bool:
        """Check whether an attribute with this name is present."""
        return any(attr.name == name for attr in self.attributes)

    def attr(self, name: str) -> Attribute | None:
        """Look up an attribute by name."""
        for attr in self.attributes:
            if attr.name == name:
                return attr
        return None

    def each_attr(self) -> Iterator[Attribute]:
        """Iterate attributes in definition order."""
        return iter(self.attributes)

    def is_empty(self) -> bool:
        """True when the element has no children (rendered as a short tag)."""
        return not self.children

    @staticmethod
    def guard(node: object) -> TypeIs["Element"]:
        """Type guard for Element."""
        return isinstance(node, Element)


# ============================================================================
# LEAF NODES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """Character data between tags. Entity-encoded on output."""

    kind: ClassVar[NodeKind] = NodeKind.TEXT

    value: str

    @staticmethod
    def guard(node: object) -> TypeIs["Text"]:
        """Type guard for Text."""
        return isinstance(node, Text)


@dataclass(frozen=True, slots=True)
class Comment:
    """Comment body, without the ``<!--`` / ``-->`` delimiters."""

    kind: ClassVar[NodeKind] = NodeKind.COMMENT

    value: str

    @staticmethod
    def guard(node: object) -> TypeIs["Comment"]:
        """Type guard for Comment."""
        return isinstance(node, Comment)


@dataclass(frozen=True, slots=True)
class CData:
    """Character-data section body. Emitted verbatim, never encoded."""

    kind: ClassVar[NodeKind] = NodeKind.CDATA

    value: str

    @staticmethod
    def guard(node: object) -> TypeIs["CData"]:
        """Type guard for CData."""
        return isinstance(node, CData)


@dataclass(frozen=True, slots=True)
class Doctype:
    """Document-type declaration body.

    Example:
        Doctype(value='svg PUBLIC "-//W3C//DTD SVG 1.1//EN"')
    """

    kind: ClassVar[NodeKind] = NodeKind.DOCTYPE

    value: str

    @staticmethod
    def guard(node: object) -> TypeIs["Doctype"]:
        """Type guard for Doctype."""
        return isinstance(node, Doctype)


@dataclass(frozen=True, slots=True)
class ProcessingInstruction:
    """Processing instruction: <?name body?>

    Example:
        ProcessingInstruction(name="xml", body='version="1.0" encoding="utf-8"')
    """

    kind: ClassVar[NodeKind] = NodeKind.PROCESSING_INSTRUCTION

    name: str
    body: str = ""

    def __post_init__(self) -> None:
        """Validate target name."""
        if not isinstance(self.name, str) or not self.name:
            raise NodeConstructionError(ErrorTemplate.empty_name("ProcessingInstruction"))

    @staticmethod
    def guard(node: object) -> TypeIs["ProcessingInstruction"]:
        """Type guard for ProcessingInstruction."""
        return isinstance(node, ProcessingInstruction)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Node = Element | Text | Comment | CData | Doctype | ProcessingInstruction
type Container = Document | Element
