"""Tests for svgwriter.syntax.ast node types.

Covers node kinds, element capability methods, construction-time
validation and immutability.
"""

from __future__ import annotations

import dataclasses

import pytest

from svgwriter.diagnostics import DiagnosticCode, NodeConstructionError
from svgwriter.enums import NodeKind
from svgwriter.syntax.ast import (
    Attribute,
    CData,
    Comment,
    Doctype,
    Document,
    Element,
    ProcessingInstruction,
    Text,
)


class TestNodeKinds:
    """Each node class carries a fixed discriminant."""

    @pytest.mark.parametrize(
        ("node", "kind"),
        [
            (Element("g"), NodeKind.ELEMENT),
            (Text("a"), NodeKind.TEXT),
            (Comment("c"), NodeKind.COMMENT),
            (CData("x"), NodeKind.CDATA),
            (Doctype("svg"), NodeKind.DOCTYPE),
            (ProcessingInstruction("xml", 'version="1.0"'), NodeKind.PROCESSING_INSTRUCTION),
        ],
    )
    def test_kind(self, node: object, kind: NodeKind) -> None:
        """kind is set by the class, not by the payload."""
        assert node.kind is kind  # type: ignore[attr-defined]

    def test_document_has_no_kind(self) -> None:
        """Document is a container, not a serializable child."""
        assert not hasattr(Document(), "kind")

    def test_kind_is_not_a_field(self) -> None:
        """kind is a ClassVar and does not appear in the constructor."""
        assert "kind" not in {f.name for f in dataclasses.fields(Element)}

    def test_guards(self) -> None:
        """Static guards narrow by type."""
        assert Element.guard(Element("g"))
        assert not Element.guard(Text("g"))
        assert Text.guard(Text("t"))
        assert Comment.guard(Comment("c"))
        assert CData.guard(CData("c"))
        assert Doctype.guard(Doctype("d"))
        assert ProcessingInstruction.guard(ProcessingInstruction("xml"))


class TestElementCapabilities:
    """Test is_elem, has_attr, attr, each_attr, is_empty."""

    def test_is_elem_single_name(self) -> None:
        """Match against one name."""
        element = Element("svg")

        assert element.is_elem("svg")
        assert not element.is_elem("g")

    def test_is_elem_name_set(self) -> None:
        """Match against any name in a collection."""
        element = Element("tspan")

        assert element.is_elem({"text", "tspan"})
        assert element.is_elem(["tspan"])
        assert not element.is_elem(frozenset({"g"}))

    def test_is_elem_does_not_match_substring(self) -> None:
        """A single name is compared for equality, not containment."""
        assert not Element("g").is_elem("svg g")

    def test_attribute_lookup(self) -> None:
        """has_attr and attr find attributes by name."""
        element = Element.from_mapping("rect", {"x": 0, "fill": "red"})

        assert element.has_attr("fill")
        assert not element.has_attr("y")
        attr = element.attr("fill")
        assert attr is not None
        assert attr.value == "red"
        assert element.attr("y") is None

    def test_each_attr_preserves_order(self) -> None:
        """Attributes iterate in insertion order."""
        element = Element.from_mapping("rect", {"y": 1, "x": 2, "width": 3})

        assert [attr.name for attr in element.each_attr()] == ["y", "x", "width"]

    def test_is_empty(self) -> None:
        """is_empty reflects the child tuple."""
        assert Element("rect").is_empty()
        assert not Element("g", children=(Element("rect"),)).is_empty()
        assert Document().is_empty()


class TestConstruction:
    """Test validation and normalization in __post_init__."""

    def test_children_list_coerced_to_tuple(self) -> None:
        """Children given as a list are stored as a tuple."""
        element = Element("g", children=[Element("rect")])  # type: ignore[arg-type]
        document = Document([element])  # type: ignore[arg-type]

        assert isinstance(element.children, tuple)
        assert isinstance(document.children, tuple)

    def test_attributes_list_coerced_to_tuple(self) -> None:
        """Attributes given as a list are stored as a tuple."""
        element = Element("g", attributes=[Attribute("id", "a")])  # type: ignore[arg-type]

        assert element.attributes == (Attribute("id", "a"),)

    def test_empty_element_name(self) -> None:
        """Elements need a name."""
        with pytest.raises(NodeConstructionError) as exc_info:
            Element("")

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.EMPTY_NAME

    def test_empty_attribute_name(self) -> None:
        """Attributes need a name."""
        with pytest.raises(NodeConstructionError, match="Attribute name"):
            Attribute("", "1")

    def test_empty_processing_instruction_name(self) -> None:
        """Processing instructions need a target name."""
        with pytest.raises(NodeConstructionError, match="ProcessingInstruction"):
            ProcessingInstruction("")

    def test_attribute_rejects_none(self) -> None:
        """None is not a stringifiable attribute value."""
        with pytest.raises(NodeConstructionError) as exc_info:
            Attribute("x", None)  # type: ignore[arg-type]

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.INVALID_ATTRIBUTE_VALUE
        assert exc_info.value.diagnostic.received_type == "NoneType"

    def test_duplicate_attribute(self) -> None:
        """Attribute names are unique within an element."""
        with pytest.raises(NodeConstructionError, match="Duplicate attribute 'x'"):
            Element("rect", attributes=(Attribute("x", 1), Attribute("x", 2)))

    def test_node_construction_error_is_value_error(self) -> None:
        """NodeConstructionError can be caught as ValueError."""
        with pytest.raises(ValueError, match="Element name"):
            Element("")

    def test_nodes_are_frozen(self) -> None:
        """Nodes cannot be mutated after construction."""
        element = Element("g")

        with pytest.raises(dataclasses.FrozenInstanceError):
            element.name = "rect"  # type: ignore[misc]


class TestAttributeText:
    """Test Attribute.text stringification."""

    @pytest.mark.parametrize(
        ("value", "text"),
        [
            ("10px", "10px"),
            (10, "10"),
            (-2, "-2"),
            (0.5, "0.5"),
            (True, "true"),
            (False, "false"),
            ("", ""),
        ],
    )
    def test_text(self, value: str | int | float | bool, text: str) -> None:
        """Primitives stringify without error; booleans use XML spelling."""
        assert Attribute("a", value).text == text
