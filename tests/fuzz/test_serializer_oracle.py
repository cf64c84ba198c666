"""Differential fuzzer: serializer output parsed back by xml.etree.

Generated trees are serialized in compact mode and parsed with the
standard library XML parser. The parsed tree must match the source tree
in element names, attribute values, text content and child order.

Run with:
    pytest tests/fuzz/test_serializer_oracle.py -m fuzz -v

Python 3.13+.
"""

from __future__ import annotations

import string
import xml.etree.ElementTree as ET

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st
from hypothesis.strategies import composite

from svgwriter.syntax import serialize
from svgwriter.syntax.ast import Attribute, Document, Element, Text

# Mark entire module as fuzz tests
pytestmark = pytest.mark.fuzz

# Printable ASCII without the XML-normalized whitespace characters
SAFE_CHARS = string.ascii_letters + string.digits + " &'\"<>;#!?=-_."
NAME_CHARS = string.ascii_lowercase


@composite
def oracle_elements(draw: st.DrawFn, max_depth: int = 3) -> Element:
    """Elements whose names and values survive an XML parse unchanged."""
    name = draw(st.text(alphabet=NAME_CHARS, min_size=1, max_size=6))
    attr_names = draw(st.lists(st.text(alphabet=NAME_CHARS, min_size=1, max_size=5), unique=True, max_size=3))
    attrs = tuple(Attribute(n, draw(st.text(alphabet=SAFE_CHARS, max_size=12))) for n in attr_names)
    children: list[Element | Text] = []
    if max_depth > 1:
        children = draw(st.lists(oracle_elements(max_depth=max_depth - 1), max_size=3))
    text = draw(st.text(alphabet=SAFE_CHARS, max_size=12))
    if text:
        children.insert(0, Text(text))
    return Element(name, attrs, tuple(children))


def _assert_same(parsed: ET.Element, source: Element) -> None:
    assert parsed.tag == source.name
    assert parsed.attrib == {attr.name: attr.text for attr in source.attributes}
    texts = [child.value for child in source.children if isinstance(child, Text)]
    assert (parsed.text or "") == "".join(texts)
    source_children = [child for child in source.children if isinstance(child, Element)]
    assert len(parsed) == len(source_children)
    for parsed_child, source_child in zip(parsed, source_children, strict=True):
        _assert_same(parsed_child, source_child)


class TestSerializerOracle:
    """Parse serialized output and compare against the source tree."""

    @given(element=oracle_elements())
    @settings(max_examples=200, deadline=None)
    def test_parse_matches_source(self, element: Element) -> None:
        """Compact output is well-formed XML describing the same tree."""
        data = serialize(Document((element,))).data
        event(f"children={len(element.children)}")

        _assert_same(ET.fromstring(data), element)
