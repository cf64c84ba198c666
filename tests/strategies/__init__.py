"""Hypothesis strategies for SVGWriter property-based testing.

Usage:
    from tests.strategies import documents, plain_elements
    from tests.strategies.svg import reserved_text, nested_chain
"""

from .svg import (
    NAME_FIRST_CHARS,
    NAME_REST_CHARS,
    PLAIN_ELEMENT_NAMES,
    RESERVED_CHARS,
    any_elements,
    attribute_tuples,
    attribute_values,
    documents,
    leaf_nodes,
    markup_names,
    nested_chain,
    plain_elements,
    plain_text,
    reserved_text,
)

__all__ = [
    "NAME_FIRST_CHARS",
    "NAME_REST_CHARS",
    "PLAIN_ELEMENT_NAMES",
    "RESERVED_CHARS",
    "any_elements",
    "attribute_tuples",
    "attribute_values",
    "documents",
    "leaf_nodes",
    "markup_names",
    "nested_chain",
    "plain_elements",
    "plain_text",
    "reserved_text",
]
