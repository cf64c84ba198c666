"""Serialize a document tree to SVG/XML markup.

Converts tree nodes to markup text. Supports compact and pretty output,
custom delimiters and custom entity encoding, and reports the width and
height declared on the root ``svg`` element.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from svgwriter.config import SerializerConfig, resolve_config
from svgwriter.constants import HEIGHT_ATTRIBUTE, WIDTH_ATTRIBUTE
from svgwriter.core.depth_guard import DepthGuard
from svgwriter.diagnostics import ErrorTemplate, UnknownNodeKindError
from svgwriter.entities import escape
from svgwriter.enums import DimensionCapture, NodeKind

from .ast import (
    CData,
    Comment,
    Container,
    Doctype,
    Element,
    ProcessingInstruction,
    Text,
)

__all__ = ["SVGInfo", "SVGSerializer", "SerializationResult", "serialize"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SVGInfo:
    """Width and height declared on the root element.

    Both values are the raw attribute text (not entity-encoded), or None
    when no root element carrying both attributes was serialized.
    """

    width: str | None = None
    height: str | None = None

    @property
    def captured(self) -> bool:
        """True once a root element with both width and height was seen."""
        return self.width is not None and self.height is not None

    def merged(self, later: SVGInfo, policy: DimensionCapture = DimensionCapture.LAST) -> SVGInfo:
        """Combine with info found later in traversal order.

        Args:
            later: Info captured after this one
            policy: LAST lets a later capture overwrite; FIRST keeps the earliest

        Returns:
            The winning SVGInfo
        """
        if not later.captured:
            return self
        if not self.captured:
            return later
        return later if policy is DimensionCapture.LAST else self


_NO_INFO = SVGInfo()


@dataclass(frozen=True, slots=True)
class SerializationResult:
    """Output of one serialization pass.

    Attributes:
        data: Serialized markup
        info: Width/height of the root element, if declared
    """

    data: str
    info: SVGInfo = _NO_INFO

    def __str__(self) -> str:
        """Return the serialized markup."""
        return self.data


class SVGSerializer:
    """Converts a document tree to markup text.

    Thread-safe serializer with no mutable instance state. The depth
    counter and the captured width/height are local to each serialize()
    call, so one instance can be shared between threads.

    Usage:
        >>> from svgwriter.syntax import Document, Element, SVGSerializer
        >>> tree = Document((Element.from_mapping("rect", {"x": 0, "y": 0}),))
        >>> SVGSerializer().serialize(tree).data
        '<rect x="0" y="0"/>'
    """

    __slots__ = ("_base", "_config")

    def __init__(self, config: SerializerConfig | None = None) -> None:
        """Initialize serializer.

        Args:
            config: Formatting options (default: SerializerConfig())
        """
        self._base = config if config is not None else SerializerConfig()
        self._config = self._base.prettified()

    @property
    def config(self) -> SerializerConfig:
        """Configuration as supplied (before pretty line breaks are added)."""
        return self._base

    def serialize(self, node: Container) -> SerializationResult:
        """Serialize the children of a document or element.

        Args:
            node: Document (or Element) whose children are rendered

        Returns:
            SerializationResult with markup and root width/height

        Raises:
            UnknownNodeKindError: If strict and a child is not a tree node
            SerializationDepthError: If nesting exceeds max_depth
        """
        guard = DepthGuard(max_depth=self._base.max_depth)
        data, info = self.walk(node, guard)
        logger.debug(
            "Serialized %d characters (width=%r, height=%r)",
            len(data),
            info.width,
            info.height,
        )
        return SerializationResult(data=data, info=info)

    def walk(self, node: Container, guard: DepthGuard | None = None) -> tuple[str, SVGInfo]:
        """Render a container's children in order.

        A container without children renders as "" and leaves the depth
        unchanged. Otherwise depth is incremented for the duration of the
        children and restored afterwards, also when an error propagates.

        Args:
            node: Document or Element
            guard: Depth tracker shared across the recursive pass
                (a fresh one is created when omitted)

        Returns:
            Tuple of (markup, SVGInfo merged from all descendants)
        """
        children = getattr(node, "children", None)
        if not children:
            return "", _NO_INFO
        if guard is None:
            guard = DepthGuard(max_depth=self._base.max_depth)

        output: list[str] = []
        info = _NO_INFO
        label = node.name if isinstance(node, Element) else ""
        with guard.descend(label):
            for child in children:
                rendered, child_info = self._render_node(child, guard)
                output.append(rendered)
                info = info.merged(child_info, self._base.dimension_capture)
        return "".join(output), info

    def _render_node(self, node: object, guard: DepthGuard) -> tuple[str, SVGInfo]:
        """Dispatch one child by its node kind."""
        match getattr(node, "kind", None):
            case NodeKind.ELEMENT if isinstance(node, Element):
                return self._render_element(node, guard)
            case NodeKind.TEXT if isinstance(node, Text):
                return self._render_text(node), _NO_INFO
            case NodeKind.DOCTYPE if isinstance(node, Doctype):
                return self._render_doctype(node), _NO_INFO
            case NodeKind.PROCESSING_INSTRUCTION if isinstance(node, ProcessingInstruction):
                return self._render_proc_inst(node), _NO_INFO
            case NodeKind.COMMENT if isinstance(node, Comment):
                return self._render_comment(node), _NO_INFO
            case NodeKind.CDATA if isinstance(node, CData):
                return self._render_cdata(node), _NO_INFO
            case _:
                return self._unknown_node(node, guard), _NO_INFO

    def _unknown_node(self, node: object, guard: DepthGuard) -> str:
        """Raise in strict mode; otherwise log and skip the child."""
        diagnostic = ErrorTemplate.unknown_node_kind(node, guard.path)
        if self._base.strict:
            raise UnknownNodeKindError(diagnostic)
        logger.warning("Skipping child: %s", diagnostic.message)
        return ""

    def _capture_info(self, element: Element) -> SVGInfo:
        """Read width/height from a root-tagged element, if both are present."""
        if not element.is_elem(self._base.root_element):
            return _NO_INFO
        if not (element.has_attr(WIDTH_ATTRIBUTE) and element.has_attr(HEIGHT_ATTRIBUTE)):
            return _NO_INFO
        size = {
            attr.name: attr.text
            for attr in element.each_attr()
            if attr.name in (WIDTH_ATTRIBUTE, HEIGHT_ATTRIBUTE)
        }
        logger.debug(
            "Captured <%s> size %r x %r",
            element.name,
            size[WIDTH_ATTRIBUTE],
            size[HEIGHT_ATTRIBUTE],
        )
        return SVGInfo(width=size[WIDTH_ATTRIBUTE], height=size[HEIGHT_ATTRIBUTE])

    def _render_element(self, element: Element, guard: DepthGuard) -> tuple[str, SVGInfo]:
        """Render an element and, recursively, its children.

        Empty elements use the short form. Non-empty elements in the text
        groups drop the line breaks and indents that would otherwise change
        the text they carry.
        """
        config = self._config
        base = self._base
        info = self._capture_info(element)
        indent = guard.indent(config.indent, config.pretty)

        if element.is_empty():
            markup = (
                indent
                + config.tag_short_start
                + element.name
                + self._render_attributes(element)
                + config.tag_short_end
            )
            return markup, info

        tag_open_start = config.tag_open_start
        tag_open_end = config.tag_open_end
        tag_close_start = config.tag_close_start
        tag_close_end = config.tag_close_end
        open_indent = ""
        close_indent = ""

        if element.is_elem(base.text_child_elements):
            tag_open_start = base.tag_open_start
            tag_close_end = base.tag_close_end
        else:
            open_indent = indent

        if element.is_elem(base.text_elements):
            tag_open_end = base.tag_open_end
            tag_close_start = base.tag_close_start
        else:
            close_indent = indent

        body, body_info = self.walk(element, guard)

        markup = (
            open_indent
            + tag_open_start
            + element.name
            + self._render_attributes(element)
            + tag_open_end
            + body
            + close_indent
            + tag_close_start
            + element.name
            + tag_close_end
        )
        return markup, info.merged(body_info, base.dimension_capture)

    def _render_attributes(self, element: Element) -> str:
        """Render ` name="value"` pairs in definition order."""
        config = self._config
        return "".join(
            " "
            + attr.name
            + config.attr_start
            + escape(attr.text, config.attribute_entities, config.encode_entity)
            + config.attr_end
            for attr in element.each_attr()
        )

    def _render_text(self, node: Text) -> str:
        """Render text with text-context entity encoding."""
        config = self._config
        return (
            config.text_start
            + escape(node.value, config.text_entities, config.encode_entity)
            + config.text_end
        )

    def _render_doctype(self, node: Doctype) -> str:
        """Render <!DOCTYPE body>."""
        body = node.value
        if body and not body[0].isspace():
            body = " " + body
        return self._config.doctype_start + body + self._config.doctype_end

    def _render_proc_inst(self, node: ProcessingInstruction) -> str:
        """Render <?name body?>."""
        config = self._config
        return config.proc_inst_start + node.name + " " + node.body + config.proc_inst_end

    def _render_comment(self, node: Comment) -> str:
        """Render <!--body-->."""
        return self._config.comment_start + node.value + self._config.comment_end

    def _render_cdata(self, node: CData) -> str:
        """Render <![CDATA[body]]> without encoding."""
        return self._config.cdata_start + node.value + self._config.cdata_end


def serialize(
    node: Container,
    config: SerializerConfig | Mapping[str, Any] | None = None,
    **options: Any,
) -> SerializationResult:
    """Serialize a document tree to markup.

    Convenience function for SVGSerializer(resolve_config(...)).serialize().

    Args:
        node: Document (or Element) whose children are rendered
        config: SerializerConfig or mapping of option overrides
        **options: Further option overrides (snake_case or camelCase)

    Returns:
        SerializationResult with ``data`` and ``info`` (width/height)

    Raises:
        ConfigurationError: If an option is unknown or invalid
        UnknownNodeKindError: If strict and a child is not a tree node
        SerializationDepthError: If nesting exceeds max_depth

    Example:
        >>> from svgwriter.syntax.ast import Document, Element
        >>> svg = Element.from_mapping(
        ...     "svg", {"width": "100", "height": "50"},
        ...     [Element.from_mapping("rect", {"x": "0", "y": "0"})],
        ... )
        >>> result = serialize(Document((svg,)))
        >>> result.data
        '<svg width="100" height="50"><rect x="0" y="0"/></svg>'
        >>> (result.info.width, result.info.height)
        ('100', '50')
    """
    serializer = SVGSerializer(resolve_config(config, **options))
    return serializer.serialize(node)
