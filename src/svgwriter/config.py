"""Serializer configuration.

Provides a single frozen dataclass holding every formatting option, plus
``resolve_config()`` which overlays caller overrides on the defaults.

The configuration is flat, so overriding is a shallow field replacement;
no generic deep merge is involved. Override keys may use the snake_case
field names or their camelCase spelling (``tagShortEnd``, ``encodeEntity``),
and the legacy names ``regEntities``/``regValEntities`` for the two
reserved-character sets.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from svgwriter.constants import (
    DEFAULT_INDENT,
    DEFAULT_ROOT_ELEMENT,
    MAX_DEPTH,
    TEXT_CONTENT_CHILD_ELEMENTS,
    TEXT_ELEMENTS,
)
from svgwriter.diagnostics import ConfigurationError, ErrorTemplate
from svgwriter.entities import ATTRIBUTE_ENTITIES, TEXT_ENTITIES
from svgwriter.entities import encode_entity as _encode_entity
from svgwriter.enums import DimensionCapture

__all__ = ["SerializerConfig", "resolve_config"]

_DELIMITER_FIELDS: tuple[str, ...] = (
    "doctype_start",
    "doctype_end",
    "proc_inst_start",
    "proc_inst_end",
    "tag_open_start",
    "tag_open_end",
    "tag_close_start",
    "tag_close_end",
    "tag_short_start",
    "tag_short_end",
    "attr_start",
    "attr_end",
    "comment_start",
    "comment_end",
    "cdata_start",
    "cdata_end",
    "text_start",
    "text_end",
    "indent",
)

# Closing delimiters that gain a line break in pretty mode.
# attr_end, text_start and text_end never do.
_PRETTY_FIELDS: tuple[str, ...] = (
    "doctype_end",
    "proc_inst_end",
    "comment_end",
    "cdata_end",
    "tag_short_end",
    "tag_open_end",
    "tag_close_end",
)

_LEGACY_ALIASES: dict[str, str] = {
    "regEntities": "text_entities",
    "regValEntities": "attribute_entities",
}


@dataclass(frozen=True, slots=True)
class SerializerConfig:
    """Immutable formatting options for SVGSerializer.

    All fields have defaults; ``SerializerConfig()`` produces compact output
    with the standard XML delimiters.

    Attributes:
        doctype_start, doctype_end: ``<!DOCTYPE`` / ``>``
        proc_inst_start, proc_inst_end: ``<?`` / ``?>``
        tag_open_start, tag_open_end: ``<`` / ``>`` around an opening tag
        tag_close_start, tag_close_end: ``</`` / ``>`` around a closing tag
        tag_short_start, tag_short_end: ``<`` / ``/>`` around a self-closing tag
        attr_start, attr_end: ``="`` / ``"`` around an attribute value
        comment_start, comment_end: ``<!--`` / ``-->``
        cdata_start, cdata_end: ``<![CDATA[`` / ``]]>``
        text_start, text_end: Wrappers around text nodes (default: empty)
        indent: Indent unit for pretty output (default: four spaces)
        pretty: Emit line breaks and indentation (default: False)
        text_entities: Characters escaped in text content
        attribute_entities: Characters escaped in attribute values
        encode_entity: Maps a reserved character to its replacement
        text_elements: Elements whose body is literal text; no line break
            after the opening tag, no indent before the closing tag
        text_child_elements: Inline children of text elements; no indent
            before the opening tag, no line break after the closing tag
        root_element: Tag whose width/height are reported (default: ``svg``)
        strict: Raise UnknownNodeKindError for unrecognized children
            (default: True). If False, skip them with a logged warning.
        max_depth: Maximum element nesting (default: MAX_DEPTH)
        dimension_capture: Which root element's width/height wins when
            several are present (default: DimensionCapture.LAST)

    Example:
        >>> config = SerializerConfig(pretty=True, indent="  ")
        >>> config.prettified().tag_open_end
        '>\\n'
    """

    doctype_start: str = "<!DOCTYPE"
    doctype_end: str = ">"
    proc_inst_start: str = "<?"
    proc_inst_end: str = "?>"
    tag_open_start: str = "<"
    tag_open_end: str = ">"
    tag_close_start: str = "</"
    tag_close_end: str = ">"
    tag_short_start: str = "<"
    tag_short_end: str = "/>"
    attr_start: str = '="'
    attr_end: str = '"'
    comment_start: str = "<!--"
    comment_end: str = "-->"
    cdata_start: str = "<![CDATA["
    cdata_end: str = "]]>"
    text_start: str = ""
    text_end: str = ""
    indent: str = DEFAULT_INDENT
    pretty: bool = False
    text_entities: frozenset[str] = TEXT_ENTITIES
    attribute_entities: frozenset[str] = ATTRIBUTE_ENTITIES
    encode_entity: Callable[[str], str] = _encode_entity
    text_elements: frozenset[str] = TEXT_ELEMENTS
    text_child_elements: frozenset[str] = TEXT_CONTENT_CHILD_ELEMENTS
    root_element: str = DEFAULT_ROOT_ELEMENT
    strict: bool = True
    max_depth: int = MAX_DEPTH
    dimension_capture: DimensionCapture = DimensionCapture.LAST

    def __post_init__(self) -> None:
        """Validate and normalize option values at construction time.

        Raises:
            ConfigurationError: If a delimiter is not a string, a reserved
                set holds anything but single characters, encode_entity is
                not callable, root_element is empty, max_depth is not
                positive, or dimension_capture is not a known policy.
        """
        for name in _DELIMITER_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigurationError(
                    ErrorTemplate.invalid_config_value(name, "str", value)
                )

        for name in ("pretty", "strict"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigurationError(
                    ErrorTemplate.invalid_config_value(name, "bool", value)
                )

        for name in ("text_entities", "attribute_entities"):
            chars = _as_frozenset(name, getattr(self, name))
            if any(len(char) != 1 for char in chars):
                raise ConfigurationError(
                    ErrorTemplate.invalid_config_value(
                        name, "a set of single characters", getattr(self, name)
                    )
                )
            object.__setattr__(self, name, chars)

        for name in ("text_elements", "text_child_elements"):
            value = getattr(self, name)
            # A bare tag name is one name, not a set of characters.
            if isinstance(value, str):
                value = frozenset({value})
            object.__setattr__(self, name, _as_frozenset(name, value))

        if not callable(self.encode_entity):
            raise ConfigurationError(
                ErrorTemplate.invalid_config_value(
                    "encode_entity", "a callable str -> str", self.encode_entity
                )
            )

        if not isinstance(self.root_element, str) or not self.root_element:
            raise ConfigurationError(
                ErrorTemplate.invalid_config_value(
                    "root_element", "a non-empty str", self.root_element
                )
            )

        if (
            isinstance(self.max_depth, bool)
            or not isinstance(self.max_depth, int)
            or self.max_depth <= 0
        ):
            raise ConfigurationError(
                ErrorTemplate.invalid_config_value("max_depth", "a positive int", self.max_depth)
            )

        try:
            policy = DimensionCapture(self.dimension_capture)
        except ValueError:
            raise ConfigurationError(
                ErrorTemplate.invalid_config_value(
                    "dimension_capture", "'last' or 'first'", self.dimension_capture
                )
            ) from None
        object.__setattr__(self, "dimension_capture", policy)

    def prettified(self) -> SerializerConfig:
        """Return the variant used for rendering.

        When ``pretty`` is set, a line break is appended to every closing
        delimiter that ends a line (doctype, processing instruction, comment,
        CDATA, short tag, opening tag, closing tag). Otherwise returns self.
        """
        if not self.pretty:
            return self
        changes = {name: getattr(self, name) + "\n" for name in _PRETTY_FIELDS}
        return replace(self, **changes)


def _as_frozenset(name: str, value: object) -> frozenset[str]:
    """Coerce a str or iterable of str option to frozenset."""
    if isinstance(value, frozenset):
        items: Iterable[object] = value
    elif isinstance(value, str | Iterable):
        items = value
    else:
        raise ConfigurationError(
            ErrorTemplate.invalid_config_value(name, "an iterable of str", value)
        )
    result = frozenset(items)
    if not all(isinstance(item, str) for item in result):
        raise ConfigurationError(
            ErrorTemplate.invalid_config_value(name, "an iterable of str", value)
        )
    return result  # type: ignore[return-value]


def _to_camel_case(snake_case: str) -> str:
    """Convert a snake_case field name to its camelCase option name.

    Examples:
        >>> _to_camel_case("tag_short_end")
        'tagShortEnd'
        >>> _to_camel_case("indent")
        'indent'
    """
    components = snake_case.split("_")
    return components[0] + "".join(comp.capitalize() for comp in components[1:])


def _build_option_names() -> dict[str, str]:
    """Map every accepted override key to its SerializerConfig field name."""
    names: dict[str, str] = {}
    for config_field in fields(SerializerConfig):
        names[config_field.name] = config_field.name
        names[_to_camel_case(config_field.name)] = config_field.name
    names.update(_LEGACY_ALIASES)
    return names


_OPTION_NAMES: dict[str, str] = _build_option_names()


def resolve_config(
    overrides: SerializerConfig | Mapping[str, Any] | None = None,
    /,
    **options: Any,
) -> SerializerConfig:
    """Overlay overrides on the default configuration.

    Shallow replacement: each provided key replaces exactly one field;
    all other fields keep their defaults (or the values of a passed
    SerializerConfig).

    Args:
        overrides: A complete SerializerConfig to start from, or a mapping
            of option names to values
        **options: Further option overrides, applied last

    Returns:
        Complete SerializerConfig

    Raises:
        ConfigurationError: If an option name is unknown or a value invalid

    Example:
        >>> config = resolve_config({"pretty": True, "tagShortEnd": " />"})
        >>> config.tag_short_end
        ' />'
        >>> resolve_config(indent="\\t").indent
        '\\t'
    """
    if isinstance(overrides, SerializerConfig):
        base = overrides
        changes: dict[str, Any] = {}
    else:
        base = SerializerConfig()
        changes = _normalize_options(overrides or {})
    changes.update(_normalize_options(options))

    if not changes:
        return base
    return replace(base, **changes)


def _normalize_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """Translate camelCase and legacy keys to field names."""
    normalized: dict[str, Any] = {}
    for key, value in options.items():
        field_name = _OPTION_NAMES.get(key)
        if field_name is None:
            raise ConfigurationError(ErrorTemplate.unknown_config_option(key))
        normalized[field_name] = value
    return normalized
