"""Shared constants for SVGWriter.

Centralized defaults used by the configuration resolver, the entity encoder
and the serializer. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for tree serialization
- Element groups: Whitespace-sensitive SVG element names
- Formatting defaults: Indent unit and root element name

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Element groups
    "TEXT_CONTENT_ELEMENTS",
    "TEXT_CONTENT_CHILD_ELEMENTS",
    "TEXT_ELEMENTS",
    # Formatting defaults
    "DEFAULT_INDENT",
    "DEFAULT_ROOT_ELEMENT",
    "WIDTH_ATTRIBUTE",
    "HEIGHT_ATTRIBUTE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum element nesting the serializer will walk before failing.
# Real SVG documents rarely nest beyond 20 groups; 100 levels of nesting
# is almost certainly generated or malformed input.
# Clamped at runtime against sys.getrecursionlimit() (see core.depth_guard).
MAX_DEPTH: int = 100

# ============================================================================
# ELEMENT GROUPS
# ============================================================================

# SVG 1.1 "text content elements".
TEXT_CONTENT_ELEMENTS: frozenset[str] = frozenset(
    {
        "altGlyph",
        "altGlyphDef",
        "altGlyphItem",
        "glyph",
        "glyphRef",
        "textPath",
        "text",
        "tref",
        "tspan",
    }
)

# SVG 1.1 "text content child elements". These sit inline inside text, so
# no line break or indent may be emitted before their opening tag.
TEXT_CONTENT_CHILD_ELEMENTS: frozenset[str] = frozenset(
    {
        "altGlyph",
        "textPath",
        "tref",
        "tspan",
    }
)

# Elements whose body is literal text: no line break after the opening tag
# and no indent before the closing tag. `title` carries text too.
TEXT_ELEMENTS: frozenset[str] = TEXT_CONTENT_ELEMENTS | {"title"}

# ============================================================================
# FORMATTING DEFAULTS
# ============================================================================

DEFAULT_INDENT: str = "    "

# Tag whose width/height attributes are reported in SVGInfo.
DEFAULT_ROOT_ELEMENT: str = "svg"

WIDTH_ATTRIBUTE: str = "width"
HEIGHT_ATTRIBUTE: str = "height"
