"""Entity encoding for markup output.

Escapes characters that are reserved in markup syntax. Two reserved sets
are used by the serializer:
- TEXT_ENTITIES for character data between tags
- ATTRIBUTE_ENTITIES for attribute values (always wrapped in double quotes,
  so the apostrophe passes through)

Substitution is a single regex pass over the input: every reserved character
is replaced exactly once and the replacement text is never re-scanned, so
the ``&`` introduced by ``&lt;`` is not escaped again.

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Callable
from functools import lru_cache
from types import MappingProxyType

__all__ = [
    "ATTRIBUTE_ENTITIES",
    "ENTITIES",
    "TEXT_ENTITIES",
    "EntityEncoder",
    "encode_entity",
    "escape",
]

type EntityEncoder = Callable[[str], str]

ENTITIES: MappingProxyType[str, str] = MappingProxyType(
    {
        "&": "&amp;",
        "'": "&apos;",
        '"': "&quot;",
        ">": "&gt;",
        "<": "&lt;",
    }
)

TEXT_ENTITIES: frozenset[str] = frozenset("&'\"<>")

ATTRIBUTE_ENTITIES: frozenset[str] = frozenset('&"<>')


def encode_entity(char: str) -> str:
    """Return the entity reference for a reserved character.

    Characters without an entry in ENTITIES are returned unchanged, so a
    custom reserved set never makes encoding fail.

    Example:
        >>> encode_entity("<")
        '&lt;'
        >>> encode_entity("x")
        'x'
    """
    return ENTITIES.get(char, char)


@lru_cache(maxsize=32)
def _reserved_pattern(reserved: frozenset[str]) -> re.Pattern[str]:
    """Compile a character class matching any character in ``reserved``."""
    chars = "".join(re.escape(char) for char in sorted(reserved))
    return re.compile(f"[{chars}]")


def escape(
    text: str,
    reserved: frozenset[str] = TEXT_ENTITIES,
    encode: EntityEncoder = encode_entity,
) -> str:
    """Escape reserved characters in a single pass.

    Args:
        text: Raw text
        reserved: Characters to replace (default: TEXT_ENTITIES)
        encode: Maps one reserved character to its replacement

    Returns:
        Text with each reserved character replaced by ``encode(char)``

    Example:
        >>> escape("a < b & c")
        'a &lt; b &amp; c'
        >>> escape("it's", ATTRIBUTE_ENTITIES)
        "it's"
    """
    if not text or not reserved:
        return text
    pattern = _reserved_pattern(frozenset(reserved))
    return pattern.sub(lambda match: encode(match.group()), text)
