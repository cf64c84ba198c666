"""Quickstart example for svgwriter.

This example demonstrates building a small SVG tree and serializing it in
compact and pretty mode, with custom delimiters and a custom entity encoder.
"""

from svgwriter import ConfigurationError, SerializerConfig, SVGSerializer, serialize
from svgwriter.syntax import (
    CData,
    Comment,
    Doctype,
    Document,
    Element,
    ProcessingInstruction,
    Text,
)

label = Element(
    "text",
    children=(Text("Total < 100 & "), Element("tspan", children=(Text("rising"),))),
)
chart = Element.from_mapping(
    "svg",
    {"xmlns": "http://www.w3.org/2000/svg", "width": 200, "height": "100"},
    [
        Element("title", children=(Text("Quarterly chart"),)),
        Comment(" bars "),
        Element.from_mapping("rect", {"x": 0, "y": 40, "width": 20, "height": 60}),
        Element("style", children=(CData("rect { fill: #369; }"),)),
        label,
    ],
)
document = Document(
    (
        ProcessingInstruction("xml", 'version="1.0" encoding="utf-8"'),
        Doctype('svg PUBLIC "-//W3C//DTD SVG 1.1//EN"'),
        chart,
    )
)

# Example 1: Compact output
print("=" * 50)
print("Example 1: Compact Output")
print("=" * 50)

result = serialize(document)
print(result.data)
print(f"width={result.info.width} height={result.info.height}")
# Output: width=200 height=100

# Example 2: Pretty output
print("\n" + "=" * 50)
print("Example 2: Pretty Output")
print("=" * 50)

print(serialize(document, pretty=True, indent="  ").data)

# Example 3: camelCase options and a numeric entity encoder
print("=" * 50)
print("Example 3: Custom Delimiters and Encoder")
print("=" * 50)

result = serialize(
    Document((label,)),
    {"tagShortEnd": " />", "encodeEntity": lambda char: f"&#{ord(char)};"},
)
print(result.data)
# Output: <text>Total &#60; 100 &#38; <tspan>rising</tspan></text>

# Example 4: Reusing one serializer
print("\n" + "=" * 50)
print("Example 4: Reusable Serializer")
print("=" * 50)

serializer = SVGSerializer(SerializerConfig(pretty=True, indent="\t"))
for size in (16, 32):
    icon = Element.from_mapping("svg", {"width": size, "height": size}, [Element("path")])
    print(serializer.serialize(Document((icon,))).data, end="")

# Example 5: Invalid options
print("\n" + "=" * 50)
print("Example 5: Configuration Errors")
print("=" * 50)

try:
    serialize(document, tagEnd=">")
except ConfigurationError as error:
    print(error)
