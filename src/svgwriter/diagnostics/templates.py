"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def unknown_node_kind(node: object, node_path: str | None = None) -> Diagnostic:
        """Child node is not one of the six serializable kinds.

        Args:
            node: The offending child object
            node_path: Element path of the parent container

        Returns:
            Diagnostic for UNKNOWN_NODE_KIND
        """
        type_name = type(node).__name__
        msg = f"Cannot serialize node of type '{type_name}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_NODE_KIND,
            message=msg,
            hint="Build the tree from svgwriter.syntax.ast node classes, "
            "or pass strict=False to skip unknown children",
            node_path=node_path or None,
            received_type=type_name,
        )

    @staticmethod
    def max_depth_exceeded(max_depth: int, node_path: str | None = None) -> Diagnostic:
        """Element nesting exceeded the configured limit.

        Args:
            max_depth: Maximum allowed depth
            node_path: Element path where the limit was hit

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth exceeded (max: {max_depth})"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten the document or raise max_depth",
            node_path=node_path or None,
        )

    @staticmethod
    def invalid_attribute_value(name: str, value: object) -> Diagnostic:
        """Attribute value is not a primitive that can be stringified.

        Args:
            name: Attribute name
            value: The rejected value

        Returns:
            Diagnostic for INVALID_ATTRIBUTE_VALUE
        """
        type_name = type(value).__name__
        msg = f"Attribute '{name}' has unsupported value type '{type_name}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_ATTRIBUTE_VALUE,
            message=msg,
            hint="Attribute values must be str, int, float or bool",
            expected_type="str | int | float | bool",
            received_type=type_name,
        )

    @staticmethod
    def empty_name(node_type: str) -> Diagnostic:
        """Element, attribute or processing instruction built with an empty name.

        Args:
            node_type: Node class name ("Element", "Attribute", ...)

        Returns:
            Diagnostic for EMPTY_NAME
        """
        msg = f"{node_type} name must be a non-empty string"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_NAME,
            message=msg,
        )

    @staticmethod
    def duplicate_attribute(element: str, name: str) -> Diagnostic:
        """Element built with two attributes of the same name.

        Args:
            element: Element name
            name: Repeated attribute name

        Returns:
            Diagnostic for DUPLICATE_ATTRIBUTE
        """
        msg = f"Duplicate attribute '{name}' on element '{element}'"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_ATTRIBUTE,
            message=msg,
            hint="Attribute names must be unique within one element",
        )

    @staticmethod
    def unknown_config_option(option: str) -> Diagnostic:
        """Override key does not name a SerializerConfig field.

        Args:
            option: The unrecognized key

        Returns:
            Diagnostic for UNKNOWN_CONFIG_OPTION
        """
        msg = f"Unknown serializer option '{option}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_CONFIG_OPTION,
            message=msg,
            hint="Use a SerializerConfig field name or its camelCase alias",
            option_name=option,
        )

    @staticmethod
    def invalid_config_value(option: str, expected: str, value: object) -> Diagnostic:
        """Override value has the wrong type or is out of range.

        Args:
            option: Field name
            expected: Human-readable description of accepted values
            value: The rejected value

        Returns:
            Diagnostic for INVALID_CONFIG_VALUE
        """
        type_name = type(value).__name__
        msg = f"Invalid value for option '{option}': expected {expected}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CONFIG_VALUE,
            message=msg,
            option_name=option,
            expected_type=expected,
            received_type=type_name,
        )
