"""
Java-specific naming utilities.

Handles Java reserved words and literals that can never be used as a
field name in a generated class.
"""

from ...core.naming import NameSanitizer


# Java keywords plus the boolean and null literals
JAVA_RESERVED_WORDS = frozenset(
    {
        "abstract",
        "assert",
        "boolean",
        "break",
        "byte",
        "case",
        "catch",
        "char",
        "class",
        "const",
        "continue",
        "default",
        "do",
        "double",
        "else",
        "enum",
        "extends",
        "final",
        "finally",
        "float",
        "for",
        "goto",
        "if",
        "implements",
        "import",
        "instanceof",
        "int",
        "interface",
        "long",
        "native",
        "new",
        "package",
        "private",
        "protected",
        "public",
        "return",
        "short",
        "static",
        "strictfp",
        "super",
        "switch",
        "synchronized",
        "this",
        "throw",
        "throws",
        "transient",
        "try",
        "void",
        "volatile",
        "while",
        "true",
        "false",
        "null",
    }
)


def create_java_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Java."""
    return NameSanitizer(JAVA_RESERVED_WORDS)


def validate_java_package_name(name: str) -> list[str]:
    """
    Validate a dotted Java package name.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not name:
        errors.append("Package name cannot be empty")
        return errors

    for segment in name.split("."):
        if not segment.isidentifier():
            errors.append(f"'{segment}' is not a valid Java identifier in '{name}'")
        elif segment in JAVA_RESERVED_WORDS:
            errors.append(f"'{segment}' is a Java reserved word in '{name}'")

    return errors
