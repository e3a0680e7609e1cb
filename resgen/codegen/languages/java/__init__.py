"""
Java code generator module.

Generates R classes of int constants from a resource table.
"""

from .generator import JavaClassGenerator, create_java_generator
from .naming import JAVA_RESERVED_WORDS, create_java_sanitizer, validate_java_package_name

__all__ = [
    "JavaClassGenerator",
    "JAVA_RESERVED_WORDS",
    "create_java_generator",
    "create_java_sanitizer",
    "validate_java_package_name",
]
