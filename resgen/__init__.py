"""
resgen: R class generation from compiled resource tables.
"""

from .table import (
    Item,
    ResourceEntry,
    ResourceId,
    ResourceNameRef,
    ResourceTable,
    ResourceTableType,
    ResourceType,
    Styleable,
    StyleableAttribute,
    TableFormatError,
    table_from_dict,
)
from .mangler import mangle_entry, unmangle
from .codegen import (
    GenerationResult,
    GeneratorConfig,
    JavaClassGenerator,
    collect_packages,
    generate_r_class,
    write_r_class,
)

__version__ = "0.1.0"

__all__ = [
    "GenerationResult",
    "GeneratorConfig",
    "Item",
    "JavaClassGenerator",
    "ResourceEntry",
    "ResourceId",
    "ResourceNameRef",
    "ResourceTable",
    "ResourceTableType",
    "ResourceType",
    "Styleable",
    "StyleableAttribute",
    "TableFormatError",
    "collect_packages",
    "generate_r_class",
    "mangle_entry",
    "table_from_dict",
    "unmangle",
    "write_r_class",
]
