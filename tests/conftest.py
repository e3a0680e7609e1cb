"""Shared builders for generator tests."""

from __future__ import annotations

from typing import Any

from resgen.table import (
    ResourceEntry,
    ResourceId,
    ResourceNameRef,
    ResourceTable,
    ResourceTableType,
    ResourceType,
    Styleable,
    StyleableAttribute,
)


# =============================================================================
# Shared table builders
# =============================================================================


HEADER = (
    "/* AUTO-GENERATED FILE. DO NOT MODIFY.\n"
    " *\n"
    " * This class was automatically generated by the\n"
    " * resgen tool from the resource data it found. It\n"
    " * should not be modified by hand.\n"
    " */\n"
    "\n"
)


def make_type(res_type: ResourceType, type_id: int, names: list[str]) -> ResourceTableType:
    """Create a table type whose entries get ids 0, 1, 2... in order."""
    return ResourceTableType(
        res_type,
        type_id,
        [ResourceEntry(name, index) for index, name in enumerate(names)],
    )


def make_styleable(attrs: list[tuple[int, str]]) -> Styleable:
    """Create a styleable from (packed id, "package:attr/name") pairs."""
    return Styleable(
        [
            StyleableAttribute(ResourceId.from_int(attr_id), ResourceNameRef.parse(name))
            for attr_id, name in attrs
        ]
    )


def make_table(
    types: list[ResourceTableType],
    package: str = "app",
    package_id: int = 0x7F,
) -> ResourceTable:
    return ResourceTable(package, package_id, list(types))


def table_document(**overrides: Any) -> dict[str, Any]:
    """A small serialized table with one id, one string and one styleable."""
    doc = {
        "package": "com.example.app",
        "id": "0x7f",
        "types": [
            {"type": "attr", "id": 1, "entries": [{"name": "color", "id": 0}]},
            {
                "type": "id",
                "id": 2,
                "entries": [
                    {"name": "root-view", "id": 0},
                    {"name": "com.example.lib$shared", "id": 1},
                ],
            },
            {
                "type": "styleable",
                "id": 3,
                "entries": [
                    {
                        "name": "Theme",
                        "id": 0,
                        "values": [
                            {
                                "styleable": [
                                    {"id": "0x01010098", "name": "android:attr/textColor"},
                                    {"id": "0x7f010000", "name": "com.example.app:attr/color"},
                                ]
                            }
                        ],
                    }
                ],
            },
        ],
    }
    doc.update(overrides)
    return doc
