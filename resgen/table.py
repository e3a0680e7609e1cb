"""
Resource table representation.

Holds the compiled resources a generator walks: a package owning an
ordered list of typed groups, each holding identifier-bearing entries.
Tables are built once and treated as read-only afterwards.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Union
from enum import Enum


class TableFormatError(Exception):
    """Raised when a serialized table document is malformed."""

    pass


class ResourceType(Enum):
    """Resource type tags, as they appear in generated class names."""

    ANIM = "anim"
    ANIMATOR = "animator"
    ARRAY = "array"
    ATTR = "attr"
    ATTR_PRIVATE = "^attr-private"
    BOOL = "bool"
    COLOR = "color"
    DIMEN = "dimen"
    DRAWABLE = "drawable"
    FRACTION = "fraction"
    ID = "id"
    INTEGER = "integer"
    INTERPOLATOR = "interpolator"
    LAYOUT = "layout"
    MENU = "menu"
    MIPMAP = "mipmap"
    PLURALS = "plurals"
    RAW = "raw"
    STRING = "string"
    STYLE = "style"
    STYLEABLE = "styleable"
    TRANSITION = "transition"
    XML = "xml"

    def __str__(self) -> str:
        return self.value


_TYPES_BY_TAG = {t.value: t for t in ResourceType}


def parse_resource_type(tag: str) -> Optional[ResourceType]:
    """Look up a resource type by its tag, or None if unknown."""
    return _TYPES_BY_TAG.get(tag)


@dataclass(frozen=True, order=True)
class ResourceId:
    """
    Packed resource identifier: 0xPPTTEEEE.

    Comparison is package-major, which is the same as comparing the
    packed integers.
    """

    package_id: int = 0
    type_id: int = 0
    entry_id: int = 0

    def __post_init__(self):
        if not 0 <= self.package_id <= 0xFF:
            raise ValueError(f"package id out of range: {self.package_id}")
        if not 0 <= self.type_id <= 0xFF:
            raise ValueError(f"type id out of range: {self.type_id}")
        if not 0 <= self.entry_id <= 0xFFFF:
            raise ValueError(f"entry id out of range: {self.entry_id}")

    @classmethod
    def from_int(cls, value: int) -> "ResourceId":
        """Unpack a 32-bit resource id."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"resource id out of range: {value}")
        return cls((value >> 24) & 0xFF, (value >> 16) & 0xFF, value & 0xFFFF)

    @property
    def id(self) -> int:
        return (self.package_id << 24) | (self.type_id << 16) | self.entry_id

    def is_valid(self) -> bool:
        """An id is usable once its package and type ids are assigned."""
        return self.package_id != 0 and self.type_id != 0

    def __str__(self) -> str:
        return f"0x{self.id:08x}"


@dataclass(frozen=True)
class ResourceNameRef:
    """Fully qualified resource name: package, type and entry."""

    package: str
    type: ResourceType
    entry: str

    def is_valid(self) -> bool:
        return bool(self.package) and bool(self.entry)

    @classmethod
    def parse(cls, text: str, default_type: ResourceType = ResourceType.ATTR) -> "ResourceNameRef":
        """
        Parse ``package:type/entry``.

        The type segment may be omitted (``package:entry``), in which case
        ``default_type`` is used.
        """
        package, sep, rest = text.partition(":")
        if not sep:
            raise TableFormatError(f"resource name has no package: '{text}'")

        type_tag, sep, entry = rest.partition("/")
        if not sep:
            return cls(package, default_type, type_tag)

        res_type = parse_resource_type(type_tag)
        if res_type is None:
            raise TableFormatError(f"unknown resource type '{type_tag}' in '{text}'")
        return cls(package, res_type, entry)

    def __str__(self) -> str:
        if self.package:
            return f"{self.package}:{self.type.value}/{self.entry}"
        return f"{self.type.value}/{self.entry}"


@dataclass(frozen=True)
class Item:
    """Any value the generator does not look inside."""

    data: Any = None


@dataclass(frozen=True)
class StyleableAttribute:
    """One attribute reference inside a styleable."""

    id: ResourceId
    name: ResourceNameRef


@dataclass
class Styleable:
    """Attribute references grouped under a styleable name, in no particular order."""

    entries: List[StyleableAttribute] = field(default_factory=list)


Value = Union[Item, Styleable]


@dataclass
class ResourceEntry:
    """A single named resource. Names may be mangled (``package$name``)."""

    name: str
    entry_id: int
    values: List[Value] = field(default_factory=list)


@dataclass
class ResourceTableType:
    """All entries of one resource type, in table order."""

    type: ResourceType
    type_id: int
    entries: List[ResourceEntry] = field(default_factory=list)

    def find_entry(self, name: str) -> Optional[ResourceEntry]:
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None


@dataclass
class ResourceTable:
    """A package's compiled resources, grouped by type."""

    package: str
    package_id: int
    types: List[ResourceTableType] = field(default_factory=list)

    def __iter__(self) -> Iterator[ResourceTableType]:
        return iter(self.types)

    def __len__(self) -> int:
        return len(self.types)

    def find_type(self, res_type: ResourceType) -> Optional[ResourceTableType]:
        for table_type in self.types:
            if table_type.type == res_type:
                return table_type
        return None

    def entry_count(self) -> int:
        return sum(len(t.entries) for t in self.types)


# Loading from JSON-compatible documents


def _parse_int(value: Any, what: str) -> int:
    """Accept ints and int strings (decimal or 0x-prefixed hex)."""
    if isinstance(value, bool):
        raise TableFormatError(f"{what} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value, 0)
        except ValueError:
            pass
    raise TableFormatError(f"{what} must be an integer, got {value!r}")


def _parse_ranged_int(value: Any, what: str, low: int, high: int) -> int:
    number = _parse_int(value, what)
    if not low <= number <= high:
        raise TableFormatError(f"{what} must be in 0x{low:x}..0x{high:x}, got {number}")
    return number


def _parse_name(value: Any, what: str) -> str:
    if not isinstance(value, str) or not value:
        raise TableFormatError(f"{what} must be a non-empty string, got {value!r}")
    return value


def _parse_attribute(attr: Any, where: str) -> StyleableAttribute:
    if not isinstance(attr, dict) or "id" not in attr or "name" not in attr:
        raise TableFormatError(f"{where} needs 'id' and 'name'")

    try:
        res_id = ResourceId.from_int(_parse_int(attr["id"], f"{where} id"))
    except ValueError as e:
        raise TableFormatError(f"{where}: {e}") from e
    if not res_id.is_valid():
        raise TableFormatError(f"{where}: {res_id} has no package or type id")

    name = ResourceNameRef.parse(_parse_name(attr["name"], f"{where} name"))
    if not name.is_valid():
        raise TableFormatError(f"{where}: incomplete attribute name '{attr['name']}'")
    return StyleableAttribute(res_id, name)


def _parse_value(raw: Any, context: str) -> Value:
    if isinstance(raw, dict) and "styleable" in raw:
        attrs = raw["styleable"]
        if not isinstance(attrs, list):
            raise TableFormatError(f"{context}: 'styleable' must be a list")
        return Styleable(
            [
                _parse_attribute(attr, f"{context}: attribute {index}")
                for index, attr in enumerate(attrs)
            ]
        )

    return Item(raw)


def _parse_entry(raw: Any, res_type: ResourceType) -> ResourceEntry:
    if not isinstance(raw, dict):
        raise TableFormatError(f"{res_type}: entry must be an object")
    if "name" not in raw or "id" not in raw:
        raise TableFormatError(f"{res_type}: entry needs 'name' and 'id'")

    name = _parse_name(raw["name"], f"{res_type} entry name")
    where = f"{res_type}/{name}"
    entry_id = _parse_ranged_int(raw["id"], f"{where} id", 0, 0xFFFF)

    raw_values = raw.get("values", [])
    if not isinstance(raw_values, list):
        raise TableFormatError(f"{where}: 'values' must be a list")
    if res_type is ResourceType.STYLEABLE and not raw_values:
        raise TableFormatError(f"{where}: styleable entry has no values")

    values = [_parse_value(v, where) for v in raw_values]
    return ResourceEntry(name, entry_id, values)


def table_from_dict(data: Dict[str, Any]) -> ResourceTable:
    """
    Build a ResourceTable from its JSON form.

    Expected layout::

        {
          "package": "com.example.app",
          "id": "0x7f",
          "types": [
            {"type": "id", "id": 1, "entries": [{"name": "foo", "id": 0}]},
            {"type": "styleable", "id": 2, "entries": [
              {"name": "Theme", "id": 0, "values": [
                {"styleable": [{"id": "0x7f010000", "name": "com.example.app:attr/color"}]}
              ]}
            ]}
          ]
        }

    Args:
        data: Parsed JSON document

    Returns:
        The resource table

    Raises:
        TableFormatError: If the document does not describe a table
    """
    if not isinstance(data, dict):
        raise TableFormatError("table document must be a JSON object")

    for key in ("package", "id"):
        if key not in data:
            raise TableFormatError(f"table document is missing '{key}'")

    table = ResourceTable(
        _parse_name(data["package"], "package"),
        _parse_ranged_int(data["id"], "package id", 1, 0xFF),
    )

    for raw_type in data.get("types", []):
        if not isinstance(raw_type, dict) or "type" not in raw_type or "id" not in raw_type:
            raise TableFormatError("each type needs 'type' and 'id'")

        tag = raw_type["type"]
        res_type = parse_resource_type(tag) if isinstance(tag, str) else None
        if res_type is None:
            raise TableFormatError(f"unknown resource type '{tag}'")
        if table.find_type(res_type) is not None:
            raise TableFormatError(f"duplicate resource type '{res_type}'")

        type_id = _parse_ranged_int(raw_type["id"], f"{res_type} type id", 1, 0xFF)
        table_type = ResourceTableType(res_type, type_id)
        for raw_entry in raw_type.get("entries", []):
            table_type.entries.append(_parse_entry(raw_entry, res_type))
        table.types.append(table_type)

    return table
