"""
Java R class generator.

Renders every resource of a table as an int constant inside a nested
class per resource type, matching what application code references as
``R.<type>.<name>``.
"""

from typing import Any, Dict, List, Optional, TextIO, Tuple

from ....logging_config import get_logger
from ....mangler import unmangle
from ....table import (
    ResourceEntry,
    ResourceId,
    ResourceNameRef,
    ResourceTable,
    ResourceTableType,
    ResourceType,
    Styleable,
)
from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator, GenerationResult, InvalidSymbolError
from .naming import create_java_sanitizer

logger = get_logger(__name__)

# Attribute ids per line in a styleable array.
ATTRIBS_PER_LINE = 4

MEMBER_INDENT = " " * 8
ARRAY_ITEM_INDENT = " " * 12

HEADER_TEMPLATE = """\
/* AUTO-GENERATED FILE. DO NOT MODIFY.
 *
 * This class was automatically generated by the
 * resgen tool from the resource data it found. It
 * should not be modified by hand.
 */

package {{ package }};

"""

CONSTANT_TEMPLATE = (
    "        public static{{ final_modifier }} int {{ name | symbol }} = {{ value }};\n"
)


class JavaClassGenerator(CodeGenerator):
    """Generates the R class for one package of a resource table."""

    def __init__(self, table: ResourceTable, config: Optional[GeneratorConfig] = None):
        """Initialize Java generator with configuration."""
        super().__init__(table, config)
        self.sanitizer = create_java_sanitizer()
        self._final_modifier = " final" if self.config.use_final else ""

    @property
    def language_name(self) -> str:
        return "java"

    @property
    def file_extension(self) -> str:
        return ".java"

    def get_templates(self) -> Dict[str, str]:
        return {
            "header.java.j2": HEADER_TEMPLATE,
            "constant.java.j2": CONSTANT_TEMPLATE,
        }

    def generate(self, package: str, out: TextIO) -> GenerationResult:
        """
        Write the R class for ``package`` to ``out``.

        Output is streamed; when a resource name is a reserved word the
        result is a failure and ``out`` keeps whatever was already written.
        """
        stats = {"constants": 0, "styleables": 0, "skipped": 0}
        metadata: Dict[str, Any] = {
            "language": self.language_name,
            "file_extension": self.file_extension,
            "package": package,
            "table_package": self.table.package,
            "type_count": len(self.table),
        }

        logger.debug(f"Generating R class for {package} from table {self.table.package}")
        out.write(self.render_template("header.java.j2", {"package": package}))
        out.write("public final class R {\n")

        for table_type in self.table:
            out.write(f"    public static final class {table_type.type.value} {{\n")
            try:
                self._generate_type(package, table_type, out, stats)
            except InvalidSymbolError as e:
                logger.error(f"Generation of {package} aborted: {e}")
                metadata.update(stats)
                return GenerationResult.error(str(e), exception=e, metadata=metadata)
            out.write("    }\n")

        out.write("}\n")

        metadata.update(stats)
        logger.info(
            f"Generated R class for {package}: {stats['constants']} constants, "
            f"{stats['styleables']} styleables, {stats['skipped']} skipped"
        )
        return GenerationResult(metadata=metadata)

    def _generate_type(
        self, package: str, table_type: ResourceTableType, out: TextIO, stats: Dict[str, int]
    ):
        for entry in table_type.entries:
            res_id = ResourceId(self.table.package_id, table_type.type_id, entry.entry_id)
            assert res_id.is_valid(), f"invalid id {res_id} for {table_type.type}/{entry.name}"

            name = self._resolve_name(package, entry)
            if name is None:
                stats["skipped"] += 1
                continue

            if not self.sanitizer.is_valid_symbol(name):
                raise InvalidSymbolError(str(ResourceNameRef(package, table_type.type, name)))

            if table_type.type == ResourceType.STYLEABLE:
                assert entry.values, f"styleable {name} has no values"
                value = entry.values[0]
                if isinstance(value, Styleable):
                    self._generate_styleable(name, value, out)
                    stats["styleables"] += 1
                else:
                    logger.debug(f"Styleable entry {name} holds a {type(value).__name__}, nothing to emit")
            else:
                out.write(self._render_constant(name, res_id))
                stats["constants"] += 1

    def _resolve_name(self, package: str, entry: ResourceEntry) -> Optional[str]:
        """
        Return the name to emit for ``entry``, or None when it belongs to
        another package's R class.
        """
        unmangled = unmangle(entry.name)
        if unmangled is not None:
            plain_name, origin_package = unmangled
            if origin_package != package:
                return None
            return plain_name

        # Unmangled names are the table's own resources.
        if package != self.table.package:
            return None
        return entry.name

    def _generate_styleable(self, entry_name: str, styleable: Styleable, out: TextIO):
        # Index constants refer to array positions, so the order must not
        # depend on how the styleable happens to store its attributes.
        sorted_attributes: List[Tuple[ResourceId, ResourceNameRef]] = []
        for attr in styleable.entries:
            assert attr.id.is_valid(), f"no ID set for Styleable entry in {entry_name}"
            assert attr.name.is_valid(), f"no name set for Styleable entry in {entry_name}"
            sorted_attributes.append((attr.id, attr.name))
        sorted_attributes.sort(key=lambda pair: (pair[0], str(pair[1])))

        array_name = self.sanitizer.transform(entry_name)
        out.write(f"{MEMBER_INDENT}public static final int[] {array_name} = {{")

        attr_count = len(sorted_attributes)
        for i, (attr_id, _) in enumerate(sorted_attributes):
            if i % ATTRIBS_PER_LINE == 0:
                out.write(f"\n{ARRAY_ITEM_INDENT}")
            out.write(str(attr_id))
            if i != attr_count - 1:
                out.write(", ")
        out.write(f"\n{MEMBER_INDENT}}};\n")

        for i, (_, attr_name) in enumerate(sorted_attributes):
            # Attributes from other packages may share a plain name.
            if attr_name.package != self.table.package:
                index_name = self.sanitizer.join(entry_name, attr_name.package, attr_name.entry)
            else:
                index_name = self.sanitizer.join(entry_name, attr_name.entry)
            out.write(self._render_constant(index_name, i))

    def _render_constant(self, name: str, value: Any) -> str:
        return self.render_template(
            "constant.java.j2",
            {"final_modifier": self._final_modifier, "name": name, "value": value},
        )


def create_java_generator(
    table: ResourceTable, config: Optional[Dict[str, Any]] = None
) -> JavaClassGenerator:
    """Create a Java generator, merging ``config`` over the defaults."""
    from ...core.config import load_config

    return JavaClassGenerator(table, load_config("java", custom_config=config))
