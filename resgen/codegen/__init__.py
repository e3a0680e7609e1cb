"""
Resource symbol code generation.

Generates R classes from a compiled resource table, one per package.
"""

import io
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..logging_config import get_logger
from ..mangler import unmangle
from ..table import ResourceTable
from .core.generator import CodeGenerator, GenerationResult, GeneratorError, generate_code
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .languages.java import JavaClassGenerator

logger = get_logger(__name__)

ConfigLike = Optional[Union[GeneratorConfig, Dict[str, Any]]]


def _resolve_config(config: ConfigLike) -> GeneratorConfig:
    if isinstance(config, GeneratorConfig):
        return config
    if config is None or isinstance(config, dict):
        return load_config("java", custom_config=config)
    raise ConfigError(f"Invalid config type: {type(config)}")


def collect_packages(table: ResourceTable) -> List[str]:
    """
    List every package an R class can be generated for.

    That is the table's own package followed by the origin packages found
    in mangled entry names, sorted.
    """
    foreign = set()
    for table_type in table:
        for entry in table_type.entries:
            unmangled = unmangle(entry.name)
            if unmangled is not None:
                foreign.add(unmangled[1])
    foreign.discard(table.package)
    return [table.package] + sorted(foreign)


def generate_r_class(
    table: ResourceTable, package: Optional[str] = None, config: ConfigLike = None
) -> GenerationResult:
    """
    Generate an R class into a string.

    Args:
        table: Resource table to render
        package: Target package (default: config.package_name, then the table's package)
        config: GeneratorConfig or dict of overrides

    Returns:
        GenerationResult whose ``code`` holds the class source. On failure
        ``code`` holds the partial output.
    """
    final_config = _resolve_config(config)
    package = package or final_config.package_name or table.package

    generator = JavaClassGenerator(table, final_config)
    buffer = io.StringIO()
    result = generate_code(generator, package, buffer)
    result.code = buffer.getvalue()
    return result


def r_class_path(output_dir: Union[str, Path], package: str) -> Path:
    """Location of a package's R.java below a source root."""
    return Path(output_dir).joinpath(*package.split(".")) / "R.java"


def write_r_class(
    table: ResourceTable,
    output_dir: Union[str, Path],
    package: Optional[str] = None,
    config: ConfigLike = None,
) -> GenerationResult:
    """
    Generate an R class and write it to ``<output_dir>/<package path>/R.java``.

    A failed generation leaves no file behind.
    """
    final_config = _resolve_config(config)
    package = package or final_config.package_name or table.package
    path = r_class_path(output_dir, package)
    path.parent.mkdir(parents=True, exist_ok=True)

    generator = JavaClassGenerator(table, final_config)
    try:
        with path.open("w", encoding="utf-8") as out:
            result = generate_code(generator, package, out)
    except BaseException:
        logger.warning(f"Removing partial output {path}")
        path.unlink(missing_ok=True)
        raise

    if not result.success:
        logger.warning(f"Removing partial output {path}")
        path.unlink()
    else:
        result.metadata["output_file"] = str(path)
        logger.info(f"Wrote {path}")
    return result


__version__ = "0.1.0"

__all__ = [
    "CodeGenerator",
    "ConfigManager",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "JavaClassGenerator",
    "collect_packages",
    "generate_code",
    "generate_r_class",
    "load_config",
    "r_class_path",
    "write_r_class",
]
