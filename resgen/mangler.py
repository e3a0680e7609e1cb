"""
Entry name mangling.

When resources from several packages are merged into one table, imported
entries keep their origin package inside the name as ``package$name``.
"""

from typing import Optional, Tuple

MANGLE_SEPARATOR = "$"


def mangle_entry(package: str, name: str) -> str:
    """Encode the origin package into an entry name."""
    return f"{package}{MANGLE_SEPARATOR}{name}"


def is_mangled(name: str) -> bool:
    return MANGLE_SEPARATOR in name


def unmangle(name: str) -> Optional[Tuple[str, str]]:
    """
    Split a mangled entry name.

    Args:
        name: Entry name as stored in the table

    Returns:
        ``(plain_name, origin_package)``, or None if the name is not mangled
    """
    package, sep, plain_name = name.partition(MANGLE_SEPARATOR)
    if not sep:
        return None
    return plain_name, package
