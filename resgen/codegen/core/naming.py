"""
Naming utilities for safe code generation.

Resource names allow characters that target languages do not accept in
identifiers, and some resource names collide with reserved words.
"""

from typing import FrozenSet, Iterable, Optional

# Characters legal in a resource name but not in a generated identifier.
_REPLACED_CHARS = {ord("."): "_", ord("-"): "_"}


def transform(symbol: str) -> str:
    """Replace ``.`` and ``-`` with ``_``; every other character is kept."""
    return symbol.translate(_REPLACED_CHARS)


class NameSanitizer:
    """Checks and rewrites resource names for use as identifiers."""

    def __init__(self, reserved_words: Optional[Iterable[str]] = None):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Words that may not be used as generated names
        """
        self.reserved_words: FrozenSet[str] = frozenset(reserved_words or ())

    def is_valid_symbol(self, symbol: str) -> bool:
        """Exact, case-sensitive check against the reserved words."""
        return symbol not in self.reserved_words

    def transform(self, symbol: str) -> str:
        return transform(symbol)

    def join(self, *parts: str) -> str:
        """Transform each part and join them with underscores."""
        return "_".join(transform(part) for part in parts)
