"""
Language-specific code generators.
"""

from .java import JavaClassGenerator

__all__ = ["JavaClassGenerator"]
