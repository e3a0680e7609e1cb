"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, TextIO

from ...logging_config import get_logger
from ...table import ResourceTable
from .config import GeneratorConfig
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class InvalidSymbolError(GeneratorError):
    """A resource name collides with a reserved word of the target language."""

    def __init__(self, resource_name: str):
        super().__init__(f"invalid symbol name '{resource_name}'")
        self.resource_name = resource_name


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, table: ResourceTable, config: Optional[GeneratorConfig] = None):
        """Initialize generator with a table and optional configuration."""
        self.table = table
        self.config = config or GeneratorConfig()
        self._template_engine = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.java')."""
        pass

    def get_templates(self) -> Dict[str, str]:
        """
        Return the in-memory templates for this generator.

        Subclasses override this to provide their templates.
        """
        return {}

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._template_engine = create_template_engine(self.get_templates())
        return self._template_engine

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        return self.template_engine.render_template(template_name, context)

    @abstractmethod
    def generate(self, package: str, out: TextIO) -> "GenerationResult":
        """
        Stream generated code for ``package`` into ``out``.

        Args:
            package: Package the generated code is declared in
            out: Text sink; written to incrementally

        Returns:
            GenerationResult; on failure the sink holds partial output
        """
        pass


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(self, code: str = "", metadata: Dict[str, Any] = None):
        """
        Initialize generation result.

        Args:
            code: Generated code, when it was collected into a string
            metadata: Additional metadata about generation
        """
        self.code = code
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(
        cls, message: str, exception: Exception = None, metadata: Dict[str, Any] = None
    ) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(metadata=metadata)
        result.success = False
        result.error_message = message
        result.exception = exception
        return result

    def __bool__(self) -> bool:
        return self.success

    def __repr__(self) -> str:
        if self.success:
            return f"GenerationResult(success=True, metadata={self.metadata!r})"
        return f"GenerationResult(success=False, error_message={self.error_message!r})"


def generate_code(generator: CodeGenerator, package: str, out: TextIO) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Assertion failures are bugs in whoever built the table and are not
    converted.

    Args:
        generator: Code generator instance
        package: Target package
        out: Text sink

    Returns:
        GenerationResult with metadata, or a failed result
    """
    try:
        return generator.generate(package, out)
    except AssertionError:
        raise
    except Exception as e:
        logger.error(f"Code generation for {package} failed: {e}")
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
