"""
Base generator interface for all code generation targets.

Defines the contract that language generators implement so the message
compiler can resolve types and build declarations without knowing the
target language.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

from .config import GeneratorConfig
from .errors import GeneratorError
from .registry import TypeRegistry
from .schema import MessageSchema, SchemaNode
from .templates import TemplateEngine, create_template_engine

if TYPE_CHECKING:
    from .compiler import CompiledDocument

__all__ = ["CodeGenerator", "GenerationResult", "GeneratorError"]


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self.template_engine: TemplateEngine = create_template_engine(
            self.get_template_directory()
        )

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'go')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.go')."""
        pass

    @abstractmethod
    def get_template_directory(self) -> Path:
        """Return the directory containing templates for this generator."""
        pass

    # Naming

    @abstractmethod
    def type_name(
        self,
        path: Iterable[str],
        major_version: Optional[int] = None,
        disambiguate: bool = False,
    ) -> str:
        """
        Synthesize a type name from a schema path.

        Args:
            path: Path segments (message name or definition location, then
                property names)
            major_version: Major version of the owning message
            disambiguate: Append the major version to the name

        Returns:
            Type identifier
        """
        pass

    @abstractmethod
    def field_name(self, prop: str) -> str:
        """Synthesize a field identifier from a property name."""
        pass

    # Types and declarations

    @abstractmethod
    def resolve_type(
        self, node: SchemaNode, nullable: bool, registry: TypeRegistry
    ) -> str:
        """
        Resolve a schema node to a target language type expression.

        Raises:
            AmbiguousTypeError, UnresolvableTypeError, UnknownCompositeError
        """
        pass

    @abstractmethod
    def build_declaration(
        self,
        name: str,
        docstring: str,
        node: SchemaNode,
        registry: TypeRegistry,
    ) -> str:
        """
        Build the declaration for an object node and register its name.

        Args:
            name: Type name to declare
            docstring: Comment block placed above the declaration (may be empty)
            node: Object schema node
            registry: Run registry; ``node`` is registered on success

        Returns:
            Declaration source text
        """
        pass

    @abstractmethod
    def build_factory(self, name: str) -> str:
        """Build the constructor declaration of a message type."""
        pass

    @abstractmethod
    def type_docstring(self, name: str, node: SchemaNode) -> str:
        """Docstring for a nested or definition type."""
        pass

    @abstractmethod
    def message_docstring(self, name: str, message: MessageSchema) -> str:
        """Docstring for a message type."""
        pass

    @abstractmethod
    def render_document(self, compiled: "CompiledDocument") -> str:
        """Assemble all declarations into one source file."""
        pass

    @abstractmethod
    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code

        Raises:
            FormattingError: If the code is not well-formed
        """
        pass

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template file name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result
