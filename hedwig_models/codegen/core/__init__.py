"""
Core code generation components.

Provides the schema model, naming, registry and compilation pipeline used
by all language generators.
"""

from .compiler import CompiledDocument, MessageCompiler, generate_code
from .config import ConfigError, ConfigManager, GeneratorConfig, load_config
from .errors import (
    AmbiguousTypeError,
    BadVersionError,
    FormattingError,
    GeneratorError,
    UnknownCompositeError,
    UnreadableInputError,
    UnresolvableTypeError,
    UnsupportedReferenceError,
)
from .generator import CodeGenerator, GenerationResult
from .naming import NameSynthesizer, to_camel
from .registry import TypeRegistry
from .schema import MessageSchema, SchemaDocument, SchemaNode, SchemaParser
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
    # Compilation
    "CompiledDocument",
    "MessageCompiler",
    "TypeRegistry",
    # Schema model
    "MessageSchema",
    "SchemaDocument",
    "SchemaNode",
    "SchemaParser",
    # Naming utilities - language-agnostic
    "NameSynthesizer",
    "to_camel",
    # Errors
    "GeneratorError",
    "UnreadableInputError",
    "UnsupportedReferenceError",
    "BadVersionError",
    "AmbiguousTypeError",
    "UnresolvableTypeError",
    "UnknownCompositeError",
    "FormattingError",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
