"""
Go code generator implementation.

Generates Go structs with JSON tags for Hedwig message schemas.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from ....logging_config import get_logger
from ...core.compiler import CompiledDocument
from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.registry import TypeRegistry
from ...core.schema import MessageSchema, SchemaNode
from .formatter import GoFormatter
from .naming import create_go_synthesizer
from .types import GoTypeMapper, create_type_config

logger = get_logger(__name__)

GENERATED_HEADER = "// Code generated by hedwig-models. DO NOT EDIT."


class GoGenerator(CodeGenerator):
    """Code generator for Go structs with JSON tags."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Go generator with configuration."""
        super().__init__(config)

        # Initialize naming
        self.synthesizer = create_go_synthesizer(self.config.initialisms)

        # Initialize type system
        self.type_config = create_type_config(self.config)
        self.type_mapper = GoTypeMapper(self.type_config)

        self.formatter = GoFormatter()

    def get_template_directory(self) -> Path:
        """Return the Go templates directory."""
        return Path(__file__).parent / "templates"

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "go"

    @property
    def file_extension(self) -> str:
        """Return Go file extension."""
        return ".go"

    def type_name(
        self,
        path: Iterable[str],
        major_version: Optional[int] = None,
        disambiguate: bool = False,
    ) -> str:
        return self.synthesizer.synthesize(
            path, major_version=major_version, disambiguate_version=disambiguate
        )

    def field_name(self, prop: str) -> str:
        return self.synthesizer.field_name(prop)

    def resolve_type(
        self, node: SchemaNode, nullable: bool, registry: TypeRegistry
    ) -> str:
        return self.type_mapper.resolve(node, nullable, registry).name

    def build_declaration(
        self,
        name: str,
        docstring: str,
        node: SchemaNode,
        registry: TypeRegistry,
    ) -> str:
        """Generate the Go struct (or map type) declaration of an object node."""
        fields = self._generate_fields(node, registry)

        template_context = {
            "name": name,
            "docstring": docstring,
            "fields": fields,
            "unknown_type": self.type_config.unknown_type,
        }
        declaration = self.render_template("struct.go.j2", template_context)

        registry.register(node, name)
        return declaration.rstrip("\n")

    def _generate_fields(
        self, node: SchemaNode, registry: TypeRegistry
    ) -> List[Dict[str, Any]]:
        """Generate field data for the struct template, ordered by property name."""
        field_data_list = []

        for prop in sorted(node.properties):
            prop_node = node.properties[prop]
            field_data = {
                "name": self.field_name(prop),
                "type": self.resolve_type(prop_node, prop_node.null_allowed, registry),
                "key": prop,
                "optional": not node.is_required(prop),
                "comment": None,
            }

            description = (prop_node.description or "").strip()
            if self.config.add_comments and description:
                field_data["comment"] = description

            field_data_list.append(field_data)

        return field_data_list

    def build_factory(self, name: str) -> str:
        """Generate the NewData constructor of a message struct."""
        return self.render_template("factory.go.j2", {"name": name}).rstrip("\n")

    def type_docstring(self, name: str, node: SchemaNode) -> str:
        description = (node.description or "").strip()
        if not self.config.add_comments or not description:
            return ""
        return "\n".join(
            f"// {line}" for line in f"{name} - {description}".split("\n")
        )

    def message_docstring(self, name: str, message: MessageSchema) -> str:
        return (
            f"// {name} represents the data for Hedwig message "
            f"{message.message_type} v{message.version}"
        )

    def render_document(self, compiled: CompiledDocument) -> str:
        """Render the complete Go file."""
        context = {
            "generated_header": (
                GENERATED_HEADER if self.config.add_generated_header else None
            ),
            "package_name": compiled.package_name,
            "base_definitions": compiled.base_definitions,
            "message_definitions": compiled.message_definitions,
        }
        logger.debug(
            "Rendering package %s with %d declarations",
            compiled.package_name,
            len(compiled.base_definitions) + len(compiled.message_definitions),
        )
        return self.render_template("file.go.j2", context)

    def format_code(self, code: str) -> str:
        """Apply gofmt-style formatting."""
        return self.formatter.format(code)


def create_go_generator(config: Optional[GeneratorConfig] = None) -> GoGenerator:
    """Create a Go generator with default configuration."""
    return GoGenerator(config or GeneratorConfig())
