"""
Two-phase compilation of a schema document into declarations.

Phase 1 walks every message schema and declares, children first, each
object type reachable from it. Phase 2 declares the message types
themselves. Both phases share one TypeRegistry, so a definition reached
from several messages is declared once.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Set

from ...logging_config import get_logger
from .errors import (
    GeneratorError,
    UnknownCompositeError,
    UnresolvableTypeError,
    UnsupportedReferenceError,
)
from .generator import CodeGenerator, GenerationResult
from .registry import TypeRegistry
from .schema import (
    MessageSchema,
    SchemaDocument,
    SchemaNode,
    unescape_pointer_segment,
)

logger = get_logger(__name__)

DEFINITIONS_PREFIX = "/definitions/"
LIST_SEGMENT = "list"


@dataclass
class CompiledDocument:
    """Ordered declarations of one compiled schema document."""

    package_name: str
    doc_id: str = ""
    base_definitions: List[str] = field(default_factory=list)
    message_definitions: List[str] = field(default_factory=list)
    message_names: Dict[str, str] = field(default_factory=dict)


class _CompileState:
    """Mutable state of a single compilation run."""

    def __init__(self, compiled: CompiledDocument):
        self.compiled = compiled
        self.registry = TypeRegistry()
        self.visiting: Set[SchemaNode] = set()


def definition_path(node: SchemaNode) -> List[str]:
    """
    Name segments of a referenced definition, taken from its location.

    ``#/definitions/vehicle/1.0`` gives ``["vehicle", "1.0"]``.
    """
    if not node.pointer.startswith(DEFINITIONS_PREFIX):
        raise UnsupportedReferenceError(
            f"can't handle schema reference: #{node.pointer}"
        )
    return [
        unescape_pointer_segment(segment)
        for segment in node.pointer[len(DEFINITIONS_PREFIX):].split("/")
    ]


class MessageCompiler:
    """Compiles all messages of a document with a language generator."""

    def __init__(self, generator: CodeGenerator):
        self.generator = generator

    def compile(self, document: SchemaDocument) -> CompiledDocument:
        """
        Compile a parsed document.

        Args:
            document: Parsed schema document

        Returns:
            CompiledDocument with base and message declarations in emission order

        Raises:
            GeneratorError: On the first failure; nothing partial is returned
        """
        compiled = CompiledDocument(
            package_name=self.generator.config.package_name, doc_id=document.doc_id
        )
        state = _CompileState(compiled)

        disambiguate = {
            message_type: len(document.major_versions(message_type)) > 1
            for message_type in document.message_types
        }

        # Message names take precedence over names derived from definitions.
        for message in document.messages:
            name = self.generator.type_name(
                [message.message_type],
                major_version=message.major_version,
                disambiguate=disambiguate[message.message_type],
            )
            compiled.message_names[message.key] = state.registry.claim(name)

        for message in document.messages:
            self._discover_message(state, message)

        for message in document.messages:
            self._declare_message(state, message)

        logger.info(
            "Compiled %d messages with %d base definitions",
            len(compiled.message_definitions) // 2,
            len(compiled.base_definitions),
        )
        return compiled

    def _discover_message(self, state: _CompileState, message: MessageSchema):
        node = message.node
        if node.types and node.types != ["object"]:
            raise UnresolvableTypeError(
                f"invalid msg schema with type: {node.types} ({message.locator})"
            )

        name = state.compiled.message_names[message.key]
        logger.debug("Discovering types of %s as %s", message.locator, name)
        for prop in sorted(node.properties):
            self._discover(state, [name, prop], node.properties[prop])

    def _discover(self, state: _CompileState, names: List[str], node: SchemaNode):
        """Declare the object types reachable from a node, children first."""
        if node.ref is not None:
            names = definition_path(node.ref)
            node = node.ref

        if node in state.registry:
            return

        js_type = node.primary_type
        if js_type == "object":
            if node in state.visiting:
                raise UnknownCompositeError(
                    f"circular reference to '#{node.pointer}' can't be declared"
                )
            state.visiting.add(node)
            for prop in sorted(node.properties):
                self._discover(state, names + [prop], node.properties[prop])
            state.visiting.discard(node)

            name = state.registry.claim(self.generator.type_name(names))
            docstring = self.generator.type_docstring(name, node)
            state.compiled.base_definitions.append(
                self.generator.build_declaration(name, docstring, node, state.registry)
            )
        elif js_type == "array" and node.items is not None:
            self._discover(state, names + [LIST_SEGMENT], node.items)

    def _declare_message(self, state: _CompileState, message: MessageSchema):
        name = state.compiled.message_names[message.key]
        docstring = self.generator.message_docstring(name, message)
        state.compiled.message_definitions.append(
            self.generator.build_declaration(
                name, docstring, message.node, state.registry
            )
        )
        state.compiled.message_definitions.append(self.generator.build_factory(name))


def generate_code(
    generator: CodeGenerator, document: SchemaDocument
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        document: Parsed schema document

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        compiled = MessageCompiler(generator).compile(document)

        code = generator.render_document(compiled)

        formatted_code = generator.format_code(code)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "package_name": compiled.package_name,
            "document_id": compiled.doc_id,
            "message_count": len(compiled.message_names),
            "definition_count": len(compiled.base_definitions),
            "message_types": document.message_types,
        }

        return GenerationResult(formatted_code, list(document.warnings), metadata)

    except GeneratorError as e:
        logger.debug("Code generation failed", exc_info=True)
        return GenerationResult.error(str(e), exception=e)
