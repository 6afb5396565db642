"""
Core schema representation for code generation.

Parses a Hedwig schema document into a normalized graph of SchemaNode
objects that generators can work with consistently. References are
dereferenced up front, so a definition reached through several $refs is a
single node.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Set
from urllib.parse import unquote, urldefrag

from jsonschema import Draft4Validator, FormatChecker
from jsonschema.exceptions import SchemaError
from referencing import Registry
from referencing.exceptions import Unresolvable
from referencing.jsonschema import DRAFT4

from ...logging_config import get_logger
from .errors import BadVersionError, UnreadableInputError, UnsupportedReferenceError

logger = get_logger(__name__)

JS_TYPE_NULL = "null"

VERSION_PATTERN = re.compile(r"^(\d+)(\.\*)?$")


@dataclass(eq=False)
class SchemaNode:
    """
    A node of the normalized schema graph.

    Nodes compare and hash by identity: two structurally identical schemas
    in different places of the document are two different nodes.
    """

    pointer: str = ""
    types: List[str] = field(default_factory=list)
    properties: Dict[str, "SchemaNode"] = field(default_factory=dict, repr=False)
    items: Optional["SchemaNode"] = field(default=None, repr=False)
    ref: Optional["SchemaNode"] = field(default=None, repr=False)
    required: List[str] = field(default_factory=list)
    description: Optional[str] = None
    format: Optional[str] = None

    @property
    def target(self) -> "SchemaNode":
        """The referenced node for a $ref, otherwise the node itself."""
        return self.ref if self.ref is not None else self

    @property
    def null_allowed(self) -> bool:
        """Whether null is allowed, read from the referenced node if any."""
        return JS_TYPE_NULL in self.target.types

    @property
    def primary_type(self) -> Optional[str]:
        """The single non-null JSON type, or None when ambiguous."""
        return get_js_type(self.types)

    def is_required(self, prop: str) -> bool:
        """Check if a property is listed as required on this object."""
        return prop in self.required


def get_js_type(types: List[str]) -> Optional[str]:
    """
    Get the JSON Schema type given the list of types defined in a schema.

    A type list names one type, or two types where one of them is null.
    Any other shape is ambiguous and yields None.
    """
    if len(types) == 1:
        return types[0]
    if len(types) == 2:
        if types[0] == JS_TYPE_NULL:
            return types[1]
        if types[1] == JS_TYPE_NULL:
            return types[0]
    return None


def parse_major_version(version: str) -> int:
    """Extract the major version from a ``<major>.*`` version key."""
    match = VERSION_PATTERN.match(version)
    if not match:
        raise BadVersionError(f"failed to read schema: bad version: '{version}'")
    return int(match.group(1))


def escape_pointer_segment(segment: str) -> str:
    return segment.replace("~", "~0").replace("/", "~1")


def unescape_pointer_segment(segment: str) -> str:
    return segment.replace("~1", "/").replace("~0", "~")


@dataclass
class MessageSchema:
    """Schema of one version of one message type."""

    message_type: str
    version: str
    major_version: int
    locator: str
    node: SchemaNode

    @property
    def key(self) -> str:
        return f"{self.message_type}.{self.version}"


@dataclass
class SchemaDocument:
    """A parsed schema document."""

    doc_id: str
    messages: List[MessageSchema] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def message_types(self) -> List[str]:
        return sorted({message.message_type for message in self.messages})

    def major_versions(self, message_type: str) -> Set[int]:
        """Distinct major versions declared for a message type."""
        return {
            message.major_version
            for message in self.messages
            if message.message_type == message_type
        }


def _always_valid(instance: Any) -> bool:
    return True


class SchemaParser:
    """Builds SchemaNode graphs from a raw Hedwig schema document."""

    def __init__(self, custom_formats: Iterable[str] = ()):
        """
        Initialize parser.

        Args:
            custom_formats: Format names to accept without validation
        """
        self.format_checker = FormatChecker()
        for custom_format in custom_formats:
            self.format_checker.checks(custom_format)(_always_valid)

        self._nodes: Dict[str, SchemaNode] = {}
        self._warnings: List[str] = []
        self._base_uri = ""
        self._resolver = None

    def parse(self, document: Any) -> SchemaDocument:
        """
        Parse a schema document.

        Args:
            document: Decoded JSON of the schema file

        Returns:
            SchemaDocument with one MessageSchema per (message type, version),
            sorted by message type then version

        Raises:
            UnreadableInputError: If the document is not a Hedwig schema
            BadVersionError: If a version key has no integer major version
            UnsupportedReferenceError: If a $ref cannot be resolved in-document
        """
        if not isinstance(document, dict):
            raise UnreadableInputError("can't read schema: document must be a JSON object")

        doc_id = document.get("id")
        if not isinstance(doc_id, str) or not doc_id:
            raise UnreadableInputError("can't read schema: missing document id")

        schemas = document.get("schemas")
        if not isinstance(schemas, dict):
            raise UnreadableInputError("can't read schema: missing 'schemas' object")

        try:
            Draft4Validator.check_schema(document)
        except SchemaError as e:
            raise UnreadableInputError(f"can't read schema: {e.message}") from e

        self._nodes = {}
        self._warnings = []
        self._base_uri = doc_id.rstrip("#")
        registry = Registry().with_resource(
            uri=self._base_uri, resource=DRAFT4.create_resource(document)
        )
        self._resolver = registry.resolver(base_uri=self._base_uri)

        result = SchemaDocument(doc_id=doc_id)

        for message_type in sorted(schemas):
            version_schemas = schemas[message_type]
            if not isinstance(version_schemas, dict):
                raise UnreadableInputError(
                    f"can't read schema: versions of '{message_type}' must be an object"
                )

            for version in sorted(version_schemas):
                major_version = parse_major_version(version)
                try:
                    # Message schemas sit under a non-standard keyword the
                    # document-level check does not descend into.
                    Draft4Validator.check_schema(version_schemas[version])
                except SchemaError as e:
                    raise UnreadableInputError(
                        f"failed to read schema {message_type} v{version}: {e.message}"
                    ) from e
                pointer = "/".join(
                    [
                        "",
                        "schemas",
                        escape_pointer_segment(message_type),
                        escape_pointer_segment(version),
                    ]
                )
                node = self._build_node(version_schemas[version], pointer)
                locator = f"{doc_id}/schemas/{message_type}/{version}"
                logger.debug("Parsed message schema %s", locator)
                result.messages.append(
                    MessageSchema(
                        message_type=message_type,
                        version=version,
                        major_version=major_version,
                        locator=locator,
                        node=node,
                    )
                )

        result.warnings = list(self._warnings)
        logger.info(
            "Parsed %d message schemas from %s", len(result.messages), doc_id
        )
        return result

    def _build_node(self, contents: Any, pointer: str) -> SchemaNode:
        """Build (or reuse) the node for a schema object of the document."""
        # One node per document location, however the decoded objects are shared.
        if pointer in self._nodes:
            return self._nodes[pointer]

        if not isinstance(contents, dict):
            raise UnreadableInputError(
                f"can't read schema: schema at '#{pointer}' must be an object"
            )

        node = SchemaNode(pointer=pointer)
        self._nodes[pointer] = node

        ref = contents.get("$ref")
        if isinstance(ref, str):
            target = self._resolve_reference(ref)
            # Collapse chains so that ref always points at a concrete schema.
            node.ref = target.ref if target.ref is not None else target
            if node.ref is node:
                raise UnsupportedReferenceError(
                    f"can't handle schema reference: circular reference {ref}"
                )
            return node

        types = contents.get("type", [])
        node.types = [types] if isinstance(types, str) else list(types)
        node.required = list(contents.get("required", []))

        description = contents.get("description")
        if isinstance(description, str):
            node.description = description

        for name, child in contents.get("properties", {}).items():
            node.properties[name] = self._build_node(
                child, f"{pointer}/properties/{escape_pointer_segment(name)}"
            )

        # Tuple-form items (a list of schemas) have no single item type.
        items = contents.get("items")
        if isinstance(items, dict):
            node.items = self._build_node(items, f"{pointer}/items")

        schema_format = contents.get("format")
        if isinstance(schema_format, str):
            node.format = schema_format
            if schema_format not in self.format_checker.checkers:
                warning = (
                    f"Unknown format '{schema_format}' at '#{pointer}' "
                    "(register it as a custom format)"
                )
                logger.warning(warning)
                self._warnings.append(warning)

        return node

    def _resolve_reference(self, ref: str) -> SchemaNode:
        """Resolve a $ref to the node at its target location."""
        url, fragment = urldefrag(ref)
        if url and url.rstrip("#") != self._base_uri:
            raise UnsupportedReferenceError(f"can't handle schema reference: {ref}")

        pointer = unquote(fragment)
        if pointer and not pointer.startswith("/"):
            raise UnsupportedReferenceError(f"can't handle schema reference: {ref}")

        try:
            resolved = self._resolver.lookup(f"#{fragment}")
        except Unresolvable as e:
            raise UnsupportedReferenceError(
                f"can't handle schema reference: {ref}"
            ) from e

        return self._build_node(resolved.contents, pointer)
