"""
Go-specific type system for code generation.

Maps schema nodes to Go types: primitives by JSON type, objects by the
name registered for them, arrays as slices and nullable primitives as
pointers.
"""

from dataclasses import dataclass

from ...core.errors import (
    AmbiguousTypeError,
    UnknownCompositeError,
    UnresolvableTypeError,
)
from ...core.registry import TypeRegistry
from ...core.schema import JS_TYPE_NULL, SchemaNode


@dataclass(frozen=True)
class GoType:
    """Immutable representation of a resolved Go type."""

    name: str  # The Go type expression (e.g., "*string", "[]Vehicle")
    is_pointer: bool = False

    def as_pointer(self) -> "GoType":
        """Return a pointer version of this type."""
        if self.is_pointer:
            return self  # Already a pointer

        return GoType(name=f"*{self.name}", is_pointer=True)

    def __str__(self) -> str:
        return self.name


@dataclass
class GoTypeConfig:
    """Configuration for Go type mapping behavior."""

    # Numeric type preferences
    int_type: str = "int"
    float_type: str = "float64"

    # Interface types
    unknown_type: str = "interface{}"  # or "any" for Go 1.18+


class GoTypeMapper:
    """Resolves schema nodes to Go types."""

    def __init__(self, config: GoTypeConfig = None):
        self.config = config or GoTypeConfig()
        self._primitives = {
            "integer": self.config.int_type,
            "string": "string",
            "boolean": "bool",
            "number": self.config.float_type,
        }

    def resolve(
        self, node: SchemaNode, nullable: bool, registry: TypeRegistry
    ) -> GoType:
        """
        Resolve the Go type of a schema node.

        Args:
            node: Schema node, possibly a reference
            nullable: Whether null is an allowed value at this position
            registry: Registry holding the names of declared object types

        Returns:
            Resolved GoType

        Raises:
            AmbiguousTypeError: If the node does not name a single type
            UnresolvableTypeError: If the type is null alone or unknown
            UnknownCompositeError: If an object type was not declared yet
        """
        node = node.target

        js_type = node.primary_type
        if js_type is None:
            raise AmbiguousTypeError(
                f"unable to determine type for schema '#{node.pointer}': {node.types}"
            )

        if js_type == JS_TYPE_NULL:
            raise UnresolvableTypeError(
                f"unable to determine type for schema '#{node.pointer}': {node.types}"
            )

        if js_type == "object":
            name = registry.get(node)
            if name is None:
                raise UnknownCompositeError(
                    f"unable to determine type for schema '#{node.pointer}': "
                    "object type is not declared"
                )
            # Object types are never wrapped in a pointer.
            return GoType(name=name)

        if js_type == "array":
            return self._resolve_array(node, registry)

        if js_type not in self._primitives:
            raise UnresolvableTypeError(f"unknown primitive type: {js_type}")

        go_type = GoType(name=self._primitives[js_type])
        if nullable:
            return go_type.as_pointer()
        return go_type

    def _resolve_array(self, node: SchemaNode, registry: TypeRegistry) -> GoType:
        if node.items is None:
            return GoType(name=f"[]{self.config.unknown_type}")

        # Array elements are never independently nullable.
        item_type = self.resolve(node.items, False, registry)
        return GoType(name=f"[]{item_type.name}")


def create_type_config(config) -> GoTypeConfig:
    """Build the Go type configuration from a GeneratorConfig."""
    return GoTypeConfig(
        int_type=config.int_type,
        float_type=config.float_type,
        unknown_type=config.unknown_type,
    )
