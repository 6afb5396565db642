"""
Run-scoped registry of synthesized type names.

Maps schema nodes, by identity, to the name of the declaration emitted for
them. One registry is created per compilation run and passed explicitly to
everything that declares or resolves composite types.
"""

from typing import Dict, Optional, Set

from ...logging_config import get_logger
from .schema import SchemaNode

logger = get_logger(__name__)


class TypeRegistry:
    """Identity-keyed index from SchemaNode to TypeName."""

    def __init__(self):
        """Initialize empty registry."""
        self._names: Dict[SchemaNode, str] = {}
        self._used_names: Set[str] = set()

    def __contains__(self, node: SchemaNode) -> bool:
        return node in self._names

    def get(self, node: SchemaNode) -> Optional[str]:
        """Get the type name registered for a node, if any."""
        return self._names.get(node)

    def register(self, node: SchemaNode, name: str):
        """Record the declaration name of a node."""
        self._names[node] = name
        self._used_names.add(name)
        logger.debug("Registered %s for '#%s'", name, node.pointer)

    def claim(self, name: str) -> str:
        """
        Reserve a type name, making it unique within the run.

        Args:
            name: Desired name

        Returns:
            The name itself, or the name with a numeric suffix when another
            type already uses it
        """
        unique_name = name
        counter = 2
        while unique_name in self._used_names:
            unique_name = f"{name}{counter}"
            counter += 1

        if unique_name != name:
            logger.warning("Type name %s already in use, using %s", name, unique_name)

        self._used_names.add(unique_name)
        return unique_name
