"""
Go code generator module.

Generates Go structs with JSON tags from Hedwig message schemas.
"""

from .formatter import GoFormatter, format_go_source
from .generator import GoGenerator, create_go_generator
from .naming import GO_INITIALISMS, create_go_synthesizer, validate_go_package_name
from .types import GoType, GoTypeConfig, GoTypeMapper

__all__ = [
    "GoGenerator",
    "GoFormatter",
    "GoType",
    "GoTypeConfig",
    "GoTypeMapper",
    "GO_INITIALISMS",
    "create_go_generator",
    "create_go_synthesizer",
    "format_go_source",
    "validate_go_package_name",
]
