"""
Hedwig Models Generator

Generates Go models for publishing and receiving Hedwig messages
from a versioned JSON Schema document.
"""

__version__ = "0.1.0"

from .codegen import (
    GenerationResult,
    GeneratorConfig,
    generate_from_document,
    generate_models,
)

__all__ = [
    "GenerationResult",
    "GeneratorConfig",
    "generate_from_document",
    "generate_models",
    "__version__",
]
