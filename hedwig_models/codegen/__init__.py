"""
Hedwig Models Code Generation Module

Generates Go models from a Hedwig JSON Schema document.
"""

from pathlib import Path
from typing import Any, Iterable, Optional

from ..logging_config import get_logger
from .core.compiler import CompiledDocument, MessageCompiler, generate_code
from .core.config import ConfigManager, GeneratorConfig, load_config
from .core.errors import GeneratorError
from .core.generator import CodeGenerator, GenerationResult
from .core.schema import SchemaDocument, SchemaParser
from .languages.go import GoGenerator, create_go_generator

logger = get_logger(__name__)


def generate_from_document(
    document: Any, config: Optional[GeneratorConfig] = None
) -> GenerationResult:
    """
    Generate Go models from a decoded schema document.

    Args:
        document: Decoded JSON of the schema document
        config: Generator configuration (defaults when None)

    Returns:
        GenerationResult with generated code, or a failed result
    """
    config = config or GeneratorConfig()

    try:
        parsed = SchemaParser(config.custom_formats).parse(document)
    except GeneratorError as e:
        logger.debug("Schema parsing failed", exc_info=True)
        return GenerationResult.error(str(e), exception=e)

    generator = create_go_generator(config)
    return generate_code(generator, parsed)


def generate_models(
    schema_file=None,
    package_name: str = "hedwig",
    output_file=None,
    custom_formats: Iterable[str] = (),
    schema_url: Optional[str] = None,
    config: Optional[GeneratorConfig] = None,
) -> str:
    """
    Generate Go models for a schema file or URL.

    Args:
        schema_file: Path to the schema document
        package_name: Go package of the generated file
        output_file: Path to write the code to (not written when None)
        custom_formats: Formats to accept in addition to the standard ones
        schema_url: URL of the schema document, instead of schema_file
        config: Full configuration; overrides the keyword options above

    Returns:
        Generated Go source

    Raises:
        GeneratorError: If loading, compiling or formatting fails
    """
    from ..utils import load_schema

    if config is None:
        config = GeneratorConfig(
            package_name=package_name,
            output_file=str(output_file) if output_file else None,
            custom_formats=list(custom_formats),
        )

    _, document = load_schema(file_path=schema_file, url=schema_url)

    result = generate_from_document(document, config)
    if not result.success:
        raise result.exception

    if config.output_file:
        output_path = Path(config.output_file)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            raise GeneratorError(f"unable to write to output path: {e}") from e
        logger.info("Wrote Go models to %s", output_path)

    return result.code


__all__ = [
    "CodeGenerator",
    "CompiledDocument",
    "ConfigManager",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "GoGenerator",
    "MessageCompiler",
    "SchemaDocument",
    "SchemaParser",
    "generate_code",
    "generate_from_document",
    "generate_models",
    "load_config",
]
