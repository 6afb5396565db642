"""
Command-line interface for the Hedwig models generator.

Reads a schema document from a file or URL and writes the generated Go
models to a file or to stdout. Diagnostics go to stderr so the generated
code can be piped.
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from . import __version__
from .codegen import GeneratorConfig, generate_from_document
from .codegen.core.config import ConfigError, get_config_manager, load_config
from .codegen.core.errors import GeneratorError
from .codegen.languages.go import validate_go_package_name
from .logging_config import get_logger, setup_logging
from .utils import load_schema

logger = get_logger(__name__)

# Initialize rich console
console = Console(stderr=True)

VERBOSITY_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="hedwig-models",
        description="Generate Go models for Hedwig messages from a JSON Schema document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  hedwig-models --schema-file schema.json --output-file models.go
  hedwig-models --schema-file schema.json --module events --custom-format vin
  hedwig-models --schema-url https://example.com/schema.json > models.go
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        "--schema-file", metavar="FILE", help="Path to the JSON schema document"
    )
    input_group.add_argument(
        "--schema-url", metavar="URL", help="URL to fetch the JSON schema document from"
    )

    parser.add_argument(
        "--module",
        "--package-name",
        dest="package_name",
        metavar="NAME",
        help="Go package name for the generated file (default: hedwig)",
    )

    parser.add_argument(
        "--output-file",
        "-o",
        metavar="FILE",
        help="Output file for generated code (default: stdout)",
    )

    parser.add_argument(
        "--custom-format",
        dest="custom_formats",
        action="append",
        metavar="FORMAT",
        help="Additional custom format accepted in schemas (repeatable)",
    )

    parser.add_argument(
        "--config", metavar="FILE", help="JSON configuration file for code generation"
    )

    # Output options
    output_group = parser.add_argument_group("output options")
    output_group.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't generate comments from schema descriptions",
    )
    output_group.add_argument(
        "--generated-header",
        action="store_true",
        help="Start the file with a 'Code generated ... DO NOT EDIT.' comment",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Increase log verbosity (-v for info and metadata, -vv for debug)",
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from CLI arguments."""
    config = load_config(config_file=args.config)

    overrides = {}
    if args.package_name:
        overrides["package_name"] = args.package_name

    if args.output_file:
        overrides["output_file"] = args.output_file

    if args.custom_formats:
        overrides["custom_formats"] = list(config.custom_formats) + args.custom_formats

    if args.no_comments:
        overrides["add_comments"] = False

    if args.generated_header:
        overrides["add_generated_header"] = True

    return replace(config, **overrides)


def _print_metadata(metadata: dict):
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )

    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), escape(str(value)))

    console.print()
    console.print(metadata_table)


def _print_warnings(warnings: List[str]):
    console.print("[yellow]⚠️  Warnings:[/yellow]")
    for warning in warnings:
        console.print(f"  [yellow]•[/yellow] {escape(warning)}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the generator.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(VERBOSITY_LEVELS.get(args.verbose, logging.DEBUG), console=console)

    try:
        config = _build_config(args)
        config_warnings = get_config_manager().validate_config(config)
        if config.package_name.isidentifier():
            config_warnings.extend(validate_go_package_name(config.package_name))
        for warning in config_warnings:
            console.print(f"[yellow]⚠️  {escape(warning)}[/yellow]")

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            task = progress.add_task("[cyan]Loading schema...", total=None)
            source, document = load_schema(
                file_path=args.schema_file, url=args.schema_url
            )

            progress.update(task, description="[green]Generating Go models...")
            result = generate_from_document(document, config)

        if not result.success:
            console.print(f"[red]✗ Error:[/red] {escape(result.error_message)}")
            return 1

        if result.warnings:
            _print_warnings(result.warnings)

        if config.output_file:
            output_path = Path(config.output_file)
            output_path.write_text(result.code, encoding="utf-8")
            console.print(
                f"[green]✓[/green] Generated Go models for {escape(source)} "
                f"saved to [cyan]{escape(str(output_path))}[/cyan]"
            )
        else:
            sys.stdout.write(result.code)
            sys.stdout.flush()

        if args.verbose and result.metadata:
            _print_metadata(result.metadata)

        return 0

    except (GeneratorError, ConfigError) as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1
    except OSError as e:
        console.print(f"[red]✗ Error:[/red] unable to write to output path: {escape(str(e))}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
