"""Shared fixtures for the generator tests."""

from pathlib import Path

import pytest

from hedwig_models.codegen.core.schema import SchemaParser

FIXTURES_DIR = Path(__file__).parent / "fixtures"

DOCUMENT_ID = "https://hedwig.automatic.com/schema"


def make_document(schemas, definitions=None):
    """Build a schema document around message schemas."""
    document = {
        "id": DOCUMENT_ID,
        "$schema": "http://json-schema.org/draft-04/schema#",
        "schemas": schemas,
    }
    if definitions is not None:
        document["definitions"] = definitions
    return document


def message(properties, required=None, **extra):
    """Build an object message schema."""
    schema = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    schema.update(extra)
    return schema


@pytest.fixture
def parse():
    """Parse a document with a fresh parser."""

    def _parse(document, custom_formats=()):
        return SchemaParser(custom_formats).parse(document)

    return _parse
