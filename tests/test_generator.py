"""Tests for the Go declaration builder."""

import pytest

from hedwig_models.codegen.core.compiler import CompiledDocument
from hedwig_models.codegen.core.config import GeneratorConfig
from hedwig_models.codegen.core.errors import AmbiguousTypeError, UnknownCompositeError
from hedwig_models.codegen.core.registry import TypeRegistry
from hedwig_models.codegen.core.schema import MessageSchema, SchemaNode
from hedwig_models.codegen.languages.go import GoGenerator


@pytest.fixture
def generator():
    return GoGenerator()


@pytest.fixture
def registry():
    return TypeRegistry()


def object_node(properties, required=(), description=None):
    return SchemaNode(
        types=["object"],
        properties=properties,
        required=list(required),
        description=description,
    )


class TestGeneratorBasics:
    """Test generator properties and templates."""

    def test_language(self, generator):
        assert generator.language_name == "go"
        assert generator.file_extension == ".go"

    def test_templates_directory(self, generator):
        template_dir = generator.get_template_directory()

        for template in ("file.go.j2", "struct.go.j2", "factory.go.j2"):
            assert (template_dir / template).is_file()

    def test_type_name(self, generator):
        assert generator.type_name(["trip_created"]) == "TripCreated"
        assert generator.type_name(["trip_created"], 3, disambiguate=True) == "TripCreatedV3"

    def test_field_name(self, generator):
        assert generator.field_name("vehicle_id") == "VehicleID"


class TestBuildDeclaration:
    """Test struct declarations."""

    def test_struct(self, generator, registry):
        node = object_node(
            {
                "vin": SchemaNode(types=["string"]),
                "user_id": SchemaNode(types=["string", "null"]),
            },
            required=["user_id"],
        )

        declaration = generator.build_declaration("TripCreated", "", node, registry)

        assert declaration.splitlines() == [
            "type TripCreated struct {",
            '\tUserID *string `json:"user_id"`',
            '\tVin string `json:"vin,omitempty"`',
            "}",
        ]

    def test_registers_node(self, generator, registry):
        node = object_node({"id": SchemaNode(types=["string"])})

        generator.build_declaration("Vehicle", "", node, registry)

        assert registry.get(node) == "Vehicle"

    def test_object_without_properties(self, generator, registry):
        node = object_node({})

        declaration = generator.build_declaration("Metadata", "", node, registry)

        assert declaration == "type Metadata map[string]interface{}"

    def test_object_without_properties_any(self, registry):
        generator = GoGenerator(GeneratorConfig(unknown_type="any"))

        declaration = generator.build_declaration("Metadata", "", object_node({}), registry)

        assert declaration == "type Metadata map[string]any"

    def test_docstring(self, generator, registry):
        node = object_node({"id": SchemaNode(types=["string"])})

        declaration = generator.build_declaration(
            "Vehicle", "// Vehicle - A vehicle", node, registry
        )

        assert declaration.splitlines()[:2] == ["// Vehicle - A vehicle", "type Vehicle struct {"]

    def test_field_comments(self, generator, registry):
        node = object_node(
            {
                "a": SchemaNode(types=["string"]),
                "b": SchemaNode(types=["string"], description="  Second\nfield  "),
                "c": SchemaNode(types=["string"], description="Third"),
            }
        )

        declaration = generator.build_declaration("T", "", node, registry)

        assert declaration.splitlines() == [
            "type T struct {",
            '\tA string `json:"a,omitempty"`',
            "",
            "\t// B - Second",
            "\t// field",
            '\tB string `json:"b,omitempty"`',
            "",
            "\t// C - Third",
            '\tC string `json:"c,omitempty"`',
            "}",
        ]

    def test_no_blank_line_before_first_commented_field(self, generator, registry):
        node = object_node({"a": SchemaNode(types=["string"], description="First")})

        declaration = generator.build_declaration("T", "", node, registry)

        assert declaration.splitlines()[1] == "\t// A - First"

    def test_comments_disabled(self, registry):
        generator = GoGenerator(GeneratorConfig(add_comments=False))
        node = object_node({"a": SchemaNode(types=["string"], description="First")})

        declaration = generator.build_declaration("T", "", node, registry)

        assert "//" not in declaration

    def test_unregistered_composite_fails(self, generator, registry):
        node = object_node({"vehicle": object_node({})})

        with pytest.raises(UnknownCompositeError):
            generator.build_declaration("T", "", node, registry)

        assert node not in registry

    def test_ambiguous_field_fails(self, generator, registry):
        node = object_node({"value": SchemaNode(types=["string", "integer"])})

        with pytest.raises(AmbiguousTypeError):
            generator.build_declaration("T", "", node, registry)


class TestDocstringsAndFactories:
    """Test comment and factory generation."""

    def test_factory(self, generator):
        assert generator.build_factory("TripCreated").splitlines() == [
            "// NewTripCreatedData creates a new TripCreated struct",
            "// this method can be used as NewData when registering callback",
            "func NewTripCreatedData() interface{} { return new(TripCreated) }",
        ]

    def test_message_docstring(self, generator):
        msg = MessageSchema(
            message_type="trip_created",
            version="1.*",
            major_version=1,
            locator="",
            node=SchemaNode(),
        )

        assert generator.message_docstring("TripCreated", msg) == (
            "// TripCreated represents the data for Hedwig message trip_created v1.*"
        )

    def test_type_docstring(self, generator):
        node = SchemaNode(description=" A vehicle\nowned by the user ")

        assert generator.type_docstring("Vehicle", node) == (
            "// Vehicle - A vehicle\n// owned by the user"
        )

    def test_type_docstring_without_description(self, generator):
        assert generator.type_docstring("Vehicle", SchemaNode()) == ""
        assert generator.type_docstring("Vehicle", SchemaNode(description="   ")) == ""

    def test_type_docstring_disabled(self):
        generator = GoGenerator(GeneratorConfig(add_comments=False))

        assert generator.type_docstring("Vehicle", SchemaNode(description="x")) == ""


class TestRenderDocument:
    """Test file assembly."""

    def test_empty_document(self, generator):
        code = generator.format_code(
            generator.render_document(CompiledDocument(package_name="hedwig"))
        )

        assert code == "\n".join(
            [
                "package hedwig",
                "",
                "/**** BEGIN base definitions ****/",
                "",
                "/**** END base definitions ****/",
                "",
                "/**** BEGIN schema definitions ****/",
                "",
                "/**** END schema definitions ****/",
                "",
            ]
        )

    def test_generated_header(self):
        generator = GoGenerator(GeneratorConfig(add_generated_header=True))

        code = generator.render_document(CompiledDocument(package_name="models"))

        assert code.startswith(
            "// Code generated by hedwig-models. DO NOT EDIT.\n\npackage models\n"
        )

    def test_declarations_are_separated_by_blank_lines(self, generator):
        compiled = CompiledDocument(
            package_name="hedwig",
            base_definitions=["type A map[string]interface{}", "type B map[string]interface{}"],
        )

        code = generator.render_document(compiled)

        assert (
            "type A map[string]interface{}\n\ntype B map[string]interface{}\n\n"
            "/**** END base definitions ****/"
        ) in code
