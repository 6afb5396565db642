"""Tests for type and field name synthesis."""

import pytest

from hedwig_models.codegen.core.naming import NameSynthesizer, to_camel
from hedwig_models.codegen.languages.go.naming import (
    GO_INITIALISMS,
    create_go_synthesizer,
    is_go_identifier,
    validate_go_package_name,
)


class TestToCamel:
    """Test camel case conversion."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("trip_created", "TripCreated"),
            ("vehicle_1.0", "Vehicle10"),
            ("user-id", "UserId"),
            ("foo bar", "FooBar"),
            ("abc123def", "Abc123Def"),
            ("TripCreated", "TripCreated"),
            ("device.update", "DeviceUpdate"),
            ("  padded_name  ", "PaddedName"),
            ("", ""),
        ],
    )
    def test_conversion(self, value, expected):
        assert to_camel(value) == expected

    def test_other_characters_are_dropped(self):
        assert to_camel("user$name") == "Username"


class TestNameSynthesizer:
    """Test synthesis of type names from schema paths."""

    def test_joins_path_segments(self):
        synthesizer = create_go_synthesizer()

        assert synthesizer.synthesize(["TripCreated", "vehicle"]) == "TripCreatedVehicle"

    def test_array_segment(self):
        synthesizer = create_go_synthesizer()

        assert (
            synthesizer.synthesize(["TripCreated", "stops", "list"])
            == "TripCreatedStopsList"
        )

    def test_versioned_definition_path(self):
        synthesizer = create_go_synthesizer()

        assert synthesizer.synthesize(["vehicle", "1.0"]) == "Vehicle10"

    def test_trailing_initialism_is_upper_cased(self):
        synthesizer = create_go_synthesizer()

        assert synthesizer.synthesize(["callback", "url"]) == "CallbackURL"
        assert synthesizer.synthesize(["trip", "uuid"]) == "TripUUID"

    def test_only_suffix_is_rewritten(self):
        synthesizer = create_go_synthesizer()

        assert synthesizer.synthesize(["url", "settings"]) == "UrlSettings"

    def test_initialism_rewritten_once(self):
        synthesizer = create_go_synthesizer()

        assert synthesizer.synthesize(["api", "id"]) == "ApiID"

    def test_version_suffix(self):
        synthesizer = create_go_synthesizer()

        name = synthesizer.synthesize(
            ["trip_created"], major_version=2, disambiguate_version=True
        )

        assert name == "TripCreatedV2"

    def test_no_suffix_without_disambiguation(self):
        synthesizer = create_go_synthesizer()

        assert synthesizer.synthesize(["trip_created"], major_version=2) == "TripCreated"

    def test_disambiguation_requires_major_version(self):
        synthesizer = create_go_synthesizer()

        with pytest.raises(ValueError, match="major_version"):
            synthesizer.synthesize(["trip_created"], disambiguate_version=True)

    def test_initialisms_sorted_longest_first(self):
        synthesizer = NameSynthesizer(["ID", "UUID", "UID"])

        assert synthesizer.initialisms == ["UUID", "UID", "ID"]


class TestFieldNames:
    """Test synthesis of struct field names."""

    @pytest.mark.parametrize(
        ("prop", "expected"),
        [
            ("id", "ID"),
            ("user_id", "UserID"),
            ("vehicle_id", "VehicleID"),
            ("vin", "Vin"),
            ("callback_url", "CallbackURL"),
            ("created_at", "CreatedAt"),
        ],
    )
    def test_field_name(self, prop, expected):
        assert create_go_synthesizer().field_name(prop) == expected

    def test_id_without_initialisms(self):
        synthesizer = NameSynthesizer([])

        assert synthesizer.field_name("id") == "ID"
        assert synthesizer.field_name("user_id") == "UserId"

    def test_field_names_have_no_version_suffix(self):
        synthesizer = create_go_synthesizer()

        assert synthesizer.field_name("trip_v2") == "TripV2"


class TestGoNaming:
    """Test Go specific naming helpers."""

    def test_default_initialisms(self):
        assert "ID" in GO_INITIALISMS
        assert "URL" in GO_INITIALISMS

    def test_custom_initialisms(self):
        synthesizer = create_go_synthesizer(["VIN"])

        assert synthesizer.field_name("vin") == "VIN"
        assert synthesizer.field_name("callback_url") == "CallbackUrl"

    @pytest.mark.parametrize(
        ("name", "valid"),
        [("Vehicle", True), ("_x1", True), ("1abc", False), ("type", False), ("", False)],
    )
    def test_is_go_identifier(self, name, valid):
        assert is_go_identifier(name) is valid

    def test_validate_package_name(self):
        assert validate_go_package_name("hedwig") == []
        assert validate_go_package_name("") == ["Package name cannot be empty"]
        assert any("reserved" in error for error in validate_go_package_name("func"))
        assert any("lowercase" in error for error in validate_go_package_name("Hedwig"))
