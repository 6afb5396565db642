"""Tests for generator configuration."""

import json

import pytest

from hedwig_models.codegen.core.config import (
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    get_config_manager,
    load_config,
)


@pytest.fixture
def manager():
    return ConfigManager()


@pytest.fixture
def write_config(tmp_path):
    def _write(content, name="config.json"):
        path = tmp_path / name
        path.write_text(content if isinstance(content, str) else json.dumps(content))
        return path

    return _write


class TestGetConfig:
    """Test configuration loading and merging."""

    def test_defaults(self, manager):
        config = manager.get_config()

        assert config == GeneratorConfig()
        assert config.package_name == "hedwig"
        assert config.add_comments is True
        assert config.initialisms is None

    def test_overrides(self, manager):
        config = manager.get_config({"package_name": "events", "int_type": "int64"})

        assert config.package_name == "events"
        assert config.int_type == "int64"

    def test_file(self, manager, write_config):
        path = write_config({"package_name": "events", "custom_formats": ["vin"]})

        config = manager.get_config(config_file=path)

        assert config.package_name == "events"
        assert config.custom_formats == ["vin"]

    def test_overrides_win_over_file(self, manager, write_config):
        path = write_config({"package_name": "events", "add_comments": False})

        config = manager.get_config({"package_name": "models"}, config_file=path)

        assert config.package_name == "models"
        assert config.add_comments is False

    def test_unknown_keys_are_custom(self, manager, write_config):
        path = write_config({"package_name": "events", "team": "platform"})

        config = manager.get_config(config_file=path)

        assert config.custom == {"team": "platform"}

    def test_defaults_are_not_shared(self, manager):
        first = manager.get_config()
        first.custom_formats.append("vin")

        assert manager.get_config().custom_formats == []

    def test_load_config_uses_global_manager(self):
        assert get_config_manager() is get_config_manager()
        assert load_config({"package_name": "events"}).package_name == "events"


class TestConfigFileErrors:
    """Test rejection of unusable configuration files."""

    def test_missing_file(self, manager, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            manager.get_config(config_file=tmp_path / "missing.json")

    def test_not_json_suffix(self, manager, write_config):
        path = write_config({}, name="config.yaml")

        with pytest.raises(ConfigError, match="must be JSON"):
            manager.get_config(config_file=path)

    def test_invalid_json(self, manager, write_config):
        path = write_config("{not json")

        with pytest.raises(ConfigError, match="Invalid JSON"):
            manager.get_config(config_file=path)

    def test_not_an_object(self, manager, write_config):
        path = write_config(["package_name"])

        with pytest.raises(ConfigError, match="JSON object"):
            manager.get_config(config_file=path)


class TestValidateConfig:
    """Test configuration warnings."""

    def test_defaults_are_valid(self, manager):
        assert manager.validate_config(GeneratorConfig()) == []

    def test_invalid_values(self, manager):
        config = GeneratorConfig(
            package_name="my-models",
            int_type="long",
            float_type="double",
            unknown_type="object",
        )

        warnings = manager.validate_config(config)

        assert len(warnings) == 4
        assert "Invalid Go package name: my-models" in warnings
        assert "Invalid int_type: long" in warnings
        assert "Invalid float_type: double" in warnings
        assert "Invalid unknown_type: object" in warnings

    def test_any_is_a_valid_unknown_type(self, manager):
        assert manager.validate_config(GeneratorConfig(unknown_type="any")) == []
