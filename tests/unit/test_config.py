"""Unit tests for layout ring configuration loading."""

import json

import pytest

from layout_ring.config import DEFAULT_CAPACITY, DEFAULT_CONTENT, RingConfig, load_config
from layout_ring.errors import ConfigLoadError


class TestRingConfig:
    """Test option defaults and validation."""

    def test_defaults(self):
        config = RingConfig()
        assert config.ring_capacity == DEFAULT_CAPACITY == 7
        assert config.default_content == DEFAULT_CONTENT
        assert config.show_names_in_status is True

    def test_capacity_must_be_positive(self):
        with pytest.raises(ValueError):
            RingConfig(ring_capacity=0)


class TestLoadConfig:
    """Test file and environment sources."""

    def test_no_sources_gives_defaults(self):
        assert load_config(environ={}) == RingConfig()

    def test_missing_file_gives_defaults(self, temp_config_dir):
        assert load_config(temp_config_dir / "absent.toml", environ={}) == RingConfig()

    def test_toml_section(self, temp_config_dir):
        path = temp_config_dir / "config.toml"
        path.write_text(
            '[layout_ring]\n'
            'ring_capacity = 3\n'
            'default_content = "*notes*"\n'
            'show_names_in_status = false\n'
        )

        config = load_config(path, environ={})

        assert config.ring_capacity == 3
        assert config.default_content == "*notes*"
        assert config.show_names_in_status is False

    def test_json_top_level(self, temp_config_dir):
        path = temp_config_dir / "config.json"
        path.write_text(json.dumps({"ring_capacity": 5, "default_content": None}))

        config = load_config(path, environ={})

        assert config.ring_capacity == 5
        assert config.default_content is None

    def test_malformed_toml(self, temp_config_dir):
        path = temp_config_dir / "config.toml"
        path.write_text("ring_capacity = [")

        with pytest.raises(ConfigLoadError) as exc_info:
            load_config(path, environ={})

        assert exc_info.value.context["file_path"] == str(path)

    def test_invalid_value(self, temp_config_dir):
        path = temp_config_dir / "config.toml"
        path.write_text("ring_capacity = 0\n")

        with pytest.raises(ConfigLoadError):
            load_config(path, environ={})

    def test_unknown_option(self, temp_config_dir):
        path = temp_config_dir / "config.json"
        path.write_text(json.dumps({"ring_size": 3}))

        with pytest.raises(ConfigLoadError):
            load_config(path, environ={})

    def test_environment_overrides_file(self, temp_config_dir):
        path = temp_config_dir / "config.toml"
        path.write_text("ring_capacity = 3\n")

        config = load_config(path, environ={
            "LAYOUT_RING_CAPACITY": "9",
            "LAYOUT_RING_DEFAULT_CONTENT": "",
            "LAYOUT_RING_SHOW_NAMES": "off",
        })

        assert config.ring_capacity == 9
        assert config.default_content is None
        assert config.show_names_in_status is False

    def test_unrecognized_boolean_is_ignored(self):
        config = load_config(environ={"LAYOUT_RING_SHOW_NAMES": "maybe"})
        assert config.show_names_in_status is True

    def test_invalid_environment_capacity(self):
        with pytest.raises(ConfigLoadError):
            load_config(environ={"LAYOUT_RING_CAPACITY": "many"})
