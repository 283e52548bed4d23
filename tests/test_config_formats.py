"""Test config file decoding.

Tests ensure that:
1. Every format decodes to a flat string table
2. Non-scalar values are dropped instead of failing
3. Malformed files raise ConfigDecodeFailure with the file path
"""
import pytest

from rig.config.formats import ConfigFormat, decode, decode_properties, decode_toml, decode_yaml
from rig.config.loader import ConfigLoader
from rig.core.errors import ConfigDecodeFailure, ConfigNotFound


def _props(text):
    return decode_properties(text.encode("utf-8"))


class TestProperties:
    """Test reading Java properties defaults."""

    def test_separators(self):
        text = "a = 1\nb:2\nc 3\nd=\n"
        assert _props(text) == {"a": "1", "b": "2", "c": "3", "d": ""}

    def test_comments_and_blank_lines(self):
        text = "# comment\n! another\n\n   \nkey = value\n"
        assert _props(text) == {"key": "value"}

    def test_continuation_lines(self):
        text = "fruits = apple, \\\n    banana, \\\n    cherry\nnext = 1\n"
        assert _props(text) == {"fruits": "apple, banana, cherry", "next": "1"}

    def test_escaped_backslash_is_not_continuation(self):
        assert _props("path = C:\\\\temp\\\\\n") == {"path": "C:\\temp\\"}

    def test_escapes(self):
        text = "tab = a\\tb\nuni = caf\\u00e9\nkey\\ with\\ spaces = x\n"
        assert _props(text) == {"tab": "a\tb", "uni": "café", "key with spaces": "x"}

    def test_value_keeps_inner_separators(self):
        assert _props("url = http://example.com/a=b\n") == {"url": "http://example.com/a=b"}

    def test_later_keys_win(self):
        assert _props("a = 1\na = 2\n") == {"a": "2"}

    def test_malformed_unicode_escape(self):
        with pytest.raises(ValueError):
            _props("bad = \\u12G4\n")


class TestDecoders:
    """Test the per-format decoders."""

    def test_decode_properties_bytes(self):
        assert decode_properties("name = caf\u00e9\n".encode("utf-8")) == {"name": "café"}

    def test_decode_toml_drops_non_scalars(self):
        data = b'''
name = "My Project"
count = 3
ratio = 0.5
enabled = true
tags = ["a", "b"]

[section]
inner = "dropped"
'''
        assert decode_toml(data) == {
            "name": "My Project",
            "count": "3",
            "ratio": "0.5",
            "enabled": "true",
        }

    def test_decode_toml_invalid(self):
        with pytest.raises(ValueError):
            decode_toml(b"name = ")

    def test_decode_yaml(self):
        data = b"name: My Project\npackage: com.example\ndebug: false\nitems: [1, 2]\nempty:\n"
        assert decode_yaml(data) == {"name": "My Project", "package": "com.example", "debug": "false"}

    def test_decode_yaml_empty_document(self):
        assert decode_yaml(b"") == {}

    def test_decode_yaml_requires_mapping(self):
        with pytest.raises(ValueError):
            decode_yaml(b"- a\n- b\n")

    def test_decode_yaml_syntax_error(self):
        with pytest.raises(ValueError):
            decode_yaml(b"name: [unclosed\n")

    def test_invalid_utf8(self):
        with pytest.raises(ValueError):
            decode(ConfigFormat.PROPERTIES, b"name = \xff\xfe\n")

    def test_file_names(self):
        assert ConfigFormat.PROPERTIES.file_name == "default.properties"
        assert ConfigFormat.TOML.file_name == "Rig.toml"
        assert ConfigFormat.YAML.file_name == "Rig.yml"


class TestConfigLoader:
    """Test loading the config file from a template root."""

    def test_load_yaml(self, tmp_path):
        (tmp_path / "Rig.yml").write_text("name: demo\n")
        loader = ConfigLoader(tmp_path, ConfigFormat.YAML)
        assert loader.load() == {"name": "demo"}
        assert loader.parameters == {"name": "demo"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigNotFound) as exc:
            ConfigLoader(tmp_path, ConfigFormat.TOML).load()
        assert exc.value.path == tmp_path / "Rig.toml"

    def test_decode_failure_names_format_and_path(self, tmp_path):
        (tmp_path / "Rig.toml").write_text("= nope\n")
        with pytest.raises(ConfigDecodeFailure) as exc:
            ConfigLoader(tmp_path).load()
        assert exc.value.config_format == "toml"
        assert "Rig.toml" in str(exc.value)

    def test_properties_decode_failure(self, tmp_path):
        (tmp_path / "default.properties").write_text("bad = \\u12G4\n")
        with pytest.raises(ConfigDecodeFailure) as exc:
            ConfigLoader(tmp_path, ConfigFormat.PROPERTIES).load()
        assert exc.value.config_format == "properties"
