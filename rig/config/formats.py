"""Config file formats and their decoders.

Every decoder takes raw bytes and returns a flat ``str -> str`` table.
Values that are not scalars (arrays, tables, nulls) are dropped. Decoders
raise ``ValueError`` on malformed input; ``ConfigLoader`` attaches the path.
"""
import tomllib
from enum import Enum
from typing import Any, Callable, Dict, Mapping

import javaproperties
import yaml


class ConfigFormat(Enum):
    """Format of the defaults file at the template root."""

    PROPERTIES = "properties"
    TOML = "toml"
    YAML = "yaml"

    @property
    def file_name(self) -> str:
        return CONFIG_FILE_NAMES[self]


CONFIG_FILE_NAMES: Dict[ConfigFormat, str] = {
    ConfigFormat.PROPERTIES: "default.properties",
    ConfigFormat.TOML: "Rig.toml",
    ConfigFormat.YAML: "Rig.yml",
}


def _scalar_to_str(value: Any):
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return None


def _flatten_scalars(document: Mapping[str, Any]) -> Dict[str, str]:
    table = {}
    for key, value in document.items():
        converted = _scalar_to_str(value)
        if converted is not None:
            table[str(key)] = converted
    return table


def decode_properties(data: bytes) -> Dict[str, str]:
    """Java ``.properties`` text, as shipped by giter8 templates.

    A malformed ``\\uXXXX`` escape raises ``javaproperties.InvalidUEscapeError``,
    a ``ValueError``.
    """
    return dict(javaproperties.loads(data.decode("utf-8")))


def decode_toml(data: bytes) -> Dict[str, str]:
    return _flatten_scalars(tomllib.loads(data.decode("utf-8")))


def decode_yaml(data: bytes) -> Dict[str, str]:
    try:
        document = yaml.safe_load(data.decode("utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(str(e)) from e

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ValueError(f"Expected a mapping at the top level, got {type(document).__name__}")
    return _flatten_scalars(document)


DECODERS: Dict[ConfigFormat, Callable[[bytes], Dict[str, str]]] = {
    ConfigFormat.PROPERTIES: decode_properties,
    ConfigFormat.TOML: decode_toml,
    ConfigFormat.YAML: decode_yaml,
}


def decode(config_format: ConfigFormat, data: bytes) -> Dict[str, str]:
    """Decode ``data`` with the decoder registered for ``config_format``."""
    return DECODERS[config_format](data)
