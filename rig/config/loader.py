"""Loads the template's default parameter table."""
from pathlib import Path
from typing import Dict, Optional

from rig.config.formats import ConfigFormat, decode
from rig.core import fsutils
from rig.core.errors import ConfigDecodeFailure, ConfigNotFound, IoFailure
from rig.core.logger import get_logger

logger = get_logger(__name__)


class ConfigLoader:
    """Reads the conventional config file found at a template root."""

    def __init__(self, root: Path, config_format: ConfigFormat = ConfigFormat.TOML):
        self.root = Path(root)
        self.config_format = config_format
        self.parameters: Optional[Dict[str, str]] = None

    @property
    def config_path(self) -> Path:
        return self.root / self.config_format.file_name

    def load(self) -> Dict[str, str]:
        """Decode the config file into a flat parameter table.

        Raises:
            ConfigNotFound: If the config file does not exist
            IoFailure: If the config file cannot be read
            ConfigDecodeFailure: If the contents are not valid for the format
        """
        path = self.config_path
        if not fsutils.exists(path):
            raise ConfigNotFound(path)

        try:
            data = fsutils.read_bytes(path)
        except OSError as e:
            raise IoFailure(path, "read config file", e.strerror) from e

        try:
            self.parameters = decode(self.config_format, data)
        except ValueError as e:
            raise ConfigDecodeFailure(path, self.config_format.value, str(e)) from e

        logger.debug(f"Loaded {len(self.parameters)} default parameters from {path}")
        return self.parameters
