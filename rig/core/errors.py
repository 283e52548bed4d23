"""Error types raised by Rig.

Only ``IoFailure`` and ``ConfigDecodeFailure`` (and their subclasses) escape
a generation run. Placeholder errors are recovered inside the template engine.
"""
from pathlib import Path
from typing import Optional, Union


class RigError(Exception):
    """Base class for every error Rig raises on purpose."""
    pass


class IoFailure(RigError):
    """Reading, writing or creating a directory failed."""

    def __init__(self, path: Union[str, Path], operation: str, reason: Optional[str] = None):
        self.path = Path(path)
        self.operation = operation
        self.reason = reason
        message = f"Failed to {operation} {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ConfigNotFound(IoFailure):
    """The conventional config file is missing from the template root."""

    def __init__(self, path: Union[str, Path]):
        super().__init__(path, "read config file", "file not found")


class ConfigDecodeFailure(RigError):
    """Config file exists but cannot be decoded in the configured format."""

    def __init__(self, path: Union[str, Path], config_format: str, reason: Optional[str] = None):
        self.path = Path(path)
        self.config_format = config_format
        self.reason = reason
        message = f"Failed decoding {config_format} config {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class PlaceholderMalformed(RigError):
    """Parser rejected a raw placeholder expression."""

    def __init__(self, expression: str, reason: str):
        self.expression = expression
        self.reason = reason
        super().__init__(f"{reason}: {expression!r}")


class PlaceholderUnresolved(RigError):
    """Placeholder key is absent from the parameter table."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"No value for placeholder key {key!r}")


class InvalidRepositoryUrl(RigError):
    """Repository argument is neither a URL nor ``owner/repo`` shorthand."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Invalid URL format: {raw}")


class TemplateFetchError(RigError):
    """Cloning the template repository failed."""

    def __init__(self, url: str, stderr: str = ""):
        self.url = url
        self.stderr = stderr
        message = f"Failed to clone {url}"
        if stderr:
            message += f": {stderr}"
        super().__init__(message)
