"""Template config file decoding."""

from .formats import ConfigFormat
from .loader import ConfigLoader

__all__ = ["ConfigFormat", "ConfigLoader"]
