"""Placeholder template engine.

Substitutes ``$key;transforms$`` placeholders in text bodies and file names.
"""

from .engine import Template
from .placeholder import Placeholder, Style, parse
from .transforms import Transform

__all__ = [
    "Placeholder",
    "Style",
    "Template",
    "Transform",
    "parse",
]
