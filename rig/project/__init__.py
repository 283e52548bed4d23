"""Project generation from a template tree."""

from .generator import PlannedEntry, Project
from .walker import RenameTable, TemplateEntry, walk

__all__ = [
    "PlannedEntry",
    "Project",
    "RenameTable",
    "TemplateEntry",
    "walk",
]
