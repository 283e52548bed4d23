"""Placeholders and the three grammars that produce them.

A placeholder names a parameter key and an ordered chain of transforms:

- ``Style.CONTENT``: ``key;t1,t2``
- ``Style.LEGACY``: ``key;format="t1,t2"`` (giter8 templates)
- ``Style.PATH_SEGMENT``: ``key__t1_t2`` (file and directory names only)

The delimiters around the expression belong to ``Template``; parsers only
see what sits between them.
"""
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, Mapping, Optional, Tuple

from rig.core.errors import PlaceholderMalformed, PlaceholderUnresolved
from rig.template import transforms
from rig.template.transforms import Transform

ParameterTable = Mapping[str, str]


class Style(Enum):
    """Placeholder grammar used by a template body."""

    CONTENT = "content"
    LEGACY = "legacy"
    PATH_SEGMENT = "path"


@dataclass(frozen=True)
class Placeholder:
    """Parameter key plus the transforms folded over its value."""

    key: str
    transforms: Tuple[Transform, ...] = ()

    @classmethod
    def new(cls, key: str, names: Iterable[str] = ()) -> "Placeholder":
        """Build a placeholder, dropping unknown and identity transform names."""
        chain = (Transform.from_name(name) for name in names)
        return cls(key, tuple(t for t in chain if t is not Transform.IDENTITY))

    def format_with(self, parameters: ParameterTable, rng: Optional[random.Random] = None) -> str:
        """Resolve against ``parameters``; a missing key renders as the key itself."""
        if self.key not in parameters:
            return self.key
        return self._fold(parameters[self.key], rng)

    def resolve_strict(self, parameters: ParameterTable, rng: Optional[random.Random] = None) -> str:
        """Like ``format_with`` but raise ``PlaceholderUnresolved`` for a missing key."""
        if self.key not in parameters:
            raise PlaceholderUnresolved(self.key)
        return self._fold(parameters[self.key], rng)

    def _fold(self, value: str, rng: Optional[random.Random]) -> str:
        for transform in self.transforms:
            value = transforms.apply(transform, value, rng)
        return value


def _split_key_and_formats(expr: str, strip_format_prefix: bool) -> Placeholder:
    if not expr:
        raise PlaceholderMalformed(expr, "Placeholder is empty")

    parts = expr.split(";")
    if len(parts) == 1:
        return Placeholder.new(expr)
    if len(parts) == 2:
        key, raw_formats = parts
        if strip_format_prefix:
            raw_formats = raw_formats.replace('"', "").replace("format=", "")
        return Placeholder.new(key, raw_formats.split(","))
    raise PlaceholderMalformed(expr, "Too many separators in placeholder")


def parse_content(expr: str) -> Placeholder:
    """Parse ``key`` or ``key;t1,t2``."""
    return _split_key_and_formats(expr, strip_format_prefix=False)


def parse_legacy(expr: str) -> Placeholder:
    """Parse ``key`` or ``key;format="t1,t2"``."""
    return _split_key_and_formats(expr, strip_format_prefix=True)


def parse_path_segment(expr: str) -> Placeholder:
    """Parse ``key__t1_t2``.

    Anything other than exactly one ``__`` separator makes the whole
    expression the key, so names that happen to contain ``__`` still render.
    """
    parts = expr.split("__")
    if len(parts) == 2:
        key, raw_formats = parts
        return Placeholder.new(key, raw_formats.split("_"))
    return Placeholder.new(expr)


PARSERS: Dict[Style, Callable[[str], Placeholder]] = {
    Style.CONTENT: parse_content,
    Style.LEGACY: parse_legacy,
    Style.PATH_SEGMENT: parse_path_segment,
}


def parse(expr: str, style: Style) -> Placeholder:
    """Parse ``expr`` with the grammar selected by ``style``."""
    return PARSERS[style](expr)
