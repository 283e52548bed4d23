"""Depth-first walk over a template tree and the run-scoped rename table."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator

from rig.core.logger import get_logger

logger = get_logger(__name__)

GIT_METADATA = ".git"


@dataclass(frozen=True)
class TemplateEntry:
    """One file or directory found under the template root."""

    path: Path
    depth: int
    is_dir: bool

    @property
    def name(self) -> str:
        return self.path.name


def walk(root: Path) -> Iterator[TemplateEntry]:
    """Yield ``root`` (depth 0) and everything below it, parents first.

    Siblings come in name order. ``.git`` directories are pruned together
    with their contents; entries that are neither regular files nor
    directories (dangling links, sockets) are skipped.

    Raises:
        OSError: If a directory cannot be listed
    """
    root = Path(root)
    yield TemplateEntry(root, 0, True)
    yield from _walk_children(root, 1)


def _walk_children(directory: Path, depth: int) -> Iterator[TemplateEntry]:
    with os.scandir(directory) as it:
        children = sorted(it, key=lambda e: e.name)

    for child in children:
        if child.is_dir(follow_symlinks=False):
            if child.name == GIT_METADATA:
                logger.debug(f"Skipping git metadata {child.path}")
                continue
            yield TemplateEntry(Path(child.path), depth, True)
            yield from _walk_children(Path(child.path), depth + 1)
        elif child.is_file():
            yield TemplateEntry(Path(child.path), depth, False)
        else:
            logger.debug(f"Skipping {child.path}: not a regular file or directory")


class RenameTable:
    """Maps an original path segment to the name it rendered to.

    Entries are recorded when a directory is visited, which the walk order
    guarantees happens before any of its descendants are placed.
    """

    def __init__(self):
        self._renames: Dict[str, str] = {}

    def record(self, original: str, rendered: str) -> None:
        if original != rendered:
            logger.debug(f"File tree altered: {original!r} => {rendered!r}")
            self._renames[original] = rendered

    def lookup(self, segment: str) -> str:
        return self._renames.get(segment, segment)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._renames)
