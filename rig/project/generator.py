"""Materializes a template tree into a new project directory."""
import io
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional

from rig.config.formats import ConfigFormat
from rig.config.loader import ConfigLoader
from rig.core import fsutils
from rig.core.config import get_config
from rig.core.errors import IoFailure
from rig.core.logger import get_logger
from rig.project.walker import RenameTable, TemplateEntry, walk
from rig.template.engine import Template
from rig.template.placeholder import Style

logger = get_logger(__name__)

# A bare package placeholder in a file or directory name becomes a nested
# directory tree when packaged naming is forced.
PACKAGE_PLACEHOLDER = "$package$"
PACKAGED_PLACEHOLDER = "$package__packaged$"


@dataclass(frozen=True)
class PlannedEntry:
    """Where one template entry lands in the generated project."""

    source: Path
    destination: Path
    is_dir: bool
    verbatim: bool = False


def normalize_extensions(extensions: Iterable[str]) -> FrozenSet[str]:
    """Turn ``png``, ``.PNG`` and friends into ``.png``."""
    normalized = set()
    for ext in extensions:
        ext = ext.strip().lower()
        if not ext:
            continue
        normalized.add(ext if ext.startswith(".") else f".{ext}")
    return frozenset(normalized)


class Project:
    """How to read a template tree and turn it into a project.

    Args:
        inner_root: Subdirectory holding the template, used only when it exists
        config_format: Format of the defaults file at the template root
        style: Placeholder grammar of file contents
        force_packaged: Render a bare ``$package$`` name as nested directories
        verbatim_extensions: File suffixes copied as-is instead of rendered
        rng: Random source for the ``random`` transform
    """

    def __init__(
        self,
        inner_root: Optional[str] = None,
        config_format: ConfigFormat = ConfigFormat.TOML,
        style: Style = Style.CONTENT,
        force_packaged: bool = False,
        verbatim_extensions: Iterable[str] = (),
        rng: Optional[random.Random] = None,
    ):
        self.inner_root = inner_root
        self.config_format = config_format
        self.style = style
        self.force_packaged = force_packaged
        self.verbatim_extensions = normalize_extensions(verbatim_extensions)
        self.rng = rng or random.Random()

    @classmethod
    def giter8(cls, inner_root: Optional[str] = None, **kwargs) -> "Project":
        """Project reading a giter8 template (properties defaults, quoted formats)."""
        return cls(
            inner_root=inner_root or get_config().giter8_root,
            config_format=ConfigFormat.PROPERTIES,
            style=Style.LEGACY,
            force_packaged=True,
            **kwargs,
        )

    @property
    def config_name(self) -> str:
        return self.config_format.file_name

    def resolve_root_dir(self, clone_root: Path) -> Path:
        """Descend into ``inner_root`` when the template nests its content there."""
        clone_root = Path(clone_root)
        if self.inner_root and fsutils.exists(clone_root / self.inner_root):
            return clone_root / self.inner_root
        return clone_root

    def default_params(self, clone_root: Path) -> Dict[str, str]:
        """Read the parameter defaults from the config file at the template root.

        Raises:
            ConfigNotFound: If the config file is missing
            ConfigDecodeFailure: If it cannot be decoded in ``config_format``
        """
        root = self.resolve_root_dir(clone_root)
        return ConfigLoader(root, self.config_format).load()

    def plan(self, params: Mapping[str, str], clone_root: Path, dest: Path) -> List[PlannedEntry]:
        """Compute the destination of every template entry, in walk order."""
        root = self.resolve_root_dir(clone_root)
        config_file = root / self.config_name
        renames = RenameTable()
        planned: List[PlannedEntry] = []

        try:
            for entry in walk(root):
                if entry.depth == 0 or entry.path == config_file:
                    logger.debug(f"Skipping {entry.path}")
                    continue

                destination = self._resolve_destination(entry, root, Path(dest), renames, params)
                planned.append(
                    PlannedEntry(
                        source=entry.path,
                        destination=destination,
                        is_dir=entry.is_dir,
                        verbatim=not entry.is_dir and self._is_verbatim(entry.path),
                    )
                )
        except OSError as e:
            raise IoFailure(e.filename or root, "walk template tree", e.strerror) from e

        logger.debug(f"Rename table: {renames.as_dict()}")
        return planned

    def generate(
        self,
        params: Mapping[str, str],
        clone_root: Path,
        dest: Path,
        dry_run: bool = False,
    ) -> List[PlannedEntry]:
        """Write the rendered project to ``dest`` and return the plan.

        A dry run only computes the plan.

        Raises:
            IoFailure: On the first read, write or mkdir error; earlier writes stay
        """
        planned = self.plan(params, clone_root, dest)
        if dry_run:
            logger.info(f"Dry run: {len(planned)} entries would be generated in {dest}")
            return planned

        self._create_directory(Path(dest))
        for entry in planned:
            if entry.is_dir:
                self._create_directory(entry.destination)
            else:
                self._write_file(entry, params)

        logger.info(f"Generated {len(planned)} entries in {dest}")
        return planned

    def _is_verbatim(self, path: Path) -> bool:
        name = path.name.lower()
        return any(name.endswith(ext) for ext in self.verbatim_extensions)

    def _resolve_destination(
        self,
        entry: TemplateEntry,
        root: Path,
        dest_root: Path,
        renames: RenameTable,
        params: Mapping[str, str],
    ) -> Path:
        dest = dest_root
        for segment in entry.path.relative_to(root).parts[:-1]:
            dest = dest / renames.lookup(segment)

        base = entry.name
        source_name = base
        if self.force_packaged and base == PACKAGE_PLACEHOLDER:
            source_name = PACKAGED_PLACEHOLDER

        name = Template(Style.PATH_SEGMENT, source_name).render(params, self.rng)
        self._check_name(entry, name)
        renames.record(base, name)

        dest = dest / name
        logger.debug(f"Destination entry: {dest}")
        return dest

    @staticmethod
    def _check_name(entry: TemplateEntry, name: str) -> None:
        """Rendered names must stay below the destination root."""
        rendered = Path(name)
        if rendered.is_absolute() or rendered.anchor:
            reason = f"rendered name {name!r} is an absolute path"
        elif not rendered.parts:
            reason = f"rendered name {name!r} is empty"
        elif ".." in rendered.parts:
            reason = f"rendered name {name!r} leaves the destination"
        else:
            return
        raise IoFailure(entry.path, "render name", reason)

    def _create_directory(self, path: Path) -> None:
        try:
            fsutils.ensure_directory(path)
        except OSError as e:
            raise IoFailure(path, "create directory", e.strerror) from e

    def _write_file(self, entry: PlannedEntry, params: Mapping[str, str]) -> None:
        self._create_directory(entry.destination.parent)

        if entry.verbatim:
            try:
                fsutils.copy_file(entry.source, entry.destination)
            except OSError as e:
                raise IoFailure(entry.destination, "copy file", e.strerror) from e
            return

        try:
            template = Template.from_file(self.style, entry.source)
        except OSError as e:
            raise IoFailure(entry.source, "read template", e.strerror) from e
        except UnicodeDecodeError as e:
            raise IoFailure(entry.source, "read template", "not UTF-8 text, mark its extension verbatim") from e

        sink = io.StringIO()
        template.write(sink, params, self.rng)
        try:
            fsutils.write_text(entry.destination, sink.getvalue())
        except OSError as e:
            raise IoFailure(entry.destination, "write file", e.strerror) from e
