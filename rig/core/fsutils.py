"""Filesystem helpers used while materializing a project.

Every helper lets ``OSError`` propagate; callers wrap it into ``IoFailure``
together with the path they were working on.
"""
import os
import shutil
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def exists(path: PathLike) -> bool:
    return os.path.lexists(path)


def read_bytes(path: PathLike) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def read_text(path: PathLike) -> str:
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def write_text(path: PathLike, contents: str) -> None:
    """Write ``contents`` to ``path`` and flush it to disk before closing."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(contents)
        f.flush()
        os.fsync(f.fileno())


def copy_file(src: PathLike, dest: PathLike) -> None:
    """Copy bytes and permission bits, syncing the destination."""
    shutil.copyfile(src, dest)
    shutil.copymode(src, dest)
    with open(dest, "rb+") as f:
        os.fsync(f.fileno())


def ensure_directory(path: PathLike) -> None:
    Path(path).mkdir(parents=True, exist_ok=True)
