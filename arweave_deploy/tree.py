"""
File tree access for the deploy walker.

Paths handed to a tree are PurePosixPath values relative to its root, so
the walker never deals with host separators.
"""
from pathlib import Path, PurePosixPath
from typing import BinaryIO, List, Protocol


class FileTree(Protocol):
    def exists(self) -> bool: ...

    def list_dir(self, rel: PurePosixPath) -> List[str]: ...

    def is_dir(self, rel: PurePosixPath) -> bool: ...

    def open(self, rel: PurePosixPath) -> BinaryIO: ...

    def size(self, rel: PurePosixPath) -> int: ...


class LocalTree:
    """FileTree backed by a directory on disk"""

    def __init__(self, root: Path):
        self.root = Path(root)

    def _resolve(self, rel: PurePosixPath) -> Path:
        return self.root.joinpath(*rel.parts)

    def exists(self) -> bool:
        return self.root.is_dir()

    def list_dir(self, rel: PurePosixPath) -> List[str]:
        return sorted(child.name for child in self._resolve(rel).iterdir())

    def is_dir(self, rel: PurePosixPath) -> bool:
        return self._resolve(rel).is_dir()

    def open(self, rel: PurePosixPath) -> BinaryIO:
        return open(self._resolve(rel), "rb")

    def size(self, rel: PurePosixPath) -> int:
        return self._resolve(rel).stat().st_size
