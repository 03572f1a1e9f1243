"""Filesystem and discovery primitives used by the orchestrator."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import List, Protocol


class FileSystem(Protocol):
    """Operations the orchestrator performs against disk."""

    def remove_tree(self, path: Path) -> None: ...

    def make_dirs(self, path: Path) -> None: ...

    def copy_static(self, source: Path, destination: Path) -> None: ...

    def list_files(self, root: Path, pattern: str) -> List[Path]: ...

    def read_text(self, path: Path) -> str: ...

    def write_text(self, path: Path, content: str) -> None: ...


class LocalFileSystem:
    """FileSystem backed by pathlib and shutil."""

    def remove_tree(self, path: Path) -> None:
        if path.exists():
            shutil.rmtree(path)

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def copy_static(self, source: Path, destination: Path) -> None:
        """Copy the contents of ``source`` into ``destination``."""
        if not source.is_dir():
            return
        shutil.copytree(source, destination, dirs_exist_ok=True)

    def list_files(self, root: Path, pattern: str) -> List[Path]:
        if not root.is_dir():
            raise FileNotFoundError(f"Input directory not found: {root}")
        return [path for path in root.glob(pattern) if path.is_file()]

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        path.write_text(content, encoding="utf-8")


__all__ = ["FileSystem", "LocalFileSystem"]
