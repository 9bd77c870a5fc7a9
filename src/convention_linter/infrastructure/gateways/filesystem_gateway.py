"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

import fnmatch
import logging
from pathlib import Path
from typing import Optional

from convention_linter.domain.protocols import FileSystemProtocol

logger = logging.getLogger(__name__)


class FileSystemGateway(FileSystemProtocol):
    """Turns CLI targets into Python files using pathlib."""

    def targets_to_filenames(
        self, targets: list[str], exclude: Optional[list[str]] = None
    ) -> list[str]:
        """
        Resolve ``targets`` to absolute ``.py`` paths.

        Files keep CLI order, directories expand recursively in sorted order,
        unknown targets are logged and skipped, and duplicates keep their
        first position.
        """
        filenames: list[str] = []
        seen: set[str] = set()
        for target in targets:
            path = Path(target)
            root: Optional[Path] = None
            if path.is_dir():
                root = path.resolve()
                candidates = self.glob_python_files(path)
            elif path.suffix == ".py":
                candidates = [str(path.resolve())]
            else:
                logger.warning("skip target %r: not a Python file or directory", target)
                continue
            for filename in candidates:
                if filename in seen or self.is_excluded(filename, exclude or [], root):
                    continue
                seen.add(filename)
                filenames.append(filename)
        return filenames

    @staticmethod
    def glob_python_files(directory: Path) -> list[str]:
        """All ``.py`` files under ``directory``, skipping hidden dirs and caches."""
        root = directory.resolve()
        files = []
        for path in sorted(root.rglob("*.py")):
            parts = path.relative_to(root).parts[:-1]
            if any(p.startswith(".") or p == "__pycache__" for p in parts):
                continue
            files.append(str(path))
        return files

    @staticmethod
    def is_excluded(filename: str, patterns: list[str], root: Optional[Path] = None) -> bool:
        """
        Match ``patterns`` against the absolute path, the file name, and the
        path relative to the working directory and to ``root``.
        """
        path = Path(filename)
        names = {filename, path.name}
        for base in (Path.cwd(), root):
            if base is None:
                continue
            try:
                names.add(path.relative_to(base.resolve()).as_posix())
            except ValueError:
                # Not under this base
                continue
        return any(fnmatch.fnmatch(name, pattern) for name in names for pattern in patterns)
