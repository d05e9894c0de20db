"""
Icon file discovery.

Walks a source tree in a stable order and keeps the files the dialect
accepts. The order of the returned files is the order of the generated
definitions.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Union

from ..dialects import Dialect
from ..logging_config import get_logger
from .errors import DiscoveryError

logger = get_logger(__name__)


@dataclass(frozen=True)
class SourceFile:
    """An icon source selected for generation."""

    path: Path
    dialect: Dialect

    @property
    def name(self) -> str:
        """PascalCase identifier derived from the path (without prefix)."""
        return self.dialect.derive_name(self.path)


def walk_sorted(root: Path) -> Iterator[Path]:
    """
    Yield every file below root, depth-first, entries sorted by name.

    Symlinked directories are listed but not descended into.
    Directories that cannot be listed are skipped with a warning.
    """
    try:
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        logger.warning("Skipping unreadable directory %s: %s", root, e)
        return

    for entry in entries:
        path = Path(entry.path)
        if entry.is_dir(follow_symlinks=False):
            yield from walk_sorted(path)
        elif entry.is_file():
            yield path


def discover(root: Union[str, Path], dialect: Dialect) -> List[SourceFile]:
    """
    Collect the icon files below root accepted by dialect.

    Args:
        root: Directory to walk (a single file is also accepted)
        dialect: Dialect deciding which files are icons

    Returns:
        Source files in traversal order

    Raises:
        DiscoveryError: If root does not exist
    """
    root = Path(root).absolute()

    if not root.exists():
        raise DiscoveryError(f"Source directory not found: {root}")

    candidates = [root] if root.is_file() else walk_sorted(root)

    files = [
        SourceFile(path=path, dialect=dialect)
        for path in candidates
        if dialect.selects(path)
    ]

    logger.info(
        "Discovered %d icon file(s) in %s (%s dialect)",
        len(files),
        root,
        dialect.name,
    )
    return files
