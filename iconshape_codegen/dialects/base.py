"""
Base dialect interface.

A dialect captures the layout and naming conventions of one icon set:
which files are icons, how an icon's identifier is derived from its path,
and a few attribute special cases applied during serialization.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from ..core.errors import NamingError
from ..core.naming import to_pascal_case


class Dialect(ABC):
    """Abstract base class for icon-set dialects."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the registry key of this dialect (e.g. 'default')."""
        pass

    @property
    def description(self) -> str:
        """Short human readable summary."""
        return ""

    @abstractmethod
    def selects(self, path: Path) -> bool:
        """Return True if the file at path is an icon source for this dialect."""
        pass

    @abstractmethod
    def raw_name(self, path: Path) -> str:
        """Return the name fragment the identifier is built from."""
        pass

    def derive_name(self, path: Path) -> str:
        """
        Derive the PascalCase identifier for an icon file.

        Raises:
            NamingError: If the path does not have the shape this dialect expects
        """
        name = to_pascal_case(self.raw_name(path))
        if not name:
            raise NamingError(
                f"Cannot derive an icon name from {path} ({self.name} dialect)"
            )
        return name

    def rewrite_value(self, value: str) -> str:
        """Rewrite an attribute value before filtering."""
        return value

    def keeps_fill(self, tag: str) -> bool:
        """Return True if a fill attribute on this tag bypasses the deny-list."""
        return False

    def __eq__(self, other) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def file_stem(path: Path, dialect: str) -> str:
    """
    Filename up to the first dot.

    Raises:
        NamingError: If the filename has no extension
    """
    filename = path.name
    if "." not in filename:
        raise NamingError(f"Icon file has no extension: {path} ({dialect} dialect)")
    return filename.split(".", 1)[0]
