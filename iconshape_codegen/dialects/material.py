"""
Google Material icons, laid out as
``<icon>/materialicons/24px.svg`` (plus other styles and sizes next to it).

The icon name is the directory three levels above the file, counting the
file itself as the last path segment.
"""

from pathlib import Path

from ..core.errors import NamingError
from .base import Dialect


class MaterialDialect(Dialect):
    """Selects ``24px.svg`` files below a ``materialicons`` directory."""

    FILENAME = "24px.svg"
    STYLE_FOLDER = "materialicons"
    FILL_TAGS = frozenset({"rect", "path"})

    @property
    def name(self) -> str:
        return "material"

    @property
    def description(self) -> str:
        return "24px.svg below a materialicons folder; identifier from the icon folder"

    def selects(self, path: Path) -> bool:
        return path.name == self.FILENAME and self.STYLE_FOLDER in path.parts

    def raw_name(self, path: Path) -> str:
        parts = path.parts
        if len(parts) < 3:
            raise NamingError(
                f"Expected <icon>/{self.STYLE_FOLDER}/{self.FILENAME}, got {path}"
            )
        return parts[-3]

    def keeps_fill(self, tag: str) -> bool:
        return tag in self.FILL_TAGS
