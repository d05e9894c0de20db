"""
Plain icon sets: every ``*.svg`` file is an icon named after its filename.
"""

from pathlib import Path

from .base import Dialect, file_stem

SVG_SUFFIX = ".svg"


class DefaultDialect(Dialect):
    """Selects ``*.svg`` files and names icons after the filename stem."""

    @property
    def name(self) -> str:
        return "default"

    @property
    def description(self) -> str:
        return "Every *.svg file; identifier from the filename"

    def selects(self, path: Path) -> bool:
        return path.suffix == SVG_SUFFIX

    def raw_name(self, path: Path) -> str:
        return file_stem(path, self.name)


class IoniconsDialect(DefaultDialect):
    """
    Ionicons exports repeat an inline style on most elements; it is removed
    from attribute values so the icon follows the component's colors.
    """

    STYLE_FRAGMENT = "fill:none;stroke:#000;"

    @property
    def name(self) -> str:
        return "ionicons"

    @property
    def description(self) -> str:
        return "Like default; strips 'fill:none;stroke:#000;' from attribute values"

    def rewrite_value(self, value: str) -> str:
        return value.replace(self.STYLE_FRAGMENT, "")
