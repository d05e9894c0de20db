"""
GitHub Octicons: each icon ships in several sizes, only the 16px variant
(``alert-16.svg``) is used and the size suffix is dropped from the name.
"""

import re
from pathlib import Path

from .base import Dialect, file_stem


class OcticonsDialect(Dialect):
    """Selects ``*-16.svg`` files; ``alert-16.svg`` becomes ``Alert``."""

    SIZE_SUFFIX = "-16"
    FILE_PATTERN = re.compile(r".*-16\.svg$")

    @property
    def name(self) -> str:
        return "octicons"

    @property
    def description(self) -> str:
        return "Only *-16.svg files; the -16 size suffix is dropped"

    def selects(self, path: Path) -> bool:
        return bool(self.FILE_PATTERN.match(path.as_posix()))

    def raw_name(self, path: Path) -> str:
        return file_stem(path, self.name).replace(self.SIZE_SUFFIX, "")
