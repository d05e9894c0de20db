"""
Icon-set dialects.

Each dialect knows how one icon set lays out its files and how icon
identifiers are derived from their paths.
"""

from .base import Dialect
from .default import DefaultDialect, IoniconsDialect
from .material import MaterialDialect
from .octicons import OcticonsDialect

__all__ = [
    "Dialect",
    "DefaultDialect",
    "IoniconsDialect",
    "MaterialDialect",
    "OcticonsDialect",
]
