"""
Core generation components.

Discovery, markup extraction, serialization and emission of icon
definitions, plus configuration and naming helpers.
"""

from .errors import (
    DiscoveryError,
    GeneratorError,
    MarkupError,
    MissingAttributeError,
    NamingError,
    OutputError,
    SourceReadError,
)
from .config import (
    ConfigError,
    ConfigManager,
    FilterOptions,
    GeneratorConfig,
    load_config,
)
from .naming import to_pascal_case, to_snake_case
from .discovery import SourceFile, discover
from .markup import RootAttributes, parse_and_extract
from .serializer import SerializedTree, TreeSerializer, attributes_for
from .templates import TemplateEngine, TemplateError, create_template_engine
from .generator import (
    ExtractedIcon,
    GenerationResult,
    IconGenerator,
    generate_icon_file,
)

__all__ = [
    # Errors
    "GeneratorError",
    "DiscoveryError",
    "NamingError",
    "SourceReadError",
    "MarkupError",
    "MissingAttributeError",
    "OutputError",
    # Configuration
    "ConfigError",
    "ConfigManager",
    "FilterOptions",
    "GeneratorConfig",
    "load_config",
    # Naming
    "to_pascal_case",
    "to_snake_case",
    # Pipeline stages
    "SourceFile",
    "discover",
    "RootAttributes",
    "parse_and_extract",
    "SerializedTree",
    "TreeSerializer",
    "attributes_for",
    # Emission
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
    "ExtractedIcon",
    "GenerationResult",
    "IconGenerator",
    "generate_icon_file",
]
