"""
SVG icon code generation.

Turns a directory of SVG icons into a Rust module of ``IconShape``
definitions for the Dioxus icon component.
"""

from .core import (
    ConfigError,
    ExtractedIcon,
    FilterOptions,
    GenerationResult,
    GeneratorConfig,
    GeneratorError,
    IconGenerator,
    generate_icon_file,
    load_config,
)
from .registry import (
    DialectRegistry,
    RegistryError,
    get_dialect,
    get_registry,
    list_dialects,
    resolve_dialect,
)

__version__ = "0.1.0"


def generate(source, prefix="", **options):
    """
    Generate icon code without writing it.

    Args:
        source: Root directory of the icon set
        prefix: Identifier prefix, also selects the dialect of known icon sets
        **options: Configuration values (dialect, jobs, filter toggles)

    Returns:
        Generated code string
    """
    config = load_config(custom_config={"prefix": prefix, **options})
    return IconGenerator(config).generate(source).code


__all__ = [
    "ConfigError",
    "DialectRegistry",
    "ExtractedIcon",
    "FilterOptions",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "IconGenerator",
    "RegistryError",
    "generate",
    "generate_icon_file",
    "get_dialect",
    "get_registry",
    "list_dialects",
    "load_config",
    "resolve_dialect",
]
