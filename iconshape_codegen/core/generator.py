"""
Icon code generator.

Runs the whole pipeline for one icon set: discover the source files,
extract every icon, and render the Rust module holding one ``IconShape``
implementation per icon.
"""

from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..dialects import Dialect
from ..logging_config import get_logger
from ..registry import resolve_dialect
from ..utils import read_markup_file, write_output
from .config import GeneratorConfig
from .discovery import SourceFile, discover
from .errors import GeneratorError
from .markup import parse_and_extract
from .naming import is_valid_identifier
from .serializer import TreeSerializer
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)

PREAMBLE_TEMPLATE = "preamble.rs.j2"
ICON_TEMPLATE = "icon.rs.j2"


@dataclass(frozen=True)
class ExtractedIcon:
    """Everything needed to emit one icon definition."""

    name: str
    view_box: str
    width: str
    height: str
    xmlns: str
    fill: str
    stroke: str
    stroke_width: str
    stroke_linecap: str
    stroke_linejoin: str
    title: str
    body: str
    source: Optional[Path] = None


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        icons: Optional[List[ExtractedIcon]] = None,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            icons: Icons in output order
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.icons = icons or []
        self.warnings = warnings or []
        self.metadata = metadata or {}

    @property
    def icon_count(self) -> int:
        return len(self.icons)


class IconGenerator:
    """Generates a Rust module of IconShape definitions from SVG files."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        dialect: Optional[Dialect] = None,
        template_engine: Optional[TemplateEngine] = None,
    ):
        """
        Initialize generator.

        Args:
            config: Generation settings; defaults apply when omitted
            dialect: Dialect to use instead of the one the config selects
            template_engine: Engine providing the icon templates
        """
        self.config = config or GeneratorConfig()
        self.dialect = dialect or resolve_dialect(self.config.prefix, self.config.dialect)
        self.serializer = TreeSerializer(self.dialect, self.config.filters)
        self.template_engine = template_engine or create_template_engine()

    def extract_icon(self, source: SourceFile) -> ExtractedIcon:
        """
        Build the icon for one source file.

        Raises:
            GeneratorError: If the file cannot be read, parsed or named
        """
        name = self.config.prefix + source.name
        content = read_markup_file(source.path)
        svg, root = parse_and_extract(content, source.path)
        tree = self.serializer.serialize(svg)

        logger.debug("Extracted %s from %s", name, source.path)

        return ExtractedIcon(
            name=name,
            view_box=root.view_box,
            width=root.width,
            height=root.height,
            xmlns=root.xmlns,
            fill=root.fill,
            stroke=root.stroke,
            stroke_width=root.stroke_width,
            stroke_linecap=root.stroke_linecap,
            stroke_linejoin=root.stroke_linejoin,
            title=(tree.title or "").strip(),
            body=tree.body.rstrip(),
            source=source.path,
        )

    def extract_all(self, files: List[SourceFile]) -> List[ExtractedIcon]:
        """Extract icons in the order of files, in parallel when jobs > 1."""
        if self.config.jobs > 1 and len(files) > 1:
            with ThreadPoolExecutor(max_workers=self.config.jobs) as executor:
                return list(executor.map(self.extract_icon, files))
        return [self.extract_icon(source) for source in files]

    def render_icon(self, icon: ExtractedIcon) -> str:
        """Render the IconShape definition of one icon."""
        return self.template_engine.render_template(ICON_TEMPLATE, {"icon": icon})

    def emit(self, icons: List[ExtractedIcon]) -> str:
        """
        Assemble the complete module text.

        The preamble is followed by one definition per icon, separated by
        blank lines, in the given order.
        """
        preamble = self.template_engine.render_template(PREAMBLE_TEMPLATE, {})
        blocks = "\n".join(self.render_icon(icon) + "\n" for icon in icons)
        return self.format_code(f"{preamble}\n\n{blocks}")

    def format_code(self, code: str) -> str:
        """Remove trailing whitespace from every line."""
        return "\n".join(line.rstrip() for line in code.split("\n"))

    def validate_icons(self, icons: List[ExtractedIcon]) -> List[str]:
        """
        Report problems that do not stop generation.

        Duplicate identifiers are reported but not renamed.
        """
        warnings = []

        counts = Counter(icon.name for icon in icons)
        for name, count in counts.items():
            if count > 1:
                sources = ", ".join(
                    str(icon.source) for icon in icons if icon.name == name
                )
                warnings.append(f"Identifier {name} generated {count} times: {sources}")

        for icon in icons:
            if not is_valid_identifier(icon.name):
                warnings.append(f"{icon.name} is not a valid identifier ({icon.source})")

        return warnings

    def generate(self, source: Union[str, Path]) -> GenerationResult:
        """
        Generate the module for every icon below source.

        Args:
            source: Root directory of the icon set

        Returns:
            GenerationResult with code, icons, warnings and metadata

        Raises:
            GeneratorError: On the first file that cannot be processed
        """
        files = discover(source, self.dialect)
        icons = self.extract_all(files)
        code = self.emit(icons)

        warnings = self.validate_icons(icons)
        for warning in warnings:
            logger.warning(warning)

        metadata = {
            "dialect": self.dialect.name,
            "prefix": self.config.prefix,
            "icon_count": len(icons),
            "source": str(Path(source)),
        }

        return GenerationResult(code, icons, warnings, metadata)


def generate_icon_file(
    source: Union[str, Path],
    output: Union[str, Path],
    prefix: str = "",
    config: Optional[GeneratorConfig] = None,
) -> GenerationResult:
    """
    Generate the module for an icon set and write it to output.

    Args:
        source: Root directory of the icon set
        output: File to (over)write
        prefix: Identifier prefix; overrides the config's prefix when given
        config: Generation settings

    Returns:
        GenerationResult of the run

    Raises:
        GeneratorError: If any icon fails or the output cannot be written
    """
    config = config or GeneratorConfig()
    if prefix:
        config = GeneratorConfig(
            prefix=prefix,
            dialect=config.dialect,
            output_file=str(output),
            jobs=config.jobs,
            filters=config.filters,
        )

    result = IconGenerator(config).generate(source)
    write_output(result.code, output)

    logger.info(
        "[%s] Generated %d icon(s) at: %s", config.prefix, result.icon_count, output
    )
    return result


__all__ = [
    "ExtractedIcon",
    "GenerationResult",
    "GeneratorError",
    "IconGenerator",
    "generate_icon_file",
]
