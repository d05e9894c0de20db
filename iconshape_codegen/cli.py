"""
Command-line interface for icon code generation.

Examples:
  iconshape-codegen icons/octicons --prefix Go -o src/icons/go_icons.rs
  iconshape-codegen material-design-icons/src --prefix Md --strip-fill
  iconshape-codegen --list-dialects
"""

import argparse
import sys
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .core.config import ConfigError, GeneratorConfig, get_config_manager, load_config
from .core.generator import GenerationResult, IconGenerator
from .core.errors import GeneratorError
from .core.templates import TemplateError
from .logging_config import get_logger, setup_logging
from .registry import RegistryError, list_all_dialect_info, resolve_dialect
from .utils import write_output

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich consoles; diagnostics go to stderr so generated code can be piped
console = Console()
err_console = Console(stderr=True)

FILTER_FLAGS = {
    "strip_id": "Drop id attributes",
    "strip_class": "Drop class attributes",
    "strip_fill": "Drop fill attributes",
    "strip_stroke": "Drop stroke attributes",
    "g_force_fill_currentcolor": "Force fill=\"currentColor\" on <g> elements",
    "allow_fill_currentcolor": "Keep fill=\"currentColor\" even when fill is stripped",
}


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="iconshape-codegen",
        description="Generate Dioxus IconShape definitions from a directory of SVG icons",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  iconshape-codegen icons/octicons --prefix Go -o src/icons/go_icons.rs
  iconshape-codegen material-design-icons/src --prefix Md --strip-fill
  iconshape-codegen --list-dialects
        """.strip(),
    )

    parser.add_argument("source", nargs="?", help="Directory containing the SVG icons")

    parser.add_argument("--output", "-o", help="Output file (default: stdout)")

    parser.add_argument(
        "--prefix",
        "-p",
        help="Prefix for generated identifiers; known prefixes (Go, Md, Io) select their dialect",
    )

    parser.add_argument(
        "--dialect",
        "-d",
        help="Dialect to use regardless of the prefix (see --list-dialects)",
    )

    parser.add_argument("--config", help="Configuration file path (JSON)")

    parser.add_argument(
        "--jobs",
        "-j",
        type=int,
        help="Number of worker threads used to extract icons",
    )

    filter_group = parser.add_argument_group("attribute filters")
    for option, help_text in FILTER_FLAGS.items():
        filter_group.add_argument(
            "--" + option.replace("_", "-"),
            dest=option,
            action="store_true",
            default=None,
            help=help_text,
        )

    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show generation metadata",
    )
    output_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    output_group.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-dialects",
        action="store_true",
        help="List supported dialects and exit",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line interface.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, console=err_console)

    try:
        if args.list_dialects:
            return _list_dialects()

        if not args.source:
            raise CLIError("Source directory required")

        config = _build_config(args)
        for warning in get_config_manager().validate_config(config):
            err_console.print(f"[yellow]⚠️  {escape(warning)}[/yellow]")

        return _generate_and_output(args.source, config, args)

    except (CLIError, ConfigError, RegistryError, TemplateError) as e:
        err_console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1
    except GeneratorError as e:
        err_console.print(f"[red]✗ Generation failed:[/red] {escape(str(e))}")
        logger.debug("Generation failed", exc_info=True)
        return 1


def _list_dialects() -> int:
    """List supported dialects with details."""
    table = Table(
        title="📋 Supported Dialects", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Dialect", style="bold green", no_wrap=True)
    table.add_column("Aliases", style="blue")
    table.add_column("Files", style="dim")

    for key, info in sorted(list_all_dialect_info().items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {key}", aliases, info["description"])

    console.print()
    console.print(table)
    console.print()

    console.print(
        Panel(
            "[bold]Usage:[/bold] iconshape-codegen [dim]icons/[/dim] --prefix [cyan]PREFIX[/cyan] -o [dim]icons.rs[/dim]\n"
            "[bold]Explicit dialect:[/bold] iconshape-codegen [dim]icons/[/dim] --dialect [cyan]DIALECT[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )

    return 0


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from config file and CLI arguments."""
    overrides = {}

    if args.prefix is not None:
        overrides["prefix"] = args.prefix

    if args.dialect:
        overrides["dialect"] = args.dialect

    if args.output:
        overrides["output_file"] = args.output

    if args.jobs is not None:
        overrides["jobs"] = args.jobs

    for option in FILTER_FLAGS:
        if getattr(args, option) is not None:
            overrides[option] = getattr(args, option)

    config = load_config(custom_config=overrides, config_file=args.config)

    # Fail on unknown dialect keys before any work starts
    resolve_dialect(config.prefix, config.dialect)

    return config


def _generate_and_output(
    source: str, config: GeneratorConfig, args: argparse.Namespace
) -> int:
    """Generate code and handle output with rich formatting."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=err_console,
        transient=True,
    ) as progress:
        progress.add_task(f"[green]Generating icons from {source}...", total=None)
        result = IconGenerator(config).generate(source)

    label = f"[{config.prefix}]"
    if config.output_file:
        output_path = write_output(result.code, config.output_file)
        err_console.print(
            f"[green]✓[/green] {escape(label)} Generated {result.icon_count} "
            f"icon(s) at: [cyan]{output_path}[/cyan]",
            highlight=False,
            markup=True,
        )
    elif console.is_terminal:
        console.print(Syntax(result.code, "rust", theme="monokai"))
    else:
        sys.stdout.write(result.code)

    if args.verbose:
        _print_metadata(result)

    if result.warnings:
        err_console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            err_console.print(f"  [yellow]•[/yellow] {escape(warning)}")
        err_console.print()

    return 0


def _print_metadata(result: GenerationResult):
    """Show generation metadata as a table."""
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )

    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    err_console.print()
    err_console.print(metadata_table)
