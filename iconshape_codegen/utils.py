"""Filesystem helpers for reading icon sources and writing the artifact.

Reads fail loudly with :class:`SourceReadError`; the generated artifact is
written atomically so an aborted run never leaves a half-written file.
"""

import os
import tempfile
from pathlib import Path

from .core.errors import OutputError, SourceReadError
from .logging_config import get_logger

logger = get_logger(__name__)


def read_markup_file(file_path: str | Path) -> bytes:
    """Read an icon file.

    The raw bytes are returned so the XML parser can honour the file's own
    encoding declaration.

    Args:
        file_path: Path to the SVG file.

    Returns:
        File content.

    Raises:
        SourceReadError: If the file is missing or cannot be read.
    """
    file_path = Path(file_path)
    logger.debug("Reading icon file: %s", file_path)

    try:
        return file_path.read_bytes()
    except OSError as e:
        logger.error("Error reading file %s: %s", file_path, e)
        raise SourceReadError(f"Error reading file {file_path}: {e}") from e


def write_output(content: str, output_path: str | Path) -> Path:
    """Write the generated code, replacing any previous content atomically.

    The text goes to a temporary file next to the target which is then
    renamed over it.

    Args:
        content: Complete artifact text.
        output_path: Destination file.

    Returns:
        The destination path.

    Raises:
        OutputError: If the destination cannot be written.
    """
    output_path = Path(output_path)
    directory = output_path.parent

    try:
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{output_path.name}.", suffix=".tmp", dir=directory
        )
    except OSError as e:
        logger.error("Cannot create output in %s: %s", directory, e)
        raise OutputError(f"Cannot write to {output_path}: {e}") from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, output_path)
    except OSError as e:
        logger.error("Failed to write %s: %s", output_path, e)
        Path(tmp_name).unlink(missing_ok=True)
        raise OutputError(f"Failed to write {output_path}: {e}") from e

    logger.info("Wrote %d characters to %s", len(content), output_path)
    return output_path
