"""Exceptions raised by the generation pipeline.

Every failure aborts the whole run, so callers only need to catch
:class:`GeneratorError`.
"""


class GeneratorError(Exception):
    """Base exception for icon generation errors."""

    pass


class DiscoveryError(GeneratorError):
    """Raised when the source directory cannot be walked."""

    pass


class NamingError(GeneratorError):
    """Raised when a path does not match the dialect's naming expectations."""

    pass


class SourceReadError(GeneratorError):
    """Raised when an icon file cannot be read."""

    pass


class MarkupError(GeneratorError):
    """Raised when a file has no usable <svg> root element."""

    pass


class MissingAttributeError(MarkupError):
    """Raised when the <svg> root lacks a required attribute."""

    pass


class OutputError(GeneratorError):
    """Raised when the generated artifact cannot be written."""

    pass
