"""
Dialect registry.

Maps dialect keys and aliases (including the icon prefixes used by the
known icon sets, e.g. ``Go`` or ``Md``) to dialect classes.
"""

from typing import Any, Dict, List, Optional, Type

from .dialects import (
    DefaultDialect,
    Dialect,
    IoniconsDialect,
    MaterialDialect,
    OcticonsDialect,
)
from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_DIALECT = "default"


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class DialectRegistry:
    """Registry for managing available dialects."""

    def __init__(self):
        """Initialize empty registry."""
        self._dialects: Dict[str, Type[Dialect]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        key: str,
        dialect_class: Type[Dialect],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a dialect.

        Args:
            key: Primary dialect key (e.g., 'material')
            dialect_class: Class implementing Dialect
            aliases: Alternative names, typically icon prefixes
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If dialect class is invalid or conflicts exist
        """
        if not (isinstance(dialect_class, type) and issubclass(dialect_class, Dialect)):
            raise RegistryError("Dialect class must inherit from Dialect")

        dialect_key = key.lower()

        if dialect_key in self._dialects and not replace:
            return

        self._dialects[dialect_key] = dialect_class

        for alias in aliases or []:
            alias_key = alias.lower()

            if alias_key == dialect_key:
                continue

            if not replace:
                if alias_key in self._dialects:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing dialect"
                    )
                if (
                    alias_key in self._aliases
                    and self._aliases[alias_key] != dialect_key
                ):
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                    )

            self._aliases[alias_key] = dialect_key

    def unregister(self, key: str):
        """Unregister a dialect and its aliases."""
        dialect_key = key.lower()
        self._dialects.pop(dialect_key, None)

        for alias in [a for a, target in self._aliases.items() if target == dialect_key]:
            del self._aliases[alias]

    def resolve_key(self, key: str) -> str:
        """
        Resolve a dialect key or alias to its primary key.

        Raises:
            RegistryError: If the key is unknown
        """
        dialect_key = key.lower()

        if dialect_key in self._dialects:
            return dialect_key

        if dialect_key in self._aliases:
            return self._aliases[dialect_key]

        raise RegistryError(
            f"Unknown dialect: {key}. "
            f"Available: {', '.join(self.list_dialects())}"
        )

    def create_dialect(self, key: str) -> Dialect:
        """Create the dialect registered under key or alias."""
        return self._dialects[self.resolve_key(key)]()

    def dialect_for_prefix(self, prefix: str) -> Dialect:
        """
        Pick the dialect for an icon prefix.

        Known prefixes map to their dialect, anything else uses the default.
        """
        if prefix and self.is_supported(prefix):
            dialect = self.create_dialect(prefix)
        else:
            dialect = self.create_dialect(DEFAULT_DIALECT)
        logger.debug("Prefix %r resolved to %s dialect", prefix, dialect.name)
        return dialect

    def list_dialects(self) -> List[str]:
        """Get sorted list of primary dialect keys."""
        return sorted(self._dialects.keys())

    def get_aliases(self, key: str) -> List[str]:
        """Get all aliases of a dialect."""
        dialect_key = key.lower()
        return sorted(
            alias for alias, target in self._aliases.items() if target == dialect_key
        )

    def is_supported(self, key: str) -> bool:
        """Check if a key or alias is registered."""
        dialect_key = key.lower()
        return dialect_key in self._dialects or dialect_key in self._aliases

    def get_dialect_info(self, key: str) -> Dict[str, Any]:
        """
        Get information about a registered dialect.

        Raises:
            RegistryError: If dialect not found
        """
        dialect_key = self.resolve_key(key)
        dialect = self._dialects[dialect_key]()

        return {
            "name": dialect.name,
            "class": type(dialect).__name__,
            "description": dialect.description,
            "aliases": self.get_aliases(dialect_key),
        }


# Global registry instance - created once
_global_registry: Optional[DialectRegistry] = None


def get_registry() -> DialectRegistry:
    """Get the global dialect registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = DialectRegistry()
        _register_builtin_dialects(_global_registry)
    return _global_registry


def _register_builtin_dialects(registry: DialectRegistry):
    """Register the dialects shipped with the package."""
    registry.register(DEFAULT_DIALECT, DefaultDialect)
    registry.register("octicons", OcticonsDialect, aliases=["go"])
    registry.register("material", MaterialDialect, aliases=["md", "materialicons"])
    registry.register("ionicons", IoniconsDialect, aliases=["io"])


def get_dialect(key: str) -> Dialect:
    """Get a dialect instance from the global registry."""
    return get_registry().create_dialect(key)


def resolve_dialect(prefix: str = "", key: Optional[str] = None) -> Dialect:
    """
    Resolve the dialect for a run.

    An explicit key wins; otherwise the icon prefix decides.
    """
    if key:
        return get_dialect(key)
    return get_registry().dialect_for_prefix(prefix)


def list_dialects() -> List[str]:
    """List all dialect keys of the global registry."""
    return get_registry().list_dialects()


def list_all_dialect_info() -> Dict[str, Dict[str, Any]]:
    """Get information about all registered dialects."""
    registry = get_registry()
    return {key: registry.get_dialect_info(key) for key in registry.list_dialects()}
