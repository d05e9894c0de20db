"""
Naming utilities for generated code.

Handles case conversions for icon identifiers (PascalCase struct names)
and attribute names (snake_case rsx fields).
"""

import re
from typing import List


_NON_ALNUM = re.compile(r'[\W_]+')
_LOWER_UPPER = re.compile(r'([a-z0-9])([A-Z])')
_ACRONYM = re.compile(r'([A-Z]+)([A-Z][a-z])')


def split_words(name: str) -> List[str]:
    """
    Split a name into lowercase words.

    Separators are any non-alphanumeric characters plus case boundaries,
    so ``viewBox``, ``view-box`` and ``view_box`` all give ``['view', 'box']``.
    """
    name = _ACRONYM.sub(r'\1_\2', name)
    name = _LOWER_UPPER.sub(r'\1_\2', name)
    name = _NON_ALNUM.sub('_', name)
    return [word.lower() for word in name.split('_') if word]


def to_snake_case(name: str) -> str:
    """Convert to snake_case."""
    return '_'.join(split_words(name))


def to_pascal_case(name: str) -> str:
    """Convert to PascalCase (upper camel case)."""
    return ''.join(word[:1].upper() + word[1:] for word in split_words(name))


def is_valid_identifier(name: str) -> bool:
    """Check that a generated struct name is usable as a Rust identifier."""
    return name.isidentifier() and name != '_'
