"""
Recursive serializer turning an <svg> subtree into an ``rsx!`` body.

Each element becomes a block::

    path {
        d: "M0 0h24v24H0z",
        fill: "none",
    }

Attributes are filtered and sorted so the output only depends on the
markup content. ``<g>`` elements without surviving attributes are
flattened into their parent and the first ``<title>`` text is returned
separately instead of being emitted.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from ..dialects import Dialect
from .config import FilterOptions
from .markup import attribute_items, element_children, has_children, local_name
from .naming import to_snake_case

TITLE_TAG = "title"
GROUP_TAG = "g"
CURRENT_COLOR = "currentColor"

BASE_INDENT = " " * 12
INDENT_UNIT = " " * 4

_DATA_ATTRIBUTE = re.compile(r"^data-.*$")


@dataclass(frozen=True)
class SerializedTree:
    """Serialized children of an element."""

    title: Optional[str]
    body: str


def rsx_string(value: str) -> str:
    """Escape a value for a string literal inside ``rsx!``."""
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("{", "{{")
        .replace("}", "}}")
    )


def _field(name: str, value: str) -> str:
    return f'{to_snake_case(name)}: "{rsx_string(value)}",'


def attributes_for(element, dialect: Dialect, filters: FilterOptions) -> List[str]:
    """
    Render the attributes of an element as sorted rsx field lines.

    Args:
        element: Element whose attributes are rendered
        dialect: Dialect of the icon set, for value rewrites and exceptions
        filters: Attribute filtering toggles

    Returns:
        Lines like ``stroke_width: "2",`` in lexicographic order
    """
    tag = local_name(element)
    denied = filters.denied_attributes
    lines = []

    for name, value in attribute_items(element):
        value = dialect.rewrite_value(value)
        if not value:
            continue
        if _DATA_ATTRIBUTE.match(name):
            continue

        if filters.g_force_fill_currentcolor and tag == GROUP_TAG and name == "fill":
            lines.append(_field(name, CURRENT_COLOR))
        elif (
            filters.allow_fill_currentcolor
            and name == "fill"
            and value.lower() == CURRENT_COLOR.lower()
        ):
            lines.append(_field(name, value))
        elif name == "fill" and dialect.keeps_fill(tag):
            lines.append(_field(name, value))
        elif name not in denied:
            lines.append(_field(name, value))

    lines.sort()
    return lines


class TreeSerializer:
    """Serializes the children of an <svg> element for one dialect."""

    def __init__(self, dialect: Dialect, filters: Optional[FilterOptions] = None):
        self.dialect = dialect
        self.filters = filters or FilterOptions()

    def serialize(self, node, depth: int = 0) -> SerializedTree:
        """
        Serialize the element children of node.

        Args:
            node: Parent element (usually the <svg> root)
            depth: Nesting level of the children, 0 directly below <svg>

        Returns:
            The first title found in document order and the body text
        """
        indent = BASE_INDENT + INDENT_UNIT * depth
        title = None
        lines = []

        for child in element_children(node):
            tag = local_name(child)

            if tag == TITLE_TAG:
                if title is None and child.text:
                    title = child.text
                continue

            attrs = attributes_for(child, self.dialect, self.filters)

            if tag == GROUP_TAG and not (attrs and element_children(child)):
                nested = self.serialize(child, depth)
                lines.append(nested.body)
            else:
                lines.append(f"{indent}{tag} {{\n")
                lines.extend(f"{indent}{INDENT_UNIT}{attr}\n" for attr in attrs)

                nested = None
                if has_children(child):
                    if child.attrib and tag != GROUP_TAG:
                        lines.append("\n")
                    nested = self.serialize(child, depth + 1)
                    lines.append(nested.body)

                lines.append(f"{indent}}}\n")

            if title is None and nested is not None:
                title = nested.title

        return SerializedTree(title=title, body="".join(lines))
