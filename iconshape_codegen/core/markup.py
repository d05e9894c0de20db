"""
SVG parsing and root attribute extraction.

Parses icon markup with lxml, locates the ``<svg>`` element holding the
drawable content and reads its presentation attributes, filling in the
SVG defaults for anything that is not set.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

from lxml import etree

from ..logging_config import get_logger
from .errors import MarkupError, MissingAttributeError

logger = get_logger(__name__)

SVG_TAG = "svg"
SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Attribute defaults used when the <svg> root does not set them
ROOT_DEFAULTS = {
    "xmlns": SVG_NAMESPACE,
    "width": "300",
    "height": "150",
    "fill": "black",
    "stroke": "none",
    "stroke-width": "1",
    "stroke-linecap": "butt",
    "stroke-linejoin": "miter",
}


@dataclass(frozen=True)
class RootAttributes:
    """Presentation attributes of an icon's <svg> root."""

    view_box: str
    xmlns: str = ROOT_DEFAULTS["xmlns"]
    width: str = ROOT_DEFAULTS["width"]
    height: str = ROOT_DEFAULTS["height"]
    fill: str = ROOT_DEFAULTS["fill"]
    stroke: str = ROOT_DEFAULTS["stroke"]
    stroke_width: str = ROOT_DEFAULTS["stroke-width"]
    stroke_linecap: str = ROOT_DEFAULTS["stroke-linecap"]
    stroke_linejoin: str = ROOT_DEFAULTS["stroke-linejoin"]


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        recover=True,
        no_network=True,
        resolve_entities=False,
        remove_comments=True,
        remove_pis=True,
    )


def local_name(element) -> str:
    """Tag name without namespace."""
    return etree.QName(element).localname


def attribute_items(element) -> Iterator[Tuple[str, str]]:
    """Yield (name, value) pairs, namespaced names reduced to their local part."""
    for name, value in element.attrib.items():
        yield etree.QName(name).localname, value


def element_children(element) -> list:
    """Child elements, skipping entities and other non-element nodes."""
    return [child for child in element if isinstance(child.tag, str)]


def has_children(element) -> bool:
    """True if the element has any child node, text included."""
    return len(element) > 0 or bool(element.text)


def parse_markup(content: Union[str, bytes]):
    """
    Parse SVG markup into an element tree.

    Args:
        content: File content; text is encoded as UTF-8 before parsing

    Returns:
        Root element of the document, or None if nothing could be recovered
    """
    if isinstance(content, str):
        content = content.encode("utf-8")

    try:
        return etree.fromstring(content, parser=_make_parser())
    except etree.XMLSyntaxError as e:
        raise MarkupError(f"Unparseable markup: {e}") from e


def find_svg_root(tree):
    """
    Find the first <svg> element that has content.

    Returns:
        The element, or None when the document has no such element
    """
    if tree is None:
        return None

    for element in tree.iter(etree.Element):
        if local_name(element) == SVG_TAG and has_children(element):
            return element
    return None


def extract_root_attributes(element) -> RootAttributes:
    """
    Read the scalar presentation attributes of an <svg> element.

    Raises:
        MissingAttributeError: If viewBox is not set
    """
    attrs = dict(attribute_items(element))

    view_box = attrs.get("viewBox") or attrs.get("viewbox")
    if not view_box:
        raise MissingAttributeError("<svg> element has no viewBox attribute")

    def value(name: str) -> str:
        return attrs.get(name) or ROOT_DEFAULTS[name]

    return RootAttributes(
        view_box=view_box,
        xmlns=element.nsmap.get(None) or attrs.get("xmlns") or ROOT_DEFAULTS["xmlns"],
        width=value("width"),
        height=value("height"),
        fill=value("fill"),
        stroke=value("stroke"),
        stroke_width=value("stroke-width"),
        stroke_linecap=value("stroke-linecap"),
        stroke_linejoin=value("stroke-linejoin"),
    )


def parse_and_extract(content: Union[str, bytes],
                      source: Optional[Union[str, Path]] = None):
    """
    Parse icon markup and extract its <svg> root.

    Args:
        content: File content
        source: Origin of the content, used in error messages

    Returns:
        Tuple of (svg element, RootAttributes)

    Raises:
        MarkupError: If there is no <svg> element with content
        MissingAttributeError: If the <svg> element has no viewBox
    """
    origin = source if source is not None else "<string>"

    try:
        svg = find_svg_root(parse_markup(content))
    except MarkupError as e:
        raise MarkupError(f"{e} in file: {origin}") from e

    if svg is None:
        raise MarkupError(f"No svg node found in file: {origin}")

    try:
        attributes = extract_root_attributes(svg)
    except MissingAttributeError as e:
        raise MissingAttributeError(f"{e} in file: {origin}") from e

    logger.debug("Extracted <svg> root from %s (viewBox=%s)", origin, attributes.view_box)
    return svg, attributes
