"""Tests for SVG parsing and root attribute extraction."""

from __future__ import annotations

import pytest

from iconshape_codegen.core.errors import MarkupError, MissingAttributeError
from iconshape_codegen.core.markup import (
    ROOT_DEFAULTS,
    RootAttributes,
    attribute_items,
    extract_root_attributes,
    find_svg_root,
    has_children,
    local_name,
    parse_and_extract,
    parse_markup,
)
from tests.conftest import FEATHER_SVG, MINIMAL_SVG, NO_VIEWBOX_SVG


class TestParseMarkup:
    def test_accepts_text_and_bytes(self):
        assert local_name(parse_markup(MINIMAL_SVG)) == "svg"
        assert local_name(parse_markup(MINIMAL_SVG.encode("utf-8"))) == "svg"

    def test_encoding_declaration(self):
        markup = '<?xml version="1.0" encoding="UTF-8"?>\n' + MINIMAL_SVG
        assert local_name(parse_markup(markup)) == "svg"

    def test_comments_removed(self):
        svg = parse_markup('<svg viewBox="0 0 1 1"><!-- c --><path d="M0 0"/></svg>')
        assert [local_name(child) for child in svg] == ["path"]


class TestFindSvgRoot:
    def test_nested_svg(self):
        tree = parse_markup(
            '<div><svg viewBox="0 0 1 1"></svg><svg viewBox="0 0 2 2"><path d="M0 0"/></svg></div>'
        )
        root = find_svg_root(tree)
        assert root.get("viewBox") == "0 0 2 2"

    def test_empty_svg_is_skipped(self):
        assert find_svg_root(parse_markup('<svg viewBox="0 0 1 1"/>')) is None

    def test_text_counts_as_child(self):
        root = parse_markup('<svg viewBox="0 0 1 1">text</svg>')
        assert has_children(root)
        assert find_svg_root(root) is root


class TestExtractRootAttributes:
    def test_defaults(self):
        attrs = extract_root_attributes(parse_markup(MINIMAL_SVG))
        assert attrs == RootAttributes(view_box="0 0 24 24")
        assert attrs.fill == "black"
        assert attrs.stroke == "none"
        assert attrs.stroke_width == "1"
        assert attrs.stroke_linecap == "butt"
        assert attrs.stroke_linejoin == "miter"
        assert attrs.width == "300"
        assert attrs.height == "150"
        assert attrs.xmlns == "http://www.w3.org/2000/svg"

    def test_explicit_values(self):
        attrs = extract_root_attributes(parse_markup(FEATHER_SVG))
        assert attrs.fill == "none"
        assert attrs.stroke == "currentColor"
        assert attrs.stroke_width == "2"
        assert attrs.stroke_linecap == "round"
        assert attrs.stroke_linejoin == "round"
        assert attrs.width == "24"
        assert attrs.height == "24"

    def test_empty_value_uses_default(self):
        attrs = extract_root_attributes(parse_markup('<svg viewBox="0 0 1 1" fill=""/>'))
        assert attrs.fill == ROOT_DEFAULTS["fill"]

    def test_xmlns_from_document(self):
        attrs = extract_root_attributes(
            parse_markup('<svg xmlns="urn:example" viewBox="0 0 1 1"/>')
        )
        assert attrs.xmlns == "urn:example"

    def test_missing_viewbox(self):
        with pytest.raises(MissingAttributeError):
            extract_root_attributes(parse_markup(NO_VIEWBOX_SVG))


class TestAttributeItems:
    def test_namespaced_names_use_local_part(self):
        svg = parse_markup(
            '<svg xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 1 1">'
            '<use xlink:href="#a"/></svg>'
        )
        assert dict(attribute_items(svg[0])) == {"href": "#a"}


class TestParseAndExtract:
    def test_returns_root_and_attributes(self):
        svg, attrs = parse_and_extract(MINIMAL_SVG)
        assert local_name(svg) == "svg"
        assert attrs.view_box == "0 0 24 24"

    def test_no_svg_names_file(self):
        with pytest.raises(MarkupError, match="broken.svg"):
            parse_and_extract("<html><body/></html>", "icons/broken.svg")

    def test_missing_viewbox_names_file(self):
        with pytest.raises(MissingAttributeError, match="bad.svg"):
            parse_and_extract(NO_VIEWBOX_SVG, "icons/bad.svg")


class TestEntities:
    def test_external_entity_not_expanded(self, tmp_path):
        secret = tmp_path / "secret.txt"
        secret.write_text("TOPSECRET", encoding="utf-8")
        markup = (
            f'<?xml version="1.0"?>\n'
            f'<!DOCTYPE svg [<!ENTITY x SYSTEM "{secret.as_uri()}">]>\n'
            f'<svg viewBox="0 0 1 1"><title>&x;</title><path d="M0 0"/></svg>'
        )
        svg, _ = parse_and_extract(markup)
        assert "TOPSECRET" not in "".join(svg.itertext())
