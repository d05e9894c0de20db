"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from iconshape_codegen.core.markup import parse_markup


MINIMAL_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M0 0"/>
</svg>'''

FEATHER_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <line x1="12" y1="8" x2="12" y2="12"/>
</svg>'''

TITLED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 16 16">
  <g>
    <title>Inner title</title>
    <path d="M1 1"/>
  </g>
  <title>Outer title</title>
  <rect width="4" height="4"/>
</svg>'''

NO_VIEWBOX_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24">
  <path d="M0 0"/>
</svg>'''

MATERIAL_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" height="24" viewBox="0 0 24 24" width="24">
  <path d="M0 0h24v24H0z" fill="none"/>
  <path d="M12 2C6.48 2 2 6.48 2 12"/>
</svg>'''


def write_icon(root: Path, relative: str, content: str = MINIMAL_SVG) -> Path:
    """Write an icon file below root, creating directories."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def first_element(markup: str):
    """Parse markup and return the first child element of the root."""
    return parse_markup(markup)[0]


@pytest.fixture
def icon_dir(tmp_path):
    """A small default-dialect icon set."""
    root = tmp_path / "icons"
    write_icon(root, "arrow-left.svg", MINIMAL_SVG)
    write_icon(root, "alert-circle.svg", FEATHER_SVG)
    write_icon(root, "README.md", "# not an icon")
    return root
