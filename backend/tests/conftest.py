"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Minimal icon from the end-to-end example
HOME_SVG = '<svg viewBox="0 0 24 24"><path d="M12 2L2 7"/></svg>'

STROKE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

CURRENT_COLOR_SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path fill="currentColor" d="M4 4h16v16H4z"/></svg>'

MULTI_COLOR_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect x="10" y="10" width="80" height="80" fill="#4ECDC4"/>
  <circle cx="50" cy="50" r="20" fill="#FF6B6B"/>
</svg>'''

# Exported from an editor: prolog, comment, metadata and provenance attributes
INKSCAPE_SVG = '''<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<!-- Created with Inkscape -->
<svg
   xmlns="http://www.w3.org/2000/svg"
   xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape"
   xmlns:sodipodi="http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd"
   version="1.1"
   viewBox="0 0 32 32"
   sodipodi:docname="star.svg"
   inkscape:version="1.3">
  <sodipodi:namedview id="namedview1" inkscape:zoom="8"/>
  <metadata><title>star</title></metadata>
  <path data-name="Star" d="M16 2 L20 12 L30 12 L22 18 L25 28 L16 22 L7 28 L10 18 L2 12 L12 12 Z"
        inkscape:label="star"/>
</svg>'''

# Affinity Designer export: serif namespace declared on the root only
AFFINITY_SVG = '''<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">
<svg width="100%" height="100%" viewBox="0 0 24 24" version="1.1" xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" xml:space="preserve" xmlns:serif="http://www.serif.com/" style="fill-rule:evenodd;clip-rule:evenodd;">
    <g id="Layer-1" serif:id="Layer 1">
        <path d="M12 2L2 7l10 5 10-5-10-5z"/>
    </g>
</svg>'''

# Illustrator export with the i: prefix used but never declared
ADOBE_SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><g i:extraneous="self"><path i:knockout="Off" d="M4 4h16v16H4z"/></g></svg>'

# Not well-formed: the <g> is never closed
MALFORMED_SVG = '<svg viewBox="0 0 24 24"><!-- note --><g><path d="M1 1h22"/></svg>'

SPRITE_TEXT = '''<svg xmlns="http://www.w3.org/2000/svg" style="display: none;">
  <symbol id="arrow" viewBox="0 0 24 24"><path d="M5 12h14"/></symbol>
  <symbol id="home" viewBox="0 0 24 24"><path d="M3 10l9-7 9 7"/></symbol>
  <symbol id="star" viewBox="0 0 24 24" class="filled"><path d="M12 2l3 7h7l-6 4 2 7-6-4-6 4 2-7-6-4h7z"/></symbol>
</svg>
'''


@pytest.fixture
def home_svg() -> str:
    return HOME_SVG


@pytest.fixture
def stroke_svg() -> str:
    return STROKE_SVG


@pytest.fixture
def multi_color_svg() -> str:
    return MULTI_COLOR_SVG


@pytest.fixture
def sprite_file(tmp_path):
    path = tmp_path / "sprite.svg"
    path.write_text(SPRITE_TEXT, encoding="utf-8")
    return path
